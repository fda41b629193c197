from core.enums import Element, WeaponType
from core.stats import StatKey
from entities.characters.base_character import BaseCharacter
from entities.characters.ineffa_constants import (
    BASE_STATS, SKILL_MULTIPLIERS, SKILL_KEYS, CONSTELLATION_BOOST, MECHANICS
)


class Ineffa(BaseCharacter):
    """
    伊涅芙

    params:
        em_bonus_active: 全相重构协议生效，基于攻击力提升元素精通 (默认开启)
        overclocking_active: 频率超限回路生效，战技追加65%攻击力的额外攻击 (默认开启)
    """
    name = "ineffa"
    display_name = "伊涅芙"
    element = Element.ELECTRO
    weapon_type = WeaponType.POLEARM
    star = 5

    BASE_STATS = BASE_STATS
    SKILL_MULTIPLIERS = SKILL_MULTIPLIERS
    SKILL_KEYS = SKILL_KEYS
    CONSTELLATION_BOOST = CONSTELLATION_BOOST

    def extra_ratio(self, key, slot):
        if slot == "e" and key == "dmg1" and self.params.get("overclocking_active", True):
            return MECHANICS["overclocking_ratio"]
        return 0.0

    def apply_effect(self, attribute):
        if not self.params.get("em_bonus_active", True):
            return
        rate = MECHANICS["em_bonus_rate"]
        attribute.add_edge(
            StatKey.FINAL_ATK,
            StatKey.ELEMENTAL_MASTERY,
            lambda atk: atk * rate,
            "伊涅芙天赋：全相重构协议"
        )
