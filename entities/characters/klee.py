from core.enums import Element, WeaponType
from core.stats import StatKey
from entities.characters.base_character import BaseCharacter
from entities.characters.klee_constants import (
    BASE_STATS, SKILL_MULTIPLIERS, SKILL_KEYS, CONSTELLATION_BOOST, MECHANICS
)


class Klee(BaseCharacter):
    name = "klee"
    display_name = "可莉"
    element = Element.PYRO
    weapon_type = WeaponType.CATALYST
    star = 5

    BASE_STATS = BASE_STATS
    SKILL_MULTIPLIERS = SKILL_MULTIPLIERS
    SKILL_KEYS = SKILL_KEYS
    CONSTELLATION_BOOST = CONSTELLATION_BOOST

    def apply_effect(self, attribute):
        # 砰砰礼物: 消耗爆裂火花的重击
        if self.params.get("explosive_spark", False):
            attribute.add_stat(StatKey.CHARGED_DMG_BONUS, MECHANICS["explosive_spark_bonus"])

        # 六命: 火力全开
        if self.config.constellation >= 6 and self.params.get("c6_active", False):
            attribute.add_stat(StatKey.FIRE_DMG_BONUS, MECHANICS["c6_fire_bonus"])
