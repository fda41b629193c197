from typing import Dict, List
from core.config_manager import get_config
from core.enums import Element, SkillSlot, WeaponType
from core.skill_key import SkillKey
from core.stats import StatKey

# 槽位 -> CharacterConfig 中的天赋等级字段
SLOT_LEVEL_FIELD = {
    SkillSlot.NORMAL: "skill1",
    SkillSlot.SKILL: "skill2",
    SkillSlot.BURST: "skill3",
}


class BaseCharacter:
    """
    角色基类

    子类只需声明静态数据（名称、元素、武器类型、成长数组、技能倍率、伤害键），
    有天赋效果的角色再覆盖 extra_ratio / apply_effect。
    """
    name: str = ""            # 注册名，如 "klee"
    display_name: str = ""    # 显示名，如 "可莉"
    element: Element = Element.PHYSICAL
    weapon_type: WeaponType = WeaponType.SWORD
    star: int = 5

    BASE_STATS: Dict = {}
    SKILL_MULTIPLIERS: Dict[str, Dict[str, List[float]]] = {}
    SKILL_KEYS: Dict[str, List[Dict]] = {}
    CONSTELLATION_BOOST: Dict[str, int] = {}

    def __init__(self, config):
        self.config = config
        self.params = dict(getattr(config, "params", None) or {})

    @classmethod
    def get_skill_keys(cls, slot: str) -> List[SkillKey]:
        """获取槽位声明的伤害键"""
        return [SkillKey(**item) for item in cls.SKILL_KEYS.get(slot, [])]

    @classmethod
    def get_slots(cls) -> List[str]:
        return [slot.value for slot in SkillSlot if slot.value in cls.SKILL_KEYS]

    def get_base_stats(self, level_index: int) -> Dict[str, float]:
        """角色基础属性与突破属性"""
        stats = {
            StatKey.BASE_HP: self.BASE_STATS["hp"][level_index],
            StatKey.BASE_ATK: self.BASE_STATS["atk"][level_index],
            StatKey.BASE_DEF: self.BASE_STATS["def"][level_index],
        }
        sub_stat = self.BASE_STATS["sub_stat"]
        stats[sub_stat] = stats.get(sub_stat, 0.0) + self.BASE_STATS["sub_stat_values"][level_index]
        return stats

    def get_skill_level(self, slot: str) -> int:
        """
        计算槽位的实际天赋等级（含命座加成）
        """
        config = get_config()
        field = SLOT_LEVEL_FIELD[SkillSlot(slot)]
        level = int(getattr(self.config, field))
        if not 1 <= level <= config.max_skill_level:
            raise ValueError(f"天赋等级超出范围: {field}={level}")

        boost_at = self.CONSTELLATION_BOOST.get(slot)
        if boost_at is not None and self.config.constellation >= boost_at:
            level += config.constellation_skill_boost
        return min(level, config.max_skill_level)

    def get_skill_ratio(self, key: str, slot: str, skill_level: int) -> float:
        """技能倍率；未声明的伤害键抛出 KeyError"""
        try:
            table = self.SKILL_MULTIPLIERS[slot][key]
        except KeyError:
            raise KeyError(f"{self.name} 没有技能 {slot}.{key}")
        return table[skill_level - 1]

    def extra_ratio(self, key: str, slot: str) -> float:
        """天赋带来的额外攻击力倍率，默认无"""
        return 0.0

    def apply_effect(self, attribute):
        """天赋/命座对面板的修改，默认无"""
        pass
