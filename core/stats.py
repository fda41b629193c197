# core/stats.py
from dataclasses import dataclass, fields
from .enums import Element, SkillType, ReactionType

class StatKey:
    """属性键名常量"""
    LEVEL = "level"

    BASE_HP = "base_hp"
    HP_PCT = "hp_pct"
    FLAT_HP = "flat_hp"
    BASE_ATK = "base_atk"
    ATK_PCT = "atk_pct"
    FLAT_ATK = "flat_atk"
    BASE_DEF = "base_def"
    DEF_PCT = "def_pct"
    FLAT_DEF = "flat_def"

    # 最终属性 (CombatStats不直接存，由 Attribute 计算)
    FINAL_HP = "final_hp"
    FINAL_ATK = "final_atk"
    FINAL_DEF = "final_def"

    ELEMENTAL_MASTERY = "elemental_mastery"
    RECHARGE = "recharge"
    HEALING_BONUS = "healing_bonus"

    # 暴击
    CRIT_RATE = "crit_rate"
    CRIT_DMG = "crit_dmg"

    # 增伤
    DMG_BONUS = "dmg_bonus"
    NORMAL_DMG_BONUS = "normal_dmg_bonus"
    CHARGED_DMG_BONUS = "charged_dmg_bonus"
    PLUNGING_DMG_BONUS = "plunging_dmg_bonus"
    SKILL_DMG_BONUS = "elemental_skill_dmg_bonus"
    BURST_DMG_BONUS = "elemental_burst_dmg_bonus"

    # 元素增伤
    FIRE_DMG_BONUS = "fire_dmg_bonus"
    WATER_DMG_BONUS = "water_dmg_bonus"
    THUNDER_DMG_BONUS = "thunder_dmg_bonus"
    ICE_DMG_BONUS = "ice_dmg_bonus"
    WIND_DMG_BONUS = "wind_dmg_bonus"
    ROCK_DMG_BONUS = "rock_dmg_bonus"
    GRASS_DMG_BONUS = "grass_dmg_bonus"
    PHYSICAL_DMG_BONUS = "physical_dmg_bonus"

    # 增幅反应加成
    MELT_BONUS = "melt_bonus"
    VAPORIZE_BONUS = "vaporize_bonus"

    # 作用于敌人的减抗/减防
    RES_MINUS = "res_minus"
    DEF_MINUS = "def_minus"

    @staticmethod
    def element_bonus(element: Element) -> str:
        return f"{element.value}_dmg_bonus"

    @staticmethod
    def skill_type_bonus(skill_type: SkillType) -> str:
        return f"{skill_type.value}_dmg_bonus"

    @staticmethod
    def reaction_bonus(reaction: ReactionType) -> str:
        return f"{reaction.value}_bonus"

    @staticmethod
    def element_res(element: Element) -> str:
        return f"{element.value}_res"


# 等级突破点: (等级, 是否突破)，角色与武器的成长数组均按此顺序存放
LEVEL_BREAKPOINTS = [
    (1, False), (20, False), (20, True), (40, False), (40, True),
    (50, False), (50, True), (60, False), (60, True), (70, False),
    (70, True), (80, False), (80, True), (90, False),
]


def get_level_index(level: int, ascend: bool = False) -> int:
    """
    将 (等级, 是否突破) 转换为成长数组下标

    1级与90级不区分突破状态。非突破点等级会抛出 ValueError。
    """
    if level in (1, 90):
        ascend = False
    try:
        return LEVEL_BREAKPOINTS.index((level, ascend))
    except ValueError:
        raise ValueError(f"不支持的等级: {level}{'+' if ascend else ''}")


@dataclass
class CombatStats:
    # --- 1. 基础区 ---
    level: int = 90
    base_hp: float = 0
    hp_pct: float = 0.0
    flat_hp: float = 0.0

    base_atk: float = 0       # 角色基础攻击 + 武器基础攻击
    atk_pct: float = 0.0
    flat_atk: float = 0.0

    base_def: float = 0
    def_pct: float = 0.0
    flat_def: float = 0.0

    elemental_mastery: float = 0.0
    recharge: float = 1.0
    healing_bonus: float = 0.0

    # --- 2. 暴击区 ---
    crit_rate: float = 0.05
    crit_dmg: float = 0.50

    # --- 3. 增伤区 ---
    dmg_bonus: float = 0.0

    # 招式增伤
    normal_dmg_bonus: float = 0.0
    charged_dmg_bonus: float = 0.0
    plunging_dmg_bonus: float = 0.0
    elemental_skill_dmg_bonus: float = 0.0
    elemental_burst_dmg_bonus: float = 0.0

    # 元素增伤
    fire_dmg_bonus: float = 0.0
    water_dmg_bonus: float = 0.0
    thunder_dmg_bonus: float = 0.0
    ice_dmg_bonus: float = 0.0
    wind_dmg_bonus: float = 0.0
    rock_dmg_bonus: float = 0.0
    grass_dmg_bonus: float = 0.0
    physical_dmg_bonus: float = 0.0

    # --- 4. 反应区 ---
    melt_bonus: float = 0.0
    vaporize_bonus: float = 0.0

    # --- 5. 防御/抗性区 (作用于敌人) ---
    res_minus: float = 0.0
    def_minus: float = 0.0


# 可被圣遗物/武器/Buff修改的属性键
STAT_FIELDS = frozenset(f.name for f in fields(CombatStats) if f.name != StatKey.LEVEL)
