from enum import Enum

class Element(Enum):
    PYRO = "fire"
    HYDRO = "water"
    ELECTRO = "thunder"
    CRYO = "ice"
    ANEMO = "wind"
    GEO = "rock"
    DENDRO = "grass"
    PHYSICAL = "physical"

class SkillSlot(Enum):
    NORMAL = "a"      # 普通攻击
    SKILL = "e"       # 元素战技
    BURST = "q"       # 元素爆发

class SkillType(Enum):
    NORMAL_ATTACK = "normal"
    CHARGED_ATTACK = "charged"
    PLUNGING_ATTACK = "plunging"
    ELEMENTAL_SKILL = "elemental_skill"
    ELEMENTAL_BURST = "elemental_burst"

# 槽位默认招式类型
SLOT_DEFAULT_SKILL_TYPE = {
    SkillSlot.NORMAL: SkillType.NORMAL_ATTACK,
    SkillSlot.SKILL: SkillType.ELEMENTAL_SKILL,
    SkillSlot.BURST: SkillType.ELEMENTAL_BURST,
}

class WeaponType(Enum):
    SWORD = "sword"
    CLAYMORE = "claymore"
    POLEARM = "polearm"
    BOW = "bow"
    CATALYST = "catalyst"

class ArtifactSlot(Enum):
    FLOWER = "flower"    # 生之花
    FEATHER = "feather"  # 死之羽
    SAND = "sand"        # 时之沙
    GOBLET = "goblet"    # 空之杯
    HEAD = "head"        # 理之冠

# 增幅反应类型
class ReactionType(Enum):
    MELT = "melt"           # 融化
    VAPORIZE = "vaporize"   # 蒸发

# Buff分类（正面/负面）
class BuffCategory(Enum):
    BUFF = "buff"           # 正面效果
    DEBUFF = "debuff"       # 负面效果（作用于敌人，如减抗、减防）
    NEUTRAL = "neutral"
