import copy
from typing import List, Dict, Optional, Any
from core.enums import BuffCategory, Element
from core.stats import StatKey

class Buff:
    """Buff基类"""
    def __init__(self, name: str, max_stacks: int = 1,
                 category: BuffCategory = BuffCategory.BUFF):
        self.name = name
        self.max_stacks = max_stacks
        self.stacks = 1
        self.category = category

    def modify_stats(self, stats: Dict):
        """修改面板属性"""
        pass

    def on_stack(self, new_buff):
        """Buff叠加时触发"""
        self.stacks = min(self.max_stacks, self.stacks + new_buff.stacks)

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "stacks": self.stacks, "category": self.category.value}

    def __repr__(self):
        return f"{type(self).__name__}({self.name!r}, stacks={self.stacks})"

# ============================================================
# 通用Buff类 - 大多数简单Buff可以用这个类
# ============================================================

class StatModifierBuff(Buff):
    """
    通用属性修改Buff

    使用示例:
        # 攻击力提升
        StatModifierBuff("热诚之火", {"atk_pct": 0.25})

        # 减抗
        StatModifierBuff("玉璋护盾", {"res_minus": 0.2}, BuffCategory.DEBUFF)

        # 元素增伤，可叠层
        StatModifierBuff("火伤", {"fire_dmg_bonus": 0.1}, max_stacks=3)
    """
    def __init__(self, name: str,
                 stat_modifiers: Dict[str, float],
                 category: BuffCategory = BuffCategory.BUFF,
                 max_stacks: int = 1,
                 stacks: int = 1):
        super().__init__(name, max_stacks, category)
        self.stat_modifiers = stat_modifiers
        self.stacks = max(0, min(max_stacks, stacks))

    def modify_stats(self, stats: Dict):
        for key, value in self.stat_modifiers.items():
            if key in stats:
                stats[key] += value * self.stacks  # 支持叠加
            else:
                stats[key] = value * self.stacks

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["stat_modifiers"] = dict(self.stat_modifiers)
        return data

class ScalingBuff(Buff):
    """
    按提供者属性折算的Buff

    加成 = source_value * ratio，可设上限。
    例如班尼特大招: 固定攻击力 = 班尼特基础攻击 * 倍率
    """
    def __init__(self, name: str, target_key: str, source_value: float,
                 ratio: float, cap: Optional[float] = None,
                 category: BuffCategory = BuffCategory.BUFF):
        super().__init__(name, 1, category)
        self.target_key = target_key
        self.source_value = source_value
        self.ratio = ratio
        self.cap = cap

    @property
    def value(self) -> float:
        v = self.source_value * self.ratio
        if self.cap is not None:
            v = min(v, self.cap)
        return v

    def modify_stats(self, stats: Dict):
        stats[self.target_key] = stats.get(self.target_key, 0.0) + self.value

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["stat_modifiers"] = {self.target_key: self.value}
        return data

# ============================================================
# 常用Buff预设
# ============================================================

def _bennett_q(params):
    ratio = params.get("ratio", 1.01)
    if params.get("c1", False):
        ratio += 0.2
    return ScalingBuff("鼓舞领域", StatKey.FLAT_ATK, params.get("base_atk", 800), ratio)

def _kazuha_a4(params):
    element = Element(params.get("element", Element.PYRO.value))
    return ScalingBuff("风物之诗咏", StatKey.element_bonus(element),
                       params.get("elemental_mastery", 800), 0.0004)

BUFF_PRESETS = {
    "pyro_resonance": lambda p: StatModifierBuff("热诚之火", {StatKey.ATK_PCT: 0.25}),
    "cryo_resonance": lambda p: StatModifierBuff("粉碎之冰", {StatKey.CRIT_RATE: 0.15}),
    "noblesse_oblige_4": lambda p: StatModifierBuff("昔日宗室之仪", {StatKey.ATK_PCT: 0.2}),
    "zhongli_shield": lambda p: StatModifierBuff("玉璋护盾", {StatKey.RES_MINUS: 0.2}, BuffCategory.DEBUFF),
    "klee_c2": lambda p: StatModifierBuff("破破弹片", {StatKey.DEF_MINUS: 0.23}, BuffCategory.DEBUFF),
    "bennett_q": _bennett_q,
    "kazuha_a4": _kazuha_a4,
}

def create_buff(data) -> Buff:
    """
    根据配置创建Buff

    支持:
        Buff实例 (原样返回)
        {"preset": "bennett_q", "params": {"base_atk": 800}}
        {"name": "自定义", "stat_modifiers": {"atk_pct": 0.2}, "stacks": 1, "max_stacks": 1}

    未知预设抛出 KeyError。
    """
    if isinstance(data, Buff):
        return data

    if "preset" in data:
        preset = data["preset"]
        if preset not in BUFF_PRESETS:
            raise KeyError(f"未知的Buff预设: {preset}")
        return BUFF_PRESETS[preset](data.get("params") or {})

    category = BuffCategory(data.get("category", BuffCategory.BUFF.value))
    max_stacks = data.get("max_stacks", 1)
    return StatModifierBuff(
        data["name"],
        dict(data["stat_modifiers"]),
        category=category,
        max_stacks=max_stacks,
        stacks=data.get("stacks", 1)
    )


class BuffManager:
    """Buff管理器"""
    def __init__(self, buffs: Optional[List[Buff]] = None):
        self.buffs: List[Buff] = []
        for b in buffs or []:
            self.add_buff(b)

    def get_buff(self, name: str) -> Optional[Buff]:
        """获取指定名称的Buff"""
        for b in self.buffs:
            if b.name == name:
                return b
        return None

    def add_buff(self, new_buff: Buff):
        """添加或叠加Buff（同名Buff叠层，不重复生效）"""
        for b in self.buffs:
            if b.name == new_buff.name:
                b.on_stack(new_buff)
                return
        self.buffs.append(new_buff)

    def apply_stats(self, base_stats: Dict):
        """应用所有Buff的属性修改，返回新字典"""
        final_stats = copy.deepcopy(base_stats)
        for b in self.buffs:
            b.modify_stats(final_stats)
        return final_stats

    def remove_buff(self, name: str):
        """移除指定名称的Buff"""
        for b in self.buffs:
            if b.name == name:
                self.buffs.remove(b)
                return True
        return False
