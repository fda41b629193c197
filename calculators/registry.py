"""
技能公式注册表
(角色, 槽位) -> SkillFormula，由角色声明的伤害键生成
"""
from typing import Dict, List, Optional, Tuple

from calculators.skill_formula import SkillFormula
from core.enums import Element, ReactionType
from core.logger import get_logger
from entities.character_registry import get_all_characters
from entities.characters.klee import Klee
from mechanics.reaction_manager import ReactionManager

logger = get_logger("registry")

# 可莉 元素战技: 蹦蹦炸弹 / 诡雷
klee_e = SkillFormula(Klee.get_skill_keys("e"), "e", reactions=("melt", "vaporize"))


def _available_reactions(skill_keys) -> Tuple[str, ...]:
    """伤害键中至少有一段能触发的增幅反应"""
    elements = {Element(k.element) for k in skill_keys}
    return tuple(r.value for r in ReactionType
                 if any(ReactionManager.can_trigger(r, e) for e in elements))


class FormulaRegistry:
    def __init__(self):
        self.formulas: Dict[Tuple[str, str], SkillFormula] = {}

    def register(self, character: str, slot: str, formula: SkillFormula):
        self.formulas[(character, slot)] = formula

    def get(self, character: str, slot: str) -> SkillFormula:
        """未注册的 (角色, 槽位) 抛出 KeyError"""
        try:
            return self.formulas[(character, slot)]
        except KeyError:
            raise KeyError(f"没有公式: {character}.{slot}")

    def get_slots(self, character: str) -> List[str]:
        return [slot for (name, slot) in self.formulas if name == character]

    def load_from_characters(self):
        for name, char_cls in get_all_characters().items():
            for slot in char_cls.get_slots():
                keys = char_cls.get_skill_keys(slot)
                self.register(name, slot, SkillFormula(keys, slot, _available_reactions(keys)))
        # 显式声明的公式覆盖自动生成的
        self.register(Klee.name, "e", klee_e)
        logger.debug(f"已注册 {len(self.formulas)} 个技能公式")
        return self


_registry: Optional[FormulaRegistry] = None


def get_registry() -> FormulaRegistry:
    global _registry
    if _registry is None:
        _registry = FormulaRegistry().load_from_characters()
    return _registry


def get_formula(character: str, slot: str) -> SkillFormula:
    return get_registry().get(character, slot)


def calculate(character: str, slot: str, artifacts, config_object, enemy) -> List[dict]:
    """按 (角色, 槽位) 分发到对应公式"""
    return get_formula(character, slot)(artifacts, config_object, enemy)
