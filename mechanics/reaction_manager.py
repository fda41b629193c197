from dataclasses import dataclass
from typing import Optional
from core.config_manager import get_config
from core.enums import Element, ReactionType


@dataclass
class ReactionResult:
    multiplier: float = 1.0
    reaction_type: Optional[ReactionType] = None
    log_msg: str = ""


class ReactionManager:
    """增幅反应（融化 / 蒸发）倍率计算"""

    @staticmethod
    def parse(reaction) -> ReactionType:
        """将字符串或枚举统一为 ReactionType，未知反应抛出 ValueError"""
        if isinstance(reaction, ReactionType):
            return reaction
        try:
            return ReactionType(reaction)
        except ValueError:
            raise ValueError(f"不支持的增幅反应: {reaction}")

    @staticmethod
    def get_base_multiplier(reaction, element: Element) -> Optional[float]:
        """触发元素对应的基础倍率，无法触发时返回 None"""
        reaction = ReactionManager.parse(reaction)
        return get_config().get_reaction_base(reaction.value, element.value)

    @staticmethod
    def can_trigger(reaction, element: Element) -> bool:
        return ReactionManager.get_base_multiplier(reaction, element) is not None

    @staticmethod
    def get_amp_multiplier(reaction, element: Element, elemental_mastery: float = 0.0,
                           reaction_bonus: float = 0.0) -> ReactionResult:
        """
        计算增幅反应乘区

        倍率 = 基础倍率 × (1 + 精通提升 + 反应加成)
        元素无法触发该反应时 reaction_type 为 None、倍率为 1。
        """
        reaction = ReactionManager.parse(reaction)
        base = ReactionManager.get_base_multiplier(reaction, element)
        if base is None:
            return ReactionResult(log_msg=f"{element.value} 无法触发 {reaction.value}")

        em_bonus = get_config().get_em_amp_bonus(elemental_mastery)
        multiplier = base * (1.0 + em_bonus + reaction_bonus)
        return ReactionResult(
            multiplier=multiplier,
            reaction_type=reaction,
            log_msg=f"【{reaction.value}】 基础{base} 精通+{em_bonus:.3f} 加成+{reaction_bonus:.3f} -> x{multiplier:.3f}"
        )
