from dataclasses import dataclass, asdict
from typing import Optional

from core.config_manager import get_config
from core.enemy import Enemy
from core.enums import Element, SkillType, ReactionType
from core.formulas import calc_def_multiplier, calc_res_multiplier
from core.stats import StatKey
from mechanics.reaction_manager import ReactionManager


@dataclass(frozen=True)
class DamageResult:
    """单段伤害的暴击 / 不暴击 / 期望"""
    critical: float
    non_critical: float
    expectation: float

    def to_dict(self):
        return asdict(self)


class DamageEngine:
    @staticmethod
    def calculate(attribute, enemy: Enemy, skill_ratio: float, element: Element,
                  skill_type: SkillType, reaction: Optional[ReactionType] = None) -> DamageResult:
        """
        伤害计算公式：
        基础伤害区 × 增伤区 × 防御区 × 抗性区 × 增幅反应区 × 暴击区

        reaction 为 None 时不计算增幅反应；元素无法触发该反应时同样按无反应计算，
        由调用方决定是否展示。
        防御区的角色等级取自 attribute.level。
        """
        config = get_config()

        # ============================================================
        # 1. 基础伤害区
        # ============================================================
        base_dmg = attribute.atk * skill_ratio

        # ============================================================
        # 2. 增伤区（加算）
        # ============================================================
        bonus = (attribute.get(StatKey.DMG_BONUS)
                 + attribute.get(StatKey.element_bonus(element))
                 + attribute.get(StatKey.skill_type_bonus(skill_type)))
        bonus_mult = 1.0 + bonus

        # ============================================================
        # 3. 防御区
        # ============================================================
        def_mult = calc_def_multiplier(attribute.level, enemy.level,
                                       attribute.get(StatKey.DEF_MINUS))

        # ============================================================
        # 4. 抗性区
        # ============================================================
        res = enemy.get_res(element) - attribute.get(StatKey.RES_MINUS)
        res_mult = calc_res_multiplier(res)

        # ============================================================
        # 5. 增幅反应区
        # ============================================================
        amp_mult = 1.0
        if reaction is not None:
            result = ReactionManager.get_amp_multiplier(
                reaction, element,
                elemental_mastery=attribute.elemental_mastery,
                reaction_bonus=attribute.get(StatKey.reaction_bonus(ReactionManager.parse(reaction)))
            )
            amp_mult = result.multiplier

        non_crit = base_dmg * bonus_mult * def_mult * res_mult * amp_mult

        # ============================================================
        # 6. 暴击区
        # ============================================================
        c_rate = min(config.crit_rate_cap, max(config.crit_rate_floor, attribute.get(StatKey.CRIT_RATE)))
        c_dmg = attribute.get(StatKey.CRIT_DMG)

        return DamageResult(
            critical=non_crit * (1.0 + c_dmg),
            non_critical=non_crit,
            expectation=non_crit * (1.0 + c_rate * c_dmg)
        )
