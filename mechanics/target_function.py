"""
目标函数
把若干技能段的期望伤害加权求和，给一套配置打分，用于比较不同配装
"""
from dataclasses import replace
from typing import Any, Dict, Tuple

from calculators.registry import get_formula


class TargetFunction:
    """
    基类: weights 为 {(槽位, 伤害键): 权重}，column 为取值的伤害列
    """
    name = ""
    weights: Dict[Tuple[str, str], float] = {}
    column = "normal"
    character_params: Dict[str, Any] = {}  # 打分时强制使用的天赋开关

    def __init__(self, character: str):
        self.character = character

    def get_weights(self) -> Dict[Tuple[str, str], float]:
        return dict(self.weights)

    def prepare_config(self, config_object):
        """用 character_params 覆盖角色天赋开关，返回新的配置，不修改原配置"""
        if not self.character_params or config_object is None or config_object.character is None:
            return config_object
        params = dict(config_object.character.params)
        params.update(self.character_params)
        return replace(config_object, character=replace(config_object.character, params=params))

    def target(self, artifacts, config_object, enemy) -> float:
        config_object = self.prepare_config(config_object)
        weights = self.get_weights()
        score = 0.0
        for slot in sorted({slot for slot, _ in weights}):
            formula = get_formula(self.character, slot)
            table = formula(artifacts, config_object, enemy)
            for skill_key, row in zip(formula.skill_keys, table):
                weight = weights.get((slot, skill_key.key), 0.0)
                cell = row.get(self.column)
                if weight and cell is not None:
                    score += cell.expectation * weight
        return score


class KleeDefaultTargetFunction(TargetFunction):
    """可莉-逃跑的太阳: 以重击与战技为主的火伤输出，默认按融化计"""
    name = "klee_default"
    column = "normalMelt"
    weights = {
        ("a", "charged"): 1.0,
        ("e", "dmg1"): 0.6,
        ("e", "dmg2"): 0.4,
        ("q", "dmg1"): 0.5,
    }

    def __init__(self):
        super().__init__("klee")


class IneffaDefaultTargetFunction(TargetFunction):
    """
    伊涅芙-月光机师

    overclocking_rate: 频率超限回路触发比例，战技伤害按 (1 + rate) 计入
    打分时频率超限回路始终视为生效，与展示用的开关无关
    """
    name = "ineffa_default"
    character_params = {"overclocking_active": True}

    def __init__(self, overclocking_rate: float = 0.8):
        super().__init__("ineffa")
        if not 0.0 <= overclocking_rate <= 1.0:
            raise ValueError(f"overclocking_rate 须在 [0, 1] 内: {overclocking_rate}")
        self.overclocking_rate = overclocking_rate

    def get_weights(self):
        return {
            ("a", "dmg1"): 0.4,
            ("a", "dmg2"): 0.4,
            ("a", "dmg3"): 0.4,
            ("a", "dmg4"): 0.4,
            ("a", "charged"): 0.3,
            ("e", "dmg1"): 0.8 * (1.0 + self.overclocking_rate),
            ("q", "dmg1"): 0.6,
        }


TARGET_FUNCTIONS = {
    KleeDefaultTargetFunction.name: KleeDefaultTargetFunction,
    IneffaDefaultTargetFunction.name: IneffaDefaultTargetFunction,
}
