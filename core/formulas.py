"""
游戏公式计算模块
提取常用的计算公式，避免重复代码
"""
from core.config_manager import get_config


def calc_res_multiplier(res: float) -> float:
    """
    计算抗性乘区

    公式:
        res < 0      : 1 - res / 2
        res < 0.75   : 1 - res
        res >= 0.75  : 1 / (4 * res + 1)

    Args:
        res: 减抗后的最终抗性

    Returns:
        抗性乘区系数
    """
    if res < 0:
        return 1.0 - res / 2.0
    if res < get_config().res_high_threshold:
        return 1.0 - res
    return 1.0 / (4.0 * res + 1.0)


def calc_def_multiplier(character_level: int, enemy_level: int, def_minus: float = 0.0) -> float:
    """
    计算防御乘区

    公式: (Lc + 100) / ((Lc + 100) + (Le + 100) × (1 - 减防))

    Args:
        character_level: 角色等级
        enemy_level: 敌人等级
        def_minus: 减防比例，限制在 [0, 1]
    """
    c = get_config().level_constant
    def_minus = min(1.0, max(0.0, def_minus))
    char_part = character_level + c
    return char_part / (char_part + (enemy_level + c) * (1.0 - def_minus))
