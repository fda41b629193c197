from calculators.presets import PRESETS
from calculators.registry import get_formula
from core.operator_config import ConfigObject


def format_cell(cell):
    if cell is None:
        return "-"
    return f"{int(cell.expectation):>7d} / {int(cell.critical):>7d}"


def main():
    # 使用预设
    preset_name = "可莉 魔女融化 (四件炽烈的炎之魔女)"
    preset = PRESETS[preset_name]

    print(f"==================================================")
    print(f"       {preset_name}")
    print(f"       {preset['description']}")
    print(f"==================================================")

    # 1. 配置与公式
    config_object = ConfigObject.from_dict(preset['config'])
    formula = get_formula(preset['character'], preset['slot'])

    # 2. 计算伤害表
    rows = formula(preset['artifacts'], config_object, preset['enemy'])

    # 3. 输出 (期望 / 暴击)
    print(" | ".join(formula.columns))
    for row in rows:
        cells = [row['chs']] + [format_cell(row[col]) for col in formula.columns[1:]]
        print(" | ".join(cells))


if __name__ == "__main__":
    main()
