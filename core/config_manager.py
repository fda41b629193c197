"""
统一配置管理系统
集中管理计算器用到的全局数值常量，支持从 JSON / YAML 覆盖
"""
import copy
import json
import yaml
from pathlib import Path
from typing import Any, Callable, Dict


class ConfigManager:
    """单例配置管理器"""
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self):
        if self._initialized:
            return

        # 防御公式等级常数: (Lc + 100) / ((Lc + 100) + (Le + 100) * (1 - 减防))
        self.level_constant = 100

        # 增幅反应基础倍率 {反应: {触发元素: 倍率}}
        self.reaction_base_multiplier = {
            "melt": {
                "fire": 2.0,
                "ice": 1.5,
            },
            "vaporize": {
                "water": 2.0,
                "fire": 1.5,
            },
        }

        # 元素精通增幅系数: 2.78 * EM / (EM + 1400)
        self.em_amp_coefficient = 2.78
        self.em_amp_constant = 1400.0

        # 抗性分段
        self.res_high_threshold = 0.75

        # 暴击相关
        self.crit_rate_cap = 1.0   # 暴击率上限
        self.crit_rate_floor = 0.0 # 暴击率下限

        # 天赋等级
        self.max_skill_level = 15
        self.constellation_skill_boost = 3  # 命座提升的技能等级

        # 日志配置
        self.log_level = "INFO"  # DEBUG, INFO, WARNING, ERROR

        self._initialized = True

    def load_from_dict(self, config_dict: Dict[str, Any]):
        """
        覆盖已有字段；未知键忽略。
        reaction_base_multiplier 按反应逐项合并，只改写给出的元素。
        """
        for key, value in (config_dict or {}).items():
            if key.startswith('_') or not hasattr(self, key):
                continue
            if key == "reaction_base_multiplier":
                for reaction, table in value.items():
                    self.reaction_base_multiplier.setdefault(reaction, {}).update(table)
            else:
                setattr(self, key, value)

    @staticmethod
    def _read(file_path: str, loader: Callable) -> Dict[str, Any]:
        path = Path(file_path)
        if not path.is_file():
            raise FileNotFoundError(f"配置文件不存在: {file_path}")
        with path.open(encoding='utf-8') as f:
            return loader(f) or {}

    def load_from_json(self, file_path: str):
        self.load_from_dict(self._read(file_path, json.load))

    def load_from_yaml(self, file_path: str):
        self.load_from_dict(self._read(file_path, yaml.safe_load))

    def save_to_json(self, file_path: str):
        path = Path(file_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(self.to_dict(), indent=2, ensure_ascii=False), encoding='utf-8')

    def to_dict(self) -> Dict[str, Any]:
        """当前配置快照（不含内部状态）"""
        return {k: copy.deepcopy(v) for k, v in vars(self).items() if not k.startswith('_')}

    def get_reaction_base(self, reaction: str, element: str):
        """
        获取增幅反应基础倍率

        Returns:
            倍率；该元素无法触发此反应时返回 None
        """
        return self.reaction_base_multiplier.get(reaction, {}).get(element)

    def get_em_amp_bonus(self, elemental_mastery: float) -> float:
        """
        元素精通带来的增幅反应提升
        提升 = coefficient * EM / (EM + constant)
        """
        if elemental_mastery <= 0:
            return 0.0
        return (self.em_amp_coefficient * elemental_mastery /
                (elemental_mastery + self.em_amp_constant))

    def reset_to_defaults(self):
        """重置为默认配置"""
        self._initialized = False
        self.__init__()

    @classmethod
    def get_instance(cls) -> 'ConfigManager':
        """获取单例实例"""
        return cls()


# 提供全局访问点
def get_config() -> ConfigManager:
    """获取配置管理器实例"""
    return ConfigManager.get_instance()
