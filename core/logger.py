import logging
import sys
from core.config_manager import ConfigManager

# 避免重复配置
_LOGGING_CONFIGURED = False

LOGGER_NAME = "DamageCalc"

_LEVEL_MAP = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR
}


def get_logger(name: str = None) -> logging.Logger:
    """
    获取计算器日志对象

    首次调用时挂载 stdout handler，之后每次调用只按 ConfigManager.log_level 更新级别。
    子模块传入 name 时返回 "DamageCalc.<name>" 子日志，沿用根日志的 handler。
    """
    global _LOGGING_CONFIGURED
    root = logging.getLogger(LOGGER_NAME)

    if not _LOGGING_CONFIGURED:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter('%(message)s'))
        root.addHandler(handler)
        root.propagate = False
        _LOGGING_CONFIGURED = True

    level = ConfigManager.get_instance().log_level
    root.setLevel(_LEVEL_MAP.get(str(level).upper(), logging.INFO))

    if name:
        return root.getChild(name)
    return root
