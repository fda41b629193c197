"""角色动态加载与查找"""
import importlib
import inspect
import pkgutil
from pathlib import Path
from typing import Dict, Type

from core.logger import get_logger
from entities.characters.base_character import BaseCharacter

logger = get_logger("characters")

CHAR_MAP: Dict[str, Type[BaseCharacter]] = {}

_CHAR_PKG_PATH = Path(__file__).parent / "characters"


def load_all_characters() -> Dict[str, Type[BaseCharacter]]:
    """扫描 entities.characters 下的模块，注册所有 BaseCharacter 子类"""
    CHAR_MAP.clear()

    for _, name, _ in pkgutil.iter_modules([str(_CHAR_PKG_PATH)]):
        if name == "base_character" or name.endswith("_constants"):
            continue
        module = importlib.import_module(f"entities.characters.{name}")
        for _, obj in inspect.getmembers(module, inspect.isclass):
            if issubclass(obj, BaseCharacter) and obj is not BaseCharacter and obj.name:
                CHAR_MAP[obj.name] = obj
                logger.debug(f"Loaded character: {obj.name} ({obj.display_name}) from {name}")

    logger.info(f"已加载 {len(CHAR_MAP)} 个角色")
    return CHAR_MAP


def get_character_class(name: str) -> Type[BaseCharacter]:
    """按注册名获取角色类，未知角色抛出 KeyError"""
    if not CHAR_MAP:
        load_all_characters()
    if name not in CHAR_MAP:
        raise KeyError(f"未知角色: {name}")
    return CHAR_MAP[name]


def get_all_characters() -> Dict[str, Type[BaseCharacter]]:
    if not CHAR_MAP:
        load_all_characters()
    return dict(CHAR_MAP)
