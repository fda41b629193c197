"""
伤害表生成
每个技能公式都由这几个函数组合而成：普通伤害列、增幅反应列、按行合并
"""
from typing import List, Optional, Sequence, Tuple

from core.calculator import DamageEngine, DamageResult
from core.enemy import Enemy
from core.logger import get_logger
from core.operator_config import CharacterConfig
from core.skill_key import SkillKey
from entities.character_registry import get_character_class
from mechanics.reaction_manager import ReactionManager

logger = get_logger("tables")


def _as_enemy(enemy) -> Enemy:
    if isinstance(enemy, Enemy):
        return enemy
    return Enemy.from_dict(enemy or {})


def _build_character(config_object):
    character = config_object.character
    if isinstance(character, dict):
        character = CharacterConfig(**character)
    return get_character_class(character.name)(character)


def _damage_row(attribute, character, enemy: Enemy, skill_key: SkillKey,
                slot: str, skill_level: int, reaction=None) -> DamageResult:
    ratio = (character.get_skill_ratio(skill_key.key, slot, skill_level)
             + character.extra_ratio(skill_key.key, slot))
    return DamageEngine.calculate(
        attribute, enemy, ratio,
        skill_key.element_enum, skill_key.skill_type_enum,
        reaction=reaction
    )


def table_normal(attribute, config_object, enemy, skill_keys: Sequence[SkillKey],
                 slot: str) -> List[DamageResult]:
    """无反应伤害列，顺序与 skill_keys 一致"""
    character = _build_character(config_object)
    enemy = _as_enemy(enemy)
    skill_level = character.get_skill_level(slot)

    results = [_damage_row(attribute, character, enemy, sk, slot, skill_level)
               for sk in skill_keys]
    logger.debug(f"[{character.display_name}] {slot} 天赋等级{skill_level} 普通伤害: "
                 f"{[int(r.expectation) for r in results]}")
    return results


def table_reaction(reaction, attribute, config_object, enemy, skill_keys: Sequence[SkillKey],
                   slot: str) -> List[Optional[DamageResult]]:
    """
    增幅反应伤害列

    Args:
        reaction: "melt" / "vaporize" (或 ReactionType)，其他值抛出 ValueError

    Returns:
        与 skill_keys 对齐的列表；该段元素无法触发此反应时为 None
    """
    reaction = ReactionManager.parse(reaction)
    character = _build_character(config_object)
    enemy = _as_enemy(enemy)
    skill_level = character.get_skill_level(slot)

    results = []
    for sk in skill_keys:
        if not ReactionManager.can_trigger(reaction, sk.element_enum):
            results.append(None)
            continue
        results.append(_damage_row(attribute, character, enemy, sk, slot, skill_level, reaction))
    return results


def merge_array(*columns: Tuple[str, Sequence]) -> List[dict]:
    """
    将多个具名列按行合并

        merge_array(("chs", ["a", "b"]), ("normal", [1, 2]))
        -> [{"chs": "a", "normal": 1}, {"chs": "b", "normal": 2}]

    各列长度不一致时抛出 ValueError。
    """
    if not columns:
        return []

    lengths = {name: len(values) for name, values in columns}
    if len(set(lengths.values())) > 1:
        raise ValueError(f"列长度不一致: {lengths}")

    names = [name for name, _ in columns]
    return [dict(zip(names, row)) for row in zip(*(values for _, values in columns))]
