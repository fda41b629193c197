"""
属性解析
汇总角色、武器、圣遗物、Buff 与天赋效果，得到计算伤害用的面板
"""
import copy
from dataclasses import asdict
from typing import Callable, Dict, List

from core.artifact_system import Artifact, get_artifact_set_manager
from core.logger import get_logger
from core.operator_config import CharacterConfig, WeaponConfig
from core.stats import CombatStats, StatKey, STAT_FIELDS, get_level_index
from core.weapon_system import get_weapon_manager
from entities.character_registry import get_character_class
from mechanics.buff_system import BuffManager, create_buff

logger = get_logger("attribute")


class CalculatorConfigError(ValueError):
    """计算配置无效（缺少角色/武器、武器类型不符、等级非法等）"""


class Attribute:
    """
    角色面板

    stats 保存各来源累加后的原始数值；最终攻击/生命/防御在读取时合成。
    edges 描述属性之间的转化（如 攻击力 -> 元素精通），读取目标属性时叠加。
    """

    def __init__(self, stats: Dict[str, float]):
        self.stats = stats
        self.edges: List[tuple] = []  # (source, target, func, name)
        self._resolving = set()

    def add_stat(self, key: str, value: float):
        self.stats[key] = self.stats.get(key, 0.0) + value

    def add_edge(self, source: str, target: str, func: Callable[[float], float], name: str = ""):
        """添加属性转化: target += func(source)"""
        self.edges.append((source, target, func, name))

    def _raw(self, key: str) -> float:
        if key == StatKey.FINAL_ATK:
            return (self.get(StatKey.BASE_ATK) * (1.0 + self.get(StatKey.ATK_PCT))
                    + self.get(StatKey.FLAT_ATK))
        if key == StatKey.FINAL_HP:
            return (self.get(StatKey.BASE_HP) * (1.0 + self.get(StatKey.HP_PCT))
                    + self.get(StatKey.FLAT_HP))
        if key == StatKey.FINAL_DEF:
            return (self.get(StatKey.BASE_DEF) * (1.0 + self.get(StatKey.DEF_PCT))
                    + self.get(StatKey.FLAT_DEF))
        return self.stats.get(key, 0.0)

    def get(self, key: str) -> float:
        if key in self._resolving:
            raise ValueError(f"属性转化存在循环: {key}")
        self._resolving.add(key)
        try:
            value = self._raw(key)
            for source, target, func, _ in self.edges:
                if target == key:
                    value += func(self.get(source))
            return value
        finally:
            self._resolving.discard(key)

    @property
    def level(self) -> int:
        return int(self.stats.get(StatKey.LEVEL, 90))

    @property
    def atk(self) -> float:
        return self.get(StatKey.FINAL_ATK)

    @property
    def hp(self) -> float:
        return self.get(StatKey.FINAL_HP)

    @property
    def defense(self) -> float:
        return self.get(StatKey.FINAL_DEF)

    @property
    def elemental_mastery(self) -> float:
        return self.get(StatKey.ELEMENTAL_MASTERY)

    def to_dict(self) -> Dict[str, float]:
        """面板快照（含最终攻击/生命/防御与转化后的数值）"""
        keys = list(self.stats.keys()) + [StatKey.FINAL_ATK, StatKey.FINAL_HP, StatKey.FINAL_DEF]
        return {k: self.get(k) for k in keys}


def _add(stats: Dict[str, float], key: str, value: float, source: str):
    if key not in STAT_FIELDS:
        logger.warning(f"忽略未知属性 {key}={value} (来源: {source})")
        return
    stats[key] += value


def _as_artifact(item) -> Artifact:
    if isinstance(item, Artifact):
        return item
    return Artifact.from_dict(item)


def _level_index(level, ascend, owner):
    try:
        return get_level_index(int(level), bool(ascend))
    except ValueError as e:
        raise CalculatorConfigError(f"{owner}: {e}") from e


def get_attribute(artifacts, character, weapon, buffs=None) -> Attribute:
    """
    解析角色面板

    Args:
        artifacts: 圣遗物列表 (Artifact 或字典)
        character: CharacterConfig (或同结构字典)
        weapon: WeaponConfig (或同结构字典)
        buffs: Buff 列表 (Buff 实例或字典)

    Raises:
        CalculatorConfigError: 缺少角色/武器、未知角色/武器、武器类型不符、等级非法
    """
    if not character:
        raise CalculatorConfigError("缺少角色配置")
    if not weapon:
        raise CalculatorConfigError("缺少武器配置")
    if isinstance(character, dict):
        character = CharacterConfig(**character)
    if isinstance(weapon, dict):
        weapon = WeaponConfig(**weapon)

    # 1. 角色基础属性
    try:
        char_cls = get_character_class(character.name)
    except KeyError as e:
        raise CalculatorConfigError(f"未知角色: {character.name}") from e
    char = char_cls(character)

    stats = asdict(CombatStats(level=int(character.level)))
    char_index = _level_index(character.level, character.ascend, char_cls.display_name)
    for key, value in char.get_base_stats(char_index).items():
        _add(stats, key, value, char_cls.display_name)

    # 2. 武器
    weapon_data = get_weapon_manager().get(weapon.name)
    if weapon_data is None:
        raise CalculatorConfigError(f"未知武器: {weapon.name}")
    if weapon_data.weapon_type != char_cls.weapon_type.value:
        raise CalculatorConfigError(
            f"{char_cls.display_name} 无法装备{weapon_data.weapon_type}武器: {weapon_data.name}"
        )
    weapon_index = _level_index(weapon.level, weapon.ascend, weapon_data.name)
    try:
        weapon_stats = weapon_data.get_stats(weapon_index, weapon.refine, weapon.params)
    except ValueError as e:
        raise CalculatorConfigError(str(e)) from e
    for key, value in weapon_stats.items():
        _add(stats, key, value, weapon_data.name)

    # 3. 圣遗物词条与套装
    items = [_as_artifact(a) for a in (artifacts or [])]
    seen_slots = set()
    for item in items:
        if item.slot in seen_slots:
            logger.warning(f"圣遗物槽位重复: {item.slot}")
        seen_slots.add(item.slot)
        for key, value in item.iter_stats():
            _add(stats, key, value, f"圣遗物[{item.slot}]")

    for set_id, bonuses in get_artifact_set_manager().check_set_bonuses(items).items():
        for bonus in bonuses:
            for key, value in bonus.stat_bonuses.items():
                _add(stats, key, value, f"套装[{set_id}]{bonus.pieces_required}件")

    # 4. Buff
    # 复制后再叠层，不修改调用方传入的 Buff
    buff_manager = BuffManager([copy.copy(create_buff(b)) for b in (buffs or [])])
    # Buff 均为加算，作用在空字典上得到增量，再按未知属性规则合入
    for key, value in buff_manager.apply_stats({}).items():
        _add(stats, key, value, "Buff")

    # 5. 天赋效果
    attribute = Attribute(stats)
    char.apply_effect(attribute)

    logger.debug(
        f"[{char_cls.display_name}] 面板: 攻击 {attribute.atk:.1f} 精通 {attribute.elemental_mastery:.1f} "
        f"暴击 {attribute.get(StatKey.CRIT_RATE):.3f}/{attribute.get(StatKey.CRIT_DMG):.3f}"
    )
    return attribute
