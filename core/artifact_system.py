"""圣遗物系统"""
import json
from pathlib import Path
from typing import Dict, List, Optional, Any, Tuple
from dataclasses import dataclass, asdict, field

from core.enums import ArtifactSlot
from core.stats import StatKey


@dataclass
class Artifact:
    """圣遗物数据类"""
    slot: str                       # flower, feather, sand, goblet, head
    set_name: str                   # 套装ID
    main_stat: Tuple[str, float]    # (属性键, 数值)
    sub_stats: List[Tuple[str, float]] = field(default_factory=list)
    level: int = 20

    def __post_init__(self):
        # 校验槽位
        ArtifactSlot(self.slot)
        self.main_stat = tuple(self.main_stat)
        self.sub_stats = [tuple(s) for s in self.sub_stats]

    def to_dict(self):
        data = asdict(self)
        return data

    def iter_stats(self):
        """遍历主副词条"""
        yield self.main_stat
        yield from self.sub_stats

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Artifact':
        """
        从字典构造，词条既可以写成 [键, 值] 也可以写成 {"name": 键, "value": 值}
        """
        def to_pair(stat):
            if isinstance(stat, dict):
                return stat['name'], float(stat['value'])
            name, value = stat
            return name, float(value)

        return cls(
            slot=data['slot'],
            set_name=data['set_name'],
            main_stat=to_pair(data['main_stat']),
            sub_stats=[to_pair(s) for s in data.get('sub_stats', [])],
            level=data.get('level', 20)
        )


@dataclass
class ArtifactSetBonus:
    """套装效果"""
    pieces_required: int            # 需要的件数（2 或 4）
    stat_bonuses: Dict[str, float]  # 属性加成
    description: str = ""

    def to_dict(self):
        data = asdict(self)
        return data


@dataclass
class ArtifactSet:
    """圣遗物套装"""
    id: str
    name: str
    bonuses: List[ArtifactSetBonus] = field(default_factory=list)

    def to_dict(self):
        data = asdict(self)
        return data


class ArtifactSetManager:
    """套装管理器"""

    def __init__(self, sets_file: Optional[str] = None):
        self.sets_file = Path(sets_file) if sets_file else None
        self.sets: Dict[str, ArtifactSet] = {}
        self.create_default_sets()
        self.load()

    def load(self):
        """从文件加载自定义套装"""
        if not self.sets_file or not self.sets_file.exists():
            return

        with open(self.sets_file, 'r', encoding='utf-8') as f:
            data = json.load(f)
        for item in data:
            # 重建 ArtifactSetBonus 对象
            bonuses = [ArtifactSetBonus(**b) for b in item.get('bonuses', [])]
            artifact_set = ArtifactSet(id=item['id'], name=item['name'], bonuses=bonuses)
            self.sets[artifact_set.id] = artifact_set

    def save(self):
        """保存套装到文件"""
        if not self.sets_file:
            return
        self.sets_file.parent.mkdir(parents=True, exist_ok=True)
        with open(self.sets_file, 'w', encoding='utf-8') as f:
            json.dump([s.to_dict() for s in self.sets.values()], f, ensure_ascii=False, indent=2)

    def create(self, set_id: str, name: str, bonuses: List[Dict[str, Any]]) -> ArtifactSet:
        """创建新套装"""
        artifact_set = ArtifactSet(
            id=set_id,
            name=name,
            bonuses=[ArtifactSetBonus(**b) for b in bonuses]
        )
        self.sets[artifact_set.id] = artifact_set
        self.save()
        return artifact_set

    def get(self, set_id: str) -> Optional[ArtifactSet]:
        """获取套装"""
        return self.sets.get(set_id)

    def get_all(self) -> List[ArtifactSet]:
        """获取所有套装"""
        return list(self.sets.values())

    def delete(self, set_id: str) -> bool:
        """删除套装"""
        if set_id in self.sets:
            del self.sets[set_id]
            self.save()
            return True
        return False

    def check_set_bonuses(self, artifacts: List[Artifact]) -> Dict[str, List[ArtifactSetBonus]]:
        """
        检查圣遗物列表中的套装效果
        返回：{set_id: [激活的套装效果列表]}
        """
        # 统计每个套装的件数（同槽位重复只计一次）
        slots_by_set = {}
        for item in artifacts:
            slots_by_set.setdefault(item.set_name, set()).add(item.slot)

        active_bonuses = {}
        for set_id, slots in slots_by_set.items():
            artifact_set = self.get(set_id)
            if artifact_set:
                activated = [b for b in artifact_set.bonuses if len(slots) >= b.pieces_required]
                if activated:
                    active_bonuses[set_id] = activated

        return active_bonuses

    def create_default_sets(self):
        """加载内置套装（不写文件）"""
        sets_file, self.sets_file = self.sets_file, None

        self.create("crimson_witch", "炽烈的炎之魔女", [
            {"pieces_required": 2, "stat_bonuses": {StatKey.FIRE_DMG_BONUS: 0.15},
             "description": "获得15%火元素伤害加成"},
            {"pieces_required": 4, "stat_bonuses": {StatKey.MELT_BONUS: 0.15, StatKey.VAPORIZE_BONUS: 0.15},
             "description": "蒸发、融化反应造成的伤害提升15%"},
        ])
        self.create("gladiators_finale", "角斗士的终幕礼", [
            {"pieces_required": 2, "stat_bonuses": {StatKey.ATK_PCT: 0.18},
             "description": "攻击力提高18%"},
        ])
        self.create("wanderers_troupe", "流浪大地的乐团", [
            {"pieces_required": 2, "stat_bonuses": {StatKey.ELEMENTAL_MASTERY: 80},
             "description": "元素精通提高80点"},
            {"pieces_required": 4, "stat_bonuses": {StatKey.CHARGED_DMG_BONUS: 0.35},
             "description": "装备者为法器或弓箭角色时，重击造成的伤害提高35%"},
        ])
        self.create("thundering_fury", "如雷的盛怒", [
            {"pieces_required": 2, "stat_bonuses": {StatKey.THUNDER_DMG_BONUS: 0.15},
             "description": "获得15%雷元素伤害加成"},
        ])
        self.create("gilded_dreams", "饰金之梦", [
            {"pieces_required": 2, "stat_bonuses": {StatKey.ELEMENTAL_MASTERY: 80},
             "description": "元素精通提高80点"},
        ])
        self.create("noblesse_oblige", "昔日宗室之仪", [
            {"pieces_required": 2, "stat_bonuses": {StatKey.BURST_DMG_BONUS: 0.2},
             "description": "元素爆发造成的伤害提升20%"},
        ])

        self.sets_file = sets_file


_default_manager: Optional[ArtifactSetManager] = None


def get_artifact_set_manager() -> ArtifactSetManager:
    """获取内置套装库（进程内共享，只读使用）"""
    global _default_manager
    if _default_manager is None:
        _default_manager = ArtifactSetManager()
    return _default_manager
