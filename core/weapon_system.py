"""武器系统"""
import json
import uuid
from pathlib import Path
from typing import Dict, List, Optional, Any
from dataclasses import dataclass, asdict, field

from core.stats import StatKey


@dataclass
class WeaponEffect:
    """武器特效"""
    key: str                      # 特效键名（WeaponConfig.params 中用此键控制层数/开关）
    effect_type: str              # "passive" 常驻, "conditional" 需要条件/层数
    buff_stats: Dict[str, float]  # 每层提供的属性加成（精炼1）
    max_stacks: int = 1
    default_stacks: int = 1
    refine_scale: float = 0.25    # 每精炼一级提升的比例
    description: str = ""

    def get_stats(self, refine: int, stacks: Optional[int] = None) -> Dict[str, float]:
        """按精炼和层数计算特效加成"""
        if self.effect_type == "passive":
            stacks = self.max_stacks
        elif stacks is None:
            stacks = self.default_stacks
        stacks = max(0, min(self.max_stacks, int(stacks)))
        scale = (1.0 + self.refine_scale * (refine - 1)) * stacks
        return {k: v * scale for k, v in self.buff_stats.items()}


@dataclass
class Weapon:
    """武器数据类"""
    id: str
    name: str
    description: str
    weapon_type: str
    atk: List[float]              # 各突破点基础攻击力，顺序同 LEVEL_BREAKPOINTS
    sub_stat: str                 # 副属性键
    sub_stat_values: List[float]  # 各突破点副属性数值
    effects: List[WeaponEffect] = field(default_factory=list)

    def to_dict(self):
        data = asdict(self)
        return data

    def get_stats(self, level_index: int, refine: int = 1,
                  params: Optional[Dict[str, Any]] = None) -> Dict[str, float]:
        """
        计算武器在指定突破点提供的全部属性

        Args:
            level_index: 突破点下标 (见 core.stats.get_level_index)
            refine: 精炼等级 1-5
            params: {特效键: 层数}，未给出时使用特效默认层数
        """
        if not 1 <= refine <= 5:
            raise ValueError(f"精炼等级必须在1-5之间: {refine}")
        params = params or {}

        stats = {
            StatKey.BASE_ATK: self.atk[level_index],
            self.sub_stat: self.sub_stat_values[level_index],
        }
        for effect in self.effects:
            stacks = params.get(effect.key)
            for key, value in effect.get_stats(refine, stacks).items():
                stats[key] = stats.get(key, 0.0) + value
        return stats


def _weapon_from_dict(item: Dict[str, Any]) -> Weapon:
    # 重建 WeaponEffect 对象
    item = dict(item)
    item['effects'] = [WeaponEffect(**eff) for eff in item.get('effects', [])]
    return Weapon(**item)


class WeaponManager:
    """武器管理器"""

    def __init__(self, weapon_file: Optional[str] = None):
        self.weapon_file = Path(weapon_file) if weapon_file else None
        self.weapons: Dict[str, Weapon] = {}
        self.create_default_weapons()
        self.load()

    def load(self):
        """从文件加载自定义武器（覆盖同名内置武器）"""
        if self.weapon_file and self.weapon_file.exists():
            with open(self.weapon_file, 'r', encoding='utf-8') as f:
                data = json.load(f)
                for item in data:
                    weapon = _weapon_from_dict(item)
                    self.weapons[weapon.id] = weapon

    def save(self):
        """保存武器到文件"""
        if not self.weapon_file:
            return
        data = [weapon.to_dict() for weapon in self.weapons.values()]
        self.weapon_file.parent.mkdir(parents=True, exist_ok=True)
        with open(self.weapon_file, 'w', encoding='utf-8') as f:
            json.dump(data, f, ensure_ascii=False, indent=2)

    def create(self, name: str, description: str, weapon_type: str,
               atk: List[float], sub_stat: str, sub_stat_values: List[float],
               effects: List[Dict[str, Any]] = None,
               weapon_id: Optional[str] = None) -> Weapon:
        """创建新武器"""
        weapon = Weapon(
            id=weapon_id or str(uuid.uuid4()),
            name=name,
            description=description,
            weapon_type=weapon_type,
            atk=list(atk),
            sub_stat=sub_stat,
            sub_stat_values=list(sub_stat_values),
            effects=[WeaponEffect(**eff) for eff in (effects or [])]
        )
        self.weapons[weapon.id] = weapon
        self.save()
        return weapon

    def get(self, weapon_id: str) -> Optional[Weapon]:
        """获取武器"""
        return self.weapons.get(weapon_id)

    def get_all(self) -> List[Weapon]:
        """获取所有武器"""
        return list(self.weapons.values())

    def get_by_type(self, weapon_type: str) -> List[Weapon]:
        return [w for w in self.weapons.values() if w.weapon_type == weapon_type]

    def update(self, weapon_id: str, name: Optional[str] = None,
               description: Optional[str] = None,
               effects: Optional[List[Dict[str, Any]]] = None) -> Optional[Weapon]:
        """更新武器"""
        weapon = self.weapons.get(weapon_id)
        if not weapon:
            return None

        if name is not None:
            weapon.name = name
        if description is not None:
            weapon.description = description
        if effects is not None:
            weapon.effects = [WeaponEffect(**eff) for eff in effects]

        self.save()
        return weapon

    def delete(self, weapon_id: str) -> bool:
        """删除武器"""
        if weapon_id in self.weapons:
            del self.weapons[weapon_id]
            self.save()
            return True
        return False

    def create_default_weapons(self):
        """加载内置武器库（不写文件）"""
        weapon_file, self.weapon_file = self.weapon_file, None

        # 嘟嘟可故事集
        self.create(
            weapon_id="dodoco_tales",
            name="嘟嘟可故事集",
            description="普通攻击命中后重击伤害提升，重击命中后攻击力提升",
            weapon_type="catalyst",
            atk=[41, 99, 125, 184, 210, 238, 264, 293, 319, 347, 373, 401, 427, 454],
            sub_stat=StatKey.ATK_PCT,
            sub_stat_values=[0.12, 0.212, 0.212, 0.309, 0.309, 0.358, 0.358,
                             0.407, 0.407, 0.455, 0.455, 0.504, 0.504, 0.551],
            effects=[
                {
                    "key": "normal_hit",
                    "effect_type": "conditional",
                    "buff_stats": {StatKey.CHARGED_DMG_BONUS: 0.16},
                    "description": "普通攻击命中后，重击造成的伤害提升16%"
                },
                {
                    "key": "charged_hit",
                    "effect_type": "conditional",
                    "buff_stats": {StatKey.ATK_PCT: 0.08},
                    "description": "重击命中后，攻击力提升8%"
                },
            ]
        )

        # 四风原典
        self.create(
            weapon_id="lost_prayer",
            name="四风原典",
            description="脱离战斗后每4秒获得一层元素伤害加成，至多4层",
            weapon_type="catalyst",
            atk=[46, 122, 153, 235, 266, 308, 340, 382, 414, 457, 488, 532, 563, 608],
            sub_stat=StatKey.CRIT_RATE,
            sub_stat_values=[0.072, 0.127, 0.127, 0.186, 0.186, 0.215, 0.215,
                             0.244, 0.244, 0.273, 0.273, 0.302, 0.302, 0.331],
            effects=[
                {
                    "key": "stacks",
                    "effect_type": "conditional",
                    "buff_stats": {
                        StatKey.FIRE_DMG_BONUS: 0.08,
                        StatKey.WATER_DMG_BONUS: 0.08,
                        StatKey.THUNDER_DMG_BONUS: 0.08,
                        StatKey.ICE_DMG_BONUS: 0.08,
                        StatKey.WIND_DMG_BONUS: 0.08,
                        StatKey.ROCK_DMG_BONUS: 0.08,
                        StatKey.GRASS_DMG_BONUS: 0.08,
                    },
                    "max_stacks": 4,
                    "default_stacks": 0,
                    "description": "每层元素伤害加成+8%，至多4层"
                },
            ]
        )

        # 决斗之枪
        self.create(
            weapon_id="deathmatch",
            name="决斗之枪",
            description="身边的敌人少于2个时，攻击力提升24%",
            weapon_type="polearm",
            atk=[41, 99, 125, 184, 210, 238, 264, 293, 319, 347, 373, 401, 427, 454],
            sub_stat=StatKey.CRIT_RATE,
            sub_stat_values=[0.08, 0.141, 0.141, 0.206, 0.206, 0.238, 0.238,
                             0.271, 0.271, 0.303, 0.303, 0.336, 0.336, 0.368],
            effects=[
                {
                    "key": "single_target",
                    "effect_type": "conditional",
                    "buff_stats": {StatKey.ATK_PCT: 0.24},
                    "description": "身边的敌人少于2个时，攻击力提升24%"
                },
            ]
        )

        self.weapon_file = weapon_file


_default_manager: Optional[WeaponManager] = None


def get_weapon_manager() -> WeaponManager:
    """获取内置武器库（进程内共享，只读使用）"""
    global _default_manager
    if _default_manager is None:
        _default_manager = WeaponManager()
    return _default_manager
