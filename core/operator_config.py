"""计算配置：角色 / 武器 / Buff 的组合，以及配置预设的持久化"""
import json
import uuid
from pathlib import Path
from typing import Dict, List, Optional, Any
from dataclasses import dataclass, asdict, field

from mechanics.buff_system import Buff, create_buff


@dataclass
class CharacterConfig:
    """角色配置"""
    name: str
    level: int = 90
    ascend: bool = False
    constellation: int = 0
    skill1: int = 10   # 普通攻击等级
    skill2: int = 10   # 元素战技等级
    skill3: int = 10   # 元素爆发等级
    params: Dict[str, Any] = field(default_factory=dict)  # 天赋开关等

    def to_dict(self):
        return asdict(self)


@dataclass
class WeaponConfig:
    """武器配置"""
    name: str
    level: int = 90
    ascend: bool = False
    refine: int = 1
    params: Dict[str, Any] = field(default_factory=dict)  # {特效键: 层数}

    def to_dict(self):
        return asdict(self)


@dataclass
class ConfigObject:
    """一次计算所需的配置：角色、武器、Buff"""
    character: Optional[CharacterConfig]
    weapon: Optional[WeaponConfig]
    buffs: List[Buff] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ConfigObject':
        """
        从字典构造

        缺失的 character / weapon 保持为 None，由属性解析阶段报错。
        """
        character = data.get('character')
        weapon = data.get('weapon')
        return cls(
            character=CharacterConfig(**character) if character else None,
            weapon=WeaponConfig(**weapon) if weapon else None,
            buffs=[create_buff(b) for b in data.get('buffs') or []]
        )


@dataclass
class ConfigPreset:
    """保存的配置预设（原始字典形式，便于序列化）"""
    id: str
    preset_name: str
    config: Dict[str, Any]
    artifacts: List[Dict[str, Any]] = field(default_factory=list)

    def to_dict(self):
        return asdict(self)


class PresetManager:
    """配置预设管理器"""

    def __init__(self, preset_file: str = "config_presets.json"):
        self.preset_file = Path(preset_file)
        self.presets: Dict[str, ConfigPreset] = {}
        self.load()

    def load(self):
        """从文件加载预设"""
        if self.preset_file.exists():
            with open(self.preset_file, 'r', encoding='utf-8') as f:
                data = json.load(f)
                for item in data:
                    preset = ConfigPreset(**item)
                    self.presets[preset.id] = preset

    def save(self):
        """保存预设到文件"""
        data = [preset.to_dict() for preset in self.presets.values()]
        with open(self.preset_file, 'w', encoding='utf-8') as f:
            json.dump(data, f, ensure_ascii=False, indent=2)

    def create(self, preset_name: str, config: Dict[str, Any],
               artifacts: Optional[List[Dict[str, Any]]] = None) -> ConfigPreset:
        """创建新预设"""
        preset = ConfigPreset(
            id=str(uuid.uuid4()),
            preset_name=preset_name,
            config=config,
            artifacts=artifacts or []
        )
        self.presets[preset.id] = preset
        self.save()
        return preset

    def get(self, preset_id: str) -> Optional[ConfigPreset]:
        """获取预设"""
        return self.presets.get(preset_id)

    def get_all(self) -> List[ConfigPreset]:
        """获取所有预设"""
        return list(self.presets.values())

    def get_by_character(self, character_name: str) -> List[ConfigPreset]:
        """获取指定角色的所有预设"""
        return [p for p in self.presets.values()
                if (p.config.get('character') or {}).get('name') == character_name]

    def delete(self, preset_id: str) -> bool:
        """删除预设"""
        if preset_id in self.presets:
            del self.presets[preset_id]
            self.save()
            return True
        return False
