from dataclasses import dataclass
from typing import Optional
from core.enums import Element, SkillSlot, SkillType, SLOT_DEFAULT_SKILL_TYPE


@dataclass(frozen=True)
class SkillKey:
    """伤害表中的一行：技能的一个伤害段"""
    key: str                          # 伤害键，如 "dmg1"
    chs: str                          # 显示名称
    skill: str                        # 技能槽位 a / e / q
    element: str                      # 元素，如 "fire"
    skill_type: Optional[str] = None  # 招式类型，缺省按槽位推断

    @property
    def element_enum(self) -> Element:
        return Element(self.element)

    @property
    def slot(self) -> SkillSlot:
        return SkillSlot(self.skill)

    @property
    def skill_type_enum(self) -> SkillType:
        if self.skill_type:
            return SkillType(self.skill_type)
        return SLOT_DEFAULT_SKILL_TYPE[self.slot]
