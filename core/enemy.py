from dataclasses import dataclass, field
from typing import Dict, Any

from core.enums import Element
from core.stats import StatKey


@dataclass
class Enemy:
    """敌人防御属性"""
    level: int = 90
    # {元素值: 抗性}，未列出的元素使用 default_res
    resistances: Dict[str, float] = field(default_factory=dict)
    default_res: float = 0.1

    def get_res(self, element: Element) -> float:
        return self.resistances.get(element.value, self.default_res)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Enemy':
        """
        从字典构造

        支持两种抗性写法：
            {"level": 90, "resistances": {"fire": 0.1}}
            {"level": 90, "fire_res": 0.1, "ice_res": 0.7}
        """
        resistances = dict(data.get('resistances') or {})
        for element in Element:
            key = StatKey.element_res(element)
            if key in data:
                resistances[element.value] = data[key]
        return cls(
            level=int(data.get('level', 90)),
            resistances=resistances,
            default_res=data.get('default_res', 0.1)
        )
