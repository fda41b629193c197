"""
技能伤害公式

一个公式 = 一组伤害键 + 技能槽位 + 需要展示的增幅反应。
调用时解析面板，生成普通伤害列与各反应列，再按行合并为伤害表。
"""
from typing import List, Sequence, Tuple

from core.attribute import get_attribute
from core.skill_key import SkillKey
from core.tables import table_normal, table_reaction, merge_array


def reaction_column_name(reaction: str) -> str:
    """"melt" -> "normalMelt" """
    return "normal" + reaction[:1].upper() + reaction[1:]


class SkillFormula:
    def __init__(self, skill_keys: Sequence[SkillKey], slot: str,
                 reactions: Tuple[str, ...] = ("melt", "vaporize")):
        self.skill_keys = tuple(skill_keys)
        self.slot = slot
        self.reactions = tuple(reactions)

    @property
    def columns(self) -> List[str]:
        return ["chs", "normal"] + [reaction_column_name(r) for r in self.reactions]

    def __call__(self, artifacts, config_object, enemy) -> List[dict]:
        c = config_object.character
        w = config_object.weapon
        attribute = get_attribute(artifacts, c, w, config_object.buffs)

        columns = [
            ("chs", [item.chs for item in self.skill_keys]),
            ("normal", table_normal(attribute, config_object, enemy, self.skill_keys, self.slot)),
        ]
        for reaction in self.reactions:
            columns.append((
                reaction_column_name(reaction),
                table_reaction(reaction, attribute, config_object, enemy, self.skill_keys, self.slot)
            ))

        return merge_array(*columns)

    def __repr__(self):
        keys = ", ".join(k.key for k in self.skill_keys)
        return f"SkillFormula(slot={self.slot!r}, keys=[{keys}], reactions={self.reactions})"
