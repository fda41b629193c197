import streamlit as st

from calculators.registry import get_registry
from entities.character_registry import get_all_characters


def render_char_manage():
    st.header("👥 角色一览")

    st.info("已注册的角色与各技能槽位的伤害段。")

    registry = get_registry()
    characters = get_all_characters()
    cols = st.columns(3)

    for i, (name, char_cls) in enumerate(characters.items()):
        with cols[i % 3]:
            with st.container(border=True):
                st.subheader(f"{char_cls.display_name} {'★' * char_cls.star}")
                st.caption(f"元素: {char_cls.element.value}")
                st.caption(f"武器: {char_cls.weapon_type.value}")
                for slot in registry.get_slots(name):
                    formula = registry.get(name, slot)
                    st.caption(f"{slot.upper()}: " + "、".join(k.chs for k in formula.skill_keys))
