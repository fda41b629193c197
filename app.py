import streamlit as st
import pandas as pd
import sys
import os
import json
import plotly.express as px

# ==========================================
# 0. 路径与导入配置
# ==========================================
sys.path.append(os.path.dirname(os.path.abspath(__file__)))

from calculators.presets import PRESETS
from calculators.registry import get_registry
from calculators.skill_formula import reaction_column_name
from core.attribute import get_attribute
from core.operator_config import ConfigObject
from core.weapon_system import get_weapon_manager
from entities.character_registry import get_all_characters
from mechanics.buff_system import BUFF_PRESETS
from ui.char_manage import render_char_manage

# ==========================================
# 1. 辅助函数
# ==========================================
COLUMN_LABELS = {
    "normal": "无反应",
    reaction_column_name("melt"): "融化",
    reaction_column_name("vaporize"): "蒸发",
}


def table_to_frame(rows, columns):
    """伤害表 -> DataFrame，每个伤害列拆成 期望/暴击/不暴击 三列"""
    records = []
    for row in rows:
        record = {"技能": row["chs"]}
        for col in columns[1:]:
            label = COLUMN_LABELS.get(col, col)
            cell = row[col]
            record[f"{label}-期望"] = None if cell is None else round(cell.expectation)
            record[f"{label}-暴击"] = None if cell is None else round(cell.critical)
            record[f"{label}-不暴击"] = None if cell is None else round(cell.non_critical)
        records.append(record)
    return pd.DataFrame(records)


def table_to_long(rows, columns):
    """用于柱状图的长表：技能 × 伤害列 的期望值"""
    records = []
    for row in rows:
        for col in columns[1:]:
            cell = row[col]
            if cell is not None:
                records.append({"技能": row["chs"], "类型": COLUMN_LABELS.get(col, col),
                                "期望伤害": cell.expectation})
    return pd.DataFrame(records)


# ==========================================
# 2. 页面
# ==========================================
st.set_page_config(page_title="原神伤害计算器", layout="wide")

characters = get_all_characters()
weapon_manager = get_weapon_manager()
registry = get_registry()

st.sidebar.title("⚙️ 计算设置")
preset_name = st.sidebar.selectbox("📥 加载配装预设", list(PRESETS.keys()))
preset = PRESETS[preset_name]
st.sidebar.caption(preset["description"])

st.sidebar.divider()
st.sidebar.write("🎯 **敌人属性**")
enemy_level = st.sidebar.number_input("敌人等级", 1, 200, preset["enemy"].get("level", 90))
enemy_res = st.sidebar.slider("元素抗性", -1.0, 1.5, 0.1, 0.05)

st.title("🔥 技能伤害表")
tab_table, tab_panel, tab_chars = st.tabs(["📊 伤害表", "🧮 面板", "👥 角色"])

preset_config = preset["config"]
char_data = preset_config["character"]
weapon_data = preset_config["weapon"]

with st.expander("📝 角色与武器", expanded=True):
    cols = st.columns(4)
    char_names = list(characters.keys())
    with cols[0]:
        char_name = st.selectbox("角色", char_names, index=char_names.index(char_data["name"]),
                                 format_func=lambda n: characters[n].display_name)
        char_cls = characters[char_name]
        slot = st.selectbox("技能槽位", registry.get_slots(char_name),
                            index=registry.get_slots(char_name).index(preset["slot"]))
    with cols[1]:
        char_level = st.selectbox("角色等级", [90, 80, 70, 60, 50, 40, 20, 1])
        constellation = st.number_input("命之座", 0, 6, char_data.get("constellation", 0))
    with cols[2]:
        skill_levels = [
            st.number_input("普攻等级", 1, 15, char_data.get("skill1", 10)),
            st.number_input("战技等级", 1, 15, char_data.get("skill2", 10)),
            st.number_input("爆发等级", 1, 15, char_data.get("skill3", 10)),
        ]
    with cols[3]:
        weapons = weapon_manager.get_by_type(char_cls.weapon_type.value)
        weapon_ids = [w.id for w in weapons]
        default_weapon = weapon_ids.index(weapon_data["name"]) if weapon_data["name"] in weapon_ids else 0
        weapon_id = st.selectbox("武器", weapon_ids, index=default_weapon,
                                 format_func=lambda i: weapon_manager.get(i).name)
        refine = st.number_input("精炼", 1, 5, weapon_data.get("refine", 1))

    buff_names = st.multiselect(
        "Buff", sorted(BUFF_PRESETS.keys()),
        default=[b["preset"] for b in preset_config.get("buffs", []) if "preset" in b]
    )

with st.expander("💍 圣遗物 (JSON)"):
    artifacts_text = st.text_area("圣遗物", json.dumps(preset["artifacts"], ensure_ascii=False, indent=2),
                                  height=300)

try:
    artifacts = json.loads(artifacts_text)
except json.JSONDecodeError as e:
    st.error(f"圣遗物 JSON 格式错误: {e}")
    st.stop()

# 同名预设沿用预设里的参数
preset_buffs = {b["preset"]: b for b in preset_config.get("buffs", []) if "preset" in b}
config_object = ConfigObject.from_dict({
    "character": {
        "name": char_name, "level": char_level, "constellation": constellation,
        "skill1": skill_levels[0], "skill2": skill_levels[1], "skill3": skill_levels[2],
        "params": char_data.get("params", {}) if char_name == char_data["name"] else {},
    },
    "weapon": {
        "name": weapon_id, "level": 90, "refine": refine,
        "params": weapon_data.get("params", {}) if weapon_id == weapon_data["name"] else {},
    },
    "buffs": [preset_buffs.get(name, {"preset": name}) for name in buff_names],
})
enemy = {"level": enemy_level, "default_res": enemy_res}

try:
    formula = registry.get(char_name, slot)
    rows = formula(artifacts, config_object, enemy)
except (KeyError, ValueError) as e:
    st.error(f"计算失败: {e}")
    st.stop()

with tab_table:
    st.dataframe(table_to_frame(rows, formula.columns), hide_index=True, use_container_width=True)
    long_df = table_to_long(rows, formula.columns)
    if not long_df.empty:
        fig = px.bar(long_df, x="技能", y="期望伤害", color="类型", barmode="group",
                     title=f"{char_cls.display_name} {slot.upper()} 期望伤害")
        st.plotly_chart(fig, use_container_width=True)

with tab_panel:
    attribute = get_attribute(artifacts, config_object.character, config_object.weapon, config_object.buffs)
    c1, c2, c3, c4 = st.columns(4)
    c1.metric("攻击力", f"{attribute.atk:,.0f}")
    c2.metric("元素精通", f"{attribute.elemental_mastery:,.0f}")
    c3.metric("暴击率", f"{attribute.get('crit_rate'):.1%}")
    c4.metric("暴击伤害", f"{attribute.get('crit_dmg'):.1%}")
    panel = [{"属性": k, "数值": v} for k, v in attribute.to_dict().items() if v]
    st.dataframe(pd.DataFrame(panel), hide_index=True)

with tab_chars:
    render_char_manage()
