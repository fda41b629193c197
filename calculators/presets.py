from core.stats import StatKey

# 演示用配装：角色 / 武器 / Buff / 圣遗物 / 敌人，均为可直接喂给公式的字典
PRESETS = {
    "可莉 魔女融化 (四件炽烈的炎之魔女)": {
        "description": "可莉带嘟嘟可故事集与四件魔女，宗室+班尼特双增攻，按融化看蹦蹦炸弹与诡雷。",
        "character": "klee",
        "slot": "e",
        "config": {
            "character": {"name": "klee", "level": 90, "ascend": False,
                          "constellation": 0, "skill1": 9, "skill2": 9, "skill3": 9},
            "weapon": {"name": "dodoco_tales", "level": 90, "refine": 5},
            "buffs": [
                {"preset": "pyro_resonance"},
                {"preset": "bennett_q", "params": {"base_atk": 755}},
            ],
        },
        "artifacts": [
            {"slot": "flower", "set_name": "crimson_witch", "main_stat": [StatKey.FLAT_HP, 4780],
             "sub_stats": [[StatKey.CRIT_RATE, 0.105], [StatKey.CRIT_DMG, 0.21], [StatKey.ATK_PCT, 0.0991]]},
            {"slot": "feather", "set_name": "crimson_witch", "main_stat": [StatKey.FLAT_ATK, 311],
             "sub_stats": [[StatKey.CRIT_RATE, 0.07], [StatKey.CRIT_DMG, 0.264], [StatKey.ELEMENTAL_MASTERY, 40]]},
            {"slot": "sand", "set_name": "crimson_witch", "main_stat": [StatKey.ATK_PCT, 0.466],
             "sub_stats": [[StatKey.CRIT_RATE, 0.066], [StatKey.CRIT_DMG, 0.202]]},
            {"slot": "goblet", "set_name": "crimson_witch", "main_stat": [StatKey.FIRE_DMG_BONUS, 0.466],
             "sub_stats": [[StatKey.CRIT_RATE, 0.078], [StatKey.CRIT_DMG, 0.14], [StatKey.FLAT_ATK, 33]]},
            {"slot": "head", "set_name": "gladiators_finale", "main_stat": [StatKey.CRIT_RATE, 0.311],
             "sub_stats": [[StatKey.CRIT_DMG, 0.218], [StatKey.ATK_PCT, 0.105]]},
        ],
        "enemy": {"level": 90, "resistances": {"fire": 0.1, "ice": 0.1}},
    },
    "伊涅芙 雷伤 (四件如雷的盛怒)": {
        "description": "伊涅芙带决斗之枪单体作战，四件如雷，精通转化与频率超限常驻。",
        "character": "ineffa",
        "slot": "e",
        "config": {
            "character": {"name": "ineffa", "level": 90, "constellation": 0,
                          "params": {"em_bonus_active": True, "overclocking_active": True}},
            "weapon": {"name": "deathmatch", "level": 90, "refine": 1, "params": {"single_target": 1}},
            "buffs": [],
        },
        "artifacts": [
            {"slot": "flower", "set_name": "thundering_fury", "main_stat": [StatKey.FLAT_HP, 4780],
             "sub_stats": [[StatKey.CRIT_RATE, 0.097], [StatKey.CRIT_DMG, 0.194]]},
            {"slot": "feather", "set_name": "thundering_fury", "main_stat": [StatKey.FLAT_ATK, 311],
             "sub_stats": [[StatKey.CRIT_RATE, 0.078], [StatKey.CRIT_DMG, 0.233]]},
            {"slot": "sand", "set_name": "thundering_fury", "main_stat": [StatKey.ATK_PCT, 0.466],
             "sub_stats": [[StatKey.CRIT_DMG, 0.218], [StatKey.ATK_PCT, 0.058]]},
            {"slot": "goblet", "set_name": "thundering_fury", "main_stat": [StatKey.THUNDER_DMG_BONUS, 0.466],
             "sub_stats": [[StatKey.CRIT_RATE, 0.066], [StatKey.CRIT_DMG, 0.132]]},
            {"slot": "head", "set_name": "noblesse_oblige", "main_stat": [StatKey.CRIT_DMG, 0.622],
             "sub_stats": [[StatKey.CRIT_RATE, 0.101], [StatKey.ATK_PCT, 0.093]]},
        ],
        "enemy": {"level": 90, "default_res": 0.1},
    },
}
