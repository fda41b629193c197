# entities/characters/ineffa_constants.py

# 成长数组顺序同 core.stats.LEVEL_BREAKPOINTS
BASE_STATS = {
    "hp": [982, 2547, 3389, 5071, 5669, 6523, 7320, 8182, 8780, 9650, 10249, 11128, 11727, 12613],
    "atk": [26, 67, 89, 133, 149, 171, 192, 214, 230, 253, 268, 291, 307, 330],
    "def": [64, 167, 222, 333, 372, 428, 480, 537, 576, 633, 673, 730, 770, 828],
    "sub_stat": "crit_rate",
    "sub_stat_values": [0, 0, 0, 0, 0.048, 0.048, 0.096, 0.096, 0.096, 0.096, 0.144, 0.144, 0.192, 0.192],
}

SKILL_MULTIPLIERS = {
    "a": {
        "dmg1": [0.3484, 0.3767, 0.4051, 0.4456, 0.4739, 0.5063, 0.5509, 0.5954, 0.64, 0.6886, 0.7372, 0.7858, 0.8344, 0.883, 0.9316],
        "dmg2": [0.3422, 0.3701, 0.3979, 0.4377, 0.4656, 0.4974, 0.5412, 0.5849, 0.6287, 0.6765, 0.7242, 0.772, 0.8197, 0.8675, 0.9152],
        "dmg3": [0.4284, 0.4634, 0.4984, 0.5482, 0.5833, 0.623, 0.6778, 0.7327, 0.7875, 0.8473, 0.9072, 0.967, 1.0268, 1.0867, 1.1465],
        "dmg4": [0.5568, 0.6022, 0.6477, 0.7125, 0.7579, 0.8096, 0.8809, 0.9521, 1.0234, 1.1011, 1.1789, 1.2566, 1.3343, 1.4121, 1.4898],
        "charged": [1.1138, 1.2046, 1.2954, 1.4249, 1.5157, 1.6193, 1.7617, 1.9041, 2.0466, 2.2022, 2.3579, 2.5136, 2.6692, 2.8249, 2.9806],
        "plunging1": [0.6393, 0.6914, 0.7434, 0.8177, 0.8698, 0.9293, 1.0112, 1.0931, 1.175, 1.2638, 1.3526, 1.4414, 1.5302, 1.619, 1.7098],
        "plunging2": [1.2784, 1.3824, 1.4865, 1.6351, 1.7392, 1.8581, 2.0216, 2.1851, 2.3486, 2.527, 2.7054, 2.8838, 3.0622, 3.2405, 3.4189],
        "plunging3": [1.5968, 1.7267, 1.8567, 2.0424, 2.1723, 2.3209, 2.5251, 2.7293, 2.9336, 3.1564, 3.3792, 3.602, 3.8248, 4.0476, 4.2704],
    },
    "e": {
        "dmg1": [0.864, 0.9288, 0.9936, 1.08, 1.1448, 1.2096, 1.296, 1.3824, 1.4688, 1.5552, 1.6416, 1.728, 1.836, 1.944, 2.052],
    },
    "q": {
        "dmg1": [6.768, 7.2756, 7.7832, 8.46, 8.9676, 9.4752, 10.152, 10.8288, 11.5056, 12.1824, 12.8592, 13.536, 14.382, 15.228, 16.074],
    },
}

SKILL_KEYS = {
    "a": [
        {"key": "dmg1", "chs": "一段伤害", "skill": "a", "element": "physical"},
        {"key": "dmg2", "chs": "二段伤害", "skill": "a", "element": "physical"},
        {"key": "dmg3", "chs": "三段伤害", "skill": "a", "element": "physical"},
        {"key": "dmg4", "chs": "四段伤害", "skill": "a", "element": "physical"},
        {"key": "charged", "chs": "重击伤害", "skill": "a", "element": "physical", "skill_type": "charged"},
        {"key": "plunging1", "chs": "下坠期间伤害", "skill": "a", "element": "physical", "skill_type": "plunging"},
        {"key": "plunging2", "chs": "低空坠地冲击伤害", "skill": "a", "element": "physical", "skill_type": "plunging"},
        {"key": "plunging3", "chs": "高空坠地冲击伤害", "skill": "a", "element": "physical", "skill_type": "plunging"},
    ],
    "e": [
        {"key": "dmg1", "chs": "技能伤害", "skill": "e", "element": "thunder"},
    ],
    "q": [
        {"key": "dmg1", "chs": "技能伤害", "skill": "q", "element": "thunder"},
    ],
}

CONSTELLATION_BOOST = {"e": 3, "q": 5}

MECHANICS = {
    "em_bonus_rate": 0.06,          # 全相重构协议: 攻击力的6%转为元素精通
    "overclocking_ratio": 0.65,     # 频率超限回路: 额外攻击的攻击力倍率
}
