# entities/characters/klee_constants.py

# 成长数组顺序同 core.stats.LEVEL_BREAKPOINTS
BASE_STATS = {
    "hp": [801, 2077, 2764, 4136, 4623, 5319, 5970, 6673, 7161, 7870, 8358, 9076, 9563, 10287],
    "atk": [24, 63, 84, 125, 140, 161, 180, 202, 216, 238, 253, 274, 289, 311],
    "def": [48, 124, 165, 247, 276, 318, 357, 399, 428, 470, 500, 542, 572, 615],
    "sub_stat": "fire_dmg_bonus",
    "sub_stat_values": [0, 0, 0, 0, 0.072, 0.072, 0.144, 0.144, 0.144, 0.144, 0.216, 0.216, 0.288, 0.288],
}

# 技能倍率，按天赋等级 1-15
SKILL_MULTIPLIERS = {
    "a": {
        "dmg1": [0.7216, 0.7757, 0.8298, 0.902, 0.9561, 1.0102, 1.0824, 1.1546, 1.2267, 1.2989, 1.3711, 1.4432, 1.5334, 1.6236, 1.7138],
        "dmg2": [0.624, 0.6708, 0.7176, 0.78, 0.8268, 0.8736, 0.936, 0.9984, 1.0608, 1.1232, 1.1856, 1.248, 1.326, 1.404, 1.482],
        "dmg3": [0.8992, 0.9666, 1.0341, 1.124, 1.1914, 1.2589, 1.3488, 1.4387, 1.5286, 1.6186, 1.7085, 1.7984, 1.9108, 2.0232, 2.1356],
        "charged": [1.5736, 1.6916, 1.8096, 1.967, 2.085, 2.203, 2.3604, 2.5178, 2.6751, 2.8325, 2.9899, 3.1472, 3.3439, 3.5406, 3.7373],
        "plunging1": [0.5683, 0.6145, 0.6608, 0.7269, 0.7731, 0.826, 0.8987, 0.9714, 1.0441, 1.1234, 1.2143, 1.3211, 1.428, 1.5348, 1.6514],
        "plunging2": [1.1363, 1.2288, 1.3213, 1.4535, 1.5459, 1.6517, 1.797, 1.9423, 2.0877, 2.2462, 2.428, 2.6416, 2.8552, 3.0688, 3.302],
        "plunging3": [1.4193, 1.5349, 1.6504, 1.8154, 1.931, 2.063, 2.2445, 2.4261, 2.6076, 2.8057, 3.0327, 3.2995, 3.5663, 3.8331, 4.1245],
    },
    "e": {
        "dmg1": [0.952, 1.0234, 1.0948, 1.19, 1.2614, 1.3328, 1.428, 1.5232, 1.6184, 1.7136, 1.8088, 1.904, 2.023, 2.142, 2.261],
        "dmg2": [0.328, 0.3526, 0.3772, 0.41, 0.4346, 0.4592, 0.492, 0.5248, 0.5576, 0.5904, 0.6232, 0.656, 0.697, 0.738, 0.779],
    },
    "q": {
        "dmg1": [0.4264, 0.4584, 0.4904, 0.533, 0.565, 0.597, 0.6396, 0.6822, 0.7249, 0.7675, 0.8102, 0.8528, 0.9061, 0.9594, 1.0127],
    },
}

SKILL_KEYS = {
    "a": [
        {"key": "dmg1", "chs": "一段伤害", "skill": "a", "element": "fire"},
        {"key": "dmg2", "chs": "二段伤害", "skill": "a", "element": "fire"},
        {"key": "dmg3", "chs": "三段伤害", "skill": "a", "element": "fire"},
        {"key": "charged", "chs": "重击伤害", "skill": "a", "element": "fire", "skill_type": "charged"},
        {"key": "plunging1", "chs": "下坠期间伤害", "skill": "a", "element": "fire", "skill_type": "plunging"},
        {"key": "plunging2", "chs": "低空坠地冲击伤害", "skill": "a", "element": "fire", "skill_type": "plunging"},
        {"key": "plunging3", "chs": "高空坠地冲击伤害", "skill": "a", "element": "fire", "skill_type": "plunging"},
    ],
    "e": [
        {"key": "dmg1", "chs": "蹦蹦炸弹伤害", "skill": "e", "element": "fire"},
        {"key": "dmg2", "chs": "诡雷伤害", "skill": "e", "element": "fire"},
    ],
    "q": [
        {"key": "dmg1", "chs": "轰轰火花伤害", "skill": "q", "element": "fire"},
    ],
}

# 命座: 达到该命座时对应槽位天赋等级+3
CONSTELLATION_BOOST = {"e": 3, "q": 5}

MECHANICS = {
    "explosive_spark_bonus": 0.5,   # 砰砰礼物: 爆裂火花使重击伤害提升50%
    "c6_fire_bonus": 0.1,           # 六命: 轰轰火花期间火元素伤害加成+10%
}
