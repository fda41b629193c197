import unittest
from core.enums import BuffCategory
from core.stats import StatKey
from mechanics.buff_system import (
    BUFF_PRESETS, BuffManager, ScalingBuff, StatModifierBuff, create_buff
)


class TestBuffs(unittest.TestCase):
    def test_stat_modifier(self):
        stats = {StatKey.ATK_PCT: 0.1}
        StatModifierBuff("热诚之火", {StatKey.ATK_PCT: 0.25, StatKey.MELT_BONUS: 0.1}).modify_stats(stats)
        self.assertAlmostEqual(stats[StatKey.ATK_PCT], 0.35)
        self.assertAlmostEqual(stats[StatKey.MELT_BONUS], 0.1)

    def test_scaling_buff(self):
        buff = ScalingBuff("鼓舞领域", StatKey.FLAT_ATK, 800, 1.01)
        self.assertAlmostEqual(buff.value, 808)
        capped = ScalingBuff("上限", StatKey.FLAT_ATK, 800, 1.01, cap=500)
        self.assertEqual(capped.value, 500)

    def test_stacking(self):
        manager = BuffManager()
        manager.add_buff(StatModifierBuff("火伤", {StatKey.FIRE_DMG_BONUS: 0.1}, max_stacks=2))
        manager.add_buff(StatModifierBuff("火伤", {StatKey.FIRE_DMG_BONUS: 0.1}, max_stacks=2))
        manager.add_buff(StatModifierBuff("火伤", {StatKey.FIRE_DMG_BONUS: 0.1}, max_stacks=2))
        self.assertEqual(len(manager.buffs), 1)
        self.assertEqual(manager.get_buff("火伤").stacks, 2)

        base = {StatKey.FIRE_DMG_BONUS: 0.0}
        result = manager.apply_stats(base)
        self.assertAlmostEqual(result[StatKey.FIRE_DMG_BONUS], 0.2)
        # 原字典不变
        self.assertEqual(base[StatKey.FIRE_DMG_BONUS], 0.0)

        self.assertTrue(manager.remove_buff("火伤"))
        self.assertFalse(manager.remove_buff("火伤"))

    def test_presets(self):
        bennett = create_buff({"preset": "bennett_q", "params": {"base_atk": 800, "c1": True}})
        self.assertAlmostEqual(bennett.value, 800 * 1.21)

        kazuha = create_buff({"preset": "kazuha_a4", "params": {"elemental_mastery": 1000}})
        self.assertEqual(kazuha.target_key, StatKey.FIRE_DMG_BONUS)
        self.assertAlmostEqual(kazuha.value, 0.4)

        shield = create_buff({"preset": "zhongli_shield"})
        self.assertEqual(shield.category, BuffCategory.DEBUFF)

        for name in BUFF_PRESETS:
            create_buff({"preset": name})

    def test_custom_and_passthrough(self):
        buff = create_buff({"name": "自定义", "stat_modifiers": {StatKey.CRIT_DMG: 0.2},
                            "max_stacks": 3, "stacks": 2})
        self.assertEqual(buff.stacks, 2)
        self.assertIs(create_buff(buff), buff)

    def test_unknown_preset(self):
        with self.assertRaises(KeyError):
            create_buff({"preset": "does_not_exist"})

if __name__ == '__main__':
    unittest.main()
