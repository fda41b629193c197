import os
import tempfile
import unittest
from core.stats import StatKey, get_level_index
from core.weapon_system import WeaponEffect, WeaponManager


class TestWeaponEffect(unittest.TestCase):
    def test_refine_scaling(self):
        effect = WeaponEffect("charged_hit", "conditional", {StatKey.ATK_PCT: 0.08})
        self.assertAlmostEqual(effect.get_stats(1)[StatKey.ATK_PCT], 0.08)
        self.assertAlmostEqual(effect.get_stats(5)[StatKey.ATK_PCT], 0.16)

    def test_stacks(self):
        effect = WeaponEffect("stacks", "conditional", {StatKey.FIRE_DMG_BONUS: 0.08},
                              max_stacks=4, default_stacks=0)
        self.assertEqual(effect.get_stats(1)[StatKey.FIRE_DMG_BONUS], 0.0)
        self.assertAlmostEqual(effect.get_stats(1, 3)[StatKey.FIRE_DMG_BONUS], 0.24)
        # 超过上限按上限计
        self.assertAlmostEqual(effect.get_stats(1, 10)[StatKey.FIRE_DMG_BONUS], 0.32)

    def test_passive_always_max(self):
        effect = WeaponEffect("passive", "passive", {StatKey.CRIT_RATE: 0.04}, max_stacks=2)
        self.assertAlmostEqual(effect.get_stats(1, 0)[StatKey.CRIT_RATE], 0.08)


class TestWeaponManager(unittest.TestCase):
    def setUp(self):
        self.manager = WeaponManager()

    def test_defaults(self):
        ids = {w.id for w in self.manager.get_all()}
        self.assertTrue({"dodoco_tales", "lost_prayer", "deathmatch"} <= ids)
        self.assertEqual({w.id for w in self.manager.get_by_type("polearm")}, {"deathmatch"})

    def test_weapon_stats(self):
        weapon = self.manager.get("lost_prayer")
        stats = weapon.get_stats(get_level_index(90), refine=1, params={"stacks": 2})
        self.assertEqual(stats[StatKey.BASE_ATK], 608)
        self.assertAlmostEqual(stats[StatKey.CRIT_RATE], 0.331)
        self.assertAlmostEqual(stats[StatKey.FIRE_DMG_BONUS], 0.16)

    def test_level_breakpoints(self):
        weapon = self.manager.get("dodoco_tales")
        low = weapon.get_stats(get_level_index(80, False))
        high = weapon.get_stats(get_level_index(80, True))
        self.assertLess(low[StatKey.BASE_ATK], high[StatKey.BASE_ATK])
        with self.assertRaises(ValueError):
            get_level_index(85)

    def test_invalid_refine(self):
        weapon = self.manager.get("dodoco_tales")
        with self.assertRaises(ValueError):
            weapon.get_stats(get_level_index(90), refine=0)

    def test_crud_with_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "weapons.json")
            manager = WeaponManager(path)
            # 内置武器不写文件
            self.assertFalse(os.path.exists(path))

            weapon = manager.create(
                name="试作金珀", description="", weapon_type="catalyst",
                atk=[41] * 14, sub_stat=StatKey.HP_PCT, sub_stat_values=[0.12] * 14,
                weapon_id="prototype_amber"
            )
            self.assertTrue(os.path.exists(path))

            reloaded = WeaponManager(path)
            self.assertEqual(reloaded.get("prototype_amber").name, "试作金珀")

            updated = reloaded.update("prototype_amber", name="试作金珀·改")
            self.assertEqual(updated.name, "试作金珀·改")
            self.assertIsNone(reloaded.update("missing", name="x"))

            self.assertTrue(reloaded.delete(weapon.id))
            self.assertFalse(reloaded.delete(weapon.id))
            self.assertIsNone(WeaponManager(path).get("prototype_amber"))

if __name__ == '__main__':
    unittest.main()
