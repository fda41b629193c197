import unittest
from calculators.registry import FormulaRegistry, calculate, get_formula, get_registry, klee_e
from core.config_manager import ConfigManager
from core.enemy import Enemy
from core.operator_config import ConfigObject
from entities.character_registry import get_all_characters, get_character_class
from entities.characters.ineffa import Ineffa
from entities.characters.klee import Klee


class TestCharacterRegistry(unittest.TestCase):
    def test_discovery(self):
        characters = get_all_characters()
        self.assertIs(characters["klee"], Klee)
        self.assertIs(characters["ineffa"], Ineffa)

    def test_unknown(self):
        with self.assertRaises(KeyError):
            get_character_class("nobody")


class TestFormulaRegistry(unittest.TestCase):
    def setUp(self):
        ConfigManager._instance = None

    def test_klee_e_registered(self):
        self.assertIs(get_formula("klee", "e"), klee_e)

    def test_generated_formulas(self):
        registry = get_registry()
        self.assertEqual(sorted(registry.get_slots("klee")), ["a", "e", "q"])
        # 雷元素没有可触发的增幅反应，物理同理
        self.assertEqual(registry.get("ineffa", "e").columns, ["chs", "normal"])
        self.assertEqual(registry.get("ineffa", "a").reactions, ())
        self.assertEqual(registry.get("klee", "q").reactions, ("melt", "vaporize"))

    def test_unknown_formula(self):
        with self.assertRaises(KeyError):
            get_formula("klee", "x")
        with self.assertRaises(KeyError):
            get_formula("nobody", "e")

    def test_register_override(self):
        registry = FormulaRegistry()
        registry.register("klee", "e", klee_e)
        self.assertEqual(registry.get_slots("klee"), ["e"])

    def test_calculate_dispatch(self):
        config = ConfigObject.from_dict({"character": {"name": "klee"}, "weapon": {"name": "dodoco_tales"}})
        enemy = Enemy()
        self.assertEqual(calculate("klee", "e", [], config, enemy), klee_e([], config, enemy))

    def test_klee_normal_attack_table(self):
        config = ConfigObject.from_dict({"character": {"name": "klee"}, "weapon": {"name": "lost_prayer"}})
        rows = calculate("klee", "a", [], config, Enemy())
        self.assertEqual(len(rows), len(Klee.SKILL_KEYS["a"]))
        charged = rows[3]
        self.assertEqual(charged["chs"], "重击伤害")
        self.assertGreater(charged["normalMelt"].expectation, charged["normal"].expectation)

if __name__ == '__main__':
    unittest.main()
