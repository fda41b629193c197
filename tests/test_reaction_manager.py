import unittest
from core.config_manager import ConfigManager
from core.enums import Element, ReactionType
from mechanics.reaction_manager import ReactionManager

class TestReactionManager(unittest.TestCase):
    def setUp(self):
        ConfigManager._instance = None

    def test_parse(self):
        self.assertEqual(ReactionManager.parse("melt"), ReactionType.MELT)
        self.assertEqual(ReactionManager.parse(ReactionType.VAPORIZE), ReactionType.VAPORIZE)
        with self.assertRaises(ValueError):
            ReactionManager.parse("overload")

    def test_base_multiplier(self):
        # 火融化 2.0，冰融化 1.5；水蒸发 2.0，火蒸发 1.5
        self.assertEqual(ReactionManager.get_base_multiplier("melt", Element.PYRO), 2.0)
        self.assertEqual(ReactionManager.get_base_multiplier("melt", Element.CRYO), 1.5)
        self.assertEqual(ReactionManager.get_base_multiplier("vaporize", Element.HYDRO), 2.0)
        self.assertEqual(ReactionManager.get_base_multiplier("vaporize", Element.PYRO), 1.5)

    def test_can_trigger(self):
        self.assertTrue(ReactionManager.can_trigger("melt", Element.PYRO))
        self.assertFalse(ReactionManager.can_trigger("melt", Element.ELECTRO))
        self.assertFalse(ReactionManager.can_trigger("vaporize", Element.PHYSICAL))

    def test_amp_multiplier_without_em(self):
        result = ReactionManager.get_amp_multiplier("melt", Element.PYRO)
        self.assertEqual(result.reaction_type, ReactionType.MELT)
        self.assertAlmostEqual(result.multiplier, 2.0)

    def test_amp_multiplier_with_em_and_bonus(self):
        # 2.0 * (1 + 2.78 * 200 / 1600 + 0.15)
        result = ReactionManager.get_amp_multiplier(
            ReactionType.MELT, Element.PYRO, elemental_mastery=200, reaction_bonus=0.15
        )
        self.assertAlmostEqual(result.multiplier, 2.0 * (1 + 2.78 * 200 / 1600 + 0.15))

    def test_untriggerable_element(self):
        result = ReactionManager.get_amp_multiplier("vaporize", Element.ELECTRO, elemental_mastery=500)
        self.assertIsNone(result.reaction_type)
        self.assertEqual(result.multiplier, 1.0)

if __name__ == '__main__':
    unittest.main()
