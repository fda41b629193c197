import unittest
from core.attribute import Attribute
from core.calculator import DamageEngine
from core.config_manager import ConfigManager
from core.enemy import Enemy
from core.enums import Element, SkillType, ReactionType
from core.formulas import calc_def_multiplier, calc_res_multiplier
from core.stats import StatKey


def make_attribute(**overrides):
    stats = {
        StatKey.LEVEL: 90,
        StatKey.BASE_ATK: 1000,
        StatKey.CRIT_RATE: 0.5,
        StatKey.CRIT_DMG: 1.0,
        StatKey.FIRE_DMG_BONUS: 0.5,
    }
    stats.update(overrides)
    return Attribute(stats)


class TestFormulas(unittest.TestCase):
    def setUp(self):
        ConfigManager._instance = None

    def test_res_multiplier(self):
        self.assertAlmostEqual(calc_res_multiplier(-0.2), 1.1)
        self.assertAlmostEqual(calc_res_multiplier(0.0), 1.0)
        self.assertAlmostEqual(calc_res_multiplier(0.5), 0.5)
        self.assertAlmostEqual(calc_res_multiplier(0.75), 0.25)
        self.assertAlmostEqual(calc_res_multiplier(1.0), 0.2)

    def test_def_multiplier(self):
        self.assertAlmostEqual(calc_def_multiplier(90, 90), 0.5)
        self.assertAlmostEqual(calc_def_multiplier(90, 100), 190 / 390)
        self.assertAlmostEqual(calc_def_multiplier(90, 90, 0.23), 190 / (190 + 190 * 0.77))
        # 减防超过100%按100%计
        self.assertAlmostEqual(calc_def_multiplier(90, 90, 1.5), 1.0)


class TestDamageEngine(unittest.TestCase):
    def setUp(self):
        ConfigManager._instance = None
        self.enemy = Enemy(level=90)

    def test_basic_damage(self):
        # 1000 × 1.0 × 1.5 × 0.5 × 0.9
        result = DamageEngine.calculate(make_attribute(), self.enemy, 1.0,
                                        Element.PYRO, SkillType.ELEMENTAL_SKILL)
        self.assertAlmostEqual(result.non_critical, 675.0)
        self.assertAlmostEqual(result.critical, 1350.0)
        self.assertAlmostEqual(result.expectation, 1012.5)

    def test_skill_type_and_global_bonus(self):
        attr = make_attribute(**{StatKey.SKILL_DMG_BONUS: 0.2, StatKey.DMG_BONUS: 0.3,
                                 StatKey.CHARGED_DMG_BONUS: 5.0})
        result = DamageEngine.calculate(attr, self.enemy, 1.0, Element.PYRO, SkillType.ELEMENTAL_SKILL)
        self.assertAlmostEqual(result.non_critical, 1000 * 2.0 * 0.5 * 0.9)

    def test_level_from_attribute(self):
        # 80级角色打90级敌人: 180 / (180 + 190)
        result = DamageEngine.calculate(make_attribute(**{StatKey.LEVEL: 80}), self.enemy, 1.0,
                                        Element.PYRO, SkillType.ELEMENTAL_SKILL)
        self.assertAlmostEqual(result.non_critical, 1000 * 1.5 * (180 / 370) * 0.9)

    def test_other_element_bonus_not_applied(self):
        result = DamageEngine.calculate(make_attribute(), self.enemy, 1.0,
                                        Element.ELECTRO, SkillType.ELEMENTAL_SKILL)
        self.assertAlmostEqual(result.non_critical, 1000 * 0.5 * 0.9)

    def test_res_and_def_minus(self):
        attr = make_attribute(**{StatKey.RES_MINUS: 0.3, StatKey.DEF_MINUS: 0.23})
        result = DamageEngine.calculate(attr, self.enemy, 1.0, Element.PYRO, SkillType.ELEMENTAL_SKILL)
        def_mult = 190 / (190 + 190 * 0.77)
        self.assertAlmostEqual(result.non_critical, 1000 * 1.5 * def_mult * 1.1)

    def test_melt_and_vaporize(self):
        attr = make_attribute()
        normal = DamageEngine.calculate(attr, self.enemy, 1.0, Element.PYRO, SkillType.ELEMENTAL_SKILL)
        melt = DamageEngine.calculate(attr, self.enemy, 1.0, Element.PYRO, SkillType.ELEMENTAL_SKILL,
                                      reaction=ReactionType.MELT)
        vaporize = DamageEngine.calculate(attr, self.enemy, 1.0, Element.PYRO, SkillType.ELEMENTAL_SKILL,
                                          reaction="vaporize")
        self.assertAlmostEqual(melt.non_critical, normal.non_critical * 2.0)
        self.assertAlmostEqual(vaporize.non_critical, normal.non_critical * 1.5)

    def test_reaction_with_em_and_bonus(self):
        attr = make_attribute(**{StatKey.ELEMENTAL_MASTERY: 200, StatKey.MELT_BONUS: 0.15})
        normal = DamageEngine.calculate(attr, self.enemy, 1.0, Element.PYRO, SkillType.ELEMENTAL_SKILL)
        melt = DamageEngine.calculate(attr, self.enemy, 1.0, Element.PYRO, SkillType.ELEMENTAL_SKILL,
                                      reaction="melt")
        self.assertAlmostEqual(melt.expectation,
                               normal.expectation * 2.0 * (1 + 2.78 * 200 / 1600 + 0.15))

    def test_crit_rate_capped(self):
        attr = make_attribute(**{StatKey.CRIT_RATE: 1.5})
        result = DamageEngine.calculate(attr, self.enemy, 1.0, Element.PYRO, SkillType.ELEMENTAL_SKILL)
        self.assertAlmostEqual(result.expectation, result.critical)

    def test_ordering(self):
        result = DamageEngine.calculate(make_attribute(), self.enemy, 1.7,
                                        Element.PYRO, SkillType.ELEMENTAL_SKILL)
        self.assertLessEqual(result.non_critical, result.expectation)
        self.assertLessEqual(result.expectation, result.critical)

    def test_to_dict(self):
        result = DamageEngine.calculate(make_attribute(), self.enemy, 1.0,
                                        Element.PYRO, SkillType.ELEMENTAL_SKILL)
        self.assertEqual(set(result.to_dict()), {"critical", "non_critical", "expectation"})

if __name__ == '__main__':
    unittest.main()
