import os
import tempfile
import unittest
from core.operator_config import CharacterConfig, ConfigObject, PresetManager
from mechanics.buff_system import StatModifierBuff


class TestConfigObject(unittest.TestCase):
    def test_from_dict(self):
        config = ConfigObject.from_dict({
            "character": {"name": "klee", "constellation": 2},
            "weapon": {"name": "dodoco_tales", "refine": 5},
            "buffs": [{"preset": "pyro_resonance"}],
        })
        self.assertIsInstance(config.character, CharacterConfig)
        self.assertEqual(config.character.constellation, 2)
        self.assertEqual(config.weapon.refine, 5)
        self.assertIsInstance(config.buffs[0], StatModifierBuff)

    def test_missing_parts(self):
        config = ConfigObject.from_dict({"character": {"name": "klee"}})
        self.assertIsNone(config.weapon)
        self.assertEqual(config.buffs, [])

    def test_null_buffs(self):
        config = ConfigObject.from_dict({"character": {"name": "klee"}, "buffs": None})
        self.assertEqual(config.buffs, [])


class TestPresetManager(unittest.TestCase):
    def test_persisted(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "presets.json")
            created = PresetManager(path).create("可莉", {"character": {"name": "klee"}})

            reloaded = PresetManager(path)
            self.assertEqual(reloaded.get(created.id).preset_name, "可莉")
            self.assertTrue(reloaded.delete(created.id))
            self.assertEqual(PresetManager(path).get_all(), [])

if __name__ == '__main__':
    unittest.main()
