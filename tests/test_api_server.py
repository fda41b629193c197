import os
import tempfile
import unittest
from unittest.mock import patch
from fastapi.testclient import TestClient

import api_server
from core.config_manager import ConfigManager
from core.operator_config import PresetManager

KLEE_REQUEST = {
    "slot": "e",
    "character": {"name": "klee", "skill2": 10},
    "weapon": {"name": "dodoco_tales", "refine": 1},
    "buffs": [{"preset": "pyro_resonance"}],
    "artifacts": [
        {"slot": "feather", "set_name": "crimson_witch", "main_stat": ["flat_atk", 311]},
    ],
    "enemy": {"level": 90, "resistances": {"fire": 0.1}},
}


class TestApiServer(unittest.TestCase):
    def setUp(self):
        ConfigManager._instance = None
        self.client = TestClient(api_server.app)

    def test_characters(self):
        response = self.client.get("/characters")
        self.assertEqual(response.status_code, 200)
        names = {c["name"] for c in response.json()}
        self.assertTrue({"klee", "ineffa"} <= names)

    def test_formulas(self):
        response = self.client.get("/characters/klee/formulas")
        self.assertEqual(response.status_code, 200)
        data = response.json()
        self.assertEqual(data["e"]["columns"], ["chs", "normal", "normalMelt", "normalVaporize"])
        self.assertEqual([k["key"] for k in data["e"]["skill_keys"]], ["dmg1", "dmg2"])

        self.assertEqual(self.client.get("/characters/nobody/formulas").status_code, 404)

    def test_weapons(self):
        response = self.client.get("/weapons", params={"weapon_type": "catalyst"})
        ids = {w["id"] for w in response.json()}
        self.assertIn("dodoco_tales", ids)
        self.assertNotIn("deathmatch", ids)

        self.assertEqual(self.client.get("/weapons/lost_prayer").json()["name"], "四风原典")
        self.assertEqual(self.client.get("/weapons/missing").status_code, 404)

    def test_artifact_sets_and_buffs(self):
        sets = {s["id"] for s in self.client.get("/artifact-sets").json()}
        self.assertIn("crimson_witch", sets)
        self.assertIn("bennett_q", self.client.get("/buffs").json())

    def test_calculate(self):
        response = self.client.post("/calculate", json=KLEE_REQUEST)
        self.assertEqual(response.status_code, 200)
        data = response.json()
        self.assertEqual(data["columns"], ["chs", "normal", "normalMelt", "normalVaporize"])
        self.assertEqual(len(data["rows"]), 2)
        row = data["rows"][0]
        self.assertEqual(row["chs"], "蹦蹦炸弹伤害")
        self.assertAlmostEqual(row["normalMelt"]["expectation"], row["normal"]["expectation"] * 2.0)

    def test_calculate_without_reactions(self):
        request = {
            "slot": "a",
            "character": {"name": "ineffa"},
            "weapon": {"name": "deathmatch"},
        }
        response = self.client.post("/calculate", json=request)
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["columns"], ["chs", "normal"])

    def test_calculate_errors(self):
        # 未知公式 -> 404
        bad_slot = dict(KLEE_REQUEST, slot="x")
        self.assertEqual(self.client.post("/calculate", json=bad_slot).status_code, 404)

        # 缺少武器 / 武器类型不符 / 未知预设 -> 400
        no_weapon = {k: v for k, v in KLEE_REQUEST.items() if k != "weapon"}
        self.assertEqual(self.client.post("/calculate", json=no_weapon).status_code, 400)

        wrong_weapon = dict(KLEE_REQUEST, weapon={"name": "deathmatch"})
        self.assertEqual(self.client.post("/calculate", json=wrong_weapon).status_code, 400)

        bad_buff = dict(KLEE_REQUEST, buffs=[{"preset": "nope"}])
        self.assertEqual(self.client.post("/calculate", json=bad_buff).status_code, 400)

        no_character = {k: v for k, v in KLEE_REQUEST.items() if k != "character"}
        self.assertEqual(self.client.post("/calculate", json=no_character).status_code, 400)

    def test_error_detail(self):
        # 自定义Buff缺少 stat_modifiers，返回缺失的键而不是预设名
        bad_buff = dict(KLEE_REQUEST, buffs=[{"name": "自定义"}])
        response = self.client.post("/calculate", json=bad_buff)
        self.assertEqual(response.status_code, 400)
        self.assertIn("stat_modifiers", response.json()["detail"])
        self.assertNotIn("Buff预设", response.json()["detail"])

    def test_target(self):
        request = dict(KLEE_REQUEST, target="klee_default")
        response = self.client.post("/target", json=request)
        self.assertEqual(response.status_code, 200)
        self.assertGreater(response.json()["score"], 0)

        self.assertEqual(self.client.post("/target", json=dict(KLEE_REQUEST, target="x")).status_code, 404)
        bad_params = dict(KLEE_REQUEST, target="klee_default", target_params={"rate": 1})
        self.assertEqual(self.client.post("/target", json=bad_params).status_code, 400)

        bad_rate = dict(KLEE_REQUEST, character={"name": "ineffa"}, weapon={"name": "deathmatch"},
                        target="ineffa_default", target_params={"overclocking_rate": 2.0})
        self.assertEqual(self.client.post("/target", json=bad_rate).status_code, 400)

    def test_presets(self):
        with tempfile.TemporaryDirectory() as tmp:
            manager = PresetManager(os.path.join(tmp, "presets.json"))
            with patch.object(api_server, "preset_manager", manager):
                created = self.client.post("/presets", json={
                    "preset_name": "可莉测试",
                    "config": {"character": {"name": "klee"}, "weapon": {"name": "dodoco_tales"}},
                }).json()
                listed = self.client.get("/presets", params={"character_name": "klee"}).json()
                self.assertEqual([p["id"] for p in listed], [created["id"]])
                self.assertEqual(self.client.get("/presets", params={"character_name": "ineffa"}).json(), [])

                self.assertEqual(self.client.delete(f"/presets/{created['id']}").status_code, 200)
                self.assertEqual(self.client.delete(f"/presets/{created['id']}").status_code, 404)

if __name__ == '__main__':
    unittest.main()
