import sys
import os
import uvicorn
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel
from typing import List, Optional, Dict, Any

# Add project root to path
sys.path.append(os.path.dirname(os.path.abspath(__file__)))

from calculators.registry import get_registry
from core.artifact_system import Artifact, get_artifact_set_manager
from core.enemy import Enemy
from core.logger import get_logger
from core.operator_config import ConfigObject, PresetManager
from core.weapon_system import get_weapon_manager
from entities.character_registry import get_all_characters, get_character_class
from mechanics.buff_system import BUFF_PRESETS
from mechanics.target_function import TARGET_FUNCTIONS

logger = get_logger("api")

app = FastAPI(title="Genshin Damage Calculator API")

# Enable CORS for frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# --- Managers ---
weapon_manager = get_weapon_manager()
artifact_set_manager = get_artifact_set_manager()
preset_manager = PresetManager()


class CharacterConfigModel(BaseModel):
    name: str
    level: int = 90
    ascend: bool = False
    constellation: int = 0
    skill1: int = 10
    skill2: int = 10
    skill3: int = 10
    params: Dict[str, Any] = {}


class WeaponConfigModel(BaseModel):
    name: str
    level: int = 90
    ascend: bool = False
    refine: int = 1
    params: Dict[str, Any] = {}


class ArtifactModel(BaseModel):
    slot: str
    set_name: str = ""
    main_stat: List[Any]
    sub_stats: List[Any] = []
    level: int = 20


class EnemyModel(BaseModel):
    level: int = 90
    resistances: Dict[str, float] = {}
    default_res: float = 0.1


class CalculateRequest(BaseModel):
    slot: str = "e"
    character: Optional[CharacterConfigModel] = None
    weapon: Optional[WeaponConfigModel] = None
    buffs: List[Dict[str, Any]] = []
    artifacts: List[ArtifactModel] = []
    enemy: EnemyModel = EnemyModel()


class TargetRequest(CalculateRequest):
    target: str
    target_params: Dict[str, Any] = {}


class PresetCreate(BaseModel):
    preset_name: str
    config: Dict[str, Any]
    artifacts: List[Dict[str, Any]] = []


def serialize_table(rows):
    """DamageResult -> dict，None 保持为 None"""
    return [
        {k: (v.to_dict() if hasattr(v, "to_dict") else v) for k, v in row.items()}
        for row in rows
    ]


def build_inputs(request: CalculateRequest):
    """请求 -> (圣遗物, ConfigObject, Enemy)；配置错误统一转为 400"""
    if request.character is None:
        raise HTTPException(status_code=400, detail="缺少角色配置")
    try:
        config_object = ConfigObject.from_dict({
            "character": request.character.dict(),
            "weapon": request.weapon.dict() if request.weapon else None,
            "buffs": request.buffs,
        })
        artifacts = [Artifact.from_dict(a.dict()) for a in request.artifacts]
    except (KeyError, ValueError) as e:
        raise HTTPException(status_code=400, detail=str(e))
    enemy = Enemy.from_dict(request.enemy.dict())
    return artifacts, config_object, enemy


# --- Character API Endpoints ---

@app.get("/characters")
async def get_characters():
    return [
        {
            "name": name,
            "display_name": char_cls.display_name,
            "element": char_cls.element.value,
            "weapon_type": char_cls.weapon_type.value,
            "star": char_cls.star,
            "slots": char_cls.get_slots(),
        }
        for name, char_cls in get_all_characters().items()
    ]


@app.get("/characters/{character_name}/formulas")
async def get_character_formulas(character_name: str):
    """获取角色已注册的技能公式（槽位、伤害键、列名）"""
    try:
        get_character_class(character_name)
    except KeyError:
        raise HTTPException(status_code=404, detail=f"Character {character_name} not found")

    registry = get_registry()
    result = {}
    for slot in registry.get_slots(character_name):
        formula = registry.get(character_name, slot)
        result[slot] = {
            "columns": formula.columns,
            "reactions": list(formula.reactions),
            "skill_keys": [{"key": k.key, "chs": k.chs, "element": k.element}
                           for k in formula.skill_keys],
        }
    return result


# --- Weapon / Artifact / Buff API Endpoints ---

@app.get("/weapons")
async def get_weapons(weapon_type: Optional[str] = None):
    """获取所有武器，可按类型过滤"""
    if weapon_type:
        weapons = weapon_manager.get_by_type(weapon_type)
    else:
        weapons = weapon_manager.get_all()
    return [weapon.to_dict() for weapon in weapons]


@app.get("/weapons/{weapon_id}")
async def get_weapon(weapon_id: str):
    """获取指定ID的武器"""
    weapon = weapon_manager.get(weapon_id)
    if not weapon:
        raise HTTPException(status_code=404, detail="Weapon not found")
    return weapon.to_dict()


@app.get("/artifact-sets")
async def get_artifact_sets():
    return [s.to_dict() for s in artifact_set_manager.get_all()]


@app.get("/buffs")
async def get_buffs():
    """可用的Buff预设名"""
    return sorted(BUFF_PRESETS.keys())


# --- Preset API Endpoints ---

@app.get("/presets")
async def get_presets(character_name: Optional[str] = None):
    if character_name:
        presets = preset_manager.get_by_character(character_name)
    else:
        presets = preset_manager.get_all()
    return [p.to_dict() for p in presets]


@app.post("/presets")
async def create_preset(data: PresetCreate):
    preset = preset_manager.create(data.preset_name, data.config, data.artifacts)
    return preset.to_dict()


@app.delete("/presets/{preset_id}")
async def delete_preset(preset_id: str):
    if not preset_manager.delete(preset_id):
        raise HTTPException(status_code=404, detail="Preset not found")
    return {"success": True}


# --- Calculation ---

@app.post("/calculate")
async def calculate(request: CalculateRequest):
    artifacts, config_object, enemy = build_inputs(request)
    character_name = config_object.character.name

    try:
        formula = get_registry().get(character_name, request.slot)
    except KeyError as e:
        raise HTTPException(status_code=404, detail=str(e))

    try:
        rows = formula(artifacts, config_object, enemy)
    except KeyError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    logger.info(f"计算完成: {character_name}.{request.slot} ({len(rows)} 行)")
    return {
        "character": character_name,
        "slot": request.slot,
        "columns": formula.columns,
        "rows": serialize_table(rows),
    }


@app.post("/target")
async def score_target(request: TargetRequest):
    """用目标函数给当前配装打分"""
    if request.target not in TARGET_FUNCTIONS:
        raise HTTPException(status_code=404, detail=f"Target {request.target} not found")
    artifacts, config_object, enemy = build_inputs(request)

    try:
        target_fn = TARGET_FUNCTIONS[request.target](**request.target_params)
    except (TypeError, ValueError) as e:
        raise HTTPException(status_code=400, detail=str(e))

    try:
        score = target_fn.target(artifacts, config_object, enemy)
    except KeyError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {"target": request.target, "score": score}


if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=8000)
