"""Runtime loader for the creature/attack catalog.

The catalog is a read-only seed table (assets/catalog/*.json). Raw JSON is
cached; every call to :func:`create_pool` builds fresh ``Creature`` instances
because battles mutate their HP.
"""
from __future__ import annotations
import json
from functools import lru_cache
from pathlib import Path
from typing import Dict, Any, List

from arena.core.errors import DataLoadError, ValidationError
from arena.core.logging import logger
from arena.core.paths import ATTACKS_FILE, CREATURES_FILE
from arena.battle.models import Attack, Creature, DEFAULT_ACCURACY

def _read_json(path: Path) -> Any:
    if not path.exists():
        raise DataLoadError(str(path), "file not found")
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise DataLoadError(str(path), str(e)) from e

@lru_cache(maxsize=None)
def _raw_attacks(path: Path = ATTACKS_FILE) -> Dict[str, Dict[str, Any]]:
    return _read_json(path)

@lru_cache(maxsize=None)
def _raw_creatures(path: Path = CREATURES_FILE) -> List[Dict[str, Any]]:
    return _read_json(path)

def get_attack(key: str, *, path: Path = ATTACKS_FILE) -> Attack:
    raw = _raw_attacks(path).get(key)
    if raw is None:
        raise KeyError(f"Attack not found: {key}")
    try:
        return Attack(name=raw["name"], power=int(raw["power"]), type=raw["type"],
                      accuracy=int(raw.get("accuracy", DEFAULT_ACCURACY)))
    except (KeyError, ValidationError) as e:
        raise DataLoadError(str(path), f"attack {key!r}: {e}") from e

def _build_creature(raw: Dict[str, Any], attacks_path: Path, creatures_path: Path) -> Creature:
    try:
        return Creature(
            name=raw["name"],
            types=tuple(raw["types"]),
            max_hp=int(raw["max_hp"]),
            speed=int(raw["speed"]),
            attacks=[get_attack(k, path=attacks_path) for k in raw.get("attacks", [])],
            image=raw.get("image", ""),
        )
    except (KeyError, ValidationError) as e:
        raise DataLoadError(str(creatures_path), f"creature {raw.get('name', '?')!r}: {e}") from e

def create_pool(*, attacks_path: Path = ATTACKS_FILE, creatures_path: Path = CREATURES_FILE) -> List[Creature]:
    """Fresh, full-health creature instances in catalog order."""
    pool = [_build_creature(r, attacks_path, creatures_path) for r in _raw_creatures(creatures_path)]
    logger.debug("CatalogLoaded", creatures=len(pool), path=str(creatures_path))
    return pool

__all__ = ["get_attack","create_pool"]
