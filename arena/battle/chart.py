"""Type effectiveness chart (current eighteen-type generation, Fairy included).

Attack type -> defender type -> multiplier. Pairs that are not listed are
neutral (1.0). Lookups are case-insensitive.
"""
from __future__ import annotations
from typing import Dict, Iterable

_TYPE_CHART: Dict[str, Dict[str, float]] = {
    "normal":  {"rock": 0.5, "ghost": 0.0, "steel": 0.5},
    "fire":    {"fire": 0.5, "water": 0.5, "grass": 2.0, "ice": 2.0, "bug": 2.0, "rock": 0.5, "dragon": 0.5, "steel": 2.0},
    "water":   {"fire": 2.0, "water": 0.5, "grass": 0.5, "ground": 2.0, "rock": 2.0, "dragon": 0.5},
    "grass":   {"fire": 0.5, "water": 2.0, "grass": 0.5, "poison": 0.5, "ground": 2.0, "flying": 0.5, "bug": 0.5, "rock": 2.0, "dragon": 0.5, "steel": 0.5},
    "electric":{"water": 2.0,"electric": 0.5,"grass": 0.5,"ground": 0.0,"flying": 2.0,"dragon": 0.5},
    "ice":     {"fire": 0.5,"water": 0.5,"grass": 2.0,"ice": 0.5,"ground": 2.0,"flying": 2.0,"dragon": 2.0,"steel": 0.5},
    "fighting":{"normal": 2.0,"ice": 2.0,"rock": 2.0,"dark": 2.0,"steel": 2.0,"poison": 0.5,"flying": 0.5,"psychic": 0.5,"bug": 0.5,"fairy": 0.5,"ghost": 0.0},
    "poison":  {"grass": 2.0,"fairy": 2.0,"poison": 0.5,"ground": 0.5,"rock": 0.5,"ghost": 0.5,"steel": 0.0},
    "ground":  {"fire": 2.0,"electric": 2.0,"poison": 2.0,"rock": 2.0,"steel": 2.0,"grass": 0.5,"bug": 0.5,"flying": 0.0},
    "flying":  {"grass": 2.0,"fighting": 2.0,"bug": 2.0,"electric": 0.5,"rock": 0.5,"steel": 0.5},
    "psychic": {"fighting": 2.0,"poison": 2.0,"psychic": 0.5,"steel": 0.5,"dark": 0.0},
    "bug":     {"grass": 2.0,"psychic": 2.0,"dark": 2.0,"fire": 0.5,"fighting": 0.5,"poison": 0.5,"flying": 0.5,"ghost": 0.5,"steel": 0.5,"fairy": 0.5},
    "rock":    {"fire": 2.0,"ice": 2.0,"flying": 2.0,"bug": 2.0,"fighting": 0.5,"ground": 0.5,"steel": 0.5},
    "ghost":   {"ghost": 2.0,"psychic": 2.0,"dark": 0.5,"normal": 0.0},
    "dragon":  {"dragon": 2.0,"steel": 0.5,"fairy": 0.0},
    "dark":    {"ghost": 2.0,"psychic": 2.0,"fighting": 0.5,"dark": 0.5,"fairy": 0.5},
    "steel":   {"ice": 2.0,"rock": 2.0,"fairy": 2.0,"fire": 0.5,"water": 0.5,"electric": 0.5,"steel": 0.5},
    "fairy":   {"fighting": 2.0,"dragon": 2.0,"dark": 2.0,"fire": 0.5,"poison": 0.5,"steel": 0.5},
}

KNOWN_TYPES = tuple(_TYPE_CHART)

def effectiveness(attack_type: str, defender_type: str) -> float:
    return _TYPE_CHART.get(attack_type.lower(), {}).get(defender_type.lower(), 1.0)

def type_effectiveness(attack_type: str, defender_types: Iterable[str]) -> float:
    """Combined multiplier against every defender type (dual types multiply)."""
    mult = 1.0
    for t in defender_types:
        mult *= effectiveness(attack_type, t)
    return mult

def effectiveness_note(multiplier: float) -> str:
    if multiplier > 1:
        return "It's super effective!"
    if 0 < multiplier < 1:
        return "It's not very effective..."
    if multiplier == 0:
        return "It has no effect!"
    return ""

__all__ = ["KNOWN_TYPES","effectiveness","type_effectiveness","effectiveness_note"]
