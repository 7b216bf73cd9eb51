"""Elemental type display helpers.

Battle rules only know lowercase type names; the views show them as colored
3-letter tags (Rich markup) or as a plain "Fire/Flying" label.
"""
from __future__ import annotations
from typing import Dict, Sequence

TYPE_COLORS_HEX: Dict[str, str] = {
    "normal": "#A8A77A",
    "fire": "#EE8130",
    "water": "#6390F0",
    "electric": "#F7D02C",
    "grass": "#7AC74C",
    "ice": "#96D9D6",
    "fighting": "#C22E28",
    "poison": "#A33EA1",
    "ground": "#E2BF65",
    "flying": "#A98FF3",
    "psychic": "#F95587",
    "bug": "#A6B91A",
    "rock": "#B6A136",
    "ghost": "#735797",
    "dragon": "#6F35FC",
    "dark": "#705746",
    "steel": "#B7B7CE",
    "fairy": "#D685AD",
}

TYPE_ABBREVIATIONS: Dict[str, str] = {
    "normal": "NRM", "fire": "FIR", "water": "WTR", "grass": "GRS",
    "electric": "ELE", "ice": "ICE", "fighting": "FGT", "poison": "PSN",
    "ground": "GRN", "flying": "FLY", "psychic": "PSY", "bug": "BUG",
    "rock": "RCK", "ghost": "GHO", "dragon": "DRA", "dark": "DRK",
    "steel": "STL", "fairy": "FAI",
}

def type_abbreviation(type_name: str) -> str:
    # Unknown types still get a tag
    return TYPE_ABBREVIATIONS.get(type_name.lower(), type_name[:3].upper())

def rich_type_markup(type_name: str, text: str) -> str:
    """Wrap text in Rich markup using the type's hex color."""
    hex_color = TYPE_COLORS_HEX.get(type_name.lower())
    if not hex_color:
        return text
    return f"[{hex_color}]{text}[/{hex_color}]"

def type_tags(types: Sequence[str]) -> str:
    """Colored 'FIR/FLY' tags as Rich markup."""
    return "/".join(rich_type_markup(t, type_abbreviation(t)) for t in types)

def type_label(types: Sequence[str]) -> str:
    """Plain 'Fire/Flying' style label, in the creature's own type order."""
    return "/".join(t.capitalize() for t in types)

__all__ = ["TYPE_COLORS_HEX","TYPE_ABBREVIATIONS","type_abbreviation","rich_type_markup",
           "type_tags","type_label"]
