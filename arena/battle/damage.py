"""Damage formula: base power x type effectiveness x STAB x random variance.

There are no attack/defense stats in this ruleset; an attack's power is the
whole base. Accuracy is rolled by the caller before this is invoked.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Sequence
import math
import random

from .chart import type_effectiveness
from .models import Attack

STAB_MULTIPLIER = 1.5
VARIANCE_STEPS = 15  # 0.85, 0.86, ... 1.00

@dataclass(frozen=True)
class DamageResult:
    damage: int
    effectiveness: float
    stab: float

    @property
    def stab_applied(self) -> bool:
        return self.stab > 1.0

def roll_variance(rng: random.Random) -> float:
    return 0.85 + rng.randint(0, VARIANCE_STEPS) / 100

def stab_multiplier(attack_type: str, attacker_types: Iterable[str]) -> float:
    t = attack_type.lower()
    return STAB_MULTIPLIER if any(a.lower() == t for a in attacker_types) else 1.0

def round_half_up(value: float) -> int:
    # Halves round away from zero; builtin round() would round them to even.
    return int(math.floor(value + 0.5)) if value >= 0 else -int(math.floor(-value + 0.5))

def calculate_damage(attack: Attack, attacker_types: Sequence[str], defender_types: Sequence[str],
                     rng: random.Random) -> DamageResult:
    eff = type_effectiveness(attack.type, defender_types)
    stab = stab_multiplier(attack.type, attacker_types)
    variance = roll_variance(rng)
    if eff == 0 or attack.power <= 0:
        return DamageResult(0, eff, stab)
    return DamageResult(round_half_up(attack.power * eff * stab * variance), eff, stab)

__all__ = ["DamageResult","calculate_damage","roll_variance","stab_multiplier","STAB_MULTIPLIER"]
