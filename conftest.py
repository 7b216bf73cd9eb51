# Ensure project root is on sys.path for tests, plus shared battle fixtures
import sys, pathlib
root = pathlib.Path(__file__).resolve().parent
if str(root) not in sys.path:
    sys.path.insert(0, str(root))

import pytest

from arena.battle.models import Attack, Creature


class ScriptedRng:
    """Stand-in for random.Random that hands out pre-chosen randint results in order."""

    def __init__(self, ints):
        self.ints = list(ints)
        self.calls = []

    def randint(self, a, b):
        if not self.ints:
            raise AssertionError(f"unexpected randint({a}, {b})")
        v = self.ints.pop(0)
        assert a <= v <= b, f"scripted {v} outside [{a}, {b}]"
        self.calls.append((a, b))
        return v


@pytest.fixture
def scripted_rng():
    return ScriptedRng


@pytest.fixture
def make_creature():
    def _make(name="Testmon", types=("normal",), hp=300, speed=100, attacks=None, current_hp=None):
        if attacks is None:
            attacks = [Attack("Tackle", 40, "normal", 100)]
        return Creature(name=name, types=tuple(types), max_hp=hp, speed=speed,
                        attacks=list(attacks), current_hp=current_hp)
    return _make


@pytest.fixture
def make_team(make_creature):
    def _team(prefix, *, types=("normal",), hp=300, speed=100, attacks=None):
        return [make_creature(f"{prefix}{i}", types=types, hp=hp, speed=speed, attacks=attacks)
                for i in range(3)]
    return _team
