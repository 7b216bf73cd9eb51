"""Pre-battle roster draft.

Player 1 picks three creatures from the shared pool; those picks leave the
pool, then player 2 picks three from what remains. Once both rosters are
complete a :class:`Battle` is built.
"""
from __future__ import annotations
from typing import Callable, List, Optional, Sequence
import random

from arena.core.errors import DraftError
from arena.core.logging import logger
from arena.core.types import type_label
from .engine import Battle, Phase
from .models import Creature, ROSTER_SIZE

DEFAULT_NAMES = ("Player 1", "Player 2")

class Draft:
    def __init__(self, pool: Optional[List[Creature]] = None, rng: Optional[random.Random] = None,
                 pool_factory: Optional[Callable[[], List[Creature]]] = None):
        if pool_factory is None:
            from arena.data.catalog import create_pool
            pool_factory = create_pool
        self._pool_factory = pool_factory
        self.rng = rng
        self.pool: List[Creature] = list(pool) if pool is not None else pool_factory()
        self.names: List[str] = list(DEFAULT_NAMES)
        self.teams: List[List[Creature]] = [[], []]
        self.battle: Optional[Battle] = None

    @property
    def phase(self) -> Phase:
        return self.battle.phase if self.battle else "DRAFTING"

    @property
    def next_picker(self) -> Optional[int]:
        """1 or 2 while drafting, None once both rosters are complete."""
        for slot, team in enumerate(self.teams, 1):
            if len(team) < ROSTER_SIZE:
                return slot
        return None

    def is_complete(self) -> bool:
        return self.next_picker is None

    def select_team(self, slot: int, indices: Sequence[int], name: Optional[str] = None) -> List[Creature]:
        """Pick ``ROSTER_SIZE`` distinct pool indices for player ``slot`` (1 or 2)."""
        if slot not in (1, 2):
            raise DraftError(f"Unknown player slot {slot}")
        if self.next_picker != slot:
            raise DraftError(f"Player {slot} cannot pick now")
        picks = list(indices)
        if len(picks) != ROSTER_SIZE:
            raise DraftError(f"Pick exactly {ROSTER_SIZE} Pokemon (got {len(picks)})")
        if len(set(picks)) != len(picks):
            raise DraftError("Each Pokemon can only be picked once")
        for i in picks:
            if isinstance(i, bool) or not isinstance(i, int) or not 0 <= i < len(self.pool):
                raise DraftError(f"No Pokemon at position {i!r}")

        display = (name or "").strip() or DEFAULT_NAMES[slot - 1]
        if slot == 2 and display == self.names[0]:
            raise DraftError(f"{display!r} is already taken by player 1")

        chosen = set(picks)
        # Roster order follows pool order, like the selection grid
        team = [c for i, c in enumerate(self.pool) if i in chosen]
        self.pool = [c for i, c in enumerate(self.pool) if i not in chosen]
        self.teams[slot - 1] = team
        self.names[slot - 1] = display
        logger.debug("TeamSelected", player=display, team=", ".join(f"{c.name}({type_label(c.types)})" for c in team))

        if self.is_complete():
            self.start_battle()
        return team

    def start_battle(self) -> Battle:
        if not self.is_complete():
            raise DraftError("Both players need a full team before battling")
        if any(c.fainted for team in self.teams for c in team):
            raise DraftError("These teams have already battled; reset() for a new game")
        self.battle = Battle(self.names[0], self.names[1], self.teams[0], self.teams[1], rng=self.rng)
        return self.battle

    def reset(self):
        """New game: fresh pool, no teams, default names, no battle."""
        self.pool = self._pool_factory()
        self.names = list(DEFAULT_NAMES)
        self.teams = [[], []]
        self.battle = None

__all__ = ["Draft","DEFAULT_NAMES"]
