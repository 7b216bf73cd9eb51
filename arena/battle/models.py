"""Battle entities: attacks, creatures and the three-member roster."""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional, Tuple, List, Dict, Any

from arena.core.errors import ValidationError
from arena.core.types import type_label

ROSTER_SIZE = 3
MAX_ATTACKS = 4
DEFAULT_ACCURACY = 90

@dataclass(frozen=True)
class Attack:
    name: str
    power: int
    type: str
    accuracy: int = DEFAULT_ACCURACY

    def __post_init__(self):
        if self.power < 0:
            raise ValidationError(f"Attack {self.name!r} has negative power {self.power}")
        if not 1 <= self.accuracy <= 100:
            raise ValidationError(f"Attack {self.name!r} accuracy {self.accuracy} outside 1..100")

@dataclass
class Creature:
    name: str
    types: Tuple[str, ...]
    max_hp: int
    speed: int
    attacks: List[Attack] = field(default_factory=list)
    image: str = ""
    current_hp: Optional[int] = None  # None -> starts at max HP

    def __post_init__(self):
        if isinstance(self.types, str):
            self.types = (self.types,)
        self.types = tuple(self.types)
        if not 1 <= len(self.types) <= 2:
            raise ValidationError(f"{self.name} must have one or two types, got {self.types!r}")
        if self.max_hp <= 0:
            raise ValidationError(f"{self.name} needs a positive max HP, got {self.max_hp}")
        if len(self.attacks) > MAX_ATTACKS:
            raise ValidationError(f"{self.name} knows {len(self.attacks)} attacks (max {MAX_ATTACKS})")
        if self.current_hp is None:
            self.current_hp = self.max_hp
        self.current_hp = max(0, min(self.max_hp, int(self.current_hp)))

    @property
    def hp(self) -> int:
        return int(self.current_hp or 0)

    @property
    def fainted(self) -> bool:
        return self.hp == 0

    def take_damage(self, amount: int) -> int:
        """Lose up to ``amount`` HP; returns the HP actually lost."""
        old = self.hp
        self.current_hp = max(0, old - max(0, int(amount)))
        return old - self.current_hp

    def heal(self, amount: int) -> int:
        """Restore up to ``amount`` HP; returns the HP actually restored."""
        old = self.hp
        self.current_hp = min(self.max_hp, old + max(0, int(amount)))
        return self.current_hp - old

    def status_line(self) -> str:
        return f"{self.name} ({type_label(self.types)}) - HP: {self.hp}/{self.max_hp}"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "types": list(self.types),
            "hp": self.hp,
            "max_hp": self.max_hp,
            "speed": self.speed,
            "fainted": self.fainted,
            "attacks": [a.name for a in self.attacks],
            "image": self.image,
        }

@dataclass
class Roster:
    """Exactly three creatures; index 0 is the one in battle."""
    members: List[Creature]

    def __post_init__(self):
        self.members = list(self.members)
        if len(self.members) != ROSTER_SIZE:
            raise ValidationError(f"A roster needs exactly {ROSTER_SIZE} creatures, got {len(self.members)}")

    def __len__(self) -> int:
        return len(self.members)

    def __getitem__(self, index: int) -> Creature:
        return self.members[index]

    def __iter__(self):
        return iter(self.members)

    def active(self) -> Creature:
        return self.members[0]

    def has_available(self) -> bool:
        return any(not m.fainted for m in self.members)

    def is_defeated(self) -> bool:
        return not self.has_available()

    def swap(self, index: int) -> Creature:
        self.members[0], self.members[index] = self.members[index], self.members[0]
        return self.members[0]

__all__ = ["Attack","Creature","Roster","ROSTER_SIZE","MAX_ATTACKS","DEFAULT_ACCURACY"]
