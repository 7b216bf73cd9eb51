"""Player actions and the uniform result every action returns.

Actions are small tagged records (``kind`` = attack / switch / item). The rule
that carries one out is looked up in ``_RULES`` by kind, so turn orchestration
never needs to know which concrete action it was handed.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, ClassVar, Dict, Mapping, Optional, Union, TYPE_CHECKING

from arena.core.errors import ActionParseError

if TYPE_CHECKING:
    from .engine import Battle

@dataclass
class ActionResult:
    success: bool
    message: str
    damage: Optional[int] = None
    effectiveness_note: Optional[str] = None
    stab_applied: Optional[bool] = None
    show_effect: bool = False
    effect_target: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"success": self.success, "message": self.message}
        if self.damage is not None:
            out["damage"] = self.damage
            out["effectivenessNote"] = self.effectiveness_note or ""
            out["stabApplied"] = bool(self.stab_applied)
        if self.show_effect:
            out["showEffect"] = True
            out["effectTarget"] = self.effect_target
        return out

def failure(message: str) -> ActionResult:
    return ActionResult(success=False, message=message)

@dataclass(frozen=True)
class AttackAction:
    attack_index: int
    kind: ClassVar[str] = "attack"
    description: ClassVar[str] = "used an attack"

@dataclass(frozen=True)
class SwitchAction:
    roster_index: int
    kind: ClassVar[str] = "switch"
    description: ClassVar[str] = "switched Pokemon"

@dataclass(frozen=True)
class ItemAction:
    kind: ClassVar[str] = "item"
    description: ClassVar[str] = "used an item"

Action = Union[AttackAction, SwitchAction, ItemAction]

_RULES: Dict[str, Callable[["Battle", str, Any], ActionResult]] = {
    "attack": lambda battle, player, action: battle.execute_attack(player, action.attack_index),
    "switch": lambda battle, player, action: battle.switch_creature(player, action.roster_index),
    "item": lambda battle, player, action: battle.use_item(player),
}

def apply_action(battle: "Battle", player: str, action: Action) -> ActionResult:
    rule = _RULES.get(getattr(action, "kind", None))
    if rule is None:
        raise ActionParseError(action, "not a battle action")
    return rule(battle, player, action)

def _index(data: Mapping[str, Any], *keys: str) -> int:
    for k in keys:
        if k in data:
            val = data[k]
            # bool is an int subclass; "true" is not an index
            if isinstance(val, bool) or not isinstance(val, int):
                raise ActionParseError(data, f"{k} must be an integer")
            return val
    raise ActionParseError(data, f"missing {keys[0]}")

def action_from_dict(data: Mapping[str, Any]) -> Action:
    """Build an action from the inbound payload, e.g. ``{"kind": "attack", "attackIndex": 1}``."""
    if not isinstance(data, Mapping):
        raise ActionParseError(data, "expected a mapping")
    kind = data.get("kind")
    if kind == "attack":
        return AttackAction(_index(data, "attackIndex", "attack_index"))
    if kind == "switch":
        return SwitchAction(_index(data, "rosterIndex", "roster_index"))
    if kind == "item":
        return ItemAction()
    raise ActionParseError(data, f"unknown kind {kind!r}")

__all__ = ["ActionResult","AttackAction","SwitchAction","ItemAction","Action",
           "apply_action","action_from_dict","failure"]
