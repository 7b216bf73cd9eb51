"""
Battle package.
- chart.py (type effectiveness)
- damage.py (damage formula, STAB, variance)
- models.py (Attack, Creature, Roster)
- actions.py (attack / switch / item actions and results)
- engine.py (turn orchestration, battle log, win detection)
- draft.py (pre-battle roster selection)
"""
from .models import Attack, Creature, Roster
from .actions import ActionResult, AttackAction, SwitchAction, ItemAction, action_from_dict
from .engine import Battle
from .draft import Draft
__all__ = ["Attack","Creature","Roster","ActionResult","AttackAction","SwitchAction",
           "ItemAction","action_from_dict","Battle","Draft"]
