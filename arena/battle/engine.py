"""Two-player battle state machine.

A ``Battle`` owns both rosters, the turn owner and the player-facing battle
log. Callers submit one action per turn through :meth:`Battle.execute_turn`;
every game-rule violation comes back as a failed ``ActionResult`` and leaves
the battle untouched.
"""
from __future__ import annotations
from collections import deque
from typing import Deque, Dict, List, Literal, Optional, Sequence, Union, Any
import random

from arena.core.errors import ValidationError
from arena.core.logging import logger
from .actions import Action, ActionResult, apply_action, failure
from .chart import effectiveness_note
from .damage import calculate_damage
from .models import Creature, Roster

Phase = Literal["DRAFTING","IN_PROGRESS","OVER"]

LOG_CAPACITY = 20
POTION_HEAL = 70

class Battle:
    def __init__(self, player1: str, player2: str,
                 team1: Union[Roster, Sequence[Creature]], team2: Union[Roster, Sequence[Creature]],
                 rng: Optional[random.Random] = None, *, log_capacity: int = LOG_CAPACITY):
        if player1 == player2:
            raise ValidationError(f"Players need distinct names, both are {player1!r}")
        self.player1 = player1
        self.player2 = player2
        self.rng = rng or random.Random()
        self._rosters: Dict[str, Roster] = {
            player1: team1 if isinstance(team1, Roster) else Roster(list(team1)),
            player2: team2 if isinstance(team2, Roster) else Roster(list(team2)),
        }
        for name, roster in self._rosters.items():
            if roster.is_defeated():
                raise ValidationError(f"{name} has no Pokemon able to battle")
        self._log: Deque[str] = deque(maxlen=log_capacity)
        self.game_over = False
        self.winner: Optional[str] = None
        self.is_tie = False
        # Effect metadata of the last accepted action (for the UI only)
        self.show_effect = False
        self.effect_target: Optional[str] = None
        self.turn_counter = 0

        self.current_turn = self._first_turn_player()
        self._add_log(f"Battle started between {player1} and {player2}!")
        self._add_log(f"{self.current_turn} goes first!")
        logger.debug("BattleStart", player1=player1, player2=player2, first=self.current_turn)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    @property
    def phase(self) -> Phase:
        return "OVER" if self.game_over else "IN_PROGRESS"

    @property
    def is_over(self) -> bool:
        return self.game_over

    @property
    def log(self) -> List[str]:
        return list(self._log)

    def log_lines(self, newest_first: bool = False) -> List[str]:
        return list(reversed(self._log)) if newest_first else list(self._log)

    def roster(self, player: str) -> Roster:
        try:
            return self._rosters[player]
        except KeyError:
            raise ValidationError(f"Unknown player {player!r}") from None

    def opponent_of(self, player: str) -> str:
        return self.player2 if player == self.player1 else self.player1

    def active(self, player: str) -> Creature:
        return self.roster(player).active()

    def snapshot(self) -> Dict[str, Any]:
        return {
            "players": [self.player1, self.player2],
            "rosters": {p: [c.to_dict() for c in r] for p, r in self._rosters.items()},
            "current_turn": self.current_turn,
            "phase": self.phase,
            "game_over": self.game_over,
            "winner": self.winner,
            "tie": self.is_tie,
            "log": self.log,
            "show_effect": self.show_effect,
            "effect_target": self.effect_target,
        }

    # ------------------------------------------------------------------
    # Turn orchestration
    # ------------------------------------------------------------------
    def _first_turn_player(self) -> str:
        speed1 = self.active(self.player1).speed
        speed2 = self.active(self.player2).speed
        if speed1 == speed2:
            return self.player1 if self.rng.randint(0, 1) == 0 else self.player2
        return self.player1 if speed1 > speed2 else self.player2

    def execute_turn(self, player: str, action: Action) -> ActionResult:
        if self.game_over:
            logger.debug("TurnRejected", player=player, reason="over")
            return failure("The battle is over!")
        if player != self.current_turn:
            logger.debug("TurnRejected", player=player, reason="not_turn", turn=self.current_turn)
            return failure("It's not your turn!")

        result = apply_action(self, player, action)
        if not result.success:
            logger.debug("ActionFailed", player=player, kind=action.kind, message=result.message)
            return result

        self.show_effect = result.show_effect
        self.effect_target = result.effect_target
        self.turn_counter += 1
        self._add_log(f"{player} {action.description}")
        logger.debug("TurnExecuted", player=player, kind=action.kind, turn=self.turn_counter)

        self._check_battle_over()
        if not self.game_over:
            self.current_turn = self.opponent_of(self.current_turn)
            self._add_log(f"{self.current_turn}'s turn!")
        return result

    def _check_battle_over(self):
        p1_out = self.roster(self.player1).is_defeated()
        p2_out = self.roster(self.player2).is_defeated()
        if not (p1_out or p2_out):
            return
        self.game_over = True
        if p1_out and p2_out:
            self.is_tie = True
            self._add_log("Battle over! It's a tie!")
        else:
            self.winner = self.player2 if p1_out else self.player1
            self._add_log(f"Battle over! {self.winner} wins!")
        logger.debug("BattleOver", winner=self.winner, tie=self.is_tie, turns=self.turn_counter)

    def _add_log(self, message: str):
        self._log.append(message)

    # ------------------------------------------------------------------
    # Action rules
    # ------------------------------------------------------------------
    def execute_attack(self, player: str, attack_index: int) -> ActionResult:
        target_player = self.opponent_of(player)
        attacker = self.active(player)
        defender = self.active(target_player)

        if attacker.fainted:
            return failure("Your Pokemon has fainted! Switch Pokemon.")
        if defender.fainted:
            return failure("The opponent's Pokemon has fainted!")
        if attack_index < 0 or attack_index >= len(attacker.attacks):
            return failure("Invalid attack selection!")

        attack = attacker.attacks[attack_index]
        if self.rng.randint(1, 100) > attack.accuracy:
            self._add_log(f"{attacker.name}'s attack missed!")
            return ActionResult(success=True, message="The attack missed!")

        dmg = calculate_damage(attack, attacker.types, defender.types, self.rng)
        defender.take_damage(dmg.damage)

        note = effectiveness_note(dmg.effectiveness)
        stab_msg = " STAB bonus!" if dmg.stab_applied else ""
        self._add_log(f"{attacker.name} used {attack.name}!{stab_msg} {note}".rstrip())
        self._add_log(f"It dealt {dmg.damage} damage to {defender.name}!")
        if defender.fainted:
            self._add_log(f"{defender.name} fainted!")

        return ActionResult(
            success=True,
            message="Attack successful!",
            damage=dmg.damage,
            effectiveness_note=note,
            stab_applied=dmg.stab_applied,
            show_effect=True,
            effect_target=target_player,
        )

    def switch_creature(self, player: str, roster_index: int) -> ActionResult:
        roster = self.roster(player)
        if roster_index < 0 or roster_index >= len(roster):
            return failure("Invalid Pokemon selection!")
        if roster_index == 0:
            return failure("This Pokemon is already in battle!")
        if roster[roster_index].fainted:
            return failure("This Pokemon has fainted and cannot battle!")

        incoming = roster.swap(roster_index)
        self._add_log(f"{player} sent out {incoming.name}!")
        return ActionResult(success=True, message="Pokemon switched!")

    def use_item(self, player: str) -> ActionResult:
        creature = self.active(player)
        if creature.fainted:
            return failure("This Pokemon has fainted and cannot use items!")

        restored = creature.heal(POTION_HEAL)
        self._add_log(f"{player} used a Potion on {creature.name}!")
        self._add_log(f"It restored {restored} HP!")
        return ActionResult(success=True, message="Item used successfully!")

__all__ = ["Battle","Phase","LOG_CAPACITY","POTION_HEAL"]
