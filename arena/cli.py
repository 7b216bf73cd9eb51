from __future__ import annotations
import argparse
import random
from typing import Callable, List, Optional, Sequence

from rich.markup import escape

from arena.battle.actions import Action, AttackAction, ItemAction, SwitchAction
from arena.battle.draft import Draft
from arena.battle.engine import Battle
from arena.core.errors import DraftError
from arena.core.logging import logger
from arena.core.types import type_tags
from arena.system.settings import Settings
from arena.ui.render import attack_table, battle_view, console, pool_table

HELP = "Commands: a <n> attack | s <n> switch | i potion | q quit"

InputFn = Callable[[str], str]

def parse_command(line: str) -> Optional[Action]:
    """Turn a command line into an action; None if it isn't one.

    'a 2' -> AttackAction(2), 's 1' -> SwitchAction(1), 'i' -> ItemAction().
    Indices are passed through unchecked; range checks belong to the battle.
    """
    parts = line.strip().lower().split()
    if not parts:
        return None
    cmd, args = parts[0], parts[1:]
    if cmd in {"i", "item", "potion"} and not args:
        return ItemAction()
    if cmd in {"a", "attack", "s", "switch"} and len(args) == 1:
        try:
            idx = int(args[0])
        except ValueError:
            return None
        return AttackAction(idx) if cmd[0] == "a" else SwitchAction(idx)
    return None

def parse_picks(line: str) -> List[int]:
    """'0 4 7' or '0,4,7' -> [0, 4, 7]; raises DraftError on junk."""
    tokens = line.replace(",", " ").split()
    try:
        return [int(t) for t in tokens]
    except ValueError:
        raise DraftError(f"Could not read picks from {line!r}") from None

def run_draft(draft: Draft, read: InputFn, default_names: Sequence[str]) -> Battle:
    while draft.battle is None:
        slot = draft.next_picker
        if slot is None:
            draft.start_battle()
            break
        console.print(pool_table(draft.pool))
        name = read(f"Player {slot} name ({escape(default_names[slot - 1])}): ").strip() or default_names[slot - 1]
        picks_raw = read(f"{escape(name)}, pick 3 Pokemon by number: ")
        try:
            team = draft.select_team(slot, parse_picks(picks_raw), name=name)
        except DraftError as e:
            console.print(f"[red]{escape(str(e))}[/red]")
            continue
        console.print(f"{escape(name)} chose " + ", ".join(f"{escape(c.name)} ({type_tags(c.types)})" for c in team))
    return draft.battle

def run_battle(battle: Battle, read: InputFn) -> Optional[str]:
    """Hot-seat loop; returns the winner (None for a tie or an early quit)."""
    while not battle.is_over:
        console.print(battle_view(battle))
        player = battle.current_turn
        console.print(attack_table(battle.active(player)))
        line = read(f"{escape(player)} > ").strip()
        if line.lower() in {"q", "quit"}:
            logger.info("BattleAbandoned", turn=battle.turn_counter)
            return None
        action = parse_command(line)
        if action is None:
            console.print(HELP)
            continue
        result = battle.execute_turn(player, action)
        if not result.success:
            console.print(f"[red]{escape(result.message)}[/red]")
    console.print(battle_view(battle))
    return battle.winner

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="arena", description="Two-player Pokemon battle arena")
    parser.add_argument("--seed", type=int, default=None, help="fixed RNG seed")
    parser.add_argument("--debug", action="store_true", help="verbose engine diagnostics")
    return parser

def run(argv: Optional[Sequence[str]] = None, read: Optional[InputFn] = None):
    args = build_parser().parse_args(argv)
    settings = Settings.load()
    settings.apply_logging()
    if args.debug:
        # One-off override; not written back to the settings file
        logger.set_level("DEBUG")
    seed = args.seed if args.seed is not None else settings.data.seed
    rng = random.Random(seed)
    read = read or console.input

    # Names typed in this game become next game's defaults
    settings.on_change(lambda _data: settings.save())

    draft = Draft(rng=rng)
    try:
        while True:
            names = (settings.data.player1_name, settings.data.player2_name)
            battle = run_draft(draft, read, names)
            settings.update(player1_name=battle.player1, player2_name=battle.player2)
            run_battle(battle, read)
            again = read("Play again? (y/n): ").strip().lower()
            if again[:1] != "y":
                break
            draft.reset()
    except (EOFError, KeyboardInterrupt):
        console.print()
        logger.info("SessionInterrupted")
    console.print("Goodbye!")

if __name__ == "__main__":
    run()
