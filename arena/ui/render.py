"""Rich rendering for the terminal front-end.

Pure view code: every function here reads battle/draft state and returns Rich
renderables; nothing mutates the battle.
"""
from __future__ import annotations
from typing import List, Optional, Sequence

from rich.align import Align
from rich.box import DOUBLE, ROUNDED
from rich.columns import Columns
from rich.console import Console, Group
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from arena.battle.engine import Battle
from arena.battle.models import Creature
from arena.core.types import rich_type_markup, type_abbreviation, type_tags

console = Console()

def hp_bar(current: int, max_hp: int, width: int = 20) -> str:
    """HP bar as Rich markup: green above half, yellow above a quarter, red below."""
    if max_hp <= 0 or current <= 0:
        return "[red]FAINTED[/red]"
    current = max(0, min(current, max_hp))
    percent = current / max_hp
    filled = max(1, int(percent * width))
    if percent > 0.5:
        color = "green"
    elif percent > 0.25:
        color = "yellow"
    else:
        color = "red"
    bar = "█" * filled + "░" * (width - filled)
    return f"[{color}]{bar}[/{color}]"

def creature_panel(c: Creature, *, title: str, hit: bool = False) -> Panel:
    title = escape(title)
    body = (
        f"[bold bright_white]{escape(c.name)}[/bold bright_white]\n"
        f"[bright_white][[/bright_white]{type_tags(c.types)}[bright_white]][/bright_white]\n"
        f"[bright_white]HP: {c.hp}/{c.max_hp}[/bright_white]\n"
        f"{hp_bar(c.hp, c.max_hp)}"
    )
    if hit:
        title = f"{title} [bold red]*HIT*[/bold red]"
    return Panel(body, title=title, box=ROUNDED, width=40, padding=(0, 1),
                 style="red" if hit else "bright_white")

def roster_table(battle: Battle, player: str) -> Table:
    table = Table(title=escape(player), box=ROUNDED, show_lines=False)
    table.add_column("#", justify="right")
    table.add_column("Pokemon")
    table.add_column("Type")
    table.add_column("HP", justify="right")
    for i, c in enumerate(battle.roster(player)):
        name = f"[dim]{escape(c.name)}[/dim]" if c.fainted else escape(c.name)
        if i == 0:
            name = f"[bold]{name}[/bold] (active)"
        table.add_row(str(i), name, type_tags(c.types), f"{c.hp}/{c.max_hp}")
    return table

def attack_table(c: Creature) -> Table:
    table = Table(box=ROUNDED)
    table.add_column("#", justify="right")
    table.add_column("Attack")
    table.add_column("Type")
    table.add_column("Power", justify="right")
    table.add_column("Acc", justify="right")
    for i, a in enumerate(c.attacks):
        table.add_row(str(i), escape(a.name), rich_type_markup(a.type, type_abbreviation(a.type)),
                      str(a.power), str(a.accuracy))
    return table

def log_panel(lines: List[str], *, limit: Optional[int] = None) -> Panel:
    shown = lines[-limit:] if limit else lines
    text = Text("\n".join(shown) if shown else "(empty)")
    return Panel(text, title="Battle Log", box=ROUNDED)

def battle_view(battle: Battle) -> Group:
    p1, p2 = battle.player1, battle.player2
    panels = Columns([
        creature_panel(battle.active(p1), title=p1, hit=battle.show_effect and battle.effect_target == p1),
        creature_panel(battle.active(p2), title=p2, hit=battle.show_effect and battle.effect_target == p2),
    ], equal=True, padding=(0, 4))
    if battle.is_over:
        status = "It's a tie!" if battle.is_tie else f"{battle.winner} wins!"
        banner = Panel(Align.center(Text(f"BATTLE OVER - {status}", style="bold bright_yellow")), box=DOUBLE)
    else:
        banner = Panel(Align.center(Text(f"{battle.current_turn}'s turn", style="bold bright_white")), box=DOUBLE)
    return Group(banner, Align.center(panels), Columns([roster_table(battle, p1), roster_table(battle, p2)]),
                 log_panel(battle.log, limit=8))

def pool_table(pool: Sequence[Creature]) -> Table:
    table = Table(title="Available Pokemon", box=ROUNDED)
    table.add_column("#", justify="right")
    table.add_column("Pokemon")
    table.add_column("Type")
    table.add_column("HP", justify="right")
    table.add_column("Speed", justify="right")
    table.add_column("Attacks")
    for i, c in enumerate(pool):
        table.add_row(str(i), escape(c.name), type_tags(c.types), str(c.max_hp), str(c.speed),
                      escape(", ".join(a.name for a in c.attacks)))
    return table

def render_text(renderable, width: int = 100) -> str:
    """Render to plain text (no ANSI); used for tests and logs."""
    plain = Console(width=width, force_terminal=False, color_system=None)
    with plain.capture() as cap:
        plain.print(renderable)
    return cap.get()

__all__ = ["console","hp_bar","creature_panel","roster_table","attack_table","log_panel",
           "battle_view","pool_table","render_text"]
