from arena.battle.actions import AttackAction
from arena.battle.engine import Battle
from arena.battle.models import Attack
from arena.ui.render import (attack_table, battle_view, creature_panel, hp_bar, log_panel,
                             pool_table, render_text)


def test_hp_bar_colors():
    assert hp_bar(0, 100) == "[red]FAINTED[/red]"
    assert hp_bar(100, 100).startswith("[green]")
    assert hp_bar(40, 100).startswith("[yellow]")
    assert hp_bar(10, 100).startswith("[red]")


def test_hp_bar_width():
    bar = hp_bar(50, 100, width=10)
    assert bar.count("█") + bar.count("░") == 10


def test_creature_panel_text(make_creature):
    c = make_creature("Moltres", types=("fire", "flying"), hp=300, current_hp=120)
    text = render_text(creature_panel(c, title="Ash", hit=True))
    assert "Moltres" in text
    assert "FIR/FLY" in text
    assert "HP: 120/300" in text
    assert "*HIT*" in text


def test_names_with_brackets_are_not_markup(make_creature):
    c = make_creature("[bold]Weird[/bold]")
    assert "[bold]Weird[/bold]" in render_text(creature_panel(c, title="[p1]"))


def test_attack_table_lists_moves(make_creature):
    c = make_creature(attacks=[Attack("Ember", 40, "fire", 100), Attack("Scratch", 40, "normal", 95)])
    text = render_text(attack_table(c))
    assert "Ember" in text and "Scratch" in text and "95" in text


def test_log_panel_limit():
    text = render_text(log_panel([f"line {i}" for i in range(10)], limit=3))
    assert "line 9" in text
    assert "line 6" not in text
    assert "(empty)" in render_text(log_panel([]))


def test_battle_view_in_progress_and_over(make_creature, scripted_rng):
    team1 = [make_creature("Charm", speed=120, attacks=[Attack("Slam", 200, "normal", 100)]),
             make_creature("B"), make_creature("C")]
    team2 = [make_creature("Dummy", speed=10, current_hp=10),
             make_creature("Out1", current_hp=0), make_creature("Out2", current_hp=0)]
    battle = Battle("Ash", "Gary", team1, team2, rng=scripted_rng([1, 0]))

    text = render_text(battle_view(battle))
    assert "Ash's turn" in text
    assert "Charm" in text and "Dummy" in text
    assert "Ash goes first!" in text

    battle.execute_turn("Ash", AttackAction(0))
    text = render_text(battle_view(battle))
    assert "BATTLE OVER - Ash wins!" in text
    assert "FAINTED" in text


def test_pool_table(make_creature):
    text = render_text(pool_table([make_creature("Pikachu", types=("electric",), hp=275, speed=90)]))
    assert "Pikachu" in text and "275" in text and "ELE" in text
