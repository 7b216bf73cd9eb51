import pytest

from arena.battle.actions import ItemAction, SwitchAction
from arena.battle.engine import Battle, POTION_HEAL


@pytest.fixture
def battle(make_team, make_creature, scripted_rng):
    team1 = [make_creature("Lead", speed=200), make_creature("Bench1"), make_creature("Bench2")]
    return Battle("Ash", "Gary", team1, make_team("G", speed=50), rng=scripted_rng([]))


def test_switch_brings_bench_member_forward(battle):
    result = battle.execute_turn("Ash", SwitchAction(2))
    assert result.success
    assert result.message == "Pokemon switched!"
    assert [c.name for c in battle.roster("Ash")] == ["Bench2", "Bench1", "Lead"]
    assert battle.log[2:] == ["Ash sent out Bench2!", "Ash switched Pokemon", "Gary's turn!"]
    assert not battle.show_effect


@pytest.mark.parametrize("index,message", [
    (0, "This Pokemon is already in battle!"),
    (3, "Invalid Pokemon selection!"),
    (-1, "Invalid Pokemon selection!"),
])
def test_bad_switches(battle, index, message):
    before = battle.snapshot()
    result = battle.execute_turn("Ash", SwitchAction(index))
    assert not result.success
    assert result.message == message
    assert battle.snapshot() == before


def test_cannot_switch_to_fainted(battle):
    battle.roster("Ash")[1].take_damage(999)
    result = battle.execute_turn("Ash", SwitchAction(1))
    assert result.message == "This Pokemon has fainted and cannot battle!"
    assert battle.current_turn == "Ash"


def test_potion_restores_up_to_seventy(battle):
    lead = battle.active("Ash")
    lead.take_damage(100)
    result = battle.execute_turn("Ash", ItemAction())
    assert result.success
    assert result.message == "Item used successfully!"
    assert lead.hp == 200 + POTION_HEAL
    assert battle.log[2:4] == ["Ash used a Potion on Lead!", "It restored 70 HP!"]


def test_potion_reports_actual_amount_near_full(battle):
    battle.active("Ash").take_damage(20)
    battle.execute_turn("Ash", ItemAction())
    assert battle.active("Ash").hp == 300
    assert "It restored 20 HP!" in battle.log


def test_potion_at_full_hp_still_uses_the_turn(battle):
    result = battle.execute_turn("Ash", ItemAction())
    assert result.success
    assert "It restored 0 HP!" in battle.log
    assert battle.current_turn == "Gary"


def test_no_potion_for_fainted_lead(battle):
    battle.active("Ash").take_damage(999)
    result = battle.execute_turn("Ash", ItemAction())
    assert not result.success
    assert result.message == "This Pokemon has fainted and cannot use items!"
    assert battle.active("Ash").hp == 0
