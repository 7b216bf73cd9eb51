import random

import pytest

from arena.battle.actions import AttackAction, SwitchAction
from arena.battle.draft import Draft
from arena.battle.models import Attack
from arena.core.errors import DraftError


@pytest.fixture
def draft(make_creature):
    def factory():
        return [make_creature(f"Mon{i}", speed=100 - i) for i in range(8)]
    return Draft(pool_factory=factory)


def test_fresh_draft(draft):
    assert draft.phase == "DRAFTING"
    assert draft.next_picker == 1
    assert len(draft.pool) == 8
    assert draft.battle is None


def test_picks_leave_the_pool_and_keep_pool_order(draft):
    team = draft.select_team(1, [4, 0, 2], name="Ash")
    assert [c.name for c in team] == ["Mon0", "Mon2", "Mon4"]
    assert [c.name for c in draft.pool] == ["Mon1", "Mon3", "Mon5", "Mon6", "Mon7"]
    assert draft.next_picker == 2
    assert draft.names[0] == "Ash"


def test_player_two_cannot_go_first(draft):
    with pytest.raises(DraftError):
        draft.select_team(2, [0, 1, 2])


def test_player_one_cannot_pick_twice(draft):
    draft.select_team(1, [0, 1, 2])
    with pytest.raises(DraftError):
        draft.select_team(1, [0, 1, 2])


@pytest.mark.parametrize("picks", [[0, 1], [0, 1, 2, 3], [0, 0, 1], [0, 1, 8], [-1, 0, 1]])
def test_bad_pick_lists(draft, picks):
    with pytest.raises(DraftError):
        draft.select_team(1, picks)
    assert len(draft.pool) == 8
    assert draft.next_picker == 1


def test_player_two_needs_a_different_name(draft):
    draft.select_team(1, [0, 1, 2], name="Ash")
    with pytest.raises(DraftError):
        draft.select_team(2, [0, 1, 2], name="Ash")


def test_blank_names_fall_back_to_defaults(draft):
    draft.select_team(1, [0, 1, 2], name="  ")
    draft.select_team(2, [0, 1, 2])
    assert draft.names == ["Player 1", "Player 2"]


def test_second_team_starts_the_battle(draft):
    draft.select_team(1, [0, 1, 2], name="Ash")
    draft.select_team(2, [2, 3, 4], name="Gary")
    battle = draft.battle
    assert battle is not None
    assert draft.phase == "IN_PROGRESS"
    assert draft.is_complete()
    assert [c.name for c in battle.roster("Gary")] == ["Mon5", "Mon6", "Mon7"]
    # Mon0 (speed 100) outruns Mon5 (speed 95)
    assert battle.current_turn == "Ash"


def test_start_battle_requires_both_teams(draft):
    draft.select_team(1, [0, 1, 2])
    with pytest.raises(DraftError):
        draft.start_battle()


def test_reset_gives_a_fresh_pool(draft):
    draft.select_team(1, [0, 1, 2], name="Ash")
    draft.select_team(2, [0, 1, 2], name="Gary")
    draft.reset()
    assert draft.battle is None
    assert len(draft.pool) == 8
    assert draft.teams == [[], []]
    assert draft.names == ["Player 1", "Player 2"]
    assert draft.next_picker == 1


def test_default_pool_comes_from_catalog():
    assert len(Draft().pool) == 25


def _play_out(battle):
    while not battle.is_over:
        player = battle.current_turn
        lead = battle.active(player)
        if lead.fainted:
            bench = next(i for i, c in enumerate(battle.roster(player)) if not c.fainted)
            action = SwitchAction(bench)
        else:
            action = AttackAction(0)
        assert battle.execute_turn(player, action).success


def test_finished_teams_cannot_battle_again(make_creature):
    growl = Attack("Growl", 0, "normal", 100)
    crush = Attack("Crush", 999, "normal", 100)

    def factory():
        return ([make_creature(f"Fast{i}", speed=200, attacks=[growl]) for i in range(3)]
                + [make_creature(f"Slow{i}", speed=50, attacks=[crush]) for i in range(3)])
    draft = Draft(rng=random.Random(0), pool_factory=factory)
    draft.select_team(1, [0, 1, 2], name="Ash")
    draft.select_team(2, [0, 1, 2], name="Gary")
    _play_out(draft.battle)
    assert draft.battle.winner == "Gary"

    with pytest.raises(DraftError):
        draft.start_battle()

    draft.reset()
    draft.select_team(1, [0, 1, 2], name="Ash")
    draft.select_team(2, [0, 1, 2], name="Gary")
    assert draft.battle.phase == "IN_PROGRESS"
    assert draft.battle.current_turn == "Ash"
