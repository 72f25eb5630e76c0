"""
Tests for the Moderator facade and day transitions.
"""

import pytest

from mafia_moderator import Moderator
from mafia_moderator.core import GamePhase, GameResult, RoleType, PhaseError
from conftest import submit_night


def test_setup_can_be_changed_before_entry(game_config):
    moderator = Moderator(game_config)
    moderator.setup(1, {RoleType.DOCTOR}, 3)
    moderator.setup(1, set(), 2)
    moderator.enter_player("Ann")
    moderator.enter_player("Ben")
    assert moderator.phase == GamePhase.DAY


def test_setup_locked_after_first_entry(game_config):
    moderator = Moderator(game_config)
    moderator.setup(1, {RoleType.DOCTOR}, 3)
    moderator.enter_player("Ann")
    with pytest.raises(PhaseError):
        moderator.setup(1, set(), 2)


def test_single_faction_wins_on_opening_day(game_config):
    moderator = Moderator(game_config)
    moderator.setup(2, set(), 2)
    moderator.enter_player("Ann")
    moderator.enter_player("Ben")

    assert moderator.phase == GamePhase.GAME_OVER
    assert moderator.check_win() == GameResult.MAFIA_WINS
    with pytest.raises(PhaseError):
        moderator.begin_night()


def test_game_over_is_terminal(make_moderator):
    moderator = make_moderator({"Mia": RoleType.MAFIA, "Alice": RoleType.CIVILIAN})
    moderator.begin_night()
    submit_night(moderator, mafia="Alice")
    moderator.resolve_night()

    assert moderator.check_win() == GameResult.MAFIA_WINS
    assert not moderator.lynch_available
    with pytest.raises(PhaseError):
        moderator.submit_night_choice(RoleType.MAFIA, "Mia")
    with pytest.raises(PhaseError):
        moderator.submit_lynch_vote("Mia")
    with pytest.raises(PhaseError):
        moderator.begin_night()


def test_check_win_during_play(town):
    assert town.check_win() == GameResult.CONTINUE
    town.begin_night()
    assert town.check_win() == GameResult.CONTINUE


def test_night_roles_only_at_night(town):
    with pytest.raises(PhaseError):
        town.night_roles()
    with pytest.raises(PhaseError):
        town.next_night_role()
    assert town.begin_night() == town.night_roles()


def test_event_log_is_a_copy(town):
    town.begin_night()
    town.resolve_night()
    log = town.event_log
    log.append("tampered")
    assert "tampered" not in town.event_log


def test_begin_night_requires_day(game_config):
    moderator = Moderator(game_config)
    with pytest.raises(PhaseError):
        moderator.begin_night()
    moderator.setup(1, set(), 3)
    with pytest.raises(PhaseError):
        moderator.begin_night()


def test_announcements(make_moderator, game_config, capsys):
    game_config.use_judge_announcements = True
    moderator = make_moderator({"Mia": RoleType.MAFIA, "Alice": RoleType.CIVILIAN, "Bob": RoleType.CIVILIAN})
    moderator.begin_night()
    submit_night(moderator, mafia="Alice")
    moderator.resolve_night()

    out = capsys.readouterr().out
    assert "[JUDGE] Night falls. Round 2 begins." in out
    assert "[MAFIA] chooses Alice." in out
    assert "[JUDGE] Morning has come. Players alive: ['Mia', 'Bob']" in out
    assert moderator.judge.announcements[-1].startswith("Morning has come")


def test_check_win_during_setup(game_config):
    moderator = Moderator(game_config)
    assert moderator.check_win() == GameResult.CONTINUE
    moderator.setup(1, set(), 2)
    moderator.enter_player("Ann")
    assert moderator.check_win() == GameResult.CONTINUE
