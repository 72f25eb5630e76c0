"""
Tests for night phase resolution.
"""

import pytest
from unittest.mock import patch

from mafia_moderator.core import (
    GamePhase, GameResult, RoleType, InvalidTarget, PhaseError, RoleNotActionable,
)
from conftest import submit_night


ALL_NIGHT_ROLES = [
    RoleType.MAFIA, RoleType.DOCTOR, RoleType.SERIAL_KILLER,
    RoleType.LAWYER, RoleType.BARMAN,
]


def alive(moderator, name):
    return moderator.roster.get_player(name).is_alive


def test_first_night_is_cupid_round(town):
    roles = town.begin_night()
    assert town.round_number == 2
    assert roles == ALL_NIGHT_ROLES + [RoleType.CUPID]


def test_cupid_only_wakes_once(town):
    town.begin_night()
    town.resolve_night()
    assert town.begin_night() == ALL_NIGHT_ROLES
    with pytest.raises(RoleNotActionable):
        town.submit_night_choice(RoleType.CUPID, ("Alice", "Bob"))


def test_dead_roles_are_skipped(town):
    town.game_state.eliminate_player("Doc")
    town.game_state.eliminate_player("Bart")
    roles = town.begin_night()
    assert RoleType.DOCTOR not in roles
    assert RoleType.BARMAN not in roles
    with pytest.raises(RoleNotActionable):
        town.submit_night_choice(RoleType.DOCTOR, "Alice")


def test_mafia_role_stays_while_one_member_lives(town):
    town.game_state.eliminate_player("Mia")
    assert RoleType.MAFIA in town.begin_night()


def test_next_role_walks_priority_order(town):
    town.begin_night()
    assert town.next_night_role() == RoleType.MAFIA
    town.submit_night_choice(RoleType.MAFIA, "Alice")
    assert town.next_night_role() == RoleType.DOCTOR
    for role_type in ALL_NIGHT_ROLES[1:]:
        town.submit_night_choice(role_type, None)
    assert town.next_night_role() == RoleType.CUPID
    town.submit_night_choice(RoleType.CUPID, None)
    assert town.next_night_role() is None


def test_mafia_kill(town):
    town.begin_night()
    submit_night(town, mafia="Alice")
    events = town.resolve_night()

    assert not alive(town, "Alice")
    assert events == [
        "Night Events:",
        "Alice was attacked by the Mafia",
        "Alice has died",
        "",
    ]


def test_doctor_saves_mafia_target(town):
    town.begin_night()
    submit_night(town, mafia="Alice", doctor="Alice")
    events = town.resolve_night()

    assert alive(town, "Alice")
    assert "Alice has died" not in events


def test_mafia_and_serial_killer_attack_independently(town):
    town.begin_night()
    submit_night(town, mafia="Alice", doctor="Carol", serial_killer="Bob")
    town.resolve_night()

    assert not alive(town, "Alice")
    assert not alive(town, "Bob")
    assert alive(town, "Carol")


def test_doctor_saves_serial_killer_target(town):
    town.begin_night()
    submit_night(town, doctor="Bob", serial_killer="Bob")
    town.resolve_night()
    assert alive(town, "Bob")


def test_double_attack_overrides_doctor(town):
    """One treatment cannot absorb both the Mafia and the Serial Killer."""
    town.begin_night()
    submit_night(town, mafia="Alice", doctor="Alice", serial_killer="Alice")
    events = town.resolve_night()

    assert not alive(town, "Alice")
    assert events.count("Alice has died") == 1


def test_double_attack_without_doctor_kills_once(town):
    town.begin_night()
    submit_night(town, mafia="Alice", serial_killer="Alice")
    events = town.resolve_night()
    assert events.count("Alice has died") == 1


def test_barman_inhibits_mafia(town):
    town.begin_night()
    submit_night(town, mafia="Alice", barman="Mia")
    events = town.resolve_night()

    assert alive(town, "Alice")
    assert "Mafia (Mia) was inhibited by the Barman" in events
    assert events.index("Alice was attacked by the Mafia") < events.index(
        "Mafia (Mia) was inhibited by the Barman")


def test_barman_inhibits_doctor(town):
    town.begin_night()
    submit_night(town, mafia="Alice", doctor="Alice", barman="Doc")
    town.resolve_night()
    assert not alive(town, "Alice")


def test_barman_inhibits_serial_killer(town):
    town.begin_night()
    submit_night(town, serial_killer="Bob", barman="Sam")
    town.resolve_night()
    assert alive(town, "Bob")


def test_barman_inhibits_lawyer_protection(town):
    town.begin_night()
    submit_night(town, lawyer="Bob", barman="Lou")
    town.resolve_night()
    assert town.game_state.lawyer_protection is None


def test_barman_leaves_other_choices_alone(town):
    """Inhibiting the Mafia keeps the Lawyer's protection and Cupid's link."""
    town.begin_night()
    submit_night(town, mafia="Alice", lawyer="Bob", barman="Max", cupid=("Bob", "Carol"))
    town.resolve_night()

    assert town.game_state.lawyer_protection == "Bob"
    assert town.lovers == ("Bob", "Carol")
    assert town.game_state.night_choices.mafia is None


def test_barman_on_civilian_is_silent(town):
    town.begin_night()
    submit_night(town, mafia="Alice", barman="Bob")
    events = town.resolve_night()

    assert not alive(town, "Alice")
    assert not any("inhibited" in line for line in events)


def test_barman_on_cupid_does_not_stop_link(town):
    town.begin_night()
    submit_night(town, barman="Cupe", cupid=("Alice", "Bob"))
    events = town.resolve_night()

    assert "Cupid (Cupe) was inhibited by the Barman" in events
    assert "Cupid linked: Alice and Bob" in events
    assert town.lovers == ("Alice", "Bob")


def test_lovers_die_together(town):
    town.begin_night()
    submit_night(town, mafia="Alice", cupid=("Alice", "Bob"))
    events = town.resolve_night()

    assert not alive(town, "Alice")
    assert not alive(town, "Bob")
    assert town.lovers is None
    assert events == [
        "Night Events:",
        "Alice was attacked by the Mafia",
        "Cupid linked: Alice and Bob",
        "Alice has died",
        "Bob has died",
        "",
    ]


def test_lover_spared_by_doctor(town):
    town.begin_night()
    submit_night(town, mafia="Alice", doctor="Bob", cupid=("Alice", "Bob"))
    town.resolve_night()

    assert not alive(town, "Alice")
    assert alive(town, "Bob")
    assert town.lovers is None


def test_lovers_persist_until_death(town):
    town.begin_night()
    submit_night(town, cupid=("Alice", "Bob"))
    town.resolve_night()

    town.begin_night()
    assert town.lovers == ("Alice", "Bob")
    submit_night(town, serial_killer="Bob")
    town.resolve_night()
    assert not alive(town, "Alice")


@pytest.mark.parametrize("pair", [("Alice",), ("Alice", "Alice"), ("Alice", "Ghost"), "Alice"])
def test_cupid_needs_two_living_players(town, pair):
    town.begin_night()
    with pytest.raises(InvalidTarget):
        town.submit_night_choice(RoleType.CUPID, pair)


def test_invalid_targets_rejected(town):
    town.game_state.eliminate_player("Carol")
    town.begin_night()
    with pytest.raises(InvalidTarget):
        town.submit_night_choice(RoleType.MAFIA, "Ghost")
    with pytest.raises(InvalidTarget) as exc_info:
        town.submit_night_choice(RoleType.MAFIA, "Carol")
    assert exc_info.value.target == "Carol"
    assert town.game_state.night_choices.mafia is None


def test_resubmission_replaces_choice(town):
    town.begin_night()
    town.submit_night_choice(RoleType.MAFIA, "Alice")
    town.submit_night_choice(RoleType.MAFIA, "Bob")
    town.resolve_night()
    assert alive(town, "Alice")
    assert not alive(town, "Bob")


def test_night_choices_outside_night_rejected(town):
    with pytest.raises(PhaseError):
        town.submit_night_choice(RoleType.MAFIA, "Alice")
    with pytest.raises(PhaseError):
        town.resolve_night()


def test_night_opens_lynch(town):
    town.begin_night()
    town.resolve_night()
    assert town.phase == GamePhase.DAY
    assert town.lynch_available


def test_new_round_clears_event_log(town):
    town.begin_night()
    submit_night(town, mafia="Alice")
    town.resolve_night()
    town.begin_night()
    assert town.event_log == []


def test_night_can_end_game(make_moderator):
    moderator = make_moderator({"Mia": RoleType.MAFIA, "Alice": RoleType.CIVILIAN})
    moderator.begin_night()
    submit_night(moderator, mafia="Alice")
    moderator.resolve_night()

    assert moderator.phase == GamePhase.GAME_OVER
    assert moderator.check_win() == GameResult.MAFIA_WINS
    assert not moderator.lynch_available
    with pytest.raises(PhaseError):
        moderator.begin_night()


@pytest.fixture
def grandma_town(make_moderator):
    return make_moderator({
        "Mia": RoleType.MAFIA,
        "Max": RoleType.MAFIA,
        "Moe": RoleType.MAFIA,
        "Gran": RoleType.GRANDMA_WITH_A_SHOTGUN,
        "Doc": RoleType.DOCTOR,
        "Bart": RoleType.BARMAN,
        "Alice": RoleType.CIVILIAN,
    })


def test_grandma_shoots_one_mafia(grandma_town):
    grandma_town.begin_night()
    submit_night(grandma_town, mafia="Gran")
    events = grandma_town.resolve_night()

    assert alive(grandma_town, "Gran")
    dead_mafia = [name for name in ("Mia", "Max", "Moe") if not alive(grandma_town, name)]
    assert len(dead_mafia) == 1
    assert f"{dead_mafia[0]} has died" in events
    assert "Gran fired back at the Mafia" in events


def test_grandma_target_drawn_from_game_rng(grandma_town):
    grandma_town.begin_night()
    submit_night(grandma_town, mafia="Gran")
    with patch.object(grandma_town.game_state.rng, "choice", side_effect=lambda seq: seq[-1]) as mock_choice:
        grandma_town.resolve_night()

    candidates = mock_choice.call_args[0][0]
    assert [p.name for p in candidates] == ["Mia", "Max", "Moe"]
    assert not alive(grandma_town, "Moe")


def test_grandma_victim_saved_by_doctor(grandma_town):
    grandma_town.begin_night()
    submit_night(grandma_town, mafia="Gran", doctor="Max")
    with patch.object(grandma_town.game_state.rng, "choice", side_effect=lambda seq: seq[1]):
        grandma_town.resolve_night()

    assert all(alive(grandma_town, name) for name in ("Mia", "Max", "Moe", "Gran"))


def test_inhibited_grandma_dies(grandma_town):
    grandma_town.begin_night()
    submit_night(grandma_town, mafia="Gran", barman="Gran")
    events = grandma_town.resolve_night()

    assert not alive(grandma_town, "Gran")
    assert "Grandma with a Shotgun (Gran) was inhibited by the Barman" in events
    assert all(alive(grandma_town, name) for name in ("Mia", "Max", "Moe"))


def test_grandma_treated_by_doctor_still_fires(grandma_town):
    grandma_town.begin_night()
    submit_night(grandma_town, mafia="Gran", doctor="Gran")
    grandma_town.resolve_night()

    assert alive(grandma_town, "Gran")
    assert len(grandma_town.game_state.get_mafia_players()) == 2
