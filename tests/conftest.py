"""
Pytest fixtures for moderator engine tests.
"""

import pytest
from typing import Dict

from mafia_moderator import Moderator
from mafia_moderator.core import GamePhase, Roster, RoleType, create_role
from mafia_moderator.core.player import Player
from mafia_moderator.config.game_config import GameConfig


@pytest.fixture
def game_config():
    """Test game configuration."""
    return GameConfig(
        random_seed=1234,
        use_judge_announcements=False,  # Disable for cleaner test output
        record_runs=False
    )


@pytest.fixture
def make_moderator(game_config):
    """
    Build a moderator whose roster is fixed instead of shuffled.

    Usage: make_moderator({"Alice": RoleType.MAFIA, "Bob": RoleType.DOCTOR})
    The game starts on the round 1 day, as if distribution just finished.
    """
    def _make(roles: Dict[str, RoleType], config: GameConfig = None) -> Moderator:
        moderator = Moderator(config or game_config)
        state = moderator.game_state
        state.roster = Roster([Player(name, create_role(role)) for name, role in roles.items()])
        state.round_number = 1
        state.phase = GamePhase.DAY
        return moderator
    return _make


@pytest.fixture
def town(make_moderator) -> Moderator:
    """
    A full town: two Mafia, every special role and one Civilian.
    """
    return make_moderator({
        "Mia": RoleType.MAFIA,
        "Max": RoleType.MAFIA,
        "Doc": RoleType.DOCTOR,
        "Sam": RoleType.SERIAL_KILLER,
        "Lou": RoleType.LAWYER,
        "Bart": RoleType.BARMAN,
        "Cupe": RoleType.CUPID,
        "Alice": RoleType.CIVILIAN,
        "Bob": RoleType.CIVILIAN,
        "Carol": RoleType.CIVILIAN,
    })


def submit_night(moderator: Moderator, **choices) -> None:
    """Submit choices by role keyword: mafia="Alice", cupid=("Bob", "Carol")."""
    for key, target in choices.items():
        moderator.submit_night_choice(RoleType[key.upper()], target)
