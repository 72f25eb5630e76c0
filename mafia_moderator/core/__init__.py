"""
Core game engine components: game state, players, roles, and rule enforcement.
"""

from .game_engine import GameState, GamePhase, GameResult, describe_result, evaluate_winner
from .player import Player, PlayerStatus
from .roster import Roster
from .roles import (
    Role, RoleType, Team, ADDITIONAL_ROLES, CUPID_ROUND, LYNCH_START_ROUND,
    NIGHT_ROLE_ORDER, create_role, get_role_distribution, night_roles_for_round, parse_roles,
)
from .choices import NightChoices
from .distribution import RoleDistributor
from .judge import Judge
from .exceptions import (
    ModeratorError, ConfigError, InvalidTarget, DuplicateName,
    InvalidPlayerName, RoleNotActionable, PhaseError,
)

__all__ = [
    'GameState',
    'GamePhase',
    'GameResult',
    'evaluate_winner',
    'describe_result',
    'Player',
    'PlayerStatus',
    'Roster',
    'Role',
    'RoleType',
    'Team',
    'ADDITIONAL_ROLES',
    'CUPID_ROUND',
    'LYNCH_START_ROUND',
    'NIGHT_ROLE_ORDER',
    'create_role',
    'get_role_distribution',
    'night_roles_for_round',
    'parse_roles',
    'NightChoices',
    'RoleDistributor',
    'Judge',
    'ModeratorError',
    'ConfigError',
    'InvalidTarget',
    'DuplicateName',
    'InvalidPlayerName',
    'RoleNotActionable',
    'PhaseError',
]
