"""
Role distribution: builds the shuffled role pool and hands roles out
as players enter their names.
"""

import random
from typing import Iterable, List, Set

from .roles import ADDITIONAL_ROLES, Role, RoleType, create_role, get_role_distribution
from .roster import Roster
from .exceptions import ConfigError


class RoleDistributor:
    """Hands out one pooled role per entered player, in shuffled order."""

    def __init__(self, num_mafia: int, additional_roles: Iterable[RoleType],
                 total_players: int, rng: random.Random):
        requested = set(additional_roles)
        self._check_additional(num_mafia, requested, total_players)
        enabled = [r for r in ADDITIONAL_ROLES if r in requested]
        self._validate(num_mafia, enabled, total_players)

        self.num_mafia = num_mafia
        self.additional_roles = enabled
        self.total_players = total_players

        self.pool: List[RoleType] = get_role_distribution(num_mafia, enabled, total_players)
        rng.shuffle(self.pool)
        self._next_index = 0

    @staticmethod
    def _check_additional(num_mafia: int, requested: Set[RoleType], total_players: int) -> None:
        """Only the special roles can be enabled; Mafia and Civilians are counted separately."""
        unknown = requested - set(ADDITIONAL_ROLES)
        if unknown:
            names = ", ".join(sorted(r.value for r in unknown))
            raise ConfigError(
                num_mafia, len(requested), total_players,
                message=f"Roles cannot be enabled as additional roles: {names}"
            )

    @staticmethod
    def _validate(num_mafia: int, enabled: List[RoleType], total_players: int) -> None:
        if total_players < 1 or num_mafia < 1:
            raise ConfigError(
                num_mafia, len(enabled), total_players,
                message="A game needs at least one player and one Mafia"
            )
        if num_mafia + len(enabled) > total_players:
            raise ConfigError(num_mafia, len(enabled), total_players)

    @property
    def remaining(self) -> int:
        return self.total_players - self._next_index

    @property
    def is_complete(self) -> bool:
        return self.remaining == 0

    def enter_player(self, roster: Roster, name: str) -> Role:
        """
        Bind the next pooled role to a newly entered player.
        The pool only advances if the name is accepted by the roster.
        """
        if self.is_complete:
            raise ConfigError(
                self.num_mafia, len(self.additional_roles), self.total_players,
                message=f"All {self.total_players} players have already entered"
            )
        role = create_role(self.pool[self._next_index])
        roster.add_player(name, role)
        self._next_index += 1
        return role
