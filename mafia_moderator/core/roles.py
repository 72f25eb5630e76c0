"""
Role definitions and abilities for the Mafia game.
"""

from enum import Enum
from typing import Iterable, List
from dataclasses import dataclass


class Team(Enum):
    """Faction a role wins with."""
    MAFIA = "mafia"
    SERIAL_KILLER = "serial_killer"
    TOWN = "town"


class RoleType(Enum):
    """Player role types."""
    MAFIA = "Mafia"
    SERIAL_KILLER = "Serial Killer"
    DOCTOR = "Doctor"
    LAWYER = "Lawyer"
    BARMAN = "Barman"
    CUPID = "Cupid"
    CIVILIAN = "Civilian"
    GRANDMA_WITH_A_SHOTGUN = "Grandma with a Shotgun"

    @property
    def team(self) -> Team:
        """Faction tag used by the win evaluator."""
        if self == RoleType.MAFIA:
            return Team.MAFIA
        if self == RoleType.SERIAL_KILLER:
            return Team.SERIAL_KILLER
        return Team.TOWN

    @classmethod
    def from_name(cls, name: str) -> "RoleType":
        """
        Parse a role from its display name or enum name.
        Accepts "Serial Killer", "serial_killer", "SERIAL_KILLER", "SerialKiller".
        """
        key = name.strip().replace(" ", "").replace("_", "").lower()
        for role_type in cls:
            if key in (role_type.value.replace(" ", "").lower(),
                       role_type.name.replace("_", "").lower()):
                return role_type
        raise ValueError(f"Unknown role: {name}")


# Order in which actionable roles are woken up during the night.
NIGHT_ROLE_ORDER = [
    RoleType.MAFIA,
    RoleType.DOCTOR,
    RoleType.SERIAL_KILLER,
    RoleType.LAWYER,
    RoleType.BARMAN,
]

# Cupid wakes up once, on this round, after everyone else.
CUPID_ROUND = 2

# Lynching is allowed from this round on.
LYNCH_START_ROUND = 2

# Roles whose night choice the Barman can cancel.
INHIBITABLE_ROLES = frozenset({
    RoleType.MAFIA,
    RoleType.DOCTOR,
    RoleType.SERIAL_KILLER,
    RoleType.LAWYER,
})

# Roles that can be enabled on top of Mafia and Civilians (one holder each).
ADDITIONAL_ROLES = [
    RoleType.DOCTOR,
    RoleType.SERIAL_KILLER,
    RoleType.LAWYER,
    RoleType.BARMAN,
    RoleType.CUPID,
    RoleType.GRANDMA_WITH_A_SHOTGUN,
]


@dataclass(frozen=True)
class Role:
    """Represents a player's role in the game."""
    role_type: RoleType

    def __str__(self) -> str:
        return self.role_type.value

    @property
    def team(self) -> Team:
        return self.role_type.team

    @property
    def is_mafia(self) -> bool:
        """Check if role is part of mafia team."""
        return self.team == Team.MAFIA

    @property
    def is_serial_killer(self) -> bool:
        return self.team == Team.SERIAL_KILLER

    @property
    def is_town(self) -> bool:
        """Check if role is part of the town (civilian) team."""
        return self.team == Team.TOWN

    @property
    def has_night_action(self) -> bool:
        """Check if role makes a choice during the night."""
        return self.role_type in NIGHT_ROLE_ORDER or self.role_type == RoleType.CUPID

    @property
    def can_be_inhibited(self) -> bool:
        return self.role_type in INHIBITABLE_ROLES


def create_role(role_type: RoleType) -> Role:
    """Create a role with its team assignment."""
    return Role(role_type=role_type)


def get_role_distribution(num_mafia: int, additional_roles: Iterable[RoleType],
                          total_players: int) -> List[RoleType]:
    """
    Build the unshuffled role pool for a game.
    Returns num_mafia Mafia, one of each additional role, and Civilians for the rest.
    Count validation is the caller's job (see RoleDistributor).
    """
    pool = [RoleType.MAFIA] * num_mafia
    pool.extend(additional_roles)
    pool.extend([RoleType.CIVILIAN] * (total_players - len(pool)))
    return pool


def parse_roles(names: Iterable[str]) -> List[RoleType]:
    """Parse configured role names (e.g. from YAML) into role types."""
    return [RoleType.from_name(name) for name in names]


def night_roles_for_round(round_number: int) -> List[RoleType]:
    """Full wake-up order for a round, before filtering out dead or absent roles."""
    roles = list(NIGHT_ROLE_ORDER)
    if round_number == CUPID_ROUND:
        roles.append(RoleType.CUPID)
    return roles
