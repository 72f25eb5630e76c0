"""
A participant: fixed name and secret role, alive until eliminated once.
"""

from dataclasses import dataclass
from enum import Enum

from .roles import Role, RoleType, Team


class PlayerStatus(Enum):
    ALIVE = "alive"
    ELIMINATED = "eliminated"


@dataclass
class Player:
    name: str
    role: Role
    status: PlayerStatus = PlayerStatus.ALIVE

    def __str__(self) -> str:
        return f"{self.name} ({self.role_type.value})"

    @property
    def role_type(self) -> RoleType:
        return self.role.role_type

    @property
    def team(self) -> Team:
        return self.role.team

    @property
    def is_alive(self) -> bool:
        return self.status is PlayerStatus.ALIVE

    def eliminate(self) -> bool:
        """Flip to eliminated. False (and no change) if already dead."""
        if self.status is PlayerStatus.ELIMINATED:
            return False
        self.status = PlayerStatus.ELIMINATED
        return True

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "role": self.role_type.value,
            "team": self.team.value,
            "is_alive": self.is_alive,
        }
