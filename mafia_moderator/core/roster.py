"""
Roster: the authoritative, ordered list of players.
"""

from typing import Iterator, List, Optional

from .player import Player
from .roles import Role, RoleType, Team
from .exceptions import DuplicateName, InvalidPlayerName


class Roster:
    """Players in entry order. Names are unique."""

    def __init__(self, players: Optional[List[Player]] = None):
        self._players: List[Player] = []
        for player in players or []:
            self.add_player(player.name, player.role)

    def __iter__(self) -> Iterator[Player]:
        return iter(self._players)

    def __len__(self) -> int:
        return len(self._players)

    def __contains__(self, name: object) -> bool:
        return self.get_player(name) is not None if isinstance(name, str) else False

    @property
    def players(self) -> List[Player]:
        return list(self._players)

    def add_player(self, name: str, role: Role) -> Player:
        """Append a player. Raises InvalidPlayerName or DuplicateName."""
        if not name or not name.strip():
            raise InvalidPlayerName(name)
        name = name.strip()
        if self.get_player(name) is not None:
            raise DuplicateName(name)
        player = Player(name=name, role=role)
        self._players.append(player)
        return player

    def get_player(self, name: str) -> Optional[Player]:
        """Get player by name."""
        for player in self._players:
            if player.name == name:
                return player
        return None

    def get_alive_players(self) -> List[Player]:
        """Get all alive players."""
        return [p for p in self._players if p.is_alive]

    def alive_names(self) -> List[str]:
        return [p.name for p in self._players if p.is_alive]

    def is_alive(self, name: Optional[str]) -> bool:
        player = self.get_player(name) if name else None
        return player is not None and player.is_alive

    def players_with_role(self, role_type: RoleType, alive_only: bool = True) -> List[Player]:
        return [
            p for p in self._players
            if p.role_type == role_type and (p.is_alive or not alive_only)
        ]

    def has_living(self, role_type: RoleType) -> bool:
        """Check if at least one living player holds the role."""
        return bool(self.players_with_role(role_type))

    def role_of(self, name: str) -> Optional[RoleType]:
        player = self.get_player(name)
        return player.role_type if player else None

    def get_team_players(self, team: Team) -> List[Player]:
        """Get all alive players of a team."""
        return [p for p in self.get_alive_players() if p.role.team == team]

    def to_list(self) -> List[dict]:
        return [p.to_dict() for p in self._players]
