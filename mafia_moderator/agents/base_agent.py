"""
Base agent interface for whoever feeds the moderator its choices.
"""

from typing import List, Optional, Sequence, Union
from abc import ABC, abstractmethod
from dataclasses import dataclass

from ..core import GameState, GamePhase, Player, RoleType
from ..config.game_config import GameConfig, default_config


# A player name, a pair of names for Cupid, or None for no choice
NightChoice = Union[None, str, Sequence[str]]


@dataclass
class AgentContext:
    """What an agent may look at when asked for a choice."""
    game_state: GameState
    round_number: int
    current_phase: GamePhase
    alive_players: List[Player]
    acting_players: List[Player]  # Living holders of the role being asked; empty for the lynch

    @property
    def alive_names(self) -> List[str]:
        return [p.name for p in self.alive_players]


class BaseAgent(ABC):
    """
    Source of moderator input. The game loop asks it for each waking
    role's night choice in turn, then for the community's lynch nominee.
    """

    def __init__(self, config: GameConfig = default_config):
        self.config = config

    @abstractmethod
    def get_night_choice(self, role_type: RoleType, context: AgentContext) -> NightChoice:
        """Choice for the role being woken up."""

    @abstractmethod
    def get_lynch_vote(self, context: AgentContext) -> Optional[str]:
        """Name of the player to lynch, or None for no lynch."""

    def build_context(self, game_state: GameState, role_type: Optional[RoleType] = None) -> AgentContext:
        """Snapshot of the game for one decision; role_type is None for the lynch."""
        acting = game_state.roster.players_with_role(role_type) if role_type else []
        return AgentContext(
            game_state=game_state,
            round_number=game_state.round_number,
            current_phase=game_state.phase,
            alive_players=game_state.get_alive_players(),
            acting_players=acting,
        )
