"""
Judge/Moderator system for rule enforcement and announcements.
"""

from typing import List, Optional, Sequence, Tuple

from .game_engine import GameState, GamePhase, GameResult, describe_result
from .roles import CUPID_ROUND, RoleType, night_roles_for_round
from .exceptions import InvalidTarget, PhaseError, RoleNotActionable
from ..config.game_config import GameConfig, default_config


class Judge:
    """Judge/Moderator that enforces rules and narrates the game."""

    def __init__(self, game_state: GameState, config: GameConfig = default_config):
        self.game_state = game_state
        self.config = config
        self.announcements: List[str] = []

    def announce(self, message: str) -> None:
        """Make a judge announcement."""
        if self.config.use_judge_announcements:
            self.announcements.append(message)
            print(f"[JUDGE] {message}")

    def start_night(self) -> None:
        """Announce night phase start."""
        self.game_state.start_night()
        self.announce(f"Night falls. Round {self.game_state.round_number} begins.")

    def start_day(self) -> GameResult:
        """Announce day phase start and the game result if it is over."""
        result = self.game_state.start_day()
        alive_players = self.game_state.roster.alive_names()
        self.announce(f"Morning has come. Players alive: {alive_players}")
        if result.is_over:
            self.announce(f"GAME OVER: {describe_result(result)}")
        return result

    def require_phase(self, operation: str, *phases: GamePhase) -> None:
        """Raise PhaseError unless the game is in one of the given phases."""
        if self.game_state.phase not in phases:
            raise PhaseError(operation, self.game_state.phase.value)

    def eligible_night_roles(self) -> List[RoleType]:
        """
        Roles that wake up this round, in wake-up order.
        A role is skipped when no living player holds it.
        """
        roster = self.game_state.roster
        return [
            role_type for role_type in night_roles_for_round(self.game_state.round_number)
            if roster.has_living(role_type)
        ]

    def validate_role(self, role_type: RoleType) -> None:
        if role_type not in self.eligible_night_roles():
            raise RoleNotActionable(role_type.value, self.game_state.round_number)

    def validate_target(self, target: Optional[str], action: str) -> Optional[str]:
        """Check that a target is a living player. None (no choice) is always allowed."""
        if target is None:
            return None
        if not self.game_state.roster.is_alive(target):
            raise InvalidTarget(target, action)
        return target

    def validate_lovers(self, targets: Optional[Sequence[str]]) -> Optional[Tuple[str, str]]:
        """Cupid links exactly two distinct living players, or nobody."""
        if targets is None or len(targets) == 0:
            return None
        if isinstance(targets, str) or len(targets) != 2 or targets[0] == targets[1]:
            raise InvalidTarget(
                str(targets), "Cupid",
                message=f"Cupid must link two different players, got {targets!r}"
            )
        first, second = targets
        self.validate_target(first, "Cupid")
        self.validate_target(second, "Cupid")
        return first, second

    def is_cupid_round(self) -> bool:
        return self.game_state.round_number == CUPID_ROUND
