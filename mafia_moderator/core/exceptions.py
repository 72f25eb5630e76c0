"""
Exceptions raised by the moderator engine.
"""

from typing import Optional


class ModeratorError(Exception):
    """Base class for all engine errors."""


class ConfigError(ModeratorError):
    """Raised when the role configuration cannot produce a game."""

    def __init__(self, num_mafia: int, num_additional: int, total_players: int, message: str = ""):
        self.num_mafia = num_mafia
        self.num_additional = num_additional
        self.total_players = total_players
        self.message = message or (
            f"{num_mafia} Mafia and {num_additional} additional roles "
            f"do not fit into {total_players} players"
        )
        super().__init__(self.message)


class InvalidTarget(ModeratorError):
    """Raised when a night or lynch choice names an unknown or dead player."""

    def __init__(self, target: Optional[str], action: str, message: str = ""):
        self.target = target
        self.action = action
        self.message = message or f"Invalid target '{target}' for {action}"
        super().__init__(self.message)


class DuplicateName(ModeratorError):
    """Raised when a player enters a name that is already taken."""

    def __init__(self, name: str):
        self.name = name
        self.message = f"Player name '{name}' is already taken"
        super().__init__(self.message)


class InvalidPlayerName(ModeratorError):
    """Raised when a player enters an empty name."""

    def __init__(self, name: str):
        self.name = name
        self.message = "Player name must not be empty"
        super().__init__(self.message)


class RoleNotActionable(ModeratorError):
    """Raised when a choice is submitted for a role that cannot act this round."""

    def __init__(self, role_name: str, round_number: int):
        self.role_name = role_name
        self.round_number = round_number
        self.message = f"{role_name} cannot act in round {round_number}"
        super().__init__(self.message)


class PhaseError(ModeratorError):
    """Raised when an operation is called in the wrong game phase."""

    def __init__(self, operation: str, phase: str):
        self.operation = operation
        self.phase = phase
        self.message = f"Cannot {operation} during phase '{phase}'"
        super().__init__(self.message)
