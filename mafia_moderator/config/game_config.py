"""
Game configuration and constants.
"""

from dataclasses import dataclass, field
from typing import Optional, List


@dataclass
class GameConfig:
    """Configuration for game parameters."""

    # Role setup
    num_mafia: int = 2
    total_players: int = 8
    additional_roles: List[str] = field(default_factory=lambda: [
        "Doctor", "Serial Killer", "Lawyer", "Barman", "Cupid",
    ])  # Role names, one holder each
    player_names: Optional[List[str]] = field(default=None)  # Defaults to "Player 1".."Player N"

    # Game settings
    max_rounds: int = 20  # Safety limit on the number of nights
    random_seed: Optional[int] = None  # Seeds role shuffle and Grandma's counter-kill

    # Judge announcements
    use_judge_announcements: bool = True

    # Agent settings
    agent_type: str = "dummy_agent"  # Options: "dummy_agent" or "scripted_agent"
    script_path: Optional[str] = None  # YAML script or recorded run directory for scripted_agent

    # Run recording
    record_runs: bool = True
    runs_dir: str = "runs"

    def get_player_names(self) -> List[str]:
        """Player names in entry order."""
        if self.player_names:
            return list(self.player_names)
        return [f"Player {i}" for i in range(1, self.total_players + 1)]


# Default configuration instance
default_config = GameConfig()
