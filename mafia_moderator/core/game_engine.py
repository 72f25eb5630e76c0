"""
Core game engine managing game state, eliminations and win conditions.
"""

import random
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Tuple, TYPE_CHECKING
from dataclasses import dataclass, field

from .choices import NightChoices
from .player import Player
from .roles import Team
from .roster import Roster

if TYPE_CHECKING:
    from ..recording.event_emitter import EventEmitter


class GamePhase(Enum):
    """Current game phase."""
    SETUP = "setup"
    NIGHT = "night"
    LYNCH = "lynch"
    DAY = "day"
    GAME_OVER = "game_over"


class GameResult(Enum):
    """Outcome of a win evaluation."""
    CONTINUE = "continue"
    MAFIA_WINS = "mafia"
    SERIAL_KILLER_WINS = "serial_killer"
    TOWN_WINS = "town"
    NO_ONE_LEFT = "no_one"

    @property
    def is_over(self) -> bool:
        return self != GameResult.CONTINUE


_RESULT_WINNERS = {
    GameResult.MAFIA_WINS: "MAFIA",
    GameResult.SERIAL_KILLER_WINS: "SERIAL KILLER",
    GameResult.TOWN_WINS: "TOWNSMEN",
    GameResult.NO_ONE_LEFT: "NO ONE",
}


def describe_result(result: GameResult) -> str:
    """Human-readable game outcome, e.g. "MAFIA WON!"."""
    if not result.is_over:
        return "The game continues"
    return f"{_RESULT_WINNERS[result]} WON!"


def evaluate_winner(players: Iterable[Player]) -> GameResult:
    """
    Decide the game outcome from the living players' factions.
    A faction wins only when it is the only one left alive.
    """
    teams = {p.role.team for p in players if p.is_alive}
    if not teams:
        return GameResult.NO_ONE_LEFT
    if teams == {Team.MAFIA}:
        return GameResult.MAFIA_WINS
    if teams == {Team.SERIAL_KILLER}:
        return GameResult.SERIAL_KILLER_WINS
    if teams == {Team.TOWN}:
        return GameResult.TOWN_WINS
    return GameResult.CONTINUE


@dataclass
class GameState:
    """Complete game state."""
    phase: GamePhase = GamePhase.SETUP
    round_number: int = 0
    roster: Roster = field(default_factory=Roster)

    # Set once by Cupid, cleared for good when either lover dies
    lovers: Optional[Tuple[str, str]] = None

    # Per-round state, reset by start_night()
    night_choices: NightChoices = field(default_factory=NightChoices)
    event_log: List[str] = field(default_factory=list)
    lawyer_protection: Optional[str] = None
    lynch_target: Optional[str] = None
    lynch_available: bool = False

    # Game history
    action_log: List[Dict[str, Any]] = field(default_factory=list)

    result: GameResult = GameResult.CONTINUE
    random_seed: Optional[int] = None
    rng: random.Random = field(default=None, repr=False)

    # Event emitter for run recording (optional)
    event_emitter: Optional['EventEmitter'] = None

    def __post_init__(self):
        """Seed the single random source used for the whole game."""
        if self.rng is None:
            self.rng = random.Random(self.random_seed)

    @property
    def players(self) -> List[Player]:
        return self.roster.players

    def get_player(self, name: str) -> Optional[Player]:
        return self.roster.get_player(name)

    def get_alive_players(self) -> List[Player]:
        return self.roster.get_alive_players()

    def get_mafia_players(self) -> List[Player]:
        """Get all alive mafia players."""
        return self.roster.get_team_players(Team.MAFIA)

    def start_night(self) -> None:
        """Transition to night phase of the next round, resetting per-round state."""
        self.round_number += 1
        self.phase = GamePhase.NIGHT
        self.night_choices = NightChoices()
        self.event_log = []
        self.lawyer_protection = None
        self.lynch_target = None
        self.lynch_available = False
        self._log_action("night_start", {"round": self.round_number})
        self._emit_phase_change()

    def start_lynch(self) -> None:
        """Move from the day into the lynch vote."""
        self.phase = GamePhase.LYNCH
        self._log_action("lynch_start", {"round": self.round_number})
        self._emit_phase_change()

    def start_day(self) -> GameResult:
        """
        Transition to day phase and evaluate the win condition.
        Ends the game if a faction has won or no one is left.
        """
        self.phase = GamePhase.DAY
        self._log_action("day_start", {"round": self.round_number})
        self._emit_phase_change()
        result = self.check_win_condition()
        if result.is_over:
            self.end_game(result)
        return result

    def check_win_condition(self) -> GameResult:
        """Check if the game has ended."""
        return evaluate_winner(self.roster)

    def log_event(self, message: str) -> None:
        """Append a narration line to this round's event log."""
        self.event_log.append(message)

    def eliminate_player(self, name: str, treated_by_doctor: Optional[str] = None,
                         reason: str = "eliminated") -> bool:
        """
        Eliminate a player and, if they were a lover, their partner.

        The partner survives only if they are the player the Doctor treated.
        Eliminating a dead player is a no-op. Returns True if someone died.
        """
        player = self.roster.get_player(name)
        if player is None or not player.eliminate():
            return False

        self.log_event(f"{name} has died")
        self._log_action("player_eliminated", {
            "player": name,
            "role": player.role_type.value,
            "reason": reason,
        })
        if self.event_emitter:
            self.event_emitter.emit_elimination(name, player.role_type.value, reason, self.round_number)

        if self.lovers and name in self.lovers:
            partner = self.lovers[1] if self.lovers[0] == name else self.lovers[0]
            self.lovers = None
            if partner != treated_by_doctor:
                self.eliminate_player(partner, reason="lover")
        return True

    def end_game(self, result: GameResult) -> None:
        """End the game with a result."""
        self.phase = GamePhase.GAME_OVER
        self.result = result
        self.lynch_available = False
        self._log_action("game_over", {
            "result": result.value,
            "round": self.round_number,
        })
        if self.event_emitter:
            self.event_emitter.emit_game_over(result.value, self.round_number, self.roster.alive_names())

    def _log_action(self, action_type: str, data: Dict[str, Any]) -> None:
        """Log a game action."""
        self.action_log.append({
            "type": action_type,
            "phase": self.phase.value,
            "round": self.round_number,
            "data": data
        })

    def _emit_phase_change(self) -> None:
        if self.event_emitter:
            self.event_emitter.emit_phase_change(self.phase.value, self.round_number)

    def get_game_summary(self) -> Dict[str, Any]:
        """Get a summary of the current game state."""
        alive_players = self.get_alive_players()
        return {
            "phase": self.phase.value,
            "round": self.round_number,
            "alive_players": [p.name for p in alive_players],
            "alive_mafia": len(self.get_mafia_players()),
            "lovers": list(self.lovers) if self.lovers else None,
            "result": self.result.value,
        }
