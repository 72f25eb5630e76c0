"""
Moderator: the engine's interface for whatever collects player input
(a screen, a CLI, or an automated agent).
"""

from typing import Iterable, List, Optional, Sequence, Union, TYPE_CHECKING

from .core import (
    GameState, GamePhase, GameResult, Judge, Role, RoleType, Roster,
    RoleDistributor, PhaseError,
)
from .phases import NightPhaseHandler, LynchHandler
from .config.game_config import GameConfig, default_config

if TYPE_CHECKING:
    from .recording.event_emitter import EventEmitter


class Moderator:
    """
    Drives one game through setup, nights, lynches and days.

    Typical flow::

        moderator.setup(2, {RoleType.DOCTOR}, 6)
        for name in names:
            moderator.enter_player(name)
        moderator.begin_night()
        moderator.submit_night_choice(RoleType.MAFIA, "Alice")
        events = moderator.resolve_night()
        if moderator.lynch_available:
            moderator.submit_lynch_vote("Bob")
            events = moderator.resolve_lynch()
        moderator.check_win()
    """

    def __init__(self, config: GameConfig = default_config, event_emitter: Optional['EventEmitter'] = None):
        self.config = config
        self.event_emitter = event_emitter
        self.game_state = GameState(random_seed=config.random_seed, event_emitter=event_emitter)
        self.judge = Judge(self.game_state, config)
        self.night_handler = NightPhaseHandler(self.game_state, self.judge, event_emitter=event_emitter)
        self.lynch_handler = LynchHandler(self.game_state, self.judge, event_emitter=event_emitter)
        self.distributor: Optional[RoleDistributor] = None

    @property
    def phase(self) -> GamePhase:
        return self.game_state.phase

    @property
    def round_number(self) -> int:
        return self.game_state.round_number

    @property
    def roster(self) -> Roster:
        return self.game_state.roster

    @property
    def event_log(self) -> List[str]:
        """This round's narration (a copy)."""
        return list(self.game_state.event_log)

    @property
    def lovers(self):
        return self.game_state.lovers

    @property
    def lynch_available(self) -> bool:
        return self.lynch_handler.is_available

    # Setup

    def setup(self, num_mafia: int, enabled_roles: Iterable[RoleType], total_players: int) -> Roster:
        """
        Build and shuffle the role pool. Raises ConfigError if the roles do not fit.
        May be repeated to change the configuration until the first player enters.
        """
        self.judge.require_phase("set up the game", GamePhase.SETUP)
        if len(self.roster):
            raise PhaseError("set up the game after players entered", self.phase.value)
        self.distributor = RoleDistributor(num_mafia, enabled_roles, total_players, self.game_state.rng)
        return self.roster

    def enter_player(self, name: str) -> Role:
        """
        Register the next player and return their secret role.
        Once everyone has entered, the game opens on the round 1 day.
        """
        self.judge.require_phase("enter a player", GamePhase.SETUP)
        if self.distributor is None:
            raise PhaseError("enter a player before setup", self.phase.value)

        role = self.distributor.enter_player(self.roster, name)
        if self.distributor.is_complete:
            if self.event_emitter:
                self.event_emitter.emit_game_start(self.roster.to_list(), self.game_state.random_seed)
            self.game_state.round_number = 1
            self.judge.start_day()
        return role

    # Night

    def begin_night(self) -> List[RoleType]:
        """
        Start the next round's night; an unused lynch is forfeited.
        Returns the roles that wake up, in order.
        """
        self.judge.require_phase("begin a night", GamePhase.DAY, GamePhase.LYNCH)
        return self.night_handler.start_night()

    def night_roles(self) -> List[RoleType]:
        self.judge.require_phase("list night roles", GamePhase.NIGHT)
        return self.night_handler.eligible_roles()

    def next_night_role(self) -> Optional[RoleType]:
        self.judge.require_phase("list night roles", GamePhase.NIGHT)
        return self.night_handler.next_role()

    def submit_night_choice(self, role: RoleType,
                            target: Union[None, str, Sequence[str]]) -> None:
        self.night_handler.submit_choice(role, target)

    def resolve_night(self) -> List[str]:
        return self.night_handler.resolve_night()

    # Lynch

    def submit_lynch_vote(self, target: Optional[str]) -> None:
        self.lynch_handler.submit_vote(target)

    def resolve_lynch(self) -> List[str]:
        return self.lynch_handler.resolve_lynch()

    # Day

    def check_win(self) -> GameResult:
        """Evaluate the win condition on the current roster."""
        if self.phase == GamePhase.SETUP:
            return GameResult.CONTINUE
        if self.phase == GamePhase.GAME_OVER:
            return self.game_state.result
        return self.game_state.check_win_condition()
