"""
Lynch handler: the community's daytime vote, blocked by the Lawyer's protection.
"""

from typing import List, Optional, TYPE_CHECKING
from ..core import GameState, GamePhase, Judge, PhaseError

if TYPE_CHECKING:
    from ..recording.event_emitter import EventEmitter


class LynchHandler:
    """Handles the lynch vote that follows a resolved night (round 2 onward)."""

    def __init__(self, game_state: GameState, judge: Judge, event_emitter: Optional['EventEmitter'] = None):
        self.game_state = game_state
        self.judge = judge
        self.event_emitter = event_emitter

    @property
    def is_available(self) -> bool:
        return self.game_state.lynch_available

    def submit_vote(self, target: Optional[str]) -> None:
        """Record the community's nominee, or None for no lynch."""
        self.judge.require_phase("submit a lynch vote", GamePhase.DAY, GamePhase.LYNCH)
        if not self.is_available:
            raise PhaseError("submit a lynch vote", self.game_state.phase.value)

        self.game_state.lynch_target = self.judge.validate_target(target, "lynch")
        if self.game_state.phase == GamePhase.DAY:
            self.game_state.start_lynch()

        self.judge.announce(f"The community chose: {target if target else 'no one'}")
        if self.event_emitter:
            self.event_emitter.emit_lynch_vote(target, self.game_state.round_number)

    def resolve_lynch(self) -> List[str]:
        """
        Lynch the nominee unless the Lawyer protected them.
        Appends to this round's event log and returns it.
        """
        self.judge.require_phase("resolve the lynch", GamePhase.DAY, GamePhase.LYNCH)
        if not self.is_available:
            raise PhaseError("resolve the lynch", self.game_state.phase.value)

        state = self.game_state
        nominee = state.lynch_target
        state.log_event("Lynch Events:")

        if nominee is None:
            state.log_event("No one was lynched")
        elif nominee == state.lawyer_protection:
            state.log_event(f"{nominee} could not be lynched")
        else:
            # A lynched lover's partner is never spared by the Doctor
            state.eliminate_player(nominee, treated_by_doctor=None, reason="lynch")

        state.lynch_available = False
        if self.event_emitter:
            self.event_emitter.emit_lynch_resolved(
                nominee, state.round_number, list(state.event_log), state.roster.alive_names()
            )

        self.judge.start_day()
        return list(state.event_log)
