"""
Typed game events, each written through a RunRecorder.
"""

from typing import Dict, Any, Optional, List

from .run_recorder import RunRecorder


class EventEmitter:
    """Engine-facing event API. Without a recorder every emit is a no-op."""

    def __init__(self, run_recorder: Optional[RunRecorder] = None):
        self.run_recorder = run_recorder

    def _emit(self, event_type: str, data: Dict[str, Any]) -> None:
        if self.run_recorder:
            try:
                self.run_recorder.record_event(event_type, data)
            except OSError as e:
                # Recording is best effort
                print(f"Error recording event: {e}")

    def emit_game_start(self, players: List[Dict[str, Any]], random_seed: Optional[int]) -> None:
        """Emit game start event with the full roster."""
        self._emit("game_start", {
            "players": players,
            "random_seed": random_seed
        })

    def emit_phase_change(self, phase: str, round_number: int) -> None:
        """Emit phase change event."""
        self._emit("phase_change", {
            "phase": phase,
            "round": round_number
        })

    def emit_night_choice(self, role: str, target: Any, round_number: int) -> None:
        """Emit a role's night choice (target is a name, a pair of names, or None)."""
        self._emit("night_choice", {
            "role": role,
            "target": target,
            "round": round_number
        })

    def emit_night_resolved(self, round_number: int, events: List[str], alive: List[str]) -> None:
        self._emit("night_resolved", {
            "round": round_number,
            "events": events,
            "alive": alive
        })

    def emit_lynch_vote(self, target: Optional[str], round_number: int) -> None:
        """Emit the community's lynch nominee."""
        self._emit("lynch_vote", {
            "target": target,
            "round": round_number
        })

    def emit_lynch_resolved(self, target: Optional[str], round_number: int,
                            events: List[str], alive: List[str]) -> None:
        self._emit("lynch_resolved", {
            "target": target,
            "round": round_number,
            "events": events,
            "alive": alive
        })

    def emit_elimination(self, player: str, role: str, reason: str, round_number: int) -> None:
        """Emit player elimination event."""
        self._emit("elimination", {
            "player": player,
            "role": role,
            "reason": reason,
            "round": round_number
        })

    def emit_game_over(self, result: str, round_number: int, survivors: List[str]) -> None:
        """Emit game over event."""
        self._emit("game_over", {
            "result": result,
            "round": round_number,
            "survivors": survivors
        })
