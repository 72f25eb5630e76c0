"""
Night phase handler: collects role choices and resolves attacks,
protections, inhibition and Cupid's link.
"""

from typing import List, Optional, Sequence, Union, TYPE_CHECKING
from ..core import GameState, GamePhase, GameResult, Judge, RoleType, LYNCH_START_ROUND
from ..core.roles import INHIBITABLE_ROLES

if TYPE_CHECKING:
    from ..recording.event_emitter import EventEmitter


NightTarget = Union[None, str, Sequence[str]]


class NightPhaseHandler:
    """Handles night phase operations for one round at a time."""

    def __init__(self, game_state: GameState, judge: Judge, event_emitter: Optional['EventEmitter'] = None):
        self.game_state = game_state
        self.judge = judge
        self.event_emitter = event_emitter
        self._submitted: List[RoleType] = []

    def start_night(self) -> List[RoleType]:
        """Begin a new round. Returns the roles that wake up, in order."""
        self.judge.start_night()
        self._submitted = []
        return self.eligible_roles()

    def eligible_roles(self) -> List[RoleType]:
        return self.judge.eligible_night_roles()

    def next_role(self) -> Optional[RoleType]:
        """First role in wake-up order that has not submitted a choice yet."""
        for role_type in self.eligible_roles():
            if role_type not in self._submitted:
                return role_type
        return None

    def submit_choice(self, role_type: RoleType, target: NightTarget) -> None:
        """
        Record a role's choice for tonight. Submitting again replaces the choice.
        Cupid's choice is a pair of player names.
        """
        self.judge.require_phase("submit a night choice", GamePhase.NIGHT)
        self.judge.validate_role(role_type)

        if role_type == RoleType.CUPID:
            value = self.judge.validate_lovers(target)
        else:
            if target is not None and not isinstance(target, str):
                raise TypeError(f"{role_type.value} chooses a single player name")
            value = self.judge.validate_target(target, role_type.value)

        self.game_state.night_choices.set(role_type, value)
        if role_type not in self._submitted:
            self._submitted.append(role_type)

        print(f"[{role_type.value.upper()}] chooses {self._describe(value)}.")
        if self.event_emitter:
            self.event_emitter.emit_night_choice(
                role_type.value,
                list(value) if isinstance(value, tuple) else value,
                self.game_state.round_number
            )

    @staticmethod
    def _describe(value) -> str:
        if value is None:
            return "no one"
        if isinstance(value, tuple):
            return " and ".join(value)
        return value

    def resolve_night(self) -> List[str]:
        """
        Resolve all submitted choices for this round.
        Returns the round's event log; the roster is updated in place.
        """
        self.judge.require_phase("resolve the night", GamePhase.NIGHT)
        state = self.game_state
        choices = state.night_choices

        state.log_event("Night Events:")
        self._narrate_choices()

        inhibited_role = self._apply_inhibition()
        self._apply_cupid_link()

        attacked_by_mafia = choices.mafia
        treated_by_doctor = choices.doctor
        attacked_by_killer = choices.serial_killer
        state.lawyer_protection = choices.lawyer

        if attacked_by_mafia is not None:
            self._resolve_mafia_attack(attacked_by_mafia, treated_by_doctor, inhibited_role)

        if attacked_by_killer is not None and attacked_by_killer != treated_by_doctor:
            state.eliminate_player(attacked_by_killer, treated_by_doctor, reason="serial killer")

        # One treatment cannot absorb two attacks on the same player
        if (attacked_by_mafia is not None
                and attacked_by_mafia == attacked_by_killer
                and attacked_by_killer == treated_by_doctor):
            state.eliminate_player(attacked_by_mafia, treated_by_doctor, reason="double attack")

        state.log_event("")

        if self.event_emitter:
            self.event_emitter.emit_night_resolved(
                state.round_number, list(state.event_log), state.roster.alive_names()
            )

        result = self.judge.start_day()
        if result == GameResult.CONTINUE and state.round_number >= LYNCH_START_ROUND:
            state.lynch_available = True
        return list(state.event_log)

    def _narrate_choices(self) -> None:
        """Describe what each role chose, before inhibition is applied."""
        choices = self.game_state.night_choices
        if choices.mafia is not None:
            self.game_state.log_event(f"{choices.mafia} was attacked by the Mafia")
        if choices.doctor is not None:
            self.game_state.log_event(f"{choices.doctor} was treated by the Doctor")
        if choices.serial_killer is not None:
            self.game_state.log_event(f"{choices.serial_killer} was attacked by the Serial Killer")
        if choices.lawyer is not None:
            self.game_state.log_event(f"{choices.lawyer} is protected from lynching by the Lawyer")

    def _apply_inhibition(self) -> Optional[RoleType]:
        """
        Cancel the night choice of the role the Barman visited.
        Returns the visited player's role, whether or not it had a choice to cancel.
        """
        state = self.game_state
        inhibited_player = state.night_choices.barman
        if inhibited_player is None:
            return None

        inhibited_role = state.roster.role_of(inhibited_player)
        if inhibited_role is None or inhibited_role == RoleType.CIVILIAN:
            return inhibited_role

        state.log_event(f"{inhibited_role.value} ({inhibited_player}) was inhibited by the Barman")
        self.judge.announce(f"The Barman kept {inhibited_player} busy tonight.")
        if inhibited_role in INHIBITABLE_ROLES:
            state.night_choices.clear(inhibited_role)
        return inhibited_role

    def _apply_cupid_link(self) -> None:
        state = self.game_state
        if not self.judge.is_cupid_round() or state.night_choices.cupid is None:
            return
        state.lovers = state.night_choices.cupid
        first, second = state.lovers
        state.log_event(f"Cupid linked: {first} and {second}")

    def _resolve_mafia_attack(self, target: str, treated_by_doctor: Optional[str],
                              inhibited_role: Optional[RoleType]) -> None:
        state = self.game_state
        target_role = state.roster.role_of(target)

        if (target_role == RoleType.GRANDMA_WITH_A_SHOTGUN
                and inhibited_role != RoleType.GRANDMA_WITH_A_SHOTGUN):
            alive_mafia = state.roster.players_with_role(RoleType.MAFIA)
            if not alive_mafia:
                return
            shot = state.rng.choice(alive_mafia).name
            state.log_event(f"{target} fired back at the Mafia")
            if shot != treated_by_doctor:
                state.eliminate_player(shot, treated_by_doctor, reason="grandma")
        elif target != treated_by_doctor:
            state.eliminate_player(target, treated_by_doctor, reason="mafia")
