"""
Per-round record of night choices, one slot per actionable role.
"""

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from .roles import RoleType


@dataclass
class NightChoices:
    """What each role chose tonight. None means no choice."""
    mafia: Optional[str] = None
    doctor: Optional[str] = None
    serial_killer: Optional[str] = None
    lawyer: Optional[str] = None
    barman: Optional[str] = None
    cupid: Optional[Tuple[str, str]] = None

    _SLOTS = {
        RoleType.MAFIA: "mafia",
        RoleType.DOCTOR: "doctor",
        RoleType.SERIAL_KILLER: "serial_killer",
        RoleType.LAWYER: "lawyer",
        RoleType.BARMAN: "barman",
        RoleType.CUPID: "cupid",
    }

    @classmethod
    def has_slot(cls, role_type: RoleType) -> bool:
        return role_type in cls._SLOTS

    def get(self, role_type: RoleType):
        return getattr(self, self._SLOTS[role_type])

    def set(self, role_type: RoleType, value) -> None:
        setattr(self, self._SLOTS[role_type], value)

    def clear(self, role_type: RoleType) -> None:
        """Drop a role's choice, as if the role never acted."""
        self.set(role_type, None)

    def to_dict(self) -> Dict[str, object]:
        return {
            role_type.value: list(value) if isinstance(value, tuple) else value
            for role_type, value in ((r, self.get(r)) for r in self._SLOTS)
            if value is not None
        }
