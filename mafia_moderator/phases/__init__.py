"""
Phase handlers for night and lynch phases.
"""

from .night_phase import NightPhaseHandler
from .lynch import LynchHandler

__all__ = ['NightPhaseHandler', 'LynchHandler']
