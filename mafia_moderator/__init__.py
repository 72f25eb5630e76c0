"""
Mafia moderator: role distribution and round resolution for the Mafia party game.
"""

from .moderator import Moderator

__all__ = ['Moderator']
