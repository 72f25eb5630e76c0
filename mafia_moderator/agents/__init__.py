"""
Agent implementations that supply the moderator's input.
"""

from .base_agent import BaseAgent, AgentContext
from .dummy_agent import DummyAgent
from .scripted_agent import ScriptedAgent

__all__ = ['BaseAgent', 'AgentContext', 'DummyAgent', 'ScriptedAgent']
