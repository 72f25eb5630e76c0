"""
Run recording: game events written to runs/<run_name>/.
"""

from .event_emitter import EventEmitter
from .run_recorder import RunRecorder, summarize_events

__all__ = ['EventEmitter', 'RunRecorder', 'summarize_events']
