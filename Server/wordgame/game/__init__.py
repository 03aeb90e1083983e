"""
Game Core Package

Pure guess evaluation and the per-round session state machine, independent
of the HTTP and WebSocket layers.
"""

from .evaluator import EvaluationMode, evaluate
from .session import GameSession

__all__ = ['EvaluationMode', 'evaluate', 'GameSession']
