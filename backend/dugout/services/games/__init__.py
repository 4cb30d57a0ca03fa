"""Game domain services: the per-game session state machines.

This package contains pure domain logic that the orchestrator drives,
keeping transport concerns separated from core game mechanics.
"""
from .base import (
    Applied,
    AppliedAndAdvanced,
    GameOver,
    GameSession,
    GameSettings,
    Outcome,
    Rejected,
)
from .grid import GridSession
from .quiz import QuizSession
from .speedround import SpeedRoundSession

SESSION_TYPES = {
    'quiz': QuizSession,
    'grid': GridSession,
    'speedround': SpeedRoundSession,
}


def load_content(provider, game_type: str, settings: GameSettings):
    """One content round trip for a game about to start."""
    if game_type == 'quiz':
        return provider.load(game_type, count=settings.quiz_question_count)
    return provider.load(game_type)


def build_session(game_type: str, content, settings: GameSettings) -> GameSession:
    return SESSION_TYPES[game_type](content, settings)


def start_session(room, provider, settings: GameSettings) -> GameSession:
    """Fetch content for the room's game type and build its session."""
    content = load_content(provider, room.game_type, settings)
    return build_session(room.game_type, content, settings)
