from backend.engine.gameplay.game import (
    Intent,
    LevelSession,
    SessionEvent,
    SessionView,
    handle_intent,
)

__all__ = ["Intent", "LevelSession", "SessionEvent", "SessionView", "handle_intent"]
