from backend.engine.moveresolver.resolver import MoveEffect, MoveResolver

__all__ = ["MoveEffect", "MoveResolver"]
