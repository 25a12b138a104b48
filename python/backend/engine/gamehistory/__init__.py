from backend.engine.gamehistory.history import HistoryManager, Snapshot

__all__ = ["HistoryManager", "Snapshot"]
