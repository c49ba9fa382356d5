from habit_tracker.storage import init_db

__all__ = ["init_db"]
