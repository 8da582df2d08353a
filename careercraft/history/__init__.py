from .storage import KeyValueStore, MemoryKeyValueStore, SqliteKeyValueStore
from .store import HISTORY_KEY, clear_history, get_history, get_storage, log_history

__all__ = [
    "HISTORY_KEY",
    "KeyValueStore",
    "MemoryKeyValueStore",
    "SqliteKeyValueStore",
    "clear_history",
    "get_history",
    "get_storage",
    "log_history",
]
