from infrastructure.repositories.in_memory_history_storage import InMemoryHistoryStorage
from infrastructure.repositories.json_history_storage import JsonHistoryStorage
from infrastructure.repositories.sqlite_history_storage import SqliteHistoryStorage

__all__ = [
    "InMemoryHistoryStorage",
    "JsonHistoryStorage",
    "SqliteHistoryStorage",
]
