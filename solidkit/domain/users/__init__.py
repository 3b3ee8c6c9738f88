"""Users domain - Dependency Inversion lesson."""

from .record_store import MySqlRecordStore, PostgresRecordStore, RecordStore
from .user_creator import TaggedUserCreator, UserCreator

__all__ = [
    "RecordStore",
    "MySqlRecordStore",
    "PostgresRecordStore",
    "UserCreator",
    "TaggedUserCreator",
]
