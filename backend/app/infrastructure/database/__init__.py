from .base import Base
from .session import engine, async_session_factory
from .models import RecordCollectionModel

__all__ = [
    "Base",
    "engine",
    "async_session_factory",
    "RecordCollectionModel",
]
