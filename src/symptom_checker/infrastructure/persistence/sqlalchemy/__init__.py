from .base import Base, init_db, make_engine, make_session_factory
from .models import QueryRecord
from .sql_ import QuerySqlStorage

__all__ = [
    "Base",
    "init_db",
    "make_engine",
    "make_session_factory",
    "QueryRecord",
    "QuerySqlStorage",
]
