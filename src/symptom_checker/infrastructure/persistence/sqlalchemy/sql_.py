# src/symptom_checker/infrastructure/persistence/sqlalchemy/sql_.py

from datetime import datetime, timezone
from typing import Optional, Sequence

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from symptom_checker.core.domain.entities import Query
from symptom_checker.core.exceptions import StorageError
from symptom_checker.core.ports import QueryRepoPort
from symptom_checker.infrastructure.persistence.sqlalchemy.crud import (
    add_query,
    get_recent_queries,
)


def _as_utc(value: Optional[datetime]) -> Optional[datetime]:
    # SQLite CURRENT_TIMESTAMP is UTC but comes back naive
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class QuerySqlStorage(QueryRepoPort):
    def __init__(self, session_factory: sessionmaker):
        self._session_factory = session_factory

    def insert(self, symptoms: str, analysis: str) -> int:
        session = self._session_factory()
        try:
            return add_query(session, symptoms, analysis)
        except SQLAlchemyError as err:
            session.rollback()
            raise StorageError(f"Could not store query: {err}") from err
        finally:
            session.close()

    def list_recent(self, limit: int) -> Sequence[Query]:
        session = self._session_factory()
        try:
            rows = get_recent_queries(session, limit=limit)
            return [
                Query(
                    id=r.id,
                    symptoms=r.symptoms,
                    analysis=r.analysis,
                    created_at=_as_utc(r.created_at),
                )
                for r in rows
            ]
        except SQLAlchemyError as err:
            raise StorageError(f"Could not read query history: {err}") from err
        finally:
            session.close()

    def ping(self) -> None:
        session = self._session_factory()
        try:
            session.execute(text("SELECT 1"))
        except SQLAlchemyError as err:
            raise StorageError(f"Database unreachable: {err}") from err
        finally:
            session.close()
