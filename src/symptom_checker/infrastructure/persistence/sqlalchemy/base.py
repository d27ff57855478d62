# src/symptom_checker/infrastructure/persistence/sqlalchemy/base.py
import logging

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

logger = logging.getLogger(__name__)

Base = declarative_base()


def is_in_memory(url: str) -> bool:
    return url in ("sqlite://", "sqlite:///:memory:") or "mode=memory" in url


def make_engine(url: str) -> Engine:
    connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
    # every connection must share the same in-memory database
    pool_kwargs = {"poolclass": StaticPool} if is_in_memory(url) else {}
    return create_engine(url, connect_args=connect_args, **pool_kwargs)


def make_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(bind=engine, autocommit=False, autoflush=False)


def init_db(engine: Engine) -> None:
    """Create the tables if they don't exist yet."""
    from symptom_checker.infrastructure.persistence.sqlalchemy import (  # noqa: F401
        models,
    )

    logger.info(f"Ensuring database schema exists at {engine.url}...")
    Base.metadata.create_all(bind=engine)
