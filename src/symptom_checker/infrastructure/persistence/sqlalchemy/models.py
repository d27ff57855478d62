# src/symptom_checker/infrastructure/persistence/sqlalchemy/models.py

from sqlalchemy import Column, DateTime, Integer, Text, func

from symptom_checker.infrastructure.persistence.sqlalchemy.base import Base


class QueryRecord(Base):
    __tablename__ = "queries"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    symptoms = Column(Text, nullable=False)
    analysis = Column(Text, nullable=False)
    created_at = Column(DateTime, server_default=func.current_timestamp())
