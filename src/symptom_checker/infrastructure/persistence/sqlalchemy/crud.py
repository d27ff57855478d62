# src/symptom_checker/infrastructure/persistence/sqlalchemy/crud.py
from sqlalchemy.orm import Session

from symptom_checker.infrastructure.persistence.sqlalchemy.models import QueryRecord


def add_query(db: Session, symptoms: str, analysis: str) -> int:
    record = QueryRecord(symptoms=symptoms, analysis=analysis)
    db.add(record)
    db.commit()
    return record.id


def get_recent_queries(db: Session, limit: int = 10):
    return (
        db.query(QueryRecord)
        .order_by(QueryRecord.created_at.desc(), QueryRecord.id.desc())
        .limit(limit)
        .all()
    )
