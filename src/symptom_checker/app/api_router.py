# src/symptom_checker/app/api_router.py

"""
FastAPI router for the application endpoints.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends

from symptom_checker.app.dependencies import get_symptom_service
from symptom_checker.core.services.symptoms import SymptomService
from symptom_checker.models import (
    CheckSymptomsRequest,
    CheckSymptomsResponse,
    ErrorResponse,
    HealthResponse,
    HistoryItem,
)

router = APIRouter()


# ---------------------- API Endpoints ---------------------- #


@router.post(
    "/check-symptoms",
    response_model=CheckSymptomsResponse,
    responses={400: {"model": ErrorResponse}},
)
def check_symptoms(
    payload: Optional[CheckSymptomsRequest] = None,
    service: SymptomService = Depends(get_symptom_service),
) -> CheckSymptomsResponse:
    result = service.check(payload.symptoms if payload else None)
    return CheckSymptomsResponse(output=result.output)


@router.get(
    "/history",
    response_model=List[HistoryItem],
    responses={500: {"model": ErrorResponse}},
)
def history(
    service: SymptomService = Depends(get_symptom_service),
) -> List[HistoryItem]:
    """
    Retrieves the most recent symptom checks, newest first.

    Returns:
        List[HistoryItem]: At most ``history_limit`` stored queries.
    """
    return [
        HistoryItem(
            id=entry.id,
            symptoms=entry.symptoms,
            analysis=entry.analysis,
            created_at=entry.created_at.isoformat() if entry.created_at else None,
        )
        for entry in service.history()
    ]


@router.get("/health", response_model=HealthResponse, response_model_exclude_none=True)
def health(service: SymptomService = Depends(get_symptom_service)) -> HealthResponse:
    report = service.health()
    return HealthResponse(
        status=report.status,
        database=report.database,
        huggingface=report.huggingface,
        error=report.error,
    )
