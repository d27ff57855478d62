# src/symptom_checker/models.py
from typing import Optional

from pydantic import BaseModel, Field


# API
class CheckSymptomsRequest(BaseModel):
    """Request schema for the `/check-symptoms` endpoint."""

    symptoms: Optional[str] = Field(None, description="Free-text symptom description")


class CheckSymptomsResponse(BaseModel):
    output: str


class HistoryItem(BaseModel):
    id: int
    symptoms: str
    analysis: str
    created_at: Optional[str] = None


class HealthResponse(BaseModel):
    status: str
    database: str
    huggingface: str
    error: Optional[str] = None


class ErrorResponse(BaseModel):
    error: str
