"""FastAPI dependencies for the application."""

from fastapi import Request

from symptom_checker.core.services.symptoms import SymptomService


def get_symptom_service(request: Request) -> SymptomService:
    """Return the :class:`SymptomService` of the running application context."""
    return request.app.state.context.service


__all__ = ["get_symptom_service"]
