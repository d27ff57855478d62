"""
File: src/symptom_checker/app/__init__.py
FastAPI application module.
"""

from .main import app
from .dependencies import get_symptom_service

__all__ = [
    "app",
    "get_symptom_service"
]
