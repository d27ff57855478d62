"""
File: src/symptom_checker/core/__init__.py
Core module with the main business logic.
"""

from .ports import GeneratorPort, QueryRepoPort
from .services.symptoms import SymptomService

__all__ = ["GeneratorPort", "QueryRepoPort", "SymptomService"]
