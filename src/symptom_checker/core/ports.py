"""
File: src/symptom_checker/core/ports.py
Domain Interfaces - Adapters
"""

from __future__ import annotations

from typing import Protocol, Sequence, runtime_checkable

from symptom_checker.core.domain.entities import (
    GenerationOptions,
    GenerationResult,
    Query,
)


# -------- Ports --------
@runtime_checkable
class GeneratorPort(Protocol):
    def generate(
        self, model: str, prompt: str, options: GenerationOptions
    ) -> GenerationResult: ...

    def probe(self, model: str) -> GenerationResult: ...


@runtime_checkable
class QueryRepoPort(Protocol):
    def insert(self, symptoms: str, analysis: str) -> int: ...
    def list_recent(self, limit: int) -> Sequence[Query]: ...
    def ping(self) -> None: ...
