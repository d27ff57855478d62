# src/symptom_checker/core/services/symptoms.py

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from symptom_checker.core.domain.entities import Err, GenerationOptions, Query
from symptom_checker.core.exceptions import StorageError, ValidationError
from symptom_checker.core.ports import GeneratorPort, QueryRepoPort
from symptom_checker.core.services.fallback import DISCLAIMER, analyze

logger = logging.getLogger(__name__)

PROMPT_TEMPLATE = (
    'The user reports these symptoms: "{symptoms}". \n'
    "As a helpful AI assistant, provide general information about what might cause these symptoms, \n"
    "suggest when to see a doctor, and remind them this is not medical advice."
)


def build_prompt(symptoms: str) -> str:
    return PROMPT_TEMPLATE.format(symptoms=symptoms)


def add_disclaimer(text: str) -> str:
    return f"{text}\n\n{DISCLAIMER}"


@dataclass(frozen=True)
class CheckResult:
    output: str
    source: str  # "model" | "fallback"
    query_id: Optional[int] = None


@dataclass(frozen=True)
class HealthReport:
    status: str
    database: str
    huggingface: str
    error: Optional[str] = None


class SymptomService:
    def __init__(
        self,
        generator: GeneratorPort,
        store: QueryRepoPort,
        model: str,
        options: GenerationOptions,
        history_limit: int = 10,
    ):
        self.generator = generator
        self.store = store
        self.model = model
        self.options = options
        self.history_limit = history_limit
        logger.info(
            f"SymptomService initialized with generator: {type(generator).__name__}, model: {model}"
        )

    def check(self, symptoms: Optional[str]) -> CheckResult:
        """
        Answer a symptom description.

        The hosted model is tried once; any failure switches to the rule-based
        analyzer. Whatever text is produced is stored best-effort and returned.

        Raises:
            ValidationError: if ``symptoms`` is missing or empty.
        """
        if not symptoms:
            raise ValidationError("Please provide symptoms text.")

        logger.info(f"Processing symptoms: '{symptoms[:100]}'")
        result = self.generator.generate(self.model, build_prompt(symptoms), self.options)

        if isinstance(result, Err):
            logger.error(f"Hugging Face error: {result.error.message}")
            output, source = analyze(symptoms), "fallback"
        else:
            output, source = add_disclaimer(result.text), "model"

        query_id = self._persist(symptoms, output)
        return CheckResult(output=output, source=source, query_id=query_id)

    def _persist(self, symptoms: str, output: str) -> Optional[int]:
        try:
            query_id = self.store.insert(symptoms, output)
        except StorageError as e:
            # The caller still gets the answer; only the log entry is lost.
            logger.error(f"Error logging query '{symptoms[:50]}': {e}", exc_info=True)
            return None
        logger.info(f"Query logged with ID: {query_id}")
        return query_id

    def history(self, limit: Optional[int] = None) -> Sequence[Query]:
        return self.store.list_recent(limit or self.history_limit)

    def health(self) -> HealthReport:
        errors = []

        try:
            self.store.ping()
            database = "connected"
        except StorageError as e:
            logger.warning(f"Health check: database unreachable: {e}")
            database = "disconnected"
            errors.append(str(e))

        probe = self.generator.probe(self.model)
        if isinstance(probe, Err):
            logger.warning(f"Health check: Hugging Face probe failed: {probe.error.message}")
            huggingface = "failing"
            errors.append(probe.error.message)
        else:
            huggingface = "working"

        healthy = database == "connected" and huggingface == "working"
        return HealthReport(
            status="healthy" if healthy else "degraded",
            database=database,
            huggingface=huggingface,
            error="; ".join(errors) or None,
        )
