# src/symptom_checker/app/factory.py

"""
Lifecycle of the application context:
- Built ONCE at startup by the FastAPI lifespan and kept on ``app.state.context``.
- Closed on shutdown (disposes the database engine).
- Tests can build their own context against any settings object.
"""

import logging
from dataclasses import dataclass

from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from symptom_checker.core.domain.entities import GenerationOptions
from symptom_checker.core.services.symptoms import SymptomService
from symptom_checker.infrastructure.llms.huggingface import HuggingFaceGenerator
from symptom_checker.infrastructure.persistence.sqlalchemy.base import (
    init_db,
    make_engine,
    make_session_factory,
)
from symptom_checker.infrastructure.persistence.sqlalchemy.sql_ import QuerySqlStorage
from symptom_checker.settings import Settings

logger = logging.getLogger(__name__)


@dataclass
class AppContext:
    settings: Settings
    engine: Engine
    session_factory: sessionmaker
    store: QuerySqlStorage
    generator: HuggingFaceGenerator
    service: SymptomService

    def close(self) -> None:
        self.engine.dispose()
        logger.info("Database engine disposed.")


def get_generation_options(settings: Settings) -> GenerationOptions:
    return GenerationOptions(
        max_new_tokens=settings.max_tokens,
        temperature=settings.temperature,
        top_p=settings.top_p,
        do_sample=True,
    )


def get_generator(settings: Settings) -> HuggingFaceGenerator:
    if not settings.huggingface_api_key:
        logger.warning("HUGGINGFACE_API_KEY missing: remote calls will fail and use the fallback")
    return HuggingFaceGenerator(
        api_key=settings.huggingface_api_key,
        base_url=settings.huggingface_base_url,
        timeout=settings.huggingface_request_timeout,
    )


def create_app_context(settings: Settings) -> AppContext:
    engine = make_engine(settings.sqlite_url)
    init_db(engine)
    session_factory = make_session_factory(engine)
    store = QuerySqlStorage(session_factory=session_factory)
    generator = get_generator(settings)
    service = SymptomService(
        generator=generator,
        store=store,
        model=settings.general_qa_model,
        options=get_generation_options(settings),
        history_limit=settings.history_limit,
    )
    logger.info(
        f"API Key: {'present' if settings.huggingface_api_key else 'missing'}, "
        f"using model: {settings.general_qa_model}"
    )
    return AppContext(
        settings=settings,
        engine=engine,
        session_factory=session_factory,
        store=store,
        generator=generator,
        service=service,
    )
