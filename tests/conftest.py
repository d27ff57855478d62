# tests/conftest.py
import logging
import sys
from pathlib import Path

import pytest

# --- 1. Add src to PYTHONPATH ---
PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_PATH = PROJECT_ROOT / "src"
if SRC_PATH.is_dir() and str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

logger = logging.getLogger(__name__)
logging.basicConfig(level=logging.INFO)  # Basic config for test logs

# --- 2. Patch global settings for the test session ---
from symptom_checker.settings import settings as global_app_settings

# A bare "sqlite://" URL gives every engine its own private in-memory DB.
global_app_settings.sqlite_url = "sqlite://"
global_app_settings.huggingface_api_key = "hf-dummy-conftest-key"
global_app_settings.medical_qa_model = None

from symptom_checker.core.domain.entities import Ok
from symptom_checker.infrastructure.persistence.sqlalchemy.base import (
    init_db,
    make_engine,
    make_session_factory,
)
from symptom_checker.infrastructure.persistence.sqlalchemy.sql_ import QuerySqlStorage


# --- 3. Fakes shared across unit tests ---
class FakeGenerator:
    def __init__(self, result=None, probe_result=None):
        self.result = result if result is not None else Ok("generated text")
        self.probe_result = probe_result if probe_result is not None else Ok("ok")
        self.calls = []
        self.probes = []

    def generate(self, model, prompt, options):
        self.calls.append((model, prompt, options))
        return self.result

    def probe(self, model):
        self.probes.append(model)
        return self.probe_result


class FakeStore:
    def __init__(self, fail_insert=None, fail_read=None, fail_ping=None):
        self.saved = []
        self.fail_insert = fail_insert
        self.fail_read = fail_read
        self.fail_ping = fail_ping

    def insert(self, symptoms, analysis):
        if self.fail_insert:
            raise self.fail_insert
        self.saved.append((symptoms, analysis))
        return len(self.saved)

    def list_recent(self, limit):
        if self.fail_read:
            raise self.fail_read
        return []

    def ping(self):
        if self.fail_ping:
            raise self.fail_ping


# --- 4. Database fixtures ---
@pytest.fixture(scope="function")
def engine():
    """Fresh in-memory SQLite engine with the schema created."""
    test_engine = make_engine("sqlite://")
    init_db(test_engine)
    yield test_engine
    test_engine.dispose()


@pytest.fixture(scope="function")
def session_factory(engine):
    return make_session_factory(engine)


@pytest.fixture(scope="function")
def query_store(session_factory) -> QuerySqlStorage:
    return QuerySqlStorage(session_factory=session_factory)
