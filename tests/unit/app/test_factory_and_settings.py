# tests/unit/app/test_factory_and_settings.py
import pytest
from sqlalchemy import inspect

from symptom_checker.app import factory
from symptom_checker.infrastructure.llms.huggingface import HuggingFaceGenerator
from symptom_checker.settings import Settings, settings


# ---------- Settings -----------------------------------------------------------
def test_settings_defaults(monkeypatch):
    for var in ("GENERAL_QA_MODEL", "MAX_TOKENS", "TEMPERATURE", "TOP_P", "APP_PORT"):
        monkeypatch.delenv(var, raising=False)
    s = Settings(_env_file=None)
    assert s.general_qa_model == "google/flan-t5-base"
    assert s.max_tokens == 150
    assert s.temperature == 0.7
    assert s.top_p == 0.9
    assert s.app_port == 5000
    assert s.huggingface_request_timeout == 30


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("HUGGINGFACE_API_KEY", "hf-env")
    monkeypatch.setenv("GENERAL_QA_MODEL", "gpt2")
    monkeypatch.setenv("MAX_TOKENS", "64")
    monkeypatch.setenv("TEMPERATURE", "0.2")
    monkeypatch.setenv("APP_PORT", "8080")
    s = Settings(_env_file=None)
    assert s.huggingface_api_key == "hf-env"
    assert s.general_qa_model == "gpt2"
    assert s.max_tokens == 64
    assert s.temperature == 0.2
    assert s.app_port == 8080


def test_settings_reject_invalid_top_p(monkeypatch):
    monkeypatch.setenv("TOP_P", "1.5")
    with pytest.raises(ValueError):
        Settings(_env_file=None)


# ---------- factory ------------------------------------------------------------
def test_generation_options_follow_settings():
    custom = settings.model_copy(update={"max_tokens": 42, "temperature": 0.1, "top_p": 0.5})
    options = factory.get_generation_options(custom)
    assert options.max_new_tokens == 42
    assert options.temperature == 0.1
    assert options.top_p == 0.5
    assert options.do_sample is True


def test_get_generator_uses_settings():
    custom = settings.model_copy(
        update={"huggingface_base_url": "https://hf.test/models/", "huggingface_request_timeout": 5}
    )
    gen = factory.get_generator(custom)
    assert isinstance(gen, HuggingFaceGenerator)
    assert gen.base_url == "https://hf.test/models"
    assert gen.timeout == 5


def test_create_app_context_wires_everything():
    custom = settings.model_copy(update={"sqlite_url": "sqlite://", "general_qa_model": "my/model"})
    ctx = factory.create_app_context(custom)
    try:
        assert "queries" in inspect(ctx.engine).get_table_names()
        assert ctx.service.model == "my/model"
        assert ctx.service.store is ctx.store
        assert ctx.service.generator is ctx.generator
        assert ctx.store.list_recent(10) == []
    finally:
        ctx.close()
