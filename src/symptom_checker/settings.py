"""
File: src/symptom_checker/settings.py
Global configuration loaded via environment variables.
Use a `.env` file or export vars before running.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_MODEL = "google/flan-t5-base"


class Settings(BaseSettings):
    # RUNTIME
    app_host: str = "0.0.0.0"
    app_port: int = 5000
    # HUGGING FACE
    huggingface_api_key: str | None = None
    huggingface_base_url: str = "https://api-inference.huggingface.co/models"
    huggingface_request_timeout: float = Field(30.0, gt=0)  # seconds
    general_qa_model: str = DEFAULT_MODEL
    medical_qa_model: str | None = None
    # sampling
    max_tokens: int = Field(150, ge=1)
    temperature: float = 0.7
    top_p: float = Field(0.9, gt=0, le=1)
    # PERSISTENCE
    sqlite_url: str = "sqlite:///./healthcare.db"
    history_limit: int = Field(10, ge=1)

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )


settings = Settings()
