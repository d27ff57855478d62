# src/symptom_checker/infrastructure/llms/huggingface.py
import json
import logging
from typing import Any

import requests

from symptom_checker.core.domain.entities import (
    Err,
    GenerationOptions,
    GenerationResult,
    Ok,
)
from symptom_checker.core.exceptions import RemoteError
from symptom_checker.core.ports import GeneratorPort

logger = logging.getLogger(__name__)

PROBE_INPUT = "Test"
PROBE_MAX_NEW_TOKENS = 5


def extract_generated_text(payload: Any) -> str:
    """
    Pull the generated text out of an Inference API payload.

    The API answers either ``[{"generated_text": ...}, ...]`` or
    ``{"generated_text": ...}``; anything else is returned as compact JSON.
    """
    if isinstance(payload, list) and payload and isinstance(payload[0], dict):
        text = payload[0].get("generated_text")
        if isinstance(text, str) and text:
            return text
    if isinstance(payload, dict):
        text = payload.get("generated_text")
        if isinstance(text, str) and text:
            return text
    return json.dumps(payload, separators=(",", ":"), ensure_ascii=False)


class HuggingFaceGenerator(GeneratorPort):
    def __init__(
        self,
        api_key: str | None,
        base_url: str = "https://api-inference.huggingface.co/models",
        timeout: float = 30.0,
    ) -> None:
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def _headers(self) -> dict:
        return {
            "Authorization": f"Bearer {self.api_key or ''}",
            "Content-Type": "application/json",
        }

    def _post(self, model: str, payload: dict) -> Any:
        api_url = f"{self.base_url}/{model}"
        try:
            response = requests.post(
                api_url, headers=self._headers(), json=payload, timeout=self.timeout
            )
        except requests.exceptions.Timeout as err:
            raise RemoteError(
                f"Hugging Face request timed out after {self.timeout}s: {api_url}"
            ) from err
        except requests.exceptions.RequestException as err:
            raise RemoteError(
                f"Could not connect to Hugging Face at {api_url}: {err}"
            ) from err

        if not response.ok:
            raise RemoteError(
                f"Hugging Face API error: {response.status_code} {response.reason}",
                status_code=response.status_code,
                reason=response.reason,
            )

        try:
            return response.json()
        except ValueError as err:
            # requests' JSONDecodeError subclasses ValueError
            raise RemoteError(
                f"Failed to decode Hugging Face JSON response: {err}",
                status_code=response.status_code,
            ) from err

    def generate(
        self, model: str, prompt: str, options: GenerationOptions
    ) -> GenerationResult:
        logger.info(f"Calling Hugging Face API (model: {model})")
        try:
            payload = self._post(
                model, {"inputs": prompt, "parameters": options.as_parameters()}
            )
        except RemoteError as err:
            return Err(err)
        logger.info("Hugging Face API call successful")
        return Ok(extract_generated_text(payload))

    def probe(self, model: str) -> GenerationResult:
        try:
            payload = self._post(
                model,
                {
                    "inputs": PROBE_INPUT,
                    "parameters": {"max_new_tokens": PROBE_MAX_NEW_TOKENS},
                },
            )
        except RemoteError as err:
            return Err(err)
        return Ok(extract_generated_text(payload))
