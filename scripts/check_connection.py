# scripts/check_connection.py

"""
Standalone connectivity check against the Hugging Face Inference API.
Probes the default model first, then the configured medical model (if any).
"""

import logging
import sys

from symptom_checker.core.domain.entities import Err, GenerationOptions
from symptom_checker.infrastructure.llms.huggingface import HuggingFaceGenerator
from symptom_checker.settings import DEFAULT_MODEL, settings

logger = logging.getLogger(__name__)
logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)

# (label, model, prompt, max_new_tokens)
CHECKS = [
    ("simple model", DEFAULT_MODEL, "Hello, are you working?", 20),
    ("medical model", settings.medical_qa_model, "What is fever?", 50),
]


def main() -> int:
    logger.info("Testing Hugging Face connection...")
    logger.info(
        f"API Key: {'present' if settings.huggingface_api_key else 'MISSING'}"
    )
    logger.info(f"Medical Model: {settings.medical_qa_model}")

    generator = HuggingFaceGenerator(
        api_key=settings.huggingface_api_key,
        base_url=settings.huggingface_base_url,
        timeout=settings.huggingface_request_timeout,
    )
    for label, model, prompt, max_new_tokens in CHECKS:
        if not model:
            logger.warning(f"Skipping {label}: no model configured")
            continue
        logger.info(f"Testing with {label} ({model})...")
        result = generator.generate(
            model, prompt, GenerationOptions(max_new_tokens=max_new_tokens)
        )
        if isinstance(result, Err):
            logger.error(f"{label} test failed: {result.error.message}")
            if result.error.status_code is not None:
                logger.error(f"HTTP Status: {result.error.status_code}")
            return 1
        logger.info(f"{label} test passed: {result.text}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
