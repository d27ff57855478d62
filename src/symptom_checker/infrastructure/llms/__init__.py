from .huggingface import HuggingFaceGenerator, extract_generated_text

__all__ = ["HuggingFaceGenerator", "extract_generated_text"]
