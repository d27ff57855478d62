"""AI symptom checker backend: hosted model answers with a rule-based fallback."""

__version__ = "0.1.0"
