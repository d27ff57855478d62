from .fallback import DISCLAIMER, analyze
from .symptoms import CheckResult, HealthReport, SymptomService

__all__ = ["DISCLAIMER", "analyze", "CheckResult", "HealthReport", "SymptomService"]
