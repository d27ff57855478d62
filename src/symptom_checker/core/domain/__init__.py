from .entities import Err, GenerationOptions, GenerationResult, Ok, Query

__all__ = ["Err", "GenerationOptions", "GenerationResult", "Ok", "Query"]
