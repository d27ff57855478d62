from dataclasses import dataclass
from datetime import datetime
from typing import Union

from symptom_checker.core.exceptions import RemoteError


@dataclass(frozen=True)
class Query:
    id: int
    symptoms: str
    analysis: str
    created_at: datetime | None


@dataclass(frozen=True)
class GenerationOptions:
    max_new_tokens: int = 150
    temperature: float = 0.7
    top_p: float = 0.9
    do_sample: bool = True

    def as_parameters(self) -> dict:
        return {
            "max_new_tokens": self.max_new_tokens,
            "temperature": self.temperature,
            "top_p": self.top_p,
            "do_sample": self.do_sample,
        }


# -------- Remote call outcome --------
@dataclass(frozen=True)
class Ok:
    text: str


@dataclass(frozen=True)
class Err:
    error: RemoteError


GenerationResult = Union[Ok, Err]
