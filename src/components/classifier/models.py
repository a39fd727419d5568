"""
Classifier component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class RequesterClass(str, Enum):
    """Who is asking for the page."""

    HUMAN = "human"
    BOT = "bot"


@dataclass(frozen=True)
class ClassifyInput:
    user_agent: str | None = None


@dataclass(frozen=True)
class ClassifyOutput:
    requester: RequesterClass
    matched_signature: str | None = None

    @property
    def is_bot(self) -> bool:
        return self.requester == RequesterClass.BOT
