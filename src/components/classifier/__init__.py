"""
Classifier component - Crawler detection from the User-Agent header.
"""

from .component import (
    CRAWLER_SIGNATURES,
    classify,
    is_bot,
    run,
)
from .models import ClassifyInput, ClassifyOutput, RequesterClass

__all__ = [
    # Entry point
    "run",
    # Pure functions
    "classify",
    "is_bot",
    "CRAWLER_SIGNATURES",
    # Models
    "ClassifyInput",
    "ClassifyOutput",
    "RequesterClass",
]
