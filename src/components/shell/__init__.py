"""
Shell component - Cached single-page application document.
"""

from .component import ShellCache
from .models import CachedShell, ShellConfig
from .ports import ShellFetcherPort

__all__ = [
    "ShellCache",
    "CachedShell",
    "ShellConfig",
    "ShellFetcherPort",
]
