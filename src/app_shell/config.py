import logging
import os
import sys
from collections.abc import Mapping

from src.rules.models import Rules

logger = logging.getLogger(__name__)


def missing_env(rules: Rules, environ: Mapping[str, str] | None = None) -> list[str]:
    """Required environment variables that are unset or empty."""
    env = os.environ if environ is None else environ
    return [name for name in rules.ops.required_env if not env.get(name)]


def validate_ops_rules(rules: Rules, environ: Mapping[str, str] | None = None) -> None:
    """
    Validate operational requirements before startup.

    Exits the process when required environment variables are missing.
    """
    missing = missing_env(rules, environ)
    if missing:
        logger.critical("Missing required environment variables: %s", ", ".join(missing))
        sys.exit(1)

    logger.info("Configuration validated (rules %s)", rules.project.rules_version)
