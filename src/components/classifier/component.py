"""
Classifier component - Decide whether a request comes from a crawler.

Crawlers and link unfurlers do not execute client-side script, so they must
be served HTML that already carries its meta tags. Everyone else gets the
single-page application.

Invariants:
- Matching is a case-insensitive substring test against a fixed registry
- An empty or missing header is always HUMAN
- Pure and deterministic; never raises
"""

from __future__ import annotations

from .models import ClassifyInput, ClassifyOutput, RequesterClass

# Lowercase substrings; specific signatures precede the generic tokens.
CRAWLER_SIGNATURES: tuple[str, ...] = (
    # Social link unfurlers
    "facebookexternalhit",
    "facebookbot",
    "twitterbot",
    "whatsapp",
    "linkedinbot",
    "slackbot",
    "discordbot",
    "telegrambot",
    "pinterest",
    "redditbot",
    "skypeuripreview",
    "embedly",
    "vkshare",
    # Search engines
    "googlebot",
    "bingbot",
    "applebot",
    "duckduckbot",
    "yandex",
    "baiduspider",
    "slurp",
    # Pre-render services
    "prerender",
    "rendertron",
    # Generic tokens
    "crawler",
    "spider",
    "bot",
)


def _match_signature(user_agent: str | None) -> str | None:
    if not user_agent:
        return None

    ua_lower = user_agent.lower()
    for signature in CRAWLER_SIGNATURES:
        if signature in ua_lower:
            return signature
    return None


def classify(user_agent: str | None) -> RequesterClass:
    """
    Classify a raw User-Agent header.

    Returns BOT when any crawler signature matches, HUMAN otherwise.
    """
    if _match_signature(user_agent) is not None:
        return RequesterClass.BOT
    return RequesterClass.HUMAN


def is_bot(user_agent: str | None) -> bool:
    return classify(user_agent) == RequesterClass.BOT


def run(inp: ClassifyInput) -> ClassifyOutput:
    """Main entry point for the classifier component."""
    signature = _match_signature(inp.user_agent)
    if signature is None:
        return ClassifyOutput(requester=RequesterClass.HUMAN)
    return ClassifyOutput(requester=RequesterClass.BOT, matched_signature=signature)
