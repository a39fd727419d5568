import os
from functools import lru_cache
from pathlib import Path

from fastapi import Depends, Request

from src.adapters.clock import SystemClock
from src.adapters.http_fetch import HttpFetcher
from src.adapters.postgrest import PostgrestClient, PostgrestSummaryRepo
from src.adapters.render.mpl_renderer import MatplotlibPreviewRenderer
from src.components.render import CachePolicy
from src.components.shell import ShellCache, ShellConfig
from src.rules.loader import load_rules
from src.rules.models import Rules


# --- Settings ---
class Settings:
    def __init__(self) -> None:
        self.base_dir = Path(os.getcwd())
        self.data_store_url = os.environ.get("PRP_DATA_STORE_URL", "")
        self.data_store_key = os.environ.get("PRP_DATA_STORE_KEY", "")
        self.shell_origin = os.environ.get("PRP_SHELL_ORIGIN") or None
        self.rules_path = Path(os.environ.get("PRP_RULES_PATH", self.base_dir / "rules.yaml"))


@lru_cache
def get_settings() -> Settings:
    return Settings()


# --- Request ---
def get_origin(request: Request) -> str:
    """Origin (scheme://host[:port]) the request was addressed to."""
    return str(request.base_url).rstrip("/")


# --- Rules ---
@lru_cache
def get_rules() -> Rules:
    return load_rules(get_settings().rules_path)


def get_bot_cache_policy(rules: Rules = Depends(get_rules)) -> CachePolicy:
    rule = rules.cache.bot_html
    return CachePolicy(rule.s_maxage_seconds, rule.stale_while_revalidate_seconds)


def get_image_cache_policy(rules: Rules = Depends(get_rules)) -> CachePolicy:
    rule = rules.cache.preview_image
    return CachePolicy(rule.s_maxage_seconds, rule.stale_while_revalidate_seconds)


def get_shell_cache_control(rules: Rules = Depends(get_rules)) -> str:
    return rules.cache.shell_cache_control


# --- Adapters ---
def get_data_store(
    settings: Settings = Depends(get_settings),
    rules: Rules = Depends(get_rules),
) -> PostgrestClient:
    return PostgrestClient(
        base_url=settings.data_store_url,
        api_key=settings.data_store_key,
        timeout=rules.data_store.timeout_seconds,
        rest_path=rules.data_store.rest_path,
    )


def get_summary_repo(store: PostgrestClient = Depends(get_data_store)) -> PostgrestSummaryRepo:
    return PostgrestSummaryRepo(store)


def get_fetcher(rules: Rules = Depends(get_rules)) -> HttpFetcher:
    return HttpFetcher(
        timeout=rules.fetch.timeout_seconds,
        max_bytes=rules.fetch.max_image_bytes,
    )


@lru_cache
def get_renderer() -> MatplotlibPreviewRenderer:
    return MatplotlibPreviewRenderer()


# --- Shell ---
@lru_cache
def get_shell_cache() -> ShellCache:
    """Process-wide SPA shell cache."""
    settings = get_settings()
    rules = get_rules()
    fetcher = HttpFetcher(
        timeout=rules.fetch.timeout_seconds,
        max_bytes=rules.fetch.max_image_bytes,
    )
    config = ShellConfig(
        path=rules.shell.path,
        ttl_seconds=rules.shell.ttl_seconds,
        origin_override=settings.shell_origin,
    )
    return ShellCache(fetcher, SystemClock(), config)
