import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

from src.adapters.http_fetch import HttpFetcher
from src.adapters.postgrest import PostgrestClient, PostgrestSummaryRepo
from src.adapters.render.mpl_renderer import MatplotlibPreviewRenderer
from src.api.deps import Settings
from src.app_shell.config import missing_env
from src.components.classifier import ClassifyInput
from src.components.classifier import run as run_classifier
from src.components.metadata import intent_from_query, parse_route_intent, resolve
from src.components.preview import PreviewRenderError, render_preview_image
from src.domain.branding import HTML_DESCRIPTION_MAX, IMAGE_DESCRIPTION_MAX
from src.rules.loader import load_rules
from src.rules.models import Rules

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("cli")


def get_rules(settings: Settings) -> Rules:
    if not settings.rules_path.exists():
        logger.error(f"Rules file {settings.rules_path} not found.")
        sys.exit(1)
    return load_rules(settings.rules_path)


def get_repo(settings: Settings, rules: Rules) -> PostgrestSummaryRepo:
    missing = missing_env(rules)
    if missing:
        logger.error(f"Missing required environment variables: {', '.join(missing)}")
        sys.exit(1)

    client = PostgrestClient(
        base_url=settings.data_store_url,
        api_key=settings.data_store_key,
        timeout=rules.data_store.timeout_seconds,
        rest_path=rules.data_store.rest_path,
    )
    return PostgrestSummaryRepo(client)


def handle_classify(args: argparse.Namespace) -> None:
    out = run_classifier(ClassifyInput(user_agent=args.user_agent))
    print(out.requester.value)


def handle_meta(args: argparse.Namespace) -> None:
    settings = Settings()
    rules = get_rules(settings)
    repo = get_repo(settings, rules)

    intent = parse_route_intent(args.path)
    meta = asyncio.run(resolve(intent, args.origin, repo, description_limit=HTML_DESCRIPTION_MAX))
    print(
        json.dumps(
            {
                "kind": intent.kind.value,
                "title": meta.title,
                "description": meta.description,
                "image": meta.image,
                "canonical_url": meta.canonical_url,
                "content_type": meta.content_type.value,
                "preview_image_url": meta.preview_image_url,
                "is_fallback": meta.is_fallback,
            },
            indent=2,
        )
    )


async def _render_preview(args: argparse.Namespace, settings: Settings, rules: Rules) -> bytes:
    repo = get_repo(settings, rules)
    intent = intent_from_query(args.type, args.id, args.slug)
    meta = await resolve(intent, args.origin, repo, description_limit=IMAGE_DESCRIPTION_MAX)
    fetcher = HttpFetcher(
        timeout=rules.fetch.timeout_seconds,
        max_bytes=rules.fetch.max_image_bytes,
    )
    image = await render_preview_image(meta, MatplotlibPreviewRenderer(), fetcher)
    return image.content


def handle_preview(args: argparse.Namespace) -> None:
    settings = Settings()
    rules = get_rules(settings)
    try:
        content = asyncio.run(_render_preview(args, settings, rules))
    except PreviewRenderError as e:
        logger.error(f"Preview rendering failed: {e.__cause__ or e}")
        sys.exit(1)

    out = Path(args.out)
    out.write_bytes(content)
    print(f"Wrote {len(content)} bytes to {out}")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Press Room Publisher social preview CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # classify
    classify_parser = subparsers.add_parser("classify", help="Classify a User-Agent header")
    classify_parser.add_argument("user_agent", help="User-Agent header value")

    # meta
    meta_parser = subparsers.add_parser("meta", help="Resolve preview metadata for a path")
    meta_parser.add_argument("path", help="Human-facing path, e.g. /blog/acme/post/42")
    meta_parser.add_argument(
        "--origin", required=True, help="Public origin, e.g. https://pressroom.example"
    )

    # preview
    preview_parser = subparsers.add_parser("preview", help="Render a preview image to a file")
    preview_parser.add_argument("--type", choices=["post", "blog"], required=True)
    preview_parser.add_argument("--id", help="Post id (type=post)")
    preview_parser.add_argument("--slug", help="Blog slug (type=blog)")
    preview_parser.add_argument("--origin", required=True, help="Public origin")
    preview_parser.add_argument("--out", default="preview.png", help="Output PNG path")

    args = parser.parse_args(argv)

    if args.command == "classify":
        handle_classify(args)
    elif args.command == "meta":
        handle_meta(args)
    elif args.command == "preview":
        handle_preview(args)


if __name__ == "__main__":
    main()
