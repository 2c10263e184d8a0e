"""Command-line interface."""

from __future__ import annotations

import argparse
import logging
import sys

import httpx
from pydantic import ValidationError

from .auth import load_auth_token
from .client import ApplicationClient
from .errors import AppViewError, ConfigurationError
from .settings import Settings
from .view import plan_view, run_view

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mesh-app",
        description="Inspect applications managed by a Meshery server.",
    )
    parser.add_argument(
        "-t",
        "--token",
        default=None,
        help="Path to the auth token file (default: $MESHERY_TOKEN_PATH)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    view = subparsers.add_parser(
        "view",
        help="Display application(s)",
        description="Displays the contents of a specific application based on name or id.",
        epilog=(
            "examples:\n"
            "  mesh-app view <app-name>\n"
            "  mesh-app view <app-id>\n"
            "  mesh-app view --all"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    view.add_argument(
        "application",
        nargs="*",
        help="Application name (multiple words allowed) or id",
    )
    view.add_argument(
        "-a",
        "--all",
        dest="select_all",
        action="store_true",
        help="(optional) view all applications available",
    )
    view.add_argument(
        "-o",
        "--output-format",
        default="yaml",
        help="(optional) format to display in [json|yaml]",
    )
    return parser


def load_settings() -> Settings:
    try:
        return Settings()
    except ValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
            for error in exc.errors()
        )
        raise ConfigurationError(f"invalid settings: {problems}") from exc


def main(
    argv: list[str] | None = None,
    *,
    transport: httpx.BaseTransport | None = None,
) -> int:
    args = build_parser().parse_args(argv)

    try:
        settings = load_settings()
        logging.basicConfig(
            level=logging.DEBUG if args.verbose else settings.log_level,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            stream=sys.stderr,
        )
        plan = plan_view(
            args.application,
            select_all=args.select_all,
            output_format=args.output_format,
        )
        token = load_auth_token(args.token or settings.token_path)
        with ApplicationClient(
            base_url=str(settings.base_url),
            headers=token.headers(),
            timeout_seconds=settings.http_timeout_seconds,
            transport=transport,
        ) as client:
            run_view(client, plan)
    except AppViewError as exc:
        logger.debug("view failed", exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0
