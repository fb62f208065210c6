"""Command-line interface for reqview."""

import argparse
import asyncio
import sys
from typing import Optional

# Check if --doctor flag is present before checking dependencies
if "--doctor" in sys.argv:
    from .doctor import run_doctor

    sys.exit(run_doctor())

# Verify core dependencies
try:
    import aiohttp  # noqa: F401
    import pydantic  # noqa: F401
    import pygments  # noqa: F401
    import rich  # noqa: F401
    import yarl  # noqa: F401
except ImportError as e:
    print(f"\nERROR: Missing required dependency: {e.name}", file=sys.stderr)
    print("\nRecommended fixes:", file=sys.stderr)
    print("  1. For pipx users: pipx reinstall reqview --force", file=sys.stderr)
    print("  2. For pip users: pip install --upgrade --force-reinstall reqview", file=sys.stderr)
    print("  3. For development: pip install -e .[dev]", file=sys.stderr)
    print("\nTo diagnose issues, run: reqview --doctor", file=sys.stderr)
    sys.exit(1)

from pydantic import ValidationError
from rich.console import Console
from rich.text import Text

from . import __version__
from .http import AsyncHttpClient, HttpClient, HttpResponse
from .logging_config import log_level_for, setup_logging
from .models.config import DEFAULT_THEME, ReqviewConfig
from .models.request import GetRequest, PostRequest, RequestSpec
from .parsing import kv_pair_type, parse_url
from .render import ResponseRenderer


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser for CLI."""
    parser = argparse.ArgumentParser(
        prog="reqview",
        description="Send an HTTP request and pretty-print the response",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Fetch a page
  reqview get https://httpbin.org/get

  # Post a JSON object {"name": "alice", "role": "admin"}
  reqview post https://httpbin.org/post name=alice role=admin

  # Use another highlighting theme
  reqview --theme native get https://httpbin.org/json
        """,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    parser.add_argument(
        "--doctor",
        action="store_true",
        help="Run diagnostic checks",
    )

    # Output control
    output_group = parser.add_argument_group("output control")
    output_group.add_argument(
        "--theme",
        type=str,
        default=DEFAULT_THEME,
        metavar="NAME",
        help=f"Pygments style for JSON/HTML bodies (default: {DEFAULT_THEME})",
    )
    output_group.add_argument(
        "--no-highlight",
        action="store_true",
        help="Print bodies without syntax highlighting",
    )
    output_group.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Debug logging on stderr",
    )
    output_group.add_argument(
        "--quiet",
        "-q",
        action="store_true",
        help="Only log errors",
    )

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    get_parser = subparsers.add_parser(
        "get",
        help="Send a GET request",
        description="Feed get with a URL and we will retrieve the response for you.",
    )
    get_parser.add_argument("url", type=parse_url, help="Absolute URL to fetch")

    post_parser = subparsers.add_parser(
        "post",
        help="Send a POST request with a JSON body",
        description=(
            "Feed post with a URL and optional key=value pairs. The pairs are sent "
            "as a JSON object and the response is retrieved for you."
        ),
    )
    post_parser.add_argument("url", type=parse_url, help="Absolute URL to post to")
    post_parser.add_argument(
        "body",
        nargs="*",
        type=kv_pair_type,
        metavar="KEY=VALUE",
        help="Fields of the JSON body; only the first '=' separates key and value",
    )

    return parser


def build_request(args: argparse.Namespace) -> RequestSpec:
    """Turn parsed arguments into a request."""
    if args.command == "get":
        return GetRequest(url=args.url)
    if args.command == "post":
        return PostRequest(url=args.url, body=tuple(args.body))
    raise ValueError(f"Unknown command: {args.command}")


def build_config(args: argparse.Namespace) -> ReqviewConfig:
    """Build the run configuration from parsed arguments."""
    config_kwargs: dict = {
        "render": {"theme": args.theme, "highlight": not args.no_highlight},
        "log_level": log_level_for(verbose=args.verbose, quiet=args.quiet),
    }

    return ReqviewConfig(**config_kwargs)


async def send(client: HttpClient, request: RequestSpec) -> HttpResponse:
    """Issue ``request`` with ``client``."""
    if isinstance(request, PostRequest):
        return await client.post(request.url, request.body)
    return await client.get(request.url)


def run_request(
    args: argparse.Namespace,
    console: Optional[Console] = None,
    error_console: Optional[Console] = None,
) -> int:
    """Send the request described by ``args`` and render the response."""
    console = console or Console()
    error_console = error_console or Console(stderr=True)

    try:
        config = build_config(args)
    except ValidationError as e:
        error_console.print(Text.assemble(("Configuration error:", "red"), f" {e}"))
        return 1

    logger = setup_logging(level=config.log_level, force=True)
    request = build_request(args)
    renderer = ResponseRenderer(console=console, config=config.render)

    async def run() -> HttpResponse:
        async with AsyncHttpClient(config.client) as client:
            return await send(client, request)

    try:
        response = asyncio.run(run())
        logger.debug(f"Rendering response from {response.url}")
        renderer.render(response)
    except Exception as e:
        error_console.print(Text.assemble(("Error:", "red"), f" {e}"))
        if args.verbose:
            import traceback

            traceback.print_exc()
        return 1

    return 0


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.doctor:
        from .doctor import run_doctor

        return run_doctor()

    if args.command is None:
        parser.error("a command is required (get or post)")

    return run_request(args)


if __name__ == "__main__":
    sys.exit(main())
