# =============================================================================
# websearch/cli/search.py -- CLI Search Command
# =============================================================================
#
# Runs one Brave web search from the command line and prints the results.
#
#   python -m websearch.cli.search "history of detroit techno"
#   python -m websearch.cli.search "history of detroit techno" --json
#   python -m websearch.cli.search "query" -o results.json
#
# Settings come from config/config.yaml, overridden by .env / environment
# variables (BRAVE_API_KEY is required).  Log output always goes to stderr;
# --quiet (implied by --json) raises the log level to WARNING.
# =============================================================================

"""Standalone CLI for a single rate-limited Brave web search.

Usage::

    python -m websearch.cli.search "query text"
    python -m websearch.cli.search "query text" --json
    python -m websearch.cli.search "query text" --output results.json

Exit status is 0 on success (including zero results) and 1 when the search
fails or the provider cannot be configured.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
import time
from pathlib import Path

from websearch.config.loader import load_config
from websearch.config.settings import Settings
from websearch.interfaces.web_search_provider import SearchResult
from websearch.utils.errors import SearchError
from websearch.utils.logging import configure_logging

# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------


def _format_text_output(query: str, results: list[SearchResult]) -> str:
    """Format results as a numbered, human-readable list."""
    lines: list[str] = []
    sep = "=" * 60

    lines.append(sep)
    lines.append(f"  Search: {query}")
    lines.append(sep)

    if not results:
        lines.append("No results.")
        return "\n".join(lines)

    for idx, r in enumerate(results, start=1):
        lines.append(f"\n{idx}. {r.title}")
        if r.url:
            lines.append(f"   {r.url}")
        lines.append(f"   {r.content}")

    return "\n".join(lines)


def _format_json_output(query: str, results: list[SearchResult]) -> str:
    output = {
        "query": query,
        "result_count": len(results),
        "results": [r.to_dict() for r in results],
    }
    return json.dumps(output, indent=2)


# ---------------------------------------------------------------------------
# Search runner
# ---------------------------------------------------------------------------


async def _run(
    query: str,
    json_output: bool,
    output_file: str | None,
    api_key: str | None,
    config_path: str,
) -> int:
    """Build the provider, run the search and write the output.

    Returns 0 on success, 1 on any :class:`SearchError`.
    """
    from websearch.providers.search.factory import create_provider

    settings = Settings()
    config = load_config(config_path, settings=settings)
    search_section = config.get("search") or {}
    provider_type = search_section.get("provider", "web")

    try:
        provider = create_provider(
            provider_type,
            api_key=api_key,
            settings=settings,
            overrides=search_section,
        )
    except SearchError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    start = time.monotonic()
    try:
        async with provider:
            results = await provider.search(query)
    except SearchError as exc:
        print(f"Error ({exc.kind.value}): {exc}", file=sys.stderr)
        return 1

    elapsed = time.monotonic() - start
    print(f"{len(results)} result(s) in {elapsed:.1f}s", file=sys.stderr)

    text = _format_json_output(query, results) if json_output else _format_text_output(query, results)

    if output_file:
        Path(output_file).write_text(text, encoding="utf-8")
        print(f"Results written to: {output_file}", file=sys.stderr)
    else:
        print(text)

    return 0


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="python -m websearch.cli.search",
        description="Run a rate-limited Brave web search and print the results.",
    )
    parser.add_argument(
        "query",
        type=str,
        help="Free-text search query (3 to 1000 characters after trimming).",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        dest="json_output",
        help="Output results as JSON instead of formatted text.",
    )
    parser.add_argument(
        "--output", "-o",
        type=str,
        default=None,
        help="Write results to a file instead of stdout.",
    )
    parser.add_argument(
        "--api-key",
        type=str,
        default=None,
        help="Brave API key (defaults to the BRAVE_API_KEY environment variable).",
    )
    parser.add_argument(
        "--config",
        type=str,
        default="config/config.yaml",
        help="Path to the YAML config file.",
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Only log warnings and errors (implied by --json).",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entry point; exits with the status returned by :func:`_run`."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    quiet = args.quiet or args.json_output
    log_level = "WARNING" if quiet else Settings().log_level
    configure_logging(log_level=log_level, stream=sys.stderr)

    exit_code = asyncio.run(
        _run(args.query, args.json_output, args.output, args.api_key, args.config)
    )
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
