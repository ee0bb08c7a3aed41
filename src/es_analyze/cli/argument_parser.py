"""Argument parser construction for all CLI subcommands."""

from __future__ import annotations

import argparse
import os

from es_analyze.cli.command_handlers import handle_analyze
from es_analyze.cli.common_runtime import (
    _DEFAULT_BACKEND_URL,
    _DEFAULT_LOG_LEVEL,
    _DEFAULT_TIMEOUT_S,
    env_bool,
    env_float,
)
from es_analyze.domain import BackendName, CommandName, FilterProjection


def add_shared_runtime_flags(subparser: argparse.ArgumentParser) -> None:
    """Add connection and runtime flags shared by subcommands."""
    subparser.add_argument(
        "--proxy-url",
        default=os.getenv("ES_ANALYZE_PROXY_URL"),
        help="Optional HTTP/HTTPS proxy URL.",
    )
    subparser.add_argument(
        "--backend",
        default=os.getenv("ES_ANALYZE_BACKEND", BackendName.HTTP.value),
        choices=[backend.value for backend in BackendName],
        help="Transport used to reach the backend: plain HTTP or an official client.",
    )
    subparser.add_argument(
        "--backend-url",
        default=os.getenv("ES_ANALYZE_BACKEND_URL", _DEFAULT_BACKEND_URL),
        help="Backend base URL (Elasticsearch or OpenSearch).",
    )
    subparser.add_argument(
        "--timeout-s",
        type=float,
        default=env_float("ES_ANALYZE_TIMEOUT_S", default_value=_DEFAULT_TIMEOUT_S),
        help="Client-side request timeout in seconds.",
    )
    subparser.add_argument(
        "--verify-certs",
        default=env_bool("ES_ANALYZE_VERIFY_CERTS", default_value=True),
        action=argparse.BooleanOptionalAction,
        help="Verify TLS certificates.",
    )
    subparser.add_argument(
        "--log-level",
        default=os.getenv("ES_ANALYZE_LOG_LEVEL", _DEFAULT_LOG_LEVEL),
        help="Logging level (DEBUG, INFO, WARNING, ERROR).",
    )


def add_output_flag(subparser: argparse.ArgumentParser) -> None:
    """Add output emission flag used by all subcommands."""
    subparser.add_argument(
        "--output",
        default="-",
        help="Output destination: '-' for stdout or path to file.",
    )


def add_analyze_flags(subparser: argparse.ArgumentParser) -> None:
    """Add flags describing one analyze request."""
    subparser.add_argument(
        "--index",
        action="append",
        default=[],
        help="Index whose analysis settings are used. Can be repeated.",
    )
    subparser.add_argument("--analyzer", default=None, help="Analyzer name, e.g. 'standard'.")
    subparser.add_argument("--tokenizer", default=None, help="Tokenizer name.")
    subparser.add_argument(
        "--token-filter",
        action="append",
        default=[],
        help="Token filter name. Can be repeated.",
    )
    subparser.add_argument(
        "--char-filter",
        action="append",
        default=[],
        help="Char filter name. Can be repeated.",
    )
    subparser.add_argument("--text", default=None, help="Text (request body) to analyze.")
    subparser.add_argument(
        "--pretty",
        default=False,
        action=argparse.BooleanOptionalAction,
        help="Ask the backend for an indented response.",
    )
    subparser.add_argument("--timeout", default=None, help="Server-side operation timeout, e.g. '5s'.")
    subparser.add_argument("--master-timeout", default=None, help="Server-side master node timeout.")
    subparser.add_argument(
        "--filter-projection",
        default=FilterProjection.IGNORE.value,
        choices=[projection.value for projection in FilterProjection],
        help=(
            "How tokenizer and filters reach the request: 'ignore' leaves the request unchanged; "
            "'body' sends them with the text as a JSON body."
        ),
    )
    subparser.add_argument(
        "--request-only",
        action="store_true",
        help="Print the derived request instead of sending it.",
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        argparse.ArgumentParser: Configured parser.

    """
    parser = argparse.ArgumentParser(prog="es-analyze")
    subparsers = parser.add_subparsers(dest="command")

    analyze_parser = subparsers.add_parser(
        CommandName.ANALYZE.value,
        help="Break text into tokens with the backend's _analyze API.",
    )
    add_shared_runtime_flags(analyze_parser)
    add_analyze_flags(analyze_parser)
    add_output_flag(analyze_parser)
    analyze_parser.set_defaults(handler=handle_analyze)

    return parser
