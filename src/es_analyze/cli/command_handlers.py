"""Command handlers invoked by the CLI parser."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from es_analyze.analyze import AnalyzeClient, AnalyzeService
from es_analyze.search.factory import build_analyze_transport

if TYPE_CHECKING:
    import argparse

    from es_analyze.domain import AnalyzeResult

_logger = logging.getLogger(__name__)


def configure_analyze_service(service: AnalyzeService, args: argparse.Namespace) -> AnalyzeService:
    """Apply parsed CLI args to an analyze builder.

    Args:
        service (AnalyzeService): Fresh builder.
        args (argparse.Namespace): Parsed command-line arguments.

    Returns:
        AnalyzeService: The same builder, configured.

    """
    service.indices(*args.index).token_filters(*args.token_filter).char_filters(*args.char_filter)
    service.pretty(bool(args.pretty))
    if args.analyzer:
        service.analyzer(str(args.analyzer))
    if args.tokenizer:
        service.tokenizer(str(args.tokenizer))
    if args.text is not None:
        service.body(str(args.text))
    if args.timeout:
        service.timeout(str(args.timeout))
    if args.master_timeout:
        service.master_timeout(str(args.master_timeout))
    return service


def handle_analyze(args: argparse.Namespace) -> dict[str, Any] | AnalyzeResult:
    """Run the analyze command.

    Clients connect lazily, so `--request-only` never touches the network.

    Args:
        args (argparse.Namespace): Parsed command-line arguments.

    Returns:
        dict[str, Any] | AnalyzeResult: Request description with `--request-only`,
            otherwise the decoded tokens.

    """
    transport = build_analyze_transport(
        backend=str(args.backend),
        url=str(args.backend_url),
        timeout_s=float(args.timeout_s),
        verify_certs=bool(args.verify_certs),
    )
    with AnalyzeClient(transport, filter_projection=str(args.filter_projection)) as client:
        service = configure_analyze_service(client.analyze(), args)
        if args.request_only:
            return service.build_request().to_payload()

        result = service.execute()

    _logger.info("Analyzed text into %d tokens.", len(result.tokens))
    return result
