"""Unified CLI package exports."""

from es_analyze.cli.argument_parser import build_parser
from es_analyze.cli.command_handlers import build_analyze_transport
from es_analyze.cli.entrypoint import main

__all__ = ["build_analyze_transport", "build_parser", "main"]
