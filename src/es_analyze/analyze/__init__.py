"""Analyze request builder and client."""

from es_analyze.analyze.client import AnalyzeClient
from es_analyze.analyze.service import AnalyzeService, build_analyze_path, encode_index_name

__all__ = ["AnalyzeClient", "AnalyzeService", "build_analyze_path", "encode_index_name"]
