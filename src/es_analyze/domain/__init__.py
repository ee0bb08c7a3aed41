"""Domain contracts for es-analyze."""

from es_analyze.domain.contracts import AnalyzeRequest, AnalyzeResult, Token
from es_analyze.domain.enums import BackendName, CommandName, FilterProjection, parse_filter_projection

__all__ = [
    "AnalyzeRequest",
    "AnalyzeResult",
    "BackendName",
    "CommandName",
    "FilterProjection",
    "Token",
    "parse_filter_projection",
]
