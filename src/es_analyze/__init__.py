"""Build and run Elasticsearch/OpenSearch `_analyze` requests."""

from es_analyze.analyze import AnalyzeClient, AnalyzeService
from es_analyze.domain import AnalyzeRequest, AnalyzeResult, FilterProjection, Token

__all__ = [
    "AnalyzeClient",
    "AnalyzeRequest",
    "AnalyzeResult",
    "AnalyzeService",
    "FilterProjection",
    "Token",
]
