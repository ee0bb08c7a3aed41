"""Transport and decoder interfaces and adapters."""

from es_analyze.search.adapters import ElasticClientAdapter, HttpxTransport, OpenSearchClientAdapter
from es_analyze.search.decoding import PydanticDecoder
from es_analyze.search.factory import build_analyze_transport, supported_backends
from es_analyze.search.protocols import Decoder, Transport

__all__ = [
    "Decoder",
    "ElasticClientAdapter",
    "HttpxTransport",
    "OpenSearchClientAdapter",
    "PydanticDecoder",
    "Transport",
    "build_analyze_transport",
    "supported_backends",
]
