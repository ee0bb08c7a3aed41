"""Fluent builder for `_analyze` requests."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any
from urllib.parse import quote

from es_analyze.domain import AnalyzeRequest, AnalyzeResult, FilterProjection, parse_filter_projection
from es_analyze.errors import IndexNameEncodingError, RequestBodyEncodingError
from es_analyze.search.decoding import PydanticDecoder

if TYPE_CHECKING:
    from es_analyze.search.protocols import Decoder, Transport

_ANALYZE_METHOD = "GET"
_ANALYZE_ENDPOINT = "_analyze"
_logger = logging.getLogger(__name__)


def encode_index_name(index: str) -> str:
    """Percent-encode one index name as a single path segment.

    Every byte outside the unreserved set (letters, digits, `-._~`) is encoded,
    so commas and slashes inside a name never split the path.

    Args:
        index (str): Raw index name.

    Raises:
        IndexNameEncodingError: If the name is not encodable as UTF-8.

    Returns:
        str: Encoded path segment.

    """
    try:
        return quote(index, safe="", encoding="utf-8", errors="strict")
    except UnicodeEncodeError as exc:
        raise IndexNameEncodingError(index) from exc


def build_analyze_path(indices: list[str] | tuple[str, ...]) -> str:
    """Build the `_analyze` path for the given indices.

    Args:
        indices (list[str] | tuple[str, ...]): Index names, in order.

    Returns:
        str: `/<indices>/_analyze`, or `/_analyze` without indices.

    """
    if not indices:
        return f"/{_ANALYZE_ENDPOINT}"
    index_part = ",".join(encode_index_name(index) for index in indices)
    return f"/{index_part}/{_ANALYZE_ENDPOINT}"


class AnalyzeService:
    """Accumulate analyze settings and run the request.

    Configuration methods return the builder itself so calls can be chained.
    List-valued settings (indices, filters) are appended to; the others are
    overwritten by the latest call. A builder is not thread-safe: use one
    builder per call scope.
    """

    def __init__(
        self,
        transport: Transport,
        decoder: Decoder | None = None,
        *,
        filter_projection: FilterProjection | str = FilterProjection.IGNORE,
    ) -> None:
        """Bind the builder to its transport and decoder.

        Args:
            transport (Transport): Transport used to send the request.
            decoder (Decoder | None): Response decoder; pydantic-backed by default.
            filter_projection (FilterProjection | str): How tokenizer and filters reach the request.

        """
        self._transport = transport
        self._decoder = decoder if decoder is not None else PydanticDecoder()
        self._filter_projection = parse_filter_projection(filter_projection)
        self._indices: list[str] = []
        self._pretty = False
        self._timeout: str | None = None
        self._master_timeout: str | None = None
        self._analyzer: str | None = None
        self._tokenizer: str | None = None
        self._token_filters: list[str] = []
        self._char_filters: list[str] = []
        self._body: str | None = None

    def index(self, index: str) -> AnalyzeService:
        """Add one index to analyze against."""
        self._indices.append(index)
        return self

    def indices(self, *indices: str) -> AnalyzeService:
        """Add several indices to analyze against."""
        self._indices.extend(indices)
        return self

    def timeout(self, timeout: str) -> AnalyzeService:
        """Set the explicit operation timeout, e.g. `5s`."""
        self._timeout = timeout
        return self

    def master_timeout(self, master_timeout: str) -> AnalyzeService:
        """Set the timeout for the connection to the master node."""
        self._master_timeout = master_timeout
        return self

    def analyzer(self, analyzer: str) -> AnalyzeService:
        """Set the analyzer to use."""
        self._analyzer = analyzer
        return self

    def tokenizer(self, tokenizer: str) -> AnalyzeService:
        """Set the tokenizer to use."""
        self._tokenizer = tokenizer
        return self

    def token_filters(self, *filters: str) -> AnalyzeService:
        """Add token filter names."""
        self._token_filters.extend(filters)
        return self

    def char_filters(self, *filters: str) -> AnalyzeService:
        """Add char filter names."""
        self._char_filters.extend(filters)
        return self

    def body(self, body: str) -> AnalyzeService:
        """Set the text to analyze."""
        self._body = body
        return self

    def pretty(self, pretty: bool = True) -> AnalyzeService:  # noqa: FBT001, FBT002
        """Ask the backend for an indented, human-readable response."""
        self._pretty = pretty
        return self

    def _build_params(self) -> tuple[tuple[str, str], ...]:
        params: list[tuple[str, str]] = []
        if self._pretty:
            params.append(("pretty", "1"))
        if self._master_timeout:
            params.append(("master_timeout", self._master_timeout))
        if self._timeout:
            params.append(("timeout", self._timeout))
        if self._analyzer:
            params.append(("analyzer", self._analyzer))
        return tuple(params)

    def _build_body(self) -> str | None:
        if self._filter_projection is FilterProjection.IGNORE:
            return self._body
        if not (self._tokenizer or self._token_filters or self._char_filters):
            return self._body

        payload: dict[str, Any] = {}
        if self._body is not None:
            payload["text"] = self._body
        if self._tokenizer:
            payload["tokenizer"] = self._tokenizer
        if self._token_filters:
            payload["filter"] = list(self._token_filters)
        if self._char_filters:
            payload["char_filter"] = list(self._char_filters)
        return json.dumps(payload, ensure_ascii=False)

    def build_request(self) -> AnalyzeRequest:
        """Materialize the current settings into a request description.

        Raises:
            IndexNameEncodingError: If an index name cannot be encoded.
            RequestBodyEncodingError: If the body is not encodable as UTF-8.

        Returns:
            AnalyzeRequest: Immutable request description.

        """
        path = build_analyze_path(self._indices)
        body = self._build_body()
        if body is not None:
            try:
                body.encode("utf-8")
            except UnicodeEncodeError as exc:
                raise RequestBodyEncodingError from exc
        return AnalyzeRequest(
            method=_ANALYZE_METHOD,
            path=path,
            params=self._build_params(),
            body=body,
        )

    def execute(self) -> AnalyzeResult:
        """Send the analyze request and decode its tokens.

        Transport and decoder errors are propagated unchanged.

        Returns:
            AnalyzeResult: Tokens in the order returned by the backend.

        """
        request = self.build_request()
        _logger.debug(
            "Dispatching %s %s with params %s via %s.",
            request.method,
            request.path,
            request.query_params,
            self._transport.backend_name,
        )
        payload = self._transport.perform_request(
            method=request.method,
            path=request.path,
            params=request.query_params,
            body=request.body,
        )
        result = self._decoder.decode(payload, AnalyzeResult)
        _logger.debug("Decoded %d tokens from %s.", len(result.tokens), request.path)
        return result
