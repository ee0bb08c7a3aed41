from __future__ import annotations

import json
from dataclasses import dataclass, field

import httpx
import pytest

from es_analyze import AnalyzeClient, Token
from es_analyze.errors import RequestBodyEncodingError, ResponseDecodeError, TransportError
from es_analyze.search.adapters import ElasticClientAdapter, HttpxTransport, OpenSearchClientAdapter
from es_analyze.search.factory import build_analyze_transport

_TEST_INDEX = "elastic-test"
_EXPECTED_TOKENS = [
    Token(token="a", start_offset=0, end_offset=1, position=0, type="<ALPHANUM>"),
    Token(token="test", start_offset=2, end_offset=6, position=2, type="<ALPHANUM>"),
]


def _standard_analyzer_response(request: httpx.Request) -> httpx.Response:
    """Answer like a backend running the standard analyzer with English stopwords."""
    if request.url.params.get("analyzer") != "standard" or request.content != b"a test":
        return httpx.Response(400, json={"error": "unexpected request"})
    return httpx.Response(
        200,
        json={
            "tokens": [
                {"token": "a", "start_offset": 0, "end_offset": 1, "type": "<ALPHANUM>", "position": 0},
                {"token": "test", "start_offset": 2, "end_offset": 6, "type": "<ALPHANUM>", "position": 2},
            ],
        },
    )


class _RecordingBackend:
    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return _standard_analyzer_response(request)


@dataclass
class _ElasticClientStub:
    calls: list[tuple[str, str, dict[str, object]]] = field(default_factory=list)

    def perform_request(self, method: str, path: str, **kwargs: object) -> object:
        self.calls.append((method, path, kwargs))
        return type("ApiResponse", (), {"body": {"tokens": [t.model_dump() for t in _EXPECTED_TOKENS]}})()

    def close(self) -> None:
        pass


def _http_client(handler) -> AnalyzeClient:
    client = httpx.Client(base_url="http://es.local:9200", transport=httpx.MockTransport(handler))
    return AnalyzeClient(build_analyze_transport(backend="http", client=client))


def test_http_client_analyzes_text_with_standard_analyzer() -> None:
    backend = _RecordingBackend()

    with _http_client(backend) as client:
        result = client.analyze().index(_TEST_INDEX).analyzer("standard").body("a test").execute()

    assert result.tokens == _EXPECTED_TOKENS
    assert backend.requests[0].method == "GET"
    assert backend.requests[0].url.path == f"/{_TEST_INDEX}/_analyze"


def test_http_client_keeps_percent_encoded_index_names_on_the_wire() -> None:
    backend = _RecordingBackend()

    with _http_client(backend) as client:
        client.analyze().indices("logs/2024", "b").analyzer("standard").body("a test").execute()

    assert backend.requests[0].url.raw_path.startswith(b"/logs%2F2024,b/_analyze")


def test_http_client_sends_pretty_and_timeouts() -> None:
    backend = _RecordingBackend()

    with _http_client(backend) as client:
        (
            client.analyze()
            .pretty()
            .timeout("5s")
            .master_timeout("30s")
            .analyzer("standard")
            .body("a test")
            .execute()
        )

    params = backend.requests[0].url.params
    assert backend.requests[0].url.path == "/_analyze"
    assert dict(params) == {"pretty": "1", "master_timeout": "30s", "timeout": "5s", "analyzer": "standard"}


def test_http_client_surfaces_backend_errors() -> None:
    with _http_client(_RecordingBackend()) as client, pytest.raises(TransportError) as exc_info:
        client.analyze().analyzer("whitespace").body("a test").execute()

    assert exc_info.value.status_code == 400  # noqa: PLR2004


def test_http_client_rejects_unencodable_body_before_sending() -> None:
    backend = _RecordingBackend()

    with _http_client(backend) as client, pytest.raises(RequestBodyEncodingError):
        client.analyze().body("bad\udc80").execute()

    assert backend.requests == []


def test_http_client_surfaces_unexpected_payloads() -> None:
    def _handler(_request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, content=json.dumps({"tokens": "nope"}).encode("utf-8"))

    with _http_client(_handler) as client, pytest.raises(ResponseDecodeError):
        client.analyze().body("a test").execute()


def test_elastic_adapter_feeds_decoded_body_to_builder() -> None:
    stub = _ElasticClientStub()
    client = AnalyzeClient(ElasticClientAdapter(client=stub))

    result = client.analyze().index(_TEST_INDEX).analyzer("standard").body("a test").execute()

    assert result.tokens == _EXPECTED_TOKENS
    method, path, kwargs = stub.calls[0]
    assert (method, path) == ("GET", f"/{_TEST_INDEX}/_analyze")
    assert kwargs["params"] == {"analyzer": "standard"}


def test_opensearch_adapter_feeds_decoded_body_to_builder() -> None:
    class _Transport:
        def perform_request(self, method: str, url: str, **kwargs: object) -> dict[str, object]:  # noqa: PLR6301
            _ = (method, url, kwargs)
            return {"tokens": [token.model_dump() for token in _EXPECTED_TOKENS]}

    stub = type("OpenSearch", (), {"transport": _Transport()})()
    client = AnalyzeClient(OpenSearchClientAdapter(client=stub))

    assert client.analyze().analyzer("standard").body("a test").execute().tokens == _EXPECTED_TOKENS


def test_http_transport_is_a_drop_in_for_the_factory() -> None:
    transport = build_analyze_transport(backend="http", client=httpx.Client())

    assert isinstance(transport, HttpxTransport)
    transport.close()
