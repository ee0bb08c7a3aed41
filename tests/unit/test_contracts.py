from __future__ import annotations

import pytest
from pydantic import ValidationError

from es_analyze.domain import AnalyzeRequest, AnalyzeResult, Token

_SINGLE_TOKEN_PAYLOAD = '{"tokens":[{"token":"a","start_offset":0,"end_offset":1,"position":0,"type":"<ALPHANUM>"}]}'


def test_analyze_result_decodes_single_token_payload() -> None:
    result = AnalyzeResult.model_validate_json(_SINGLE_TOKEN_PAYLOAD)

    assert len(result.tokens) == 1
    token = result.tokens[0]
    assert token.model_dump() == {
        "token": "a",
        "start_offset": 0,
        "end_offset": 1,
        "position": 0,
        "type": "<ALPHANUM>",
    }


def test_token_ignores_unknown_payload_keys() -> None:
    token = Token.model_validate(
        {
            "token": "a",
            "start_offset": 0,
            "end_offset": 1,
            "position": 0,
            "type": "<ALPHANUM>",
            "positionLength": 1,
        },
    )

    assert set(token.model_dump()) == {"token", "start_offset", "end_offset", "position", "type"}


def test_token_is_immutable() -> None:
    token = Token(token="a", start_offset=0, end_offset=1, position=0, type="<ALPHANUM>")

    with pytest.raises(ValidationError):
        token.token = "b"


def test_analyze_result_defaults_to_no_tokens() -> None:
    assert AnalyzeResult.model_validate({}).tokens == []


def test_analyze_request_exposes_params_as_fresh_dict() -> None:
    request = AnalyzeRequest(method="GET", path="/_analyze", params=(("pretty", "1"),), body="x")

    params = request.query_params
    params["timeout"] = "1s"

    assert request.query_params == {"pretty": "1"}
    assert request.to_payload() == {
        "method": "GET",
        "path": "/_analyze",
        "params": {"pretty": "1"},
        "body": "x",
    }
