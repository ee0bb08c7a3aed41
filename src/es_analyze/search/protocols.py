"""Protocols for the transport and decoder collaborators of analyze requests."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol, TypeVar

from pydantic import BaseModel

ModelT = TypeVar("ModelT", bound=BaseModel)

RawPayload = bytes | str | Mapping[str, Any]


class Transport(Protocol):
    """Define a thin interface to send one HTTP request to Elasticsearch/OpenSearch."""

    backend_name: str

    def perform_request(
        self,
        *,
        method: str,
        path: str,
        params: Mapping[str, str],
        body: str | None,
    ) -> RawPayload:
        """Send one request and return the raw response payload.

        Args:
            method (str): HTTP method.
            path (str): Already-encoded request path.
            params (Mapping[str, str]): Query parameters.
            body (str | None): Raw request body.

        Returns:
            RawPayload: Raw response payload (bytes, text, or decoded mapping).

        """


class Decoder(Protocol):
    """Define how a raw response payload turns into a typed result."""

    def decode(self, payload: RawPayload, model: type[ModelT]) -> ModelT:
        """Decode a raw payload into `model`.

        Args:
            payload (RawPayload): Raw response payload.
            model (type[ModelT]): Target pydantic model.

        Returns:
            ModelT: Decoded model instance.

        """
