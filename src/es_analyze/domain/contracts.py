"""Domain contracts for analyze requests and results."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr


class Token(BaseModel):
    """Represent one token of analyzed text, as returned by the engine.

    Fields are strict: strings, booleans or floats in integer fields are
    rejected instead of coerced.
    """

    model_config = ConfigDict(frozen=True)

    token: StrictStr
    start_offset: StrictInt
    end_offset: StrictInt
    position: StrictInt
    type: StrictStr


class AnalyzeResult(BaseModel):
    """Represent the outcome of analyzing text, tokens in engine order."""

    tokens: list[Token] = Field(default_factory=list)


@dataclass(frozen=True, slots=True)
class AnalyzeRequest:
    """Describe one analyze call independently of the transport."""

    method: str
    path: str
    params: tuple[tuple[str, str], ...] = ()
    body: str | None = None

    @property
    def query_params(self) -> dict[str, str]:
        """Return query parameters as a fresh dictionary.

        Returns:
            dict[str, str]: Query parameters in insertion order.

        """
        return dict(self.params)

    def to_payload(self) -> dict[str, Any]:
        """Return a JSON-serializable view of the request.

        Returns:
            dict[str, Any]: Request description payload.

        """
        return {
            "method": self.method,
            "path": self.path,
            "params": self.query_params,
            "body": self.body,
        }
