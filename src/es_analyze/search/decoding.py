"""Default pydantic-backed response decoder."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING

from pydantic import ValidationError

from es_analyze.errors import ResponseDecodeError

if TYPE_CHECKING:
    from es_analyze.search.protocols import ModelT, RawPayload


@dataclass(frozen=True, slots=True)
class PydanticDecoder:
    """Decode JSON text or already-parsed mappings with pydantic validation."""

    def decode(self, payload: RawPayload, model: type[ModelT]) -> ModelT:  # noqa: PLR6301
        """Decode a raw payload into `model`.

        Args:
            payload (RawPayload): JSON bytes/text, or a decoded mapping.
            model (type[ModelT]): Target pydantic model.

        Raises:
            ResponseDecodeError: If the payload does not match the model shape.

        Returns:
            ModelT: Decoded model instance.

        """
        try:
            if isinstance(payload, Mapping):
                return model.model_validate(dict(payload))
            return model.model_validate_json(payload)
        except ValidationError as exc:
            raise ResponseDecodeError(model=model.__name__, error=str(exc)) from exc
