"""Typed enumerations for CLI/domain choices."""

from __future__ import annotations

from enum import StrEnum


class CommandName(StrEnum):
    """Represent supported top-level CLI commands."""

    ANALYZE = "analyze"


class BackendName(StrEnum):
    """Represent supported analyze transports."""

    HTTP = "http"
    ELASTICSEARCH = "elasticsearch"
    OPENSEARCH = "opensearch"


class FilterProjection(StrEnum):
    """Represent how tokenizer and filter settings reach the outgoing request.

    `IGNORE` accepts the settings but leaves the request untouched.
    `BODY` serializes them, together with the text, into a JSON request body.
    """

    IGNORE = "ignore"
    BODY = "body"


def parse_filter_projection(value: FilterProjection | str) -> FilterProjection:
    """Parse one filter projection mode.

    Args:
        value (FilterProjection | str): Raw or typed projection mode.

    Raises:
        ValueError: If the value is not a known projection mode.

    Returns:
        FilterProjection: Parsed projection mode.

    """
    if isinstance(value, FilterProjection):
        return value
    normalized = value.strip().lower()
    try:
        return FilterProjection(normalized)
    except ValueError as exc:
        supported = ", ".join(item.value for item in FilterProjection)
        msg = f"Unsupported filter projection '{value}'. Supported values: {supported}."
        raise ValueError(msg) from exc
