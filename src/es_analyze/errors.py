"""Project-specific exceptions for es-analyze."""


class EsAnalyzeError(Exception):
    """Base exception for the project."""


class MissingOptionalDependencyError(ImportError, EsAnalyzeError):
    """Raised when an optional dependency is not installed."""


class UnsupportedBackendError(ValueError, EsAnalyzeError):
    """Raised when the user asks for an unsupported backend."""

    def __init__(self, backend: str, supported: str) -> None:
        """Build exception payload for unsupported backend values."""
        super().__init__(f"Unsupported backend '{backend}'. Supported values: {supported}.")


class MissingBackendUrlError(ValueError, EsAnalyzeError):
    """Raised when no backend URL is supplied and no client is injected."""

    def __init__(self) -> None:
        """Build exception payload for missing backend URLs."""
        super().__init__("Backend URL is required when no client instance is provided.")


class IndexNameEncodingError(ValueError, EsAnalyzeError):
    """Raised when an index name cannot be percent-encoded into the request path."""

    def __init__(self, index: str) -> None:
        """Build exception payload for index names that cannot be encoded."""
        super().__init__(f"Cannot encode index name {index!r} into the request path.")


class TransportError(RuntimeError, EsAnalyzeError):
    """Raised when the HTTP call to the backend fails."""

    def __init__(self, *, method: str, path: str, error: str, status_code: int | None = None) -> None:
        """Build exception payload for failed backend calls."""
        self.status_code = status_code
        super().__init__(f"{method} {path} failed: {error}")


class ResponseDecodeError(ValueError, EsAnalyzeError):
    """Raised when a backend payload does not match the expected shape."""

    def __init__(self, model: str, error: str) -> None:
        """Build exception payload for undecodable responses."""
        super().__init__(f"Cannot decode backend response into {model}: {error}")


class RequestBodyEncodingError(ValueError, EsAnalyzeError):
    """Raised when the request body cannot be encoded as UTF-8."""

    def __init__(self) -> None:
        """Build exception payload for request bodies that cannot be encoded."""
        super().__init__("Cannot encode the request body as UTF-8.")
