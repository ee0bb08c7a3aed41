"""Adapters implementing the thin Transport interface."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from importlib import import_module
from typing import TYPE_CHECKING, Any

import httpx

from es_analyze.errors import MissingOptionalDependencyError, TransportError

if TYPE_CHECKING:
    from collections.abc import Mapping

_ELASTIC_MISSING_DEP_MSG = "Install the optional dependency group 'elasticsearch' to use this backend."
_OPENSEARCH_MISSING_DEP_MSG = "Install the optional dependency group 'opensearch' to use this backend."
_JSON_HEADERS = {"accept": "application/json", "content-type": "application/json"}
_logger = logging.getLogger(__name__)


def _response_body(response: Any) -> Any:
    """Unwrap official client responses that carry the payload in `.body`."""
    return getattr(response, "body", response)


def _client_errors(module_name: str, *names: str) -> tuple[type[Exception], ...]:
    """Return the base exception classes exported by an official client package.

    Args:
        module_name (str): Importable package name.
        *names (str): Exception class names exported at package level.

    Returns:
        tuple[type[Exception], ...]: Exception classes found, empty when the package is missing.

    """
    try:
        module = import_module(module_name)
    except ImportError:
        return ()
    errors = (getattr(module, name, None) for name in names)
    return tuple(error for error in errors if isinstance(error, type) and issubclass(error, Exception))


def _client_transport_error(*, method: str, path: str, exc: Exception) -> TransportError:
    """Wrap an official client failure into the project transport error."""
    status_code = getattr(exc, "status_code", None)
    return TransportError(
        method=method,
        path=path,
        error=f"{exc.__class__.__name__}: {exc}",
        status_code=status_code if isinstance(status_code, int) else None,
    )


@dataclass(frozen=True, slots=True)
class HttpxTransport:
    """Send analyze requests with a plain `httpx.Client`."""

    client: httpx.Client
    backend_name: str = "http"

    @classmethod
    def from_connection(
        cls,
        *,
        url: str,
        timeout_s: float,
        verify_certs: bool,
    ) -> HttpxTransport:
        """Build a transport from connection settings.

        Args:
            url (str): Backend base URL.
            timeout_s (float): Request timeout in seconds.
            verify_certs (bool): Whether TLS certificates are verified.

        Returns:
            HttpxTransport: Configured transport.

        """
        client = httpx.Client(base_url=url, timeout=timeout_s, verify=verify_certs)
        return cls(client=client)

    def perform_request(
        self,
        *,
        method: str,
        path: str,
        params: Mapping[str, str],
        body: str | None,
    ) -> bytes:
        """Send one request and return the raw response bytes.

        Args:
            method (str): HTTP method.
            path (str): Already-encoded request path.
            params (Mapping[str, str]): Query parameters.
            body (str | None): Raw request body.

        Raises:
            TransportError: If the call fails or the backend answers with an error status.

        Returns:
            bytes: Raw response body.

        """
        content = None if body is None else body.encode("utf-8")
        try:
            response = self.client.request(
                method,
                path,
                params=dict(params),
                content=content,
                headers=_JSON_HEADERS,
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise TransportError(
                method=method,
                path=path,
                error=f"{exc.__class__.__name__}: {exc}",
                status_code=exc.response.status_code,
            ) from exc
        except httpx.HTTPError as exc:
            raise TransportError(
                method=method,
                path=path,
                error=f"{exc.__class__.__name__}: {exc}",
            ) from exc
        return response.content

    def close(self) -> None:
        """Close the underlying HTTP client."""
        self.client.close()


@dataclass(frozen=True, slots=True)
class ElasticClientAdapter:
    """Thin adapter around the Elasticsearch Python client."""

    client: Any
    backend_name: str = "elasticsearch"

    @classmethod
    def from_connection(
        cls,
        *,
        url: str,
        timeout_s: float,
        verify_certs: bool,
    ) -> ElasticClientAdapter:
        """Build an adapter from connection settings.

        Args:
            url (str): Backend URL.
            timeout_s (float): Request timeout in seconds.
            verify_certs (bool): Whether TLS certificates are verified.

        Raises:
            MissingOptionalDependencyError: If `elasticsearch` is not installed.

        Returns:
            ElasticClientAdapter: Configured adapter.

        """
        try:
            module = import_module("elasticsearch")
        except ImportError as exc:
            raise MissingOptionalDependencyError(_ELASTIC_MISSING_DEP_MSG) from exc

        elasticsearch_class = module.Elasticsearch
        client = elasticsearch_class(
            hosts=[url],
            request_timeout=timeout_s,
            verify_certs=verify_certs,
        )
        return cls(client=client)

    def perform_request(
        self,
        *,
        method: str,
        path: str,
        params: Mapping[str, str],
        body: str | None,
    ) -> Any:
        """Send one request through the client's low-level request API.

        Args:
            method (str): HTTP method.
            path (str): Already-encoded request path.
            params (Mapping[str, str]): Query parameters.
            body (str | None): Raw request body.

        Raises:
            TransportError: If the client raises one of its `ApiError`/`TransportError` classes.

        Returns:
            Any: Response payload.

        """
        try:
            response = self.client.perform_request(
                method,
                path,
                params=dict(params),
                headers=dict(_JSON_HEADERS),
                body=body,
            )
        except _client_errors("elasticsearch", "ApiError", "TransportError") as exc:
            raise _client_transport_error(method=method, path=path, exc=exc) from exc
        return _response_body(response)

    def close(self) -> None:
        """Close the underlying client."""
        self.client.close()


@dataclass(frozen=True, slots=True)
class OpenSearchClientAdapter:
    """Thin adapter around the OpenSearch Python client."""

    client: Any
    backend_name: str = "opensearch"

    @classmethod
    def from_connection(
        cls,
        *,
        url: str,
        timeout_s: float,
        verify_certs: bool,
    ) -> OpenSearchClientAdapter:
        """Build an adapter from connection settings.

        Args:
            url (str): Backend URL.
            timeout_s (float): Request timeout in seconds.
            verify_certs (bool): Whether TLS certificates are verified.

        Raises:
            MissingOptionalDependencyError: If `opensearch-py` is not installed.

        Returns:
            OpenSearchClientAdapter: Configured adapter.

        """
        try:
            module = import_module("opensearchpy")
        except ImportError as exc:
            raise MissingOptionalDependencyError(_OPENSEARCH_MISSING_DEP_MSG) from exc

        opensearch_class = module.OpenSearch
        client = opensearch_class(
            hosts=[url],
            timeout=timeout_s,
            use_ssl=url.startswith("https://"),
            verify_certs=verify_certs,
        )
        return cls(client=client)

    def perform_request(
        self,
        *,
        method: str,
        path: str,
        params: Mapping[str, str],
        body: str | None,
    ) -> Any:
        """Send one request through the client's transport layer.

        Args:
            method (str): HTTP method.
            path (str): Already-encoded request path.
            params (Mapping[str, str]): Query parameters.
            body (str | None): Raw request body.

        Raises:
            TransportError: If the client raises an `OpenSearchException`.

        Returns:
            Any: Response payload.

        """
        try:
            response = self.client.transport.perform_request(
                method,
                path,
                params=dict(params),
                body=body,
            )
        except _client_errors("opensearchpy", "OpenSearchException") as exc:
            raise _client_transport_error(method=method, path=path, exc=exc) from exc
        return _response_body(response)

    def close(self) -> None:
        """Close the underlying client."""
        self.client.close()
