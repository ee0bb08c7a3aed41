"""Factory helpers to instantiate the configured analyze transport."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from es_analyze.domain import BackendName
from es_analyze.errors import MissingBackendUrlError, UnsupportedBackendError
from es_analyze.search.adapters import ElasticClientAdapter, HttpxTransport, OpenSearchClientAdapter

if TYPE_CHECKING:
    from es_analyze.search.protocols import Transport

_logger = logging.getLogger(__name__)


def supported_backends() -> tuple[BackendName, BackendName, BackendName]:
    """Return backend names supported by the project.

    Returns:
        tuple[BackendName, BackendName, BackendName]: Supported backend identifiers.

    """
    return (BackendName.HTTP, BackendName.ELASTICSEARCH, BackendName.OPENSEARCH)


def build_analyze_transport(
    *,
    backend: BackendName | str,
    client: object | None = None,
    url: str | None = None,
    timeout_s: float = 30.0,
    verify_certs: bool = True,
) -> Transport:
    """Build a concrete transport from user options.

    Args:
        backend (BackendName | str): Backend identifier.
        client (object | None): Optional pre-configured client (`httpx.Client` for `http`).
        url (str | None): Optional backend URL when no client is injected.
        timeout_s (float): Request timeout in seconds.
        verify_certs (bool): Whether TLS certificates are verified.

    Raises:
        MissingBackendUrlError: If `url` is missing when `client` is absent.
        UnsupportedBackendError: If the backend identifier is unsupported.

    Returns:
        Transport: Transport adapter.

    """
    backend_name = backend.value if isinstance(backend, BackendName) else backend.strip().lower()
    adapters = {
        BackendName.HTTP.value: HttpxTransport,
        BackendName.ELASTICSEARCH.value: ElasticClientAdapter,
        BackendName.OPENSEARCH.value: OpenSearchClientAdapter,
    }
    adapter_class = adapters.get(backend_name)
    if adapter_class is None:
        supported = ", ".join(item.value for item in supported_backends())
        raw_backend = backend.value if isinstance(backend, BackendName) else backend
        raise UnsupportedBackendError(backend=raw_backend, supported=supported)

    if client is not None:
        return adapter_class(client=client)
    if url is None:
        raise MissingBackendUrlError

    _logger.debug("Connecting %s transport to %s.", backend_name, url)
    return adapter_class.from_connection(
        url=url,
        timeout_s=timeout_s,
        verify_certs=verify_certs,
    )
