"""Client handle that hands out analyze builders bound to one transport."""

from __future__ import annotations

from typing import TYPE_CHECKING

from es_analyze.analyze.service import AnalyzeService
from es_analyze.domain import BackendName, FilterProjection, parse_filter_projection
from es_analyze.search.decoding import PydanticDecoder
from es_analyze.search.factory import build_analyze_transport

if TYPE_CHECKING:
    from types import TracebackType

    from es_analyze.search.protocols import Decoder, Transport


class AnalyzeClient:
    """Own one transport/decoder pair and create a fresh builder per call."""

    def __init__(
        self,
        transport: Transport,
        decoder: Decoder | None = None,
        *,
        filter_projection: FilterProjection | str = FilterProjection.IGNORE,
        owns_transport: bool = True,
    ) -> None:
        """Store the collaborators shared by every builder of this client.

        Args:
            transport (Transport): Transport used to send requests.
            decoder (Decoder | None): Response decoder; pydantic-backed by default.
            filter_projection (FilterProjection | str): Default projection for new builders.
            owns_transport (bool): Whether `close()` also closes the transport.

        """
        self.transport = transport
        self.owns_transport = owns_transport
        self.decoder = decoder if decoder is not None else PydanticDecoder()
        self.filter_projection = parse_filter_projection(filter_projection)

    @classmethod
    def from_connection(
        cls,
        *,
        backend: BackendName | str = BackendName.HTTP,
        url: str | None = None,
        client: object | None = None,
        timeout_s: float = 30.0,
        verify_certs: bool = True,
        filter_projection: FilterProjection | str = FilterProjection.IGNORE,
    ) -> AnalyzeClient:
        """Build a client and its transport from connection settings.

        An injected `client` stays owned by the caller: closing this client
        leaves it open.

        Args:
            backend (BackendName | str): Backend identifier.
            url (str | None): Backend URL when no client is injected.
            client (object | None): Optional pre-configured backend client.
            timeout_s (float): Request timeout in seconds.
            verify_certs (bool): Whether TLS certificates are verified.
            filter_projection (FilterProjection | str): Default projection for new builders.

        Returns:
            AnalyzeClient: Configured client.

        """
        transport = build_analyze_transport(
            backend=backend,
            client=client,
            url=url,
            timeout_s=timeout_s,
            verify_certs=verify_certs,
        )
        return cls(transport, filter_projection=filter_projection, owns_transport=client is None)

    def analyze(self) -> AnalyzeService:
        """Return a new analyze builder.

        Returns:
            AnalyzeService: Builder bound to this client's transport and decoder.

        """
        return AnalyzeService(
            self.transport,
            self.decoder,
            filter_projection=self.filter_projection,
        )

    def close(self) -> None:
        """Close the transport when this client owns it."""
        if not self.owns_transport:
            return
        close = getattr(self.transport, "close", None)
        if callable(close):
            close()

    def __enter__(self) -> AnalyzeClient:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.close()
