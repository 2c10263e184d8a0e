"""Client for the management service's application API."""

from __future__ import annotations

import logging
from types import TracebackType

import httpx

from .errors import ApiError, TransportError
from .query import ById, QueryIntent

logger = logging.getLogger(__name__)


class ApplicationClient:
    """Thin wrapper around the experimental application endpoint."""

    def __init__(
        self,
        *,
        base_url: str,
        headers: dict[str, str] | None = None,
        timeout_seconds: float = 15.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._client = httpx.Client(
            base_url=base_url.rstrip("/"),
            headers=headers,
            timeout=httpx.Timeout(timeout_seconds),
            transport=transport,
        )

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> ApplicationClient:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def fetch(self, intent: QueryIntent) -> bytes:
        """Issue the single GET the intent names and return the raw body."""
        path = intent.path()
        logger.debug("GET %s", path)
        try:
            resp = self._client.get(path)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise TransportError(f"request to {path} failed: {exc}") from exc

        logger.debug("GET %s -> %d", path, resp.status_code)
        if resp.status_code != 200:
            raise ApiError(
                status_code=resp.status_code,
                method="GET",
                url=str(resp.request.url),
                response_text=(resp.text or "").strip(),
                hint="possible invalid ID" if isinstance(intent, ById) else None,
            )
        return resp.content
