"""httpx-backed transport for the messaging REST API."""
from __future__ import annotations

import logging
from typing import Any, Mapping

import httpx

from ip_messaging.application.exceptions import TransportError
from ip_messaging.config import Settings, settings

logger = logging.getLogger(__name__)


class HttpTransport:
    """Basic-auth client rooted at the service URL.

    Relative paths are resolved against ``base_url``; absolute URLs (as
    found in page links) are requested as-is. No retries are attempted.

    An already configured ``client`` may be passed instead of the
    connection arguments; it is then left open by ``close()``.
    """

    def __init__(
        self,
        base_url: str = "",
        account_sid: str = "",
        auth_token: str = "",
        *,
        timeout: float = 30.0,
        transport: httpx.BaseTransport | None = None,
        client: httpx.Client | None = None,
    ) -> None:
        self._owns_client = client is None
        if client is None:
            client = httpx.Client(
                base_url=base_url,
                auth=httpx.BasicAuth(account_sid, auth_token),
                timeout=timeout,
                transport=transport,
            )
        self._client = client

    @classmethod
    def from_settings(cls, cfg: Settings = settings) -> HttpTransport:
        return cls(
            cfg.IP_MESSAGING_BASE_URL,
            cfg.IP_MESSAGING_ACCOUNT_SID,
            cfg.IP_MESSAGING_AUTH_TOKEN,
            timeout=cfg.IP_MESSAGING_TIMEOUT,
        )

    def get(self, query: Mapping[str, str] | None, path: str) -> bytes:
        return self._request("GET", path, params=dict(query) if query else None)

    def post(self, form: Mapping[str, str], path: str) -> bytes:
        return self._request("POST", path, data=dict(form))

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> HttpTransport:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def _request(self, method: str, path: str, **kwargs: Any) -> bytes:
        logger.debug("%s %s", method, path)
        try:
            response = self._client.request(method, path, **kwargs)
        except httpx.HTTPError as exc:
            raise TransportError(f"{method} {path} failed: {exc}") from exc

        logger.debug("%s %s -> %d", method, path, response.status_code)
        if response.is_error:
            raise TransportError(
                _error_detail(response),
                status_code=response.status_code,
            )
        return response.content


def _error_detail(response: httpx.Response) -> str:
    try:
        data = response.json()
    except ValueError:
        return response.text or response.reason_phrase
    if isinstance(data, dict) and data.get("message"):
        return str(data["message"])
    return response.text
