from __future__ import annotations

from typing import Mapping, Protocol


class Transport(Protocol):
    """Authenticated access to the messaging API.

    Both calls return the raw response body and raise TransportError
    on any failure.
    """

    def get(self, query: Mapping[str, str] | None, path: str) -> bytes: ...

    def post(self, form: Mapping[str, str], path: str) -> bytes: ...
