from __future__ import annotations


class IPMessagingError(Exception):
    """Base client error."""

    def __init__(self, detail: str = "") -> None:
        self.detail = detail
        super().__init__(detail)


class TransportError(IPMessagingError):
    """The remote call failed: network, auth or a non-2xx status."""

    def __init__(self, detail: str = "", status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(detail)


class DecodeError(IPMessagingError):
    pass


class PaginationError(IPMessagingError):
    pass


class NoNextPageError(PaginationError):
    pass


class NoPreviousPageError(PaginationError):
    pass


class NoFirstPageError(PaginationError):
    pass
