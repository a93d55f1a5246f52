"""Cursor over the pages of a channel's message listing.

Each page is an immutable snapshot holding the server's page links and the
transport it was fetched with. Moving to another page returns a new
``MessageList`` bound to the same transport; the current one is unchanged.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ip_messaging.application.exceptions import (
    NoFirstPageError,
    NoNextPageError,
    NoPreviousPageError,
)
from ip_messaging.application.ports.transport import Transport
from ip_messaging.domain.entities.message import Message
from ip_messaging.infrastructure.http.mappers import decode_page
from ip_messaging.infrastructure.http.schemas import PageMeta

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class MessageList:
    messages: tuple[Message, ...]
    meta: PageMeta
    transport: Transport = field(repr=False, compare=False)

    @classmethod
    def from_response(cls, raw: bytes, transport: Transport) -> MessageList:
        messages, meta = decode_page(raw)
        return cls(messages=messages, meta=meta, transport=transport)

    def get_messages(self) -> tuple[Message, ...]:
        return self.messages

    def has_next_page(self) -> bool:
        return bool(self.meta.next_page_url)

    def next_page(self) -> MessageList:
        if not self.has_next_page():
            raise NoNextPageError("No next page")
        return self._get_page(self.meta.next_page_url)

    def has_previous_page(self) -> bool:
        return bool(self.meta.previous_page_url)

    def previous_page(self) -> MessageList:
        if not self.has_previous_page():
            raise NoPreviousPageError("No previous page")
        return self._get_page(self.meta.previous_page_url)

    def first_page(self) -> MessageList:
        if not self.meta.first_page_url:
            raise NoFirstPageError("No first page link")
        return self._get_page(self.meta.first_page_url)

    def get_all_messages(self) -> list[Message]:
        """Collect this page and every page after it.

        Fails as a whole on the first page that cannot be fetched. There is
        no page limit: a server that never stops returning a next link keeps
        this looping. Use ``next_page`` directly to impose a bound.
        """
        messages = list(self.messages)
        page = self
        while page.has_next_page():
            page = page.next_page()
            messages.extend(page.messages)
        return messages

    def _get_page(self, url: str) -> MessageList:
        logger.debug("Fetching message page %s", url)
        raw = self.transport.get(None, url)
        return MessageList.from_response(raw, self.transport)
