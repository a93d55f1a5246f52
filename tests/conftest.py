"""Shared test fixtures."""
from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Mapping

import pytest

from ip_messaging.application.exceptions import TransportError

SERVICE_SID = "IS0001"
CHANNEL_SID = "CH0001"
MESSAGES_PATH = f"/Services/{SERVICE_SID}/Channels/{CHANNEL_SID}/Messages"


def make_message_payload(
    *,
    sid: str = "IM0001",
    body: str = "hello",
    attributes: str = "{}",
    from_: str | None = "alice",
    was_edited: bool = False,
    **extra: Any,
) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "sid": sid,
        "account_sid": "AC0001",
        "service_sid": SERVICE_SID,
        "to": CHANNEL_SID,
        "body": body,
        "attributes": attributes,
        "date_created": "2016-03-24T20:37:57Z",
        "date_updated": "2016-03-24T20:37:57Z",
        "was_edited": was_edited,
        "url": f"https://ip-messaging.test/v1{MESSAGES_PATH}/{sid}",
    }
    if from_ is not None:
        payload["from"] = from_
    payload.update(extra)
    return payload


def make_page_payload(
    sids: list[str],
    *,
    next_url: str | None = None,
    previous_url: str | None = None,
    first_url: str | None = MESSAGES_PATH,
) -> bytes:
    return json.dumps(
        {
            "messages": [make_message_payload(sid=sid, body=f"body {sid}") for sid in sids],
            "meta": {
                "page": 0,
                "page_size": 50,
                "first_page_url": first_url,
                "previous_page_url": previous_url,
                "next_page_url": next_url,
                "url": MESSAGES_PATH,
                "key": "messages",
            },
        }
    ).encode()


@dataclass
class FakeTransport:
    """In-memory transport: canned bodies or errors keyed by path."""

    responses: dict[str, bytes | Exception] = field(default_factory=dict)
    calls: list[tuple[str, str, dict[str, str] | None]] = field(default_factory=list)

    def get(self, query: Mapping[str, str] | None, path: str) -> bytes:
        self.calls.append(("GET", path, None if query is None else dict(query)))
        return self._respond(path)

    def post(self, form: Mapping[str, str], path: str) -> bytes:
        self.calls.append(("POST", path, dict(form)))
        return self._respond(path)

    def _respond(self, path: str) -> bytes:
        result = self.responses.get(path)
        if result is None:
            raise TransportError(f"The requested resource {path} was not found", status_code=404)
        if isinstance(result, Exception):
            raise result
        return result


@pytest.fixture
def transport() -> FakeTransport:
    return FakeTransport()
