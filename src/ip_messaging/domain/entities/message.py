from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True, slots=True)
class Message:
    sid: str
    account_sid: str
    service_sid: str
    to: str
    body: str
    attributes: str
    date_created: datetime | None
    date_updated: datetime | None
    was_edited: bool
    from_: str | None
    url: str
