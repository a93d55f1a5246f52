"""Wire models for the messaging API's JSON responses."""
from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator


class MessagePayload(BaseModel):
    sid: str
    account_sid: str = ""
    service_sid: str = ""
    to: str = ""
    body: str
    attributes: str = ""
    date_created: datetime | None = None
    date_updated: datetime | None = None
    was_edited: bool = False
    from_: str | None = Field(default=None, alias="from")
    url: str = ""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    @field_validator("account_sid", "service_sid", "to", "attributes", "url", mode="before")
    @classmethod
    def _null_is_empty(cls, value: object) -> object:
        if value is None:
            return ""
        return value


class PageMeta(BaseModel):
    page: int | None = None
    page_size: int | None = None
    first_page_url: str | None = None
    previous_page_url: str | None = None
    next_page_url: str | None = None
    url: str | None = None
    key: str | None = None

    model_config = ConfigDict(extra="ignore", frozen=True)

    @field_validator("first_page_url", "previous_page_url", "next_page_url", mode="before")
    @classmethod
    def _blank_link_is_absent(cls, value: object) -> object:
        # The API sends "" or null on the last/first page; keep one representation.
        if value == "":
            return None
        return value


class MessageListPayload(BaseModel):
    messages: list[MessagePayload]
    meta: PageMeta = Field(default_factory=PageMeta)

    model_config = ConfigDict(extra="ignore")
