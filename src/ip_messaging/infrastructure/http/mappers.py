from __future__ import annotations

from pydantic import ValidationError

from ip_messaging.application.exceptions import DecodeError
from ip_messaging.domain.entities.message import Message
from ip_messaging.infrastructure.http.schemas import (
    MessageListPayload,
    MessagePayload,
    PageMeta,
)


def payload_to_entity(payload: MessagePayload) -> Message:
    return Message(
        sid=payload.sid,
        account_sid=payload.account_sid,
        service_sid=payload.service_sid,
        to=payload.to,
        body=payload.body,
        attributes=payload.attributes,
        date_created=payload.date_created,
        date_updated=payload.date_updated,
        was_edited=payload.was_edited,
        from_=payload.from_,
        url=payload.url,
    )


def decode_message(raw: bytes) -> Message:
    try:
        payload = MessagePayload.model_validate_json(raw)
    except ValidationError as exc:
        raise DecodeError(f"Malformed message response: {exc}") from exc
    return payload_to_entity(payload)


def decode_page(raw: bytes) -> tuple[tuple[Message, ...], PageMeta]:
    try:
        payload = MessageListPayload.model_validate_json(raw)
    except ValidationError as exc:
        raise DecodeError(f"Malformed message list response: {exc}") from exc
    messages = tuple(payload_to_entity(p) for p in payload.messages)
    return messages, payload.meta
