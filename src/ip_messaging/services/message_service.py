from __future__ import annotations

from ip_messaging.application.ports.transport import Transport
from ip_messaging.domain.entities.message import Message
from ip_messaging.infrastructure.http.mappers import decode_message
from ip_messaging.services.message_list import MessageList


def _messages_path(service_sid: str, channel_sid: str) -> str:
    return f"/Services/{service_sid}/Channels/{channel_sid}/Messages"


def _message_path(service_sid: str, channel_sid: str, message_sid: str) -> str:
    return f"{_messages_path(service_sid, channel_sid)}/{message_sid}"


def send_message(
    transport: Transport,
    service_sid: str,
    channel_sid: str,
    body: str,
    attributes: str,
    from_: str | None = None,
) -> Message:
    """Post a new message to a channel.

    ``From`` is only sent when given; the server defaults the sender
    otherwise.
    """
    form = {"Body": body, "Attributes": attributes}
    if from_:
        form["From"] = from_

    raw = transport.post(form, _messages_path(service_sid, channel_sid))
    return decode_message(raw)


def update_message(
    transport: Transport,
    service_sid: str,
    channel_sid: str,
    message_sid: str,
    body: str,
    attributes: str,
) -> Message:
    """Replace body and attributes of an existing message.

    Both fields are always sent, even if only one of them changed.
    """
    form = {"Body": body, "Attributes": attributes}
    raw = transport.post(form, _message_path(service_sid, channel_sid, message_sid))
    return decode_message(raw)


def get_message(
    transport: Transport,
    service_sid: str,
    channel_sid: str,
    message_sid: str,
) -> Message:
    raw = transport.get({}, _message_path(service_sid, channel_sid, message_sid))
    return decode_message(raw)


def list_messages(
    transport: Transport,
    service_sid: str,
    channel_sid: str,
) -> MessageList:
    """Fetch the first page of a channel's messages."""
    raw = transport.get(None, _messages_path(service_sid, channel_sid))
    return MessageList.from_response(raw, transport)
