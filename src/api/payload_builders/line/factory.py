"""Factory de payloads LINE: mensagens por tipo e envelopes de envio."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel

from api.connectors.line.constants import MessageType
from api.connectors.line.models import MulticastMessage, PushMessage, ReplyMessage
from api.payload_builders.line.base import PayloadBuilder, build_base_payload
from api.payload_builders.line.location import (
    LocationPayloadBuilder,
    StickerPayloadBuilder,
)
from api.payload_builders.line.media import (
    AudioPayloadBuilder,
    ImagePayloadBuilder,
    VideoPayloadBuilder,
)
from api.payload_builders.line.text import TextPayloadBuilder

if TYPE_CHECKING:
    from collections.abc import Iterable

    from api.connectors.line.models import Message

# Mapeamento de tipo de mensagem para builder
_BUILDERS: dict[MessageType, PayloadBuilder] = {
    MessageType.TEXT: TextPayloadBuilder(),
    MessageType.IMAGE: ImagePayloadBuilder(),
    MessageType.VIDEO: VideoPayloadBuilder(),
    MessageType.AUDIO: AudioPayloadBuilder(),
    MessageType.LOCATION: LocationPayloadBuilder(),
    MessageType.STICKER: StickerPayloadBuilder(),
}


def get_payload_builder(message_type: MessageType) -> PayloadBuilder | None:
    """Retorna o builder para o tipo de mensagem (None se não suportado)."""
    return _BUILDERS.get(message_type)


def build_message_payload(message: Message) -> dict[str, Any]:
    """Constrói o message object JSON de uma mensagem.

    Raises:
        ValueError: Se o tipo de mensagem não for suportado
    """
    try:
        builder = get_payload_builder(MessageType(message.type))
    except ValueError:
        builder = None
    if builder is None:
        raise ValueError(f"Tipo de mensagem não suportado: {message.type}")

    payload = build_base_payload(message)
    payload.update(builder.build(message))
    return payload


def _build_messages(messages: Iterable[Message]) -> list[dict[str, Any]]:
    return [build_message_payload(message) for message in messages]


def build_request_payload(body: object) -> Any:
    """Converte um corpo de requisição em estrutura serializável em JSON.

    Aceita envelopes (push, reply, multicast), mensagens avulsas,
    modelos pydantic e mappings.

    Raises:
        TypeError: Se o corpo não tiver representação JSON conhecida
    """
    if isinstance(body, PushMessage):
        return {"to": body.to, "messages": _build_messages(body.messages)}
    if isinstance(body, ReplyMessage):
        return {"replyToken": body.reply_token, "messages": _build_messages(body.messages)}
    if isinstance(body, MulticastMessage):
        return {"to": list(body.to), "messages": _build_messages(body.messages)}
    if isinstance(getattr(body, "type", None), MessageType):
        return build_message_payload(body)  # type: ignore[arg-type]
    if isinstance(body, BaseModel):
        return body.model_dump(mode="json", by_alias=True, exclude_none=True)
    if isinstance(body, Mapping):
        return dict(body)
    raise TypeError(f"Corpo de requisição não serializável: {type(body).__name__}")
