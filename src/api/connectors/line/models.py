"""Modelos de requisição e resposta da LINE Messaging API.

Mensagens formam uma união discriminada pelo campo ``type``; a
serialização para JSON fica em api/payload_builders/line.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from api.connectors.line.constants import MessageType


@dataclass(frozen=True, slots=True)
class TextMessage:
    """Mensagem de texto simples."""

    text: str
    type: Literal[MessageType.TEXT] = field(default=MessageType.TEXT, init=False)


@dataclass(frozen=True, slots=True)
class ImageMessage:
    original_content_url: str
    preview_image_url: str
    type: Literal[MessageType.IMAGE] = field(default=MessageType.IMAGE, init=False)


@dataclass(frozen=True, slots=True)
class VideoMessage:
    original_content_url: str
    preview_image_url: str
    type: Literal[MessageType.VIDEO] = field(default=MessageType.VIDEO, init=False)


@dataclass(frozen=True, slots=True)
class AudioMessage:
    """Mensagem de áudio; ``duration`` em milissegundos."""

    original_content_url: str
    duration: int
    type: Literal[MessageType.AUDIO] = field(default=MessageType.AUDIO, init=False)


@dataclass(frozen=True, slots=True)
class LocationMessage:
    title: str
    address: str
    latitude: float
    longitude: float
    type: Literal[MessageType.LOCATION] = field(default=MessageType.LOCATION, init=False)


@dataclass(frozen=True, slots=True)
class StickerMessage:
    package_id: str
    sticker_id: str
    type: Literal[MessageType.STICKER] = field(default=MessageType.STICKER, init=False)


Message = (
    TextMessage
    | ImageMessage
    | VideoMessage
    | AudioMessage
    | LocationMessage
    | StickerMessage
)


def text_messages(message: str | Sequence[str]) -> tuple[TextMessage, ...]:
    """Envolve uma string (ou lista de strings) em mensagens de texto, em ordem."""
    if isinstance(message, str):
        return (TextMessage(text=message),)
    return tuple(TextMessage(text=item) for item in message)


@dataclass(frozen=True, slots=True)
class PushMessage:
    """Envelope de push: destinatário + mensagens em ordem."""

    to: str
    messages: tuple[Message, ...]

    def __post_init__(self) -> None:
        # Normaliza listas para tupla mantendo o objeto imutável
        object.__setattr__(self, "messages", tuple(self.messages))

    @classmethod
    def from_text(cls, to: str, message: str | Sequence[str]) -> PushMessage:
        """Cria push a partir de um texto ou de uma lista de textos."""
        return cls(to=to, messages=text_messages(message))


@dataclass(frozen=True, slots=True)
class ReplyMessage:
    """Envelope de resposta a um evento (via reply token)."""

    reply_token: str
    messages: tuple[Message, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "messages", tuple(self.messages))

    @classmethod
    def from_text(cls, reply_token: str, message: str | Sequence[str]) -> ReplyMessage:
        return cls(reply_token=reply_token, messages=text_messages(message))


@dataclass(frozen=True, slots=True)
class MulticastMessage:
    """Envelope de multicast: vários destinatários, mesmas mensagens."""

    to: tuple[str, ...]
    messages: tuple[Message, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "to", tuple(self.to))
        object.__setattr__(self, "messages", tuple(self.messages))

    @classmethod
    def from_text(
        cls,
        to: Sequence[str],
        message: str | Sequence[str],
    ) -> MulticastMessage:
        return cls(to=tuple(to), messages=text_messages(message))


class Profile(BaseModel):
    """Perfil de usuário retornado pela LINE."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)

    display_name: str = Field(alias="displayName")
    user_id: str = Field(alias="userId")
    picture_url: str | None = Field(default=None, alias="pictureUrl")
    status_message: str | None = Field(default=None, alias="statusMessage")


class MemberIds(BaseModel):
    """Página de IDs de membros de um grupo."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)

    member_ids: list[str] = Field(default_factory=list, alias="memberIds")
    next: str | None = None
