"""Constantes e enums do canal LINE."""

from __future__ import annotations

from enum import StrEnum

from config.settings.line import LINE_API_BASE_URL

# Timeout fixo por requisição; não configurável por instância
REQUEST_TIMEOUT_SECONDS: float = 10.0

MEDIA_TYPE_JSON = "application/json; charset=utf-8"
MEDIA_TYPE_JPEG = "image/jpeg"
MEDIA_TYPE_PNG = "image/png"


class MessageType(StrEnum):
    """Tipos de message object aceitos pela LINE Messaging API."""

    TEXT = "text"
    IMAGE = "image"
    VIDEO = "video"
    AUDIO = "audio"
    LOCATION = "location"
    STICKER = "sticker"


class ImageFormat(StrEnum):
    """Formatos de imagem aceitos em upload binário."""

    JPEG = "jpeg"
    PNG = "png"


IMAGE_MEDIA_TYPES: dict[str, str] = {
    ImageFormat.JPEG: MEDIA_TYPE_JPEG,
    ImageFormat.PNG: MEDIA_TYPE_PNG,
}
