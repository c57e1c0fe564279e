"""Builders para mensagens de mídia (imagem, vídeo, áudio).

A LINE exige URLs HTTPS públicas para o conteúdo; este módulo apenas
mapeia os campos, sem validar as URLs.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from api.connectors.line.models import AudioMessage, ImageMessage, VideoMessage


def _build_media_object(
    original_content_url: str,
    preview_image_url: str,
) -> dict[str, Any]:
    return {
        "originalContentUrl": original_content_url,
        "previewImageUrl": preview_image_url,
    }


class ImagePayloadBuilder:
    """Builder para mensagens de imagem."""

    def build(self, message: ImageMessage) -> dict[str, Any]:
        return _build_media_object(message.original_content_url, message.preview_image_url)


class VideoPayloadBuilder:
    """Builder para mensagens de vídeo."""

    def build(self, message: VideoMessage) -> dict[str, Any]:
        return _build_media_object(message.original_content_url, message.preview_image_url)


class AudioPayloadBuilder:
    """Builder para mensagens de áudio (duração em ms)."""

    def build(self, message: AudioMessage) -> dict[str, Any]:
        return {
            "originalContentUrl": message.original_content_url,
            "duration": message.duration,
        }
