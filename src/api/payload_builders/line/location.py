"""Builders para mensagens de localização e sticker."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from api.connectors.line.models import LocationMessage, StickerMessage


class LocationPayloadBuilder:
    """Builder para mensagens de localização."""

    def build(self, message: LocationMessage) -> dict[str, Any]:
        return {
            "title": message.title,
            "address": message.address,
            "latitude": message.latitude,
            "longitude": message.longitude,
        }


class StickerPayloadBuilder:
    """Builder para stickers (package_id + sticker_id do catálogo LINE)."""

    def build(self, message: StickerMessage) -> dict[str, Any]:
        return {
            "packageId": message.package_id,
            "stickerId": message.sticker_id,
        }
