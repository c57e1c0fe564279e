"""Builder para mensagens de texto."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from api.connectors.line.models import TextMessage


class TextPayloadBuilder:
    """Builder para mensagens de texto simples."""

    def build(self, message: TextMessage) -> dict[str, Any]:
        return {"text": message.text}
