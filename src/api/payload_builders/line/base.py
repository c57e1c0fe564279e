"""Contrato base dos builders de payload LINE."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from api.connectors.line.models import Message


class PayloadBuilder(Protocol):
    """Constrói os campos específicos de um tipo de mensagem."""

    def build(self, message: Message) -> dict[str, Any]:
        """Retorna os campos do message object (sem o discriminador)."""
        ...


def build_base_payload(message: Message) -> dict[str, Any]:
    """Payload mínimo comum a toda mensagem: o discriminador ``type``."""
    return {"type": str(message.type)}
