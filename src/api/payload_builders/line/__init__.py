"""Builders de payload para a LINE Messaging API.

Cada tipo de message object tem seu builder; a factory despacha pelo
discriminador ``type`` e monta os envelopes de envio.
"""

from api.payload_builders.line.base import PayloadBuilder, build_base_payload
from api.payload_builders.line.factory import (
    build_message_payload,
    build_request_payload,
    get_payload_builder,
)

__all__ = [
    "PayloadBuilder",
    "build_base_payload",
    "build_message_payload",
    "build_request_payload",
    "get_payload_builder",
]
