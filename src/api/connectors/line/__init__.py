"""Conector LINE - adapter de borda para a LINE Messaging API.

Este módulo é o único ponto de IO para o canal LINE.
Responsabilidades:
- Núcleo HTTP autenticado (LineHttpClient)
- Endpoints de envio, perfis, grupos e rich menus (LineMessagingClient)
- Modelos de requisição/resposta
- Erros da API e classificação de falhas
- Serialização de query string
"""

from .constants import MessageType
from .http_client import LineHttpClient
from .line_errors import (
    LineConfigurationError,
    LineErrorDetail,
    LineErrorKind,
    LineErrorResponse,
    LineMessagingError,
    parse_line_error,
)
from .messaging_client import LineMessagingClient, create_line_messaging_client
from .models import (
    AudioMessage,
    ImageMessage,
    LocationMessage,
    MemberIds,
    Message,
    MulticastMessage,
    Profile,
    PushMessage,
    ReplyMessage,
    StickerMessage,
    TextMessage,
    VideoMessage,
)
from .query import to_query_string

__all__ = [
    "AudioMessage",
    "ImageMessage",
    "LineConfigurationError",
    "LineErrorDetail",
    "LineErrorKind",
    "LineErrorResponse",
    "LineHttpClient",
    "LineMessagingClient",
    "LineMessagingError",
    "LocationMessage",
    "MemberIds",
    "Message",
    "MessageType",
    "MulticastMessage",
    "Profile",
    "PushMessage",
    "ReplyMessage",
    "StickerMessage",
    "TextMessage",
    "VideoMessage",
    "create_line_messaging_client",
    "parse_line_error",
    "to_query_string",
]
