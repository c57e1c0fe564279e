"""Endpoints da LINE Messaging API sobre o LineHttpClient.

Cada método apenas mapeia um endpoint da API para o núcleo de transporte;
autenticação, serialização e classificação de erros ficam no cliente base.
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from urllib.parse import quote

from api.connectors.line.http_client import LineHttpClient
from api.connectors.line.models import MemberIds, Profile

if TYPE_CHECKING:
    from api.connectors.line.models import MulticastMessage, PushMessage, ReplyMessage
    from config.settings import LineSettings


def _segment(value: str) -> str:
    """Escapa um identificador para uso como segmento de path."""
    return quote(value, safe="")


class LineMessagingClient(LineHttpClient):
    """Cliente da LINE Messaging API (envio, perfis, grupos, rich menus)."""

    __slots__ = ()

    async def push_message(self, message: PushMessage) -> None:
        """Envia mensagens a um destinatário a qualquer momento."""
        await self.post("/v2/bot/message/push", message)

    async def reply_message(self, message: ReplyMessage) -> None:
        """Responde a um evento usando o reply token recebido no webhook."""
        await self.post("/v2/bot/message/reply", message)

    async def multicast(self, message: MulticastMessage) -> None:
        await self.post("/v2/bot/message/multicast", message)

    async def get_profile(self, user_id: str) -> Profile:
        return await self.get(f"/v2/bot/profile/{_segment(user_id)}", Profile)

    async def get_group_member_profile(self, group_id: str, user_id: str) -> Profile:
        path = f"/v2/bot/group/{_segment(group_id)}/member/{_segment(user_id)}"
        return await self.get(path, Profile)

    async def get_group_member_ids(
        self,
        group_id: str,
        start: str | None = None,
    ) -> MemberIds:
        """Retorna uma página de IDs de membros.

        Args:
            group_id: ID do grupo
            start: Token de continuação (campo ``next`` da página anterior)
        """
        return await self.get(
            f"/v2/bot/group/{_segment(group_id)}/members/ids",
            MemberIds,
            query={"start": start},
        )

    async def leave_group(self, group_id: str) -> None:
        await self.post(f"/v2/bot/group/{_segment(group_id)}/leave")

    async def leave_room(self, room_id: str) -> None:
        await self.post(f"/v2/bot/room/{_segment(room_id)}/leave")

    async def get_message_content(self, message_id: str) -> bytes:
        """Baixa o conteúdo binário (imagem, vídeo, áudio) de uma mensagem."""
        return await self.get_bytes(f"/v2/bot/message/{_segment(message_id)}/content")

    async def upload_rich_menu_jpeg(self, rich_menu_id: str, image: bytes) -> None:
        await self.post_jpeg(f"/v2/bot/richmenu/{_segment(rich_menu_id)}/content", image)

    async def upload_rich_menu_png(self, rich_menu_id: str, image: bytes) -> None:
        await self.post_png(f"/v2/bot/richmenu/{_segment(rich_menu_id)}/content", image)

    async def download_rich_menu_image(self, rich_menu_id: str) -> bytes:
        return await self.get_bytes(f"/v2/bot/richmenu/{_segment(rich_menu_id)}/content")

    async def delete_rich_menu(self, rich_menu_id: str) -> None:
        await self.delete(f"/v2/bot/richmenu/{_segment(rich_menu_id)}")


def create_line_messaging_client(
    settings: LineSettings | None = None,
) -> LineMessagingClient:
    """Factory para criar cliente LINE com config padrão.

    Args:
        settings: LineSettings opcional. Se None, carrega do ambiente.

    Returns:
        Cliente configurado para a LINE Messaging API.

    Raises:
        LineConfigurationError: Se o access token não estiver configurado
    """
    # Import local para evitar dependência circular
    from config.settings import get_line_settings

    line = settings or get_line_settings()
    return LineMessagingClient(
        line.channel_access_token,
        base_url=line.api_base_url,
    )
