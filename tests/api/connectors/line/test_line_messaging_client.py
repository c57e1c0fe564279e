"""Testes dos endpoints do LineMessagingClient."""

from __future__ import annotations

import json

import httpx
import pytest

from api.connectors.line.line_errors import LineConfigurationError
from api.connectors.line.messaging_client import (
    LineMessagingClient,
    create_line_messaging_client,
)
from api.connectors.line.models import (
    MemberIds,
    MulticastMessage,
    Profile,
    PushMessage,
    ReplyMessage,
    StickerMessage,
    TextMessage,
)
from config.settings import LineSettings


class _Recorder:
    """Transporte fake que registra requisições e responde com um valor fixo."""

    def __init__(self, response: httpx.Response) -> None:
        self.response = response
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.response

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


def _client(recorder: _Recorder) -> LineMessagingClient:
    return LineMessagingClient("token", transport=httpx.MockTransport(recorder))


class TestMessageEndpoints:
    """Envio de mensagens."""

    @pytest.mark.asyncio
    async def test_push_message(self) -> None:
        recorder = _Recorder(httpx.Response(200, json={}))
        client = _client(recorder)

        await client.push_message(PushMessage.from_text("user1", ["a", "b"]))

        assert recorder.last.method == "POST"
        assert recorder.last.url.path == "/v2/bot/message/push"
        assert json.loads(recorder.last.content) == {
            "to": "user1",
            "messages": [{"type": "text", "text": "a"}, {"type": "text", "text": "b"}],
        }
        await client.close()

    @pytest.mark.asyncio
    async def test_reply_message(self) -> None:
        recorder = _Recorder(httpx.Response(200, json={}))
        client = _client(recorder)

        message = ReplyMessage(
            reply_token="rt-1",
            messages=[TextMessage(text="oi"), StickerMessage(package_id="1", sticker_id="2")],
        )
        await client.reply_message(message)

        assert recorder.last.url.path == "/v2/bot/message/reply"
        assert json.loads(recorder.last.content) == {
            "replyToken": "rt-1",
            "messages": [
                {"type": "text", "text": "oi"},
                {"type": "sticker", "packageId": "1", "stickerId": "2"},
            ],
        }
        await client.close()

    @pytest.mark.asyncio
    async def test_multicast(self) -> None:
        recorder = _Recorder(httpx.Response(200, json={}))
        client = _client(recorder)

        await client.multicast(MulticastMessage.from_text(["u1", "u2"], "hello"))

        assert recorder.last.url.path == "/v2/bot/message/multicast"
        assert json.loads(recorder.last.content)["to"] == ["u1", "u2"]
        await client.close()


class TestProfileAndGroupEndpoints:
    """Perfis e grupos."""

    @pytest.mark.asyncio
    async def test_get_profile(self) -> None:
        recorder = _Recorder(
            httpx.Response(
                200,
                json={
                    "displayName": "LINE taro",
                    "userId": "U4af4980629",
                    "pictureUrl": "https://obs.line-apps.com/x",
                    "language": "en",
                },
            )
        )
        client = _client(recorder)

        profile = await client.get_profile("U4af4980629")

        assert recorder.last.method == "GET"
        assert recorder.last.url.path == "/v2/bot/profile/U4af4980629"
        assert profile == Profile(
            display_name="LINE taro",
            user_id="U4af4980629",
            picture_url="https://obs.line-apps.com/x",
        )
        assert profile.status_message is None
        await client.close()

    @pytest.mark.asyncio
    async def test_get_group_member_profile(self) -> None:
        recorder = _Recorder(httpx.Response(200, json={"displayName": "a", "userId": "u1"}))
        client = _client(recorder)

        profile = await client.get_group_member_profile("g1", "u1")

        assert recorder.last.url.path == "/v2/bot/group/g1/member/u1"
        assert profile.user_id == "u1"
        await client.close()

    @pytest.mark.asyncio
    async def test_get_group_member_ids_first_page(self) -> None:
        """Sem start, nenhuma query string é enviada."""
        recorder = _Recorder(
            httpx.Response(200, json={"memberIds": ["u1", "u2"], "next": "tok"})
        )
        client = _client(recorder)

        page = await client.get_group_member_ids("g1")

        assert recorder.last.url.path == "/v2/bot/group/g1/members/ids"
        assert recorder.last.url.query == b""
        assert page == MemberIds(member_ids=["u1", "u2"], next="tok")
        await client.close()

    @pytest.mark.asyncio
    async def test_get_group_member_ids_next_page(self) -> None:
        recorder = _Recorder(httpx.Response(200, json={"memberIds": ["u3"]}))
        client = _client(recorder)

        page = await client.get_group_member_ids("g1", start="tok")

        assert recorder.last.url.query == b"start=tok"
        assert page.next is None
        await client.close()

    @pytest.mark.asyncio
    async def test_leave_group_and_room(self) -> None:
        recorder = _Recorder(httpx.Response(200, json={}))
        client = _client(recorder)

        await client.leave_group("g1")
        await client.leave_room("r1")

        paths = [request.url.path for request in recorder.requests]
        assert paths == ["/v2/bot/group/g1/leave", "/v2/bot/room/r1/leave"]
        await client.close()

    @pytest.mark.asyncio
    async def test_identifiers_are_escaped(self) -> None:
        """IDs com caracteres reservados não quebram o path."""
        recorder = _Recorder(httpx.Response(200, json={"displayName": "a", "userId": "u"}))
        client = _client(recorder)

        await client.get_profile("a/b")

        assert recorder.last.url.raw_path == b"/v2/bot/profile/a%2Fb"
        await client.close()


class TestContentAndRichMenuEndpoints:
    """Conteúdo binário e rich menus."""

    @pytest.mark.asyncio
    async def test_get_message_content(self) -> None:
        recorder = _Recorder(httpx.Response(200, content=b"binary"))
        client = _client(recorder)

        assert await client.get_message_content("m1") == b"binary"
        assert recorder.last.url.path == "/v2/bot/message/m1/content"
        await client.close()

    @pytest.mark.asyncio
    async def test_upload_rich_menu_images(self) -> None:
        recorder = _Recorder(httpx.Response(200, json={}))
        client = _client(recorder)

        await client.upload_rich_menu_jpeg("rm1", b"j")
        await client.upload_rich_menu_png("rm1", b"p")

        content_types = [r.headers["Content-Type"] for r in recorder.requests]
        assert content_types == ["image/jpeg", "image/png"]
        assert {r.url.path for r in recorder.requests} == {"/v2/bot/richmenu/rm1/content"}
        await client.close()

    @pytest.mark.asyncio
    async def test_download_and_delete_rich_menu(self) -> None:
        recorder = _Recorder(httpx.Response(200, content=b"img"))
        client = _client(recorder)

        assert await client.download_rich_menu_image("rm1") == b"img"
        await client.delete_rich_menu("rm1")

        assert [r.method for r in recorder.requests] == ["GET", "DELETE"]
        assert recorder.last.url.path == "/v2/bot/richmenu/rm1"
        await client.close()


class TestCreateLineMessagingClient:
    """Factory a partir de settings."""

    def test_create_from_settings(self) -> None:
        settings = LineSettings(channel_access_token="tok", api_base_url="https://example.test")
        client = create_line_messaging_client(settings)
        assert isinstance(client, LineMessagingClient)
        assert client.base_url == "https://example.test"

    def test_create_without_token_fails(self) -> None:
        with pytest.raises(LineConfigurationError):
            create_line_messaging_client(LineSettings())
