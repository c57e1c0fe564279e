"""Cliente HTTP base para a LINE Messaging API.

Núcleo de transporte compartilhado por todos os endpoints:
- Base URL fixa e timeout fixo (10s) por requisição
- Header Authorization (Bearer) derivado do access token da instância
- Serialização JSON (UTF-8) ou binária (imagens) do corpo
- Classificação de falhas: timeout -> erro estruturado -> status genérico
- Deserialização tipada via pydantic

Sem retry: toda falha é propagada imediatamente ao chamador, que decide
a política de retentativa.
"""

from __future__ import annotations

import json
import time
from functools import lru_cache
from typing import TYPE_CHECKING, Any, TypeVar

import httpx
from pydantic import TypeAdapter

from api.connectors.line.constants import (
    IMAGE_MEDIA_TYPES,
    LINE_API_BASE_URL,
    MEDIA_TYPE_JSON,
    REQUEST_TIMEOUT_SECONDS,
    ImageFormat,
)
from api.connectors.line.line_errors import (
    LineConfigurationError,
    LineErrorKind,
    LineMessagingError,
    parse_line_error,
)
from api.connectors.line.line_logging import (
    log_line_error,
    log_request_timeout,
    log_success,
)
from api.connectors.line.query import to_query_string

if TYPE_CHECKING:
    from collections.abc import Mapping
    from types import TracebackType

T = TypeVar("T")


@lru_cache(maxsize=128)
def _type_adapter(response_type: Any) -> TypeAdapter[Any]:
    return TypeAdapter(response_type)


def _encode_json_body(body: object) -> bytes:
    """Serializa o corpo em JSON UTF-8."""
    # Import local para evitar dependência circular com payload_builders
    from api.payload_builders.line.factory import build_request_payload

    payload = build_request_payload(body)
    return json.dumps(payload, ensure_ascii=False, separators=(",", ":")).encode("utf-8")


class LineHttpClient:
    """Cliente HTTP autenticado para a LINE Messaging API.

    Instância explícita e reutilizável: pode ser compartilhada entre
    corrotinas concorrentes, pois seu estado (base URL, timeout, header de
    autenticação) é somente leitura após a construção. O pool de conexões
    fica a cargo do httpx.

    Uso:
        async with LineHttpClient(token) as client:
            data = await client.get("/v2/bot/info", dict[str, Any])
    """

    __slots__ = ("_authorization", "_base_url", "_http_client")

    def __init__(
        self,
        access_token: str | None,
        *,
        base_url: str = LINE_API_BASE_URL,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Inicializa o cliente.

        Args:
            access_token: Channel access token (Bearer)
            base_url: URL base da API
            transport: Transporte httpx alternativo (ex: MockTransport em testes)

        Raises:
            LineConfigurationError: Se access_token for None ou vazio
        """
        if not access_token or not access_token.strip():
            raise LineConfigurationError("access_token is null or empty.")

        self._authorization = f"Bearer {access_token}"
        self._base_url = base_url
        self._http_client = httpx.AsyncClient(
            base_url=base_url,
            timeout=REQUEST_TIMEOUT_SECONDS,
            transport=transport,
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    async def get(
        self,
        path: str,
        response_type: type[T],
        query: Mapping[str, Any] | None = None,
    ) -> T:
        """GET autenticado com query opcional; deserializa o JSON em ``response_type``."""
        content = await self._send("GET", path, query=query)
        return _type_adapter(response_type).validate_json(content)

    async def post(
        self,
        path: str,
        body: object | None = None,
        response_type: type[T] | None = None,
    ) -> T | None:
        """POST autenticado com corpo JSON.

        Sem ``response_type`` o corpo da resposta é descartado, mas a chamada
        continua sendo aguardada e validada (falhas propagam normalmente).
        """
        content = await self._send("POST", path, body=body)
        if response_type is None:
            return None
        return _type_adapter(response_type).validate_json(content)

    async def post_jpeg(self, path: str, image: bytes) -> None:
        await self.post_image(path, ImageFormat.JPEG, image)

    async def post_png(self, path: str, image: bytes) -> None:
        await self.post_image(path, ImageFormat.PNG, image)

    async def post_image(self, path: str, image_format: str, image: bytes) -> None:
        """POST binário de imagem com o content-type do formato.

        Raises:
            LineMessagingError: kind UNSUPPORTED_FORMAT se o formato não for
                jpeg/png (antes de qualquer chamada de rede)
        """
        media_type = IMAGE_MEDIA_TYPES.get(image_format)
        if media_type is None:
            raise LineMessagingError(
                path,
                f"{image_format} is not supported.",
                kind=LineErrorKind.UNSUPPORTED_FORMAT,
            )
        await self._send("POST", path, content=image, content_type=media_type)

    async def delete(self, path: str) -> None:
        await self._send("DELETE", path)

    async def get_bytes(self, path: str) -> bytes:
        """GET autenticado retornando o payload bruto."""
        return await self._send("GET", path)

    async def close(self) -> None:
        """Fecha o cliente HTTP subjacente."""
        await self._http_client.aclose()

    async def __aenter__(self) -> LineHttpClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.close()

    async def _send(
        self,
        method: str,
        path: str,
        *,
        query: Mapping[str, Any] | None = None,
        body: object | None = None,
        content: bytes | None = None,
        content_type: str | None = None,
    ) -> bytes:
        """Executa a requisição e devolve o corpo de uma resposta bem-sucedida."""
        headers = {"Authorization": self._authorization}
        if body is not None:
            content = _encode_json_body(body)
            content_type = MEDIA_TYPE_JSON
        if content_type is not None:
            headers["Content-Type"] = content_type

        url = path + to_query_string(query)
        started = time.perf_counter()
        try:
            response = await self._http_client.request(
                method,
                url,
                content=content,
                headers=headers,
            )
        except httpx.TimeoutException as exc:
            log_request_timeout(method, REQUEST_TIMEOUT_SECONDS)
            raise LineMessagingError(
                path,
                "Request Timeout",
                kind=LineErrorKind.TIMEOUT,
            ) from exc
        except httpx.TransportError as exc:
            error = LineMessagingError(
                path,
                f"Connection error: {type(exc).__name__}",
                kind=LineErrorKind.CONNECTION,
            )
            log_line_error(error, method)
            raise error from exc

        self._check_status_code(method, path, response)
        log_success(method, response.status_code, (time.perf_counter() - started) * 1000)
        return response.content

    @staticmethod
    def _check_status_code(method: str, path: str, response: httpx.Response) -> None:
        """Traduz status não-2xx em LineMessagingError.

        Tenta primeiro o corpo de erro estruturado; só então recorre à
        mensagem genérica com status code e reason phrase.
        """
        if response.is_success:
            return

        error_response = parse_line_error(response.content)
        if error_response is not None:
            error = LineMessagingError.from_error_response(
                path,
                error_response,
                status_code=response.status_code,
                reason_phrase=response.reason_phrase,
            )
        else:
            error = LineMessagingError(
                path,
                "Error has occurred. "
                f"Response StatusCode:{response.status_code} "
                f"ReasonPhrase:{response.reason_phrase}.",
                kind=LineErrorKind.HTTP_STATUS,
                status_code=response.status_code,
                reason_phrase=response.reason_phrase,
            )

        log_line_error(error, method)
        raise error
