"""Erros e helpers de parsing para a LINE Messaging API."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, ValidationError


class LineErrorDetail(BaseModel):
    """Detalhe por campo de um erro retornado pela LINE."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    message: str | None = None
    property: str | None = None


class LineErrorResponse(BaseModel):
    """Corpo de erro estruturado da LINE (message + details opcionais)."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    message: str
    details: list[LineErrorDetail] = Field(default_factory=list)


class LineErrorKind(StrEnum):
    """Discriminante da classificação de falhas."""

    TIMEOUT = "timeout"
    CONNECTION = "connection"
    API_ERROR = "api_error"
    HTTP_STATUS = "http_status"
    UNSUPPORTED_FORMAT = "unsupported_format"


class LineConfigurationError(ValueError):
    """Configuração inválida do cliente (ex: access token ausente)."""


class LineMessagingError(Exception):
    """Erro de uma chamada à LINE Messaging API.

    Tipo único exposto ao chamador; ``kind`` distingue timeout, erro
    estruturado da API, status HTTP genérico e formato não suportado.

    Attributes:
        path: Path da requisição que falhou
        kind: Classificação da falha
        error: Corpo de erro estruturado, quando parseável
        status_code: Status HTTP (None para timeout/formato)
        reason_phrase: Reason phrase HTTP, quando houver resposta
    """

    def __init__(
        self,
        path: str,
        message: str,
        *,
        kind: LineErrorKind = LineErrorKind.HTTP_STATUS,
        error: LineErrorResponse | None = None,
        status_code: int | None = None,
        reason_phrase: str | None = None,
    ) -> None:
        super().__init__(message)
        self.path = path
        self.message = message
        self.kind = kind
        self.error = error
        self.status_code = status_code
        self.reason_phrase = reason_phrase

    @classmethod
    def from_error_response(
        cls,
        path: str,
        error: LineErrorResponse,
        status_code: int | None = None,
        reason_phrase: str | None = None,
    ) -> LineMessagingError:
        """Cria erro a partir do corpo estruturado da LINE."""
        return cls(
            path,
            error.message,
            kind=LineErrorKind.API_ERROR,
            error=error,
            status_code=status_code,
            reason_phrase=reason_phrase,
        )

    @property
    def is_timeout(self) -> bool:
        return self.kind is LineErrorKind.TIMEOUT

    def __str__(self) -> str:
        if self.error is None:
            return self.message
        details = "; ".join(
            f"{d.property}: {d.message}" if d.property else d.message
            for d in self.error.details
            if d.message is not None
        )
        if details:
            return f"{self.message} ({details})"
        return self.message


def parse_line_error(content: bytes | str) -> LineErrorResponse | None:
    """Tenta extrair o erro estruturado do corpo de uma resposta.

    Args:
        content: Corpo bruto da resposta

    Returns:
        LineErrorResponse se o corpo tiver o formato esperado, None caso
        contrário (JSON inválido, vazio, null ou schema divergente)
    """
    if not content:
        return None
    try:
        return LineErrorResponse.model_validate_json(content)
    except ValidationError:
        return None
