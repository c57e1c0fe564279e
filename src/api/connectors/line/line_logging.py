"""Helpers de logging para a LINE Messaging API (sem PII).

Nunca logar access token, corpo de requisição ou IDs de destinatário.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .line_errors import LineMessagingError

logger = logging.getLogger(__name__)


def log_line_error(error: LineMessagingError, method: str) -> None:
    """Loga falha de chamada sem expor dados sensíveis."""
    logger.warning(
        "Erro da API LINE",
        extra={
            "method": method,
            "error_kind": str(error.kind),
            "status_code": error.status_code,
        },
    )


def log_request_timeout(method: str, timeout_seconds: float) -> None:
    logger.warning(
        "Timeout na chamada LINE",
        extra={"method": method, "timeout_seconds": timeout_seconds},
    )


def log_success(method: str, status_code: int, elapsed_ms: float) -> None:
    """Loga sucesso sem expor dados sensíveis."""
    logger.debug(
        "Chamada LINE bem-sucedida",
        extra={
            "method": method,
            "status_code": status_code,
            "elapsed_ms": round(elapsed_ms, 2),
        },
    )
