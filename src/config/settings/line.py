"""Settings específicas do canal LINE.

Configurações da LINE Messaging API. O timeout por requisição é fixo no
cliente e não é configurável por ambiente.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

# Constantes da LINE Messaging API
LINE_API_BASE_URL: str = "https://api.line.me"


@dataclass(frozen=True)
class LineSettings:
    """Configurações do canal LINE.

    Attributes:
        channel_access_token: Channel access token (Bearer) do bot
        api_base_url: URL base da Messaging API
    """

    # Credenciais (carregadas de env ou Secret Manager)
    channel_access_token: str = ""

    # API
    api_base_url: str = LINE_API_BASE_URL

    def validate(self) -> list[str]:
        """Valida configurações mínimas do LINE.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.channel_access_token.strip():
            errors.append("LINE_CHANNEL_ACCESS_TOKEN não configurado")

        if not self.api_base_url.startswith(("https://", "http://")):
            errors.append("LINE_API_BASE_URL deve ser uma URL http(s)")

        return errors


def _load_from_env() -> LineSettings:
    """Carrega LineSettings a partir de variáveis de ambiente."""
    return LineSettings(
        channel_access_token=os.getenv("LINE_CHANNEL_ACCESS_TOKEN", ""),
        api_base_url=os.getenv("LINE_API_BASE_URL", LINE_API_BASE_URL).rstrip("/"),
    )


@lru_cache(maxsize=1)
def get_line_settings() -> LineSettings:
    """Retorna instância cacheada de LineSettings.

    A cache garante singleton para múltiplas injeções.
    """
    return _load_from_env()
