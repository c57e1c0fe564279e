"""Configuração centralizada de logging.

Logging estruturado JSON para aplicações que usam o cliente LINE:
- Campos obrigatórios (correlation_id, service, level, logger, message)
- Nível configurável por ambiente

O conector nunca chama configure_logging; apenas emite logs via
``logging.getLogger(__name__)``. Quem configura é a aplicação hospedeira.

Uso:
    import logging

    from config.logging import configure_logging

    configure_logging(level="INFO", service_name="line_messaging")
    logger = logging.getLogger(__name__)
    logger.info("Push enviado", extra={"elapsed_ms": 42})
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from config.logging.filters import CorrelationIdFilter
from config.logging.formatters import create_json_formatter

if TYPE_CHECKING:
    from collections.abc import Callable

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

DEFAULT_SERVICE_NAME = "line_messaging"

def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    correlation_id_getter: Callable[[], str] | None = None,
) -> None:
    """Configura logging JSON estruturado no logger raiz.

    Args:
        level: Nível de log (case insensitive).
        service_name: Nome do serviço injetado em cada record.
        correlation_id_getter: Função opcional que retorna o correlation_id
            do contexto atual (ex: de ContextVar).

    Raises:
        ValueError: Se o nível de log for inválido.
    """
    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    handler = logging.StreamHandler()
    handler.setLevel(level_upper)
    handler.setFormatter(create_json_formatter())
    handler.addFilter(CorrelationIdFilter(service_name, correlation_id_getter))

    root = logging.getLogger()
    root.setLevel(level_upper)
    # Substituir handlers existentes para evitar duplicação
    root.handlers = [handler]


def set_connector_log_level(level: str) -> None:
    """Ajusta apenas o nível dos loggers do conector LINE.

    Útil para ligar os logs DEBUG de sucesso sem poluir o resto da app.

    Raises:
        ValueError: Se o nível de log for inválido.
    """
    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(f"Nível de log inválido: {level}")
    logging.getLogger("api.connectors.line").setLevel(level_upper)
