"""Configuração de logging estruturado.

Uso:
    import logging

    from config.logging import configure_logging

    configure_logging(level="INFO", service_name="line_messaging")
    logger = logging.getLogger(__name__)

Campos obrigatórios em todo log: correlation_id, service, level, logger,
message, asctime.
"""

from config.logging.config import (
    configure_logging,
    set_connector_log_level,
)
from config.logging.filters import CorrelationIdFilter
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    "CorrelationIdFilter",
    "configure_logging",
    "create_json_formatter",
    "set_connector_log_level",
]
