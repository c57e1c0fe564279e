"""Formatter JSON com campos padronizados."""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

# Campos obrigatórios em todo log estruturado
REQUIRED_LOG_FIELDS = (
    "asctime",
    "levelname",
    "name",
    "message",
    "correlation_id",
    "service",
)

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Cria JsonFormatter com os campos obrigatórios renomeados.

    Exemplo de output:
        {"asctime": "...", "level": "WARNING", "logger": "api.connectors.line.line_logging",
         "message": "Erro da API LINE", "correlation_id": "abc-123",
         "service": "line_messaging", "error_kind": "http_status"}
    """
    format_string = " ".join(f"%({field})s" for field in REQUIRED_LOG_FIELDS)
    return JsonFormatter(format_string, rename_fields=FIELD_RENAME_MAP)
