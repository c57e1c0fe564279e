"""Serialização de parâmetros de query string."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any
from urllib.parse import urlencode


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def to_query_string(query: Mapping[str, Any] | None) -> str:
    """Converte um mapping em query string pronta para anexar ao path.

    Valores None são omitidos; sequências repetem a chave.

    Returns:
        String no formato ``?k=v&k2=v2`` ou vazia se não houver parâmetros

    Exemplo:
        to_query_string({"limit": 10})  # "?limit=10"
    """
    if not query:
        return ""

    pairs: list[tuple[str, str]] = []
    for key, value in query.items():
        if value is None:
            continue
        if isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
            pairs.extend((key, _format_value(item)) for item in value if item is not None)
        else:
            pairs.append((key, _format_value(value)))

    if not pairs:
        return ""
    return "?" + urlencode(pairs)
