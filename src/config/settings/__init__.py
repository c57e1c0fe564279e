"""Agregador de settings do cliente LINE Messaging.

Re-exporta todas as settings e funções de cada módulo.
Organização por domínio para isolamento de mudanças.
"""

from __future__ import annotations

# Channel-specific settings
from config.settings.line import (
    LINE_API_BASE_URL,
    LineSettings,
    get_line_settings,
)

__all__ = [
    # Constants
    "LINE_API_BASE_URL",
    # Channels
    "LineSettings",
    "get_line_settings",
]
