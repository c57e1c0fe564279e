"""Connectors por canal: adapters de borda para APIs externas.

Estrutura:
- line/: LINE Messaging API
"""

__all__: list[str] = []
