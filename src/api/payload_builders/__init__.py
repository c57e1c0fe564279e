"""Payload builders por canal: construção de payloads para APIs externas.

Estrutura:
- line/: message objects e envelopes da LINE Messaging API
"""

__all__: list[str] = []
