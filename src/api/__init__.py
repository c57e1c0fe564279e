"""API: camada de borda para a LINE Messaging API.

Subpastas:
- connectors/: clientes HTTP por canal (transporte, endpoints, erros)
- payload_builders/: construção de payloads JSON para APIs externas

NÃO PODE conter: regras de negócio, retry ou orquestração; o chamador
decide a política de retentativa.
"""
