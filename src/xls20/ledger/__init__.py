"""
Ledger - On-ledger interaction layer for xls20.

Endpoint resolution, NFT lifecycle intents and the LedgerOfferClient
façade over an XRP Ledger websocket connection.

Uses xrpl-py for transport, transaction models and signing.
"""
