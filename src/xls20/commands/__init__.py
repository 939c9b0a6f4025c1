"""
Commands - CLI command implementations for xls20.

Each module corresponds to a top-level CLI command or group:
- wallet:  Create and store a wallet seed
- account: Account info, faucet funding, NFT listing
- mint:    Mint an NFT
- offer:   Create, accept, broker and cancel NFT offers
- burn:    Burn an NFT
"""
