"""
Module for resolving ERC20 tokens.

The main class of this module is :class:`TokensService`.
It builds :class:`Token` from a chain id and an address, reading
decimals from :class:`ammcat.fetcher.decimals.DecimalsCache` or directly
from the blockchain.

Example:
    ::

        import asyncio
        from ammcat.fetcher.chains import ChainId
        from ammcat.fetcher.options import FetchOptions
        from ammcat.fetcher.tokens import TokensService

        service = TokensService.create()
        usdc = asyncio.run(
            service.fetch_token_data(
                ChainId.MAINNET,
                "0xA0b86991c6218b36c1d19D4a2e9Eb0cE3606eB48",
                FetchOptions(symbol="USDC", name="USD Coin"),
            )
        )
        # => Token({"chainId": 1, "address": "0xA0b86991c6218b36c1d19D4a2e9Eb0cE3606eB48", "decimals": 6, "symbol": "USDC", "name": "USD Coin"})
        # served from the seeded cache, no rpc calls
"""

from ammcat.fetcher.tokens.token import Token
from ammcat.fetcher.tokens.service import TokensService
