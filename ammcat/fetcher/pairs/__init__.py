"""
Module for fetching AMM liquidity pairs.

The main class of this module is :class:`PairsService`.
It derives the pair address from two tokens, reads the pair reserves
and attributes each reserve to its token.

Example:
    ::

        import asyncio
        from ammcat.fetcher.chains import ChainId
        from ammcat.fetcher.pairs import PairsService
        from ammcat.fetcher.tokens import TokensService

        tokens = TokensService.create()
        pairs = PairsService()

        async def main():
            weth = await tokens.fetch_token_data(ChainId.MAINNET, "0xC02aaA39b223FE8D0A0e5C4F27eAD9083C756Cc2")
            usdc = await tokens.fetch_token_data(ChainId.MAINNET, "0xA0b86991c6218b36c1d19D4a2e9Eb0cE3606eB48")
            return await pairs.fetch_pair_data(weth, usdc)

        pair = asyncio.run(main())
        pair.address
        # => 0xB4e16d0168e52d35CaCD2c6185b44281Ec28C9Dc
        pair.token1_price
        # => WETH price in USDC
"""

from ammcat.fetcher.pairs.token_amount import TokenAmount
from ammcat.fetcher.pairs.pair import Pair, pair_address, sort_tokens
from ammcat.fetcher.pairs.service import PairsService
