"""
Module for caching ERC20 tokens decimals.

The main class of this module is :class:`DecimalsCache`.
It's a flat in-memory mapping from ``(chain_id, address)`` to token
decimals, preloaded with major tokens and filled in on demand by
:class:`ammcat.fetcher.tokens.TokensService`.

Example:
    ::

        from ammcat.fetcher.chains import ChainId
        from ammcat.fetcher.decimals import DecimalsCache

        cache = DecimalsCache.seeded()
        cache.get(ChainId.MAINNET, "0xA0b86991c6218b36c1d19D4a2e9Eb0cE3606eB48")
        # => 6
        cache.get(ChainId.MAINNET, "0x1f9840a85d5af5bf1d1762f925bdaddc4201f984")
        # => None
"""

from ammcat.fetcher.decimals.cache import DecimalsCache
