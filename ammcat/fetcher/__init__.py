"""
Fetcher module builds tokens and AMM pairs from on-chain data.

There are several services that do exactly this:

+-----------------------------------------------------+------------------------------+
| Service                                             | Description                  |
+=====================================================+==============================+
| :class:`ammcat.fetcher.tokens.TokensService`        | Resolving ERC20 tokens       |
|                                                     | (decimals are cached)        |
+-----------------------------------------------------+------------------------------+
| :class:`ammcat.fetcher.pairs.PairsService`          | Fetching pairs with reserves |
+-----------------------------------------------------+------------------------------+
| :class:`ammcat.fetcher.fetcher.Fetcher`             | Both of the above sharing    |
|                                                     | one configuration            |
+-----------------------------------------------------+------------------------------+

Errors raised by the services live in :mod:`ammcat.fetcher.errors`.

The best way to get started is to explore these services and module
docs.
"""
