"""
Tokens and AMM pairs from on-chain data.

See :mod:`ammcat.fetcher`.
"""
