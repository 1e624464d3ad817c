from __future__ import annotations
from web3 import AsyncWeb3

from ammcat.fetcher.chains import ChainId
from ammcat.fetcher.decimals import DecimalsCache
from ammcat.fetcher.options import FetchOptions
from ammcat.fetcher.pairs import Pair, PairsService
from ammcat.fetcher.tokens import Token, TokensService


class Fetcher:
    """
    Constructs tokens and pairs from on-chain data.

    A thin facade over :class:`TokensService` and :class:`PairsService`
    sharing one transport configuration. Each instance owns its own
    :class:`DecimalsCache`, so separate fetchers never see each other's
    cached decimals.

    Args:
        decimals_cache: cache to use, a seeded one by default
        rpc: An https Ethereum RPC endpoint uri
        w3: an instance of :class:`web3.AsyncWeb3` (overrides rpc)
        factory_address: AMM pair factory address
        init_code_hash: AMM pair creation code hash
    """

    #: Token resolution
    tokens: TokensService
    #: Pair resolution
    pairs: PairsService

    def __init__(
        self,
        decimals_cache: DecimalsCache | None = None,
        rpc: str | None = None,
        w3: AsyncWeb3 | None = None,
        factory_address: str | None = None,
        init_code_hash: str | None = None,
    ):
        if decimals_cache is None:
            decimals_cache = DecimalsCache.seeded()
        self.tokens = TokensService(decimals_cache, rpc=rpc, w3=w3)
        self.pairs = PairsService(
            factory_address=factory_address,
            init_code_hash=init_code_hash,
            rpc=rpc,
            w3=w3,
        )

    @property
    def decimals_cache(self) -> DecimalsCache:
        return self.tokens.decimals_cache

    async def fetch_token_data(
        self,
        chain_id: ChainId,
        address: str,
        options: FetchOptions | None = None,
    ) -> Token:
        """
        See :meth:`TokensService.fetch_token_data`
        """
        return await self.tokens.fetch_token_data(chain_id, address, options)

    async def fetch_pair_data(
        self,
        token_a: Token,
        token_b: Token,
        options: FetchOptions | None = None,
    ) -> Pair:
        """
        See :meth:`PairsService.fetch_pair_data`
        """
        return await self.pairs.fetch_pair_data(token_a, token_b, options)
