from __future__ import annotations
import asyncio
import logging
from typing import Any, Dict, List
from web3 import AsyncWeb3

from ammcat.fetcher.chains import ChainId, to_chain_id
from ammcat.fetcher.core import Core
from ammcat.fetcher.decimals import DecimalsCache
from ammcat.fetcher.errors import MetadataFetchError
from ammcat.fetcher.options import DEFAULT_OPTIONS, FetchOptions
from ammcat.fetcher.tokens.token import Token
from ammcat.fetcher.utils import load_abi, short_address

logger = logging.getLogger(__name__)


class TokensService(Core):
    """
    Service for resolving ERC20 tokens (decimals, symbol, name).

    Only decimals are read from the chain. Symbol and name are taken
    from the request as is, since they're not needed for pricing and
    are unreliable on-chain.

    **Request/Response flow**

    ::

                    +---------------+                    +-------+ +---------------+
                    | TokensService |                    | Web3  | | DecimalsCache |
                    +---------------+                    +-------+ +---------------+
         ---------------  |                                  |             |
         | Token request |-|                                  |             |
         |---------------| |                                  |             |
                          |                                  |             |
                          | Find decimals                    |             |
                          |------------------------------------------------>|
                          |                                  |             |
                          | If cache miss: call decimals()   |             |
                          |--------------------------------->|             |
                          |                                  |             |
                          | Save decimals                    |             |
                          |------------------------------------------------>|
            -----------   |                                  |             |
            | Response |-|                                  |             |
            |----------|  |                                  |             |
                          |                                  |             |

    Args:
        decimals_cache: :class:`DecimalsCache` instance
        kwargs: Args for the :class:`ammcat.fetcher.core.Core`
    """

    _decimals_cache: DecimalsCache
    _erc20_abi: List[Dict[str, Any]]

    def __init__(self, decimals_cache: DecimalsCache, **kwargs):
        super().__init__(**kwargs)
        self._decimals_cache = decimals_cache
        self._erc20_abi = load_abi("erc20")

    @staticmethod
    def create(**kwargs) -> TokensService:
        """
        Create an instance of :class:`TokensService` with a seeded
        :class:`DecimalsCache`

        Args:
            kwargs: Args for the :class:`ammcat.fetcher.core.Core`

        Returns:
            An instance of :class:`TokensService`
        """
        return TokensService(DecimalsCache.seeded(), **kwargs)

    @property
    def decimals_cache(self) -> DecimalsCache:
        """
        :class:`DecimalsCache` used by the service
        """
        return self._decimals_cache

    async def fetch_token_data(
        self,
        chain_id: ChainId,
        address: str,
        options: FetchOptions | None = None,
    ) -> Token:
        """
        Resolve a token by address.

        Decimals are served from the cache. On cache miss exactly one
        ``decimals()`` call is made and the result is cached.

        Args:
            chain_id: network of the token
            address: token address
            options: transport override, symbol and name for the token

        Returns:
            An instance of :class:`Token`

        Raises:
            MetadataFetchError: if decimals can't be read from the chain
        """
        options = options or DEFAULT_OPTIONS
        chain_id = to_chain_id(chain_id)
        decimals = self._decimals_cache.get(chain_id, address)
        if decimals is None:
            w3 = options.w3 or await self.connect(chain_id)
            decimals = await self._fetch_decimals(w3, chain_id, address)
            self._decimals_cache.put(chain_id, address, decimals)
        else:
            logger.debug(
                "Decimals cache hit for %s on chain %d",
                short_address(address),
                chain_id,
            )
        return Token(chain_id, address, decimals, options.symbol, options.name)

    async def fetch_tokens_data(
        self,
        chain_id: ChainId,
        addresses: List[str],
        options: FetchOptions | None = None,
    ) -> List[Token]:
        """
        Resolve several tokens concurrently.

        Note:
            ``options.symbol`` and ``options.name`` are applied to every token,
            so usually they should be left empty here.

        Args:
            chain_id: network of the tokens
            addresses: token addresses
            options: transport override

        Returns:
            A list of :class:`Token` in the order of ``addresses``

        Raises:
            MetadataFetchError: for the first token whose decimals can't be read
        """
        return list(
            await asyncio.gather(
                *[self.fetch_token_data(chain_id, a, options) for a in addresses]
            )
        )

    async def _fetch_decimals(
        self, w3: AsyncWeb3, chain_id: ChainId, address: str
    ) -> int:
        logger.debug(
            "Fetching decimals for %s on chain %d", short_address(address), chain_id
        )
        try:
            contract = w3.eth.contract(
                address=AsyncWeb3.to_checksum_address(address), abi=self._erc20_abi
            )
            decimals = await contract.functions.decimals().call()
        except Exception as e:
            raise MetadataFetchError(chain_id, address, e) from e
        if not isinstance(decimals, int) or not 0 <= decimals < 256:
            cause = ValueError(f"Unexpected decimals value {decimals!r}")
            raise MetadataFetchError(chain_id, address, cause) from cause
        return decimals
