from __future__ import annotations
import logging
import os
from typing import Any, Dict, List, Tuple
from web3 import AsyncWeb3

from ammcat.fetcher.chains import AMM_DEPLOYMENTS, AmmDeployment, ChainId
from ammcat.fetcher.core import Core
from ammcat.fetcher.errors import ChainMismatchError, PairFetchError
from ammcat.fetcher.options import DEFAULT_OPTIONS, FetchOptions
from ammcat.fetcher.pairs.pair import Pair, pair_address
from ammcat.fetcher.pairs.token_amount import TokenAmount
from ammcat.fetcher.tokens.token import Token
from ammcat.fetcher.utils import load_abi, short_address

logger = logging.getLogger(__name__)


class PairsService(Core):
    """
    Service for fetching AMM pairs with their current reserves.

    Reserves are never cached: every call reads ``getReserves()`` from
    the pair contract.

    **Reserves orientation**

    A pair contract stores its tokens sorted by address and
    ``getReserves()`` returns ``(reserve0, reserve1)`` in that order,
    regardless of how the caller ordered the tokens. The service
    attributes ``reserve0`` to the token that sorts first, using
    :meth:`ammcat.fetcher.tokens.Token.sorts_before`, the same ordering
    :func:`ammcat.fetcher.pairs.pair_address` uses to derive the address.

    **Deployment**

    The AMM factory is looked up in this order:

        1. ``factory_address`` and ``init_code_hash`` passed to the constructor
        2. ``AMM_FACTORY_ADDRESS`` and ``AMM_INIT_CODE_HASH`` env variables
        3. :data:`ammcat.fetcher.chains.AMM_DEPLOYMENTS`

    Factory address and init code hash are set together, one without the
    other is rejected.

    Args:
        factory_address: pair factory address (overrides the known deployments)
        init_code_hash: pair creation code hash (overrides the known deployments)
        kwargs: Args for the :class:`ammcat.fetcher.core.Core`
    """

    _factory_address: str | None
    _init_code_hash: str | None
    _pair_abi: List[Dict[str, Any]]

    def __init__(
        self,
        factory_address: str | None = None,
        init_code_hash: str | None = None,
        **kwargs,
    ):
        super().__init__(**kwargs)
        self._factory_address = factory_address
        self._init_code_hash = init_code_hash
        self._pair_abi = load_abi("pair")

    def deployment_for(self, chain_id: ChainId) -> AmmDeployment:
        """
        AMM deployment used on ``chain_id``

        Raises:
            ValueError: if there's no known deployment for the chain or only
                one of factory address and init code hash is set
        """
        factory_address = self._factory_address or os.environ.get(
            "AMM_FACTORY_ADDRESS"
        )
        init_code_hash = self._init_code_hash or os.environ.get("AMM_INIT_CODE_HASH")
        if factory_address and init_code_hash:
            return AmmDeployment(factory_address, init_code_hash)
        if factory_address or init_code_hash:
            raise ValueError(
                "AMM factory address and init code hash must be set together. \
                Use `AMM_FACTORY_ADDRESS` and `AMM_INIT_CODE_HASH` env variables or pass both explicitly"
            )

        if not chain_id in AMM_DEPLOYMENTS:
            raise ValueError(
                f"AMM factory is not set for chain {int(chain_id)}. \
                Use `AMM_FACTORY_ADDRESS` and `AMM_INIT_CODE_HASH` env variables or pass them explicitly"
            )
        return AMM_DEPLOYMENTS[chain_id]

    def get_address(self, token_a: Token, token_b: Token) -> str:
        """
        Address of the pair for two tokens (order-independent)

        Raises:
            ChainMismatchError: if tokens are on different chains
        """
        self._check_same_chain(token_a, token_b)
        return pair_address(token_a, token_b, self.deployment_for(token_a.chain_id))

    async def fetch_pair_data(
        self,
        token_a: Token,
        token_b: Token,
        options: FetchOptions | None = None,
    ) -> Pair:
        """
        Fetch a pair with current reserves.

        Makes exactly one ``getReserves()`` call. Tokens can be passed in
        any order: each reserve is attributed to its own token.

        Args:
            token_a: first token
            token_b: second token
            options: transport override

        Returns:
            An instance of :class:`Pair`

        Raises:
            ChainMismatchError: if tokens are on different chains (no network access)
            PairFetchError: if reserves can't be read from the pair contract
        """
        options = options or DEFAULT_OPTIONS
        address = self.get_address(token_a, token_b)
        w3 = options.w3 or await self.connect(token_a.chain_id)
        reserve0, reserve1 = await self._fetch_reserves(w3, address)
        if token_a.sorts_before(token_b):
            balances = (reserve0, reserve1)
        else:
            balances = (reserve1, reserve0)
        return Pair(
            TokenAmount(token_a, balances[0]),
            TokenAmount(token_b, balances[1]),
            address,
        )

    async def _fetch_reserves(self, w3: AsyncWeb3, address: str) -> Tuple[int, int]:
        logger.debug("Fetching reserves of pair %s", short_address(address))
        try:
            contract = w3.eth.contract(address=address, abi=self._pair_abi)
            reserves = await contract.functions.getReserves().call()
            reserve0, reserve1 = int(reserves[0]), int(reserves[1])
        except Exception as e:
            raise PairFetchError(address, e) from e
        return reserve0, reserve1

    def _check_same_chain(self, token_a: Token, token_b: Token):
        if token_a.chain_id != token_b.chain_id:
            raise ChainMismatchError(token_a.chain_id, token_b.chain_id)
