"""
Implements :class:`Core` that is used in other modules.
"""

from __future__ import annotations
import os
from typing import Dict
from web3 import AsyncHTTPProvider, AsyncWeb3

from ammcat.fetcher.chains import DEFAULT_RPCS, ChainId, to_chain_id

DEFAULT_RPC_TIMEOUT = 30
web3_cache: Dict[str, AsyncWeb3] = {}
chain_id_cache: Dict[str, int] = {}


class Core:
    """
    A base class for any service that talks to an Ethereum RPC.

    When deriving this class, you're providing either an rpc url or a ready
    :class:`web3.AsyncWeb3` instance. Nothing is connected in the
    constructor: the transport for a chain is resolved on the first
    request, so this class is lightweight and safe to derive from.

    **Transport resolution**

    For a given chain id the transport is picked in this order:

        1. ``w3`` passed to the constructor
        2. ``rpc`` passed to the constructor
        3. ``WEB3_PROVIDER_URI_<chain_id>`` env variable
        4. ``WEB3_PROVIDER_URI`` env variable
        5. a public endpoint from :data:`ammcat.fetcher.chains.DEFAULT_RPCS`

    **Caching**

    :class:`web3.AsyncWeb3` instances are cached by the rpc url key, so
    services built with the same url share a single provider.

    **Chain verification**

    An rpc resolved by url (2-5) may serve some other chain, e.g. a generic
    ``WEB3_PROVIDER_URI`` pointing to mainnet used for a Mumbai request.
    :meth:`connect` reads ``eth_chainId`` once per url and rejects the
    transport if it doesn't match the requested chain. An injected ``w3``
    is trusted as is.

    Args:
        rpc: An https Ethereum RPC endpoint uri
        w3: an instance of :class:`web3.AsyncWeb3` (overrides rpc)
    """

    #: An https Ethereum RPC endpoint uri.
    #: Can be ``None`` if :class:`web3.AsyncWeb3` is injected directly.
    rpc: str | None

    def __init__(self, rpc: str | None = None, w3: AsyncWeb3 | None = None):
        self.rpc = rpc
        self._w3 = w3

    def w3_for(self, chain_id: ChainId) -> AsyncWeb3:
        """
        :class:`web3.AsyncWeb3` instance serving ``chain_id``

        Args:
            chain_id: network of the request

        Returns:
            An instance of :class:`web3.AsyncWeb3`

        Raises:
            ValueError: if no rpc is configured for the chain
        """
        if not self._w3 is None:
            return self._w3

        rpc = self.rpc_for(chain_id)
        if not rpc in web3_cache:
            web3_cache[rpc] = AsyncWeb3(
                AsyncHTTPProvider(rpc, request_kwargs={"timeout": DEFAULT_RPC_TIMEOUT})
            )
        return web3_cache[rpc]

    async def connect(self, chain_id: ChainId) -> AsyncWeb3:
        """
        :class:`web3.AsyncWeb3` instance serving ``chain_id``, verified
        to be on that chain

        Args:
            chain_id: network of the request

        Returns:
            An instance of :class:`web3.AsyncWeb3`

        Raises:
            ValueError: if no rpc is configured for the chain or the rpc
                serves a different chain
        """
        w3 = self.w3_for(chain_id)
        if not self._w3 is None:
            return w3

        chain_id = to_chain_id(chain_id)
        rpc = self.rpc_for(chain_id)
        if not rpc in chain_id_cache:
            chain_id_cache[rpc] = int(await w3.eth.chain_id)
        if chain_id_cache[rpc] != chain_id.value:
            raise ValueError(
                f"Ethereum RPC `{rpc}` serves chain {chain_id_cache[rpc]}, not {chain_id.value}. \
                Use `WEB3_PROVIDER_URI_{chain_id.value}` env variable or pass rpc explicitly"
            )
        return w3

    def rpc_for(self, chain_id: ChainId) -> str:
        """
        Ethereum RPC uri for ``chain_id``
        """
        if not self.rpc is None:
            return self.rpc

        chain_id = to_chain_id(chain_id)
        rpc = os.environ.get(f"WEB3_PROVIDER_URI_{chain_id.value}")
        if rpc is None:
            rpc = os.environ.get("WEB3_PROVIDER_URI")
        if rpc is None:
            rpc = DEFAULT_RPCS.get(chain_id)
        if rpc is None:
            raise ValueError(
                f"Ethereum RPC is not set for chain {chain_id.value}. \
                Use `WEB3_PROVIDER_URI_{chain_id.value}` env variable or pass rpc explicitly"
            )
        return rpc
