from __future__ import annotations
from dataclasses import dataclass
from web3 import AsyncWeb3


@dataclass(frozen=True)
class FetchOptions:
    """
    Per-request options for :class:`ammcat.fetcher.tokens.TokensService`
    and :class:`ammcat.fetcher.pairs.PairsService`.

    Every field is optional. ``FetchOptions()`` means "use the service defaults".
    """

    #: Transport for this request. Overrides the transport the service
    #: would resolve for the chain (see :class:`ammcat.fetcher.core.Core`).
    w3: AsyncWeb3 | None = None
    #: Token symbol, attached to the resulting token as is. Never fetched.
    symbol: str | None = None
    #: Token name, attached to the resulting token as is. Never fetched.
    name: str | None = None


DEFAULT_OPTIONS = FetchOptions()
