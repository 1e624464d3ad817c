"""
Errors raised by the fetcher services.

Every error carries enough context (chain id, address) for the caller to
implement its own retry policy. The fetcher itself never retries.
"""

from __future__ import annotations


class FetcherError(Exception):
    """
    Base class for all fetcher errors.
    """


class ChainMismatchError(FetcherError):
    """
    Two tokens of a pair belong to different chains.

    Raised before any network access.
    """

    #: Chain id of the first token
    chain_a: int
    #: Chain id of the second token
    chain_b: int

    def __init__(self, chain_a: int, chain_b: int):
        super().__init__(
            f"Tokens belong to different chains: {int(chain_a)} and {int(chain_b)}"
        )
        self.chain_a = chain_a
        self.chain_b = chain_b


class MetadataFetchError(FetcherError):
    """
    Reading token decimals from the chain failed.

    The decimals cache is left untouched when this is raised.
    """

    #: Chain id of the token
    chain_id: int
    #: Token address
    address: str
    #: Underlying exception
    cause: BaseException

    def __init__(self, chain_id: int, address: str, cause: BaseException):
        super().__init__(
            f"Could not fetch decimals of `{address}` on chain {int(chain_id)}: {cause}"
        )
        self.chain_id = chain_id
        self.address = address
        self.cause = cause


class PairFetchError(FetcherError):
    """
    Reading pair reserves from the chain failed.
    """

    #: Derived pair address
    address: str
    #: Underlying exception
    cause: BaseException

    def __init__(self, address: str, cause: BaseException):
        super().__init__(f"Could not fetch reserves of pair `{address}`: {cause}")
        self.address = address
        self.cause = cause
