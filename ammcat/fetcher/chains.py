"""
Supported networks and per-network AMM deployments.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import IntEnum
from typing import Dict


class ChainId(IntEnum):
    """
    Networks the fetcher knows how to talk to.
    """

    MAINNET = 1
    ROPSTEN = 3
    RINKEBY = 4
    GOERLI = 5
    KOVAN = 42
    BINANCE_TESTNET = 97
    POLYGON_MUMBAI = 80001


@dataclass(frozen=True)
class AmmDeployment:
    """
    Pair factory of an AMM protocol deployed on a network.

    Pair addresses are derived with ``CREATE2`` from these two values,
    so they have to match the deployed factory exactly.
    """

    #: Address of the pair factory contract
    factory_address: str
    #: Hex keccak256 of the pair contract creation code
    init_code_hash: str


_UNISWAP_V2 = AmmDeployment(
    factory_address="0x5C69bEe701ef814a2B6a3EDD4B1652CB9cc5aA6f",
    init_code_hash="0x96e8ac4277198ff8b6f785478aa9a39f403cb768dd02cbee326c3e7da348845f",
)

#: Known AMM deployments by network.
#: Networks missing here need an explicit ``factory_address`` and ``init_code_hash``.
AMM_DEPLOYMENTS: Dict[ChainId, AmmDeployment] = {
    ChainId.MAINNET: _UNISWAP_V2,
    ChainId.ROPSTEN: _UNISWAP_V2,
    ChainId.RINKEBY: _UNISWAP_V2,
    ChainId.GOERLI: _UNISWAP_V2,
    ChainId.KOVAN: _UNISWAP_V2,
}

#: Public RPC endpoints used when nothing else is configured.
DEFAULT_RPCS: Dict[ChainId, str] = {
    ChainId.MAINNET: "https://cloudflare-eth.com",
    ChainId.BINANCE_TESTNET: "https://data-seed-prebsc-1-s1.binance.org:8545",
    ChainId.POLYGON_MUMBAI: "https://rpc-mumbai.maticvigil.com",
}


def to_chain_id(value: int) -> ChainId:
    """
    Convert an integer to a :class:`ChainId`.

    Args:
        value: network chain id

    Returns:
        The matching :class:`ChainId`

    Raises:
        ValueError: if the network is not supported
    """
    try:
        return ChainId(value)
    except ValueError:
        raise ValueError(f"Unsupported chain id: {value!r}") from None
