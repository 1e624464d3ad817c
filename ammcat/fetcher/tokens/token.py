from __future__ import annotations
import json
from dataclasses import dataclass, field
from typing import Any, Dict, Tuple

from ammcat.fetcher.chains import ChainId, to_chain_id
from ammcat.fetcher.utils import canonical_address, checksum_address


@dataclass(frozen=True, eq=False)
class Token:
    """
    ERC20 token on a specific chain.

    Two tokens are the same iff their ``chain_id`` and ``address`` match
    (case-insensitively). ``symbol`` and ``name`` are informational and
    don't take part in equality.

    Note:
        ``address`` is stored in the EIP55 checksummed format. Use
        :attr:`key` for lookups.
    """

    #: Network of the token
    chain_id: ChainId
    #: Token address (checksummed)
    address: str
    #: Token decimals
    decimals: int
    #: Token symbol
    symbol: str | None = field(default=None)
    #: Token name
    name: str | None = field(default=None)

    def __post_init__(self):
        object.__setattr__(self, "chain_id", to_chain_id(self.chain_id))
        object.__setattr__(self, "address", checksum_address(self.address))
        if not 0 <= self.decimals < 256:
            raise ValueError(f"Decimals must fit uint8, got {self.decimals}")

    @property
    def key(self) -> Tuple[ChainId, str]:
        """
        Identity of the token: ``(chain_id, lowercase address)``
        """
        return (self.chain_id, canonical_address(self.address))

    def sorts_before(self, other: Token) -> bool:
        """
        Whether this token comes first in a pair with ``other``.

        Pair contracts store their tokens sorted by lowercase address, and
        the same order is used to derive the pair address.

        Args:
            other: the other token of the pair

        Raises:
            ValueError: if tokens are on different chains or are the same token
        """
        if self.chain_id != other.chain_id:
            raise ValueError(
                f"Cannot order tokens on different chains: {self.chain_id} and {other.chain_id}"
            )
        if self == other:
            raise ValueError(f"Cannot order token `{self.address}` with itself")
        return canonical_address(self.address) < canonical_address(other.address)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert :class:`Token` to dict
        """
        return {
            "chainId": int(self.chain_id),
            "address": self.address,
            "decimals": self.decimals,
            "symbol": self.symbol,
            "name": self.name,
        }

    @staticmethod
    def from_dict(dct: Dict[str, Any]) -> Token:
        """
        Create :class:`Token` from dict
        """
        return Token(
            chain_id=dct["chainId"],
            address=dct["address"],
            decimals=dct["decimals"],
            symbol=dct.get("symbol"),
            name=dct.get("name"),
        )

    def __eq__(self, other):
        if type(other) is type(self):
            return self.key == other.key
        return False

    def __hash__(self):
        return hash(self.key)

    def __repr__(self):
        return f"Token({json.dumps(self.to_dict())})"
