from __future__ import annotations
import json
import os
from typing import Dict, Iterator, Tuple

from ammcat.fetcher.chains import ChainId, to_chain_id
from ammcat.fetcher.utils import canonical_address

DecimalsKey = Tuple[ChainId, str]


class DecimalsCache:
    """
    In-memory cache of token decimals.

    Entries are keyed by ``(chain_id, address)`` where the address is
    canonicalized (lowercased) on every read and write, so case variants
    of the same address always hit the same entry.

    The cache only grows: decimals are fixed once a token is deployed,
    so entries are never evicted or invalidated.

    Note:
        There's no locking. A single ``dict`` assignment is atomic, so
        two concurrent misses for the same token at worst fetch twice
        and write the same value.

    Args:
        entries: initial entries
    """

    _entries: Dict[DecimalsKey, int]

    def __init__(self, entries: Dict[DecimalsKey, int] | None = None):
        self._entries = {}
        for (chain_id, address), decimals in (entries or {}).items():
            self.put(chain_id, address, decimals)

    @staticmethod
    def seeded() -> DecimalsCache:
        """
        Create an instance of :class:`DecimalsCache` preloaded with
        well-known tokens (stablecoins, wrapped native assets).

        Returns:
            An instance of :class:`DecimalsCache`
        """
        current_folder = os.path.realpath(os.path.dirname(__file__))
        with open(f"{current_folder}/seeds.json", "r", encoding="utf-8") as f:
            seeds = json.load(f)
        cache = DecimalsCache()
        for chain_id, tokens in seeds.items():
            for address, data in tokens.items():
                cache.put(int(chain_id), address, data["decimals"])
        return cache

    def get(self, chain_id: int, address: str) -> int | None:
        """
        Get cached decimals.

        Args:
            chain_id: network of the token
            address: token address in any case

        Returns:
            Token decimals or ``None`` if not cached
        """
        return self._entries.get(self._key(chain_id, address))

    def put(self, chain_id: int, address: str, decimals: int):
        """
        Insert or overwrite decimals for a token.

        Args:
            chain_id: network of the token
            address: token address in any case
            decimals: token decimals
        """
        if decimals < 0:
            raise ValueError(f"Decimals must be non-negative, got {decimals}")
        self._entries[self._key(chain_id, address)] = decimals

    def __contains__(self, key: Tuple[int, str]) -> bool:
        chain_id, address = key
        return self._key(chain_id, address) in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[DecimalsKey]:
        return iter(self._entries)

    def _key(self, chain_id: int, address: str) -> DecimalsKey:
        return (to_chain_id(chain_id), canonical_address(address))
