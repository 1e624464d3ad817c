"""
Utility functions.
"""

import json
import os
from typing import Any, Dict, List
from web3 import Web3


def canonical_address(address: str) -> str:
    """
    Canonical form of an address used for keys and comparisons.

    Addresses are case-insensitive, so ``0xAbC...`` and ``0xabc...`` are
    the same account. The canonical form is lowercase.

    Args:
        address: Ethereum address in any case

    Returns:
        Lowercase address
    """
    return address.lower()


def checksum_address(address: str) -> str:
    """
    EIP55 checksummed version of an address.

    Raises:
        ValueError: if ``address`` is not a valid address
    """
    if not Web3.is_address(address):
        raise ValueError(f"Invalid address `{address}`")
    return Web3.to_checksum_address(address)


def short_address(address: str) -> str:
    """
    Converts ethereum address to short version (for display purposes only).

    Args:
        address: Ethereum address to shorten

    Returns:
        Short version of the address.

    Examples:
        ::

            print(short_address("0x6B175474E89094C44Da98b954EedeAC495271d0F"))
            # 0x6B17...1d0F

    """
    return f"{address[:6]}...{address[38:]}"


def load_abi(name: str) -> List[Dict[str, Any]]:
    """
    Load a bundled contract ABI.

    Args:
        name: ABI file name without extension (``erc20``, ``pair``)

    Returns:
        ABI as a list of json entries
    """
    current_folder = os.path.realpath(os.path.dirname(__file__))
    with open(f"{current_folder}/abi/{name}.json", "r", encoding="utf-8") as f:
        return json.load(f)
