from __future__ import annotations
import json
from decimal import Decimal
from typing import Tuple
from eth_abi.packed import encode_packed
from eth_utils import keccak, to_checksum_address
from hexbytes import HexBytes

from ammcat.fetcher.chains import AmmDeployment, ChainId
from ammcat.fetcher.pairs.token_amount import TokenAmount
from ammcat.fetcher.tokens.token import Token


def sort_tokens(token_a: Token, token_b: Token) -> Tuple[Token, Token]:
    """
    Order two tokens the way a pair contract stores them.

    Args:
        token_a: first token
        token_b: second token

    Returns:
        ``(token0, token1)``
    """
    if token_a.sorts_before(token_b):
        return (token_a, token_b)
    return (token_b, token_a)


def pair_address(token_a: Token, token_b: Token, deployment: AmmDeployment) -> str:
    """
    Address of the pair contract for two tokens.

    The address is computed offline the way the factory deploys pairs
    with ``CREATE2``:

    ::

        salt = keccak256(token0 ++ token1)
        address = keccak256(0xff ++ factory ++ salt ++ init_code_hash)[12:]

    Tokens are sorted first, so the result doesn't depend on argument order.

    Args:
        token_a: first token
        token_b: second token
        deployment: factory of the AMM on the tokens chain

    Returns:
        Checksummed pair address
    """
    token0, token1 = sort_tokens(token_a, token_b)
    salt = keccak(encode_packed(["address", "address"], [token0.address, token1.address]))
    raw = keccak(
        b"\xff"
        + HexBytes(deployment.factory_address)
        + salt
        + HexBytes(deployment.init_code_hash)
    )
    return to_checksum_address(raw[12:])


class Pair:
    """
    Liquidity pair of two tokens with their reserves.

    Token amounts are kept in the pair contract storage order: ``token0``
    is the token that sorts first. Arguments can be passed in any order.

    Args:
        amount_a: reserve of the first token
        amount_b: reserve of the second token
        address: address of the pair contract
    """

    #: Pair contract address (checksummed)
    address: str
    _token_amounts: Tuple[TokenAmount, TokenAmount]

    def __init__(self, amount_a: TokenAmount, amount_b: TokenAmount, address: str):
        if amount_a.token.chain_id != amount_b.token.chain_id:
            raise ValueError(
                f"Pair tokens must be on the same chain: {amount_a.token.chain_id} and {amount_b.token.chain_id}"
            )
        if amount_a.token.sorts_before(amount_b.token):
            self._token_amounts = (amount_a, amount_b)
        else:
            self._token_amounts = (amount_b, amount_a)
        self.address = to_checksum_address(address)

    @staticmethod
    def get_address(token_a: Token, token_b: Token, deployment: AmmDeployment) -> str:
        """
        Same as :func:`pair_address`
        """
        return pair_address(token_a, token_b, deployment)

    @property
    def chain_id(self) -> ChainId:
        """
        Network of the pair
        """
        return self.token0.chain_id

    @property
    def token_amounts(self) -> Tuple[TokenAmount, TokenAmount]:
        """
        Reserves in storage order
        """
        return self._token_amounts

    @property
    def token0(self) -> Token:
        return self._token_amounts[0].token

    @property
    def token1(self) -> Token:
        return self._token_amounts[1].token

    @property
    def reserve0(self) -> TokenAmount:
        return self._token_amounts[0]

    @property
    def reserve1(self) -> TokenAmount:
        return self._token_amounts[1]

    def involves_token(self, token: Token) -> bool:
        """
        Whether ``token`` is one of the pair tokens
        """
        return token == self.token0 or token == self.token1

    def reserve_of(self, token: Token) -> TokenAmount:
        """
        Reserve of a pair token.

        Raises:
            ValueError: if ``token`` is not in the pair
        """
        if token == self.token0:
            return self.reserve0
        if token == self.token1:
            return self.reserve1
        raise ValueError(f"Token `{token.address}` is not in pair `{self.address}`")

    def price_of(self, token: Token) -> Decimal:
        """
        Spot price of one whole ``token`` in units of the other token.

        Args:
            token: base token, one of the pair tokens

        Returns:
            Price adjusted for both tokens decimals

        Raises:
            ValueError: if ``token`` is not in the pair or the pair has no liquidity
        """
        base = self.reserve_of(token)
        quote = self.reserve1 if token == self.token0 else self.reserve0
        if base.raw == 0:
            raise ValueError(f"Pair `{self.address}` has no liquidity")
        return quote.to_decimal() / base.to_decimal()

    @property
    def token0_price(self) -> Decimal:
        """
        Price of ``token0`` in ``token1``
        """
        return self.price_of(self.token0)

    @property
    def token1_price(self) -> Decimal:
        """
        Price of ``token1`` in ``token0``
        """
        return self.price_of(self.token1)

    def to_dict(self):
        return {
            "address": self.address,
            "chainId": int(self.chain_id),
            "token0": self.token0.address,
            "token1": self.token1.address,
            "reserve0": str(self.reserve0.raw),
            "reserve1": str(self.reserve1.raw),
        }

    def __eq__(self, other):
        if type(other) is type(self):
            return (
                self.address == other.address
                and self._token_amounts == other._token_amounts
            )
        return False

    def __repr__(self):
        return f"Pair({json.dumps(self.to_dict())})"
