from __future__ import annotations
import json
from dataclasses import dataclass
from decimal import Decimal

from ammcat.fetcher.tokens.token import Token

MAX_UINT256 = 2**256 - 1


@dataclass(frozen=True)
class TokenAmount:
    """
    Amount of a token in its smallest unit.

    ``raw`` is already scaled by ``10 ** token.decimals``, e.g. one USDC
    is ``TokenAmount(usdc, 1_000_000)``.
    """

    #: The token
    token: Token
    #: Amount in the smallest unit
    raw: int

    def __post_init__(self):
        if not isinstance(self.raw, int):
            raise ValueError(f"Token amount must be an integer, got {self.raw!r}")
        if not 0 <= self.raw <= MAX_UINT256:
            raise ValueError(f"Token amount must fit uint256, got {self.raw}")

    def to_decimal(self) -> Decimal:
        """
        Amount in whole token units
        """
        return Decimal(self.raw).scaleb(-self.token.decimals)

    def to_exact(self) -> str:
        """
        Amount in whole token units as a string without exponent
        """
        return f"{self.to_decimal():f}"

    def __add__(self, other: TokenAmount) -> TokenAmount:
        self._check_same_token(other)
        return TokenAmount(self.token, self.raw + other.raw)

    def __sub__(self, other: TokenAmount) -> TokenAmount:
        self._check_same_token(other)
        return TokenAmount(self.token, self.raw - other.raw)

    def _check_same_token(self, other: TokenAmount):
        if self.token != other.token:
            raise ValueError(
                f"Token mismatch: {self.token.address} and {other.token.address}"
            )

    def __repr__(self):
        return f"TokenAmount({json.dumps({'token': self.token.address, 'raw': str(self.raw)})})"
