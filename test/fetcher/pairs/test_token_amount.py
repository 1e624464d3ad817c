from decimal import Decimal
import pytest

from ammcat.fetcher.pairs import TokenAmount
from ammcat.fetcher.pairs.token_amount import MAX_UINT256
from ammcat.fetcher.tokens import Token


def test_token_amount_units(usdc: Token, weth: Token):
    assert TokenAmount(usdc, 1_500_000).to_decimal() == Decimal("1.5")
    assert TokenAmount(usdc, 1_500_000).to_exact() == "1.500000"
    assert TokenAmount(weth, 1).to_exact() == "0.000000000000000001"
    assert TokenAmount(weth, 0).to_decimal() == 0


def test_token_amount_arithmetic(usdc: Token, weth: Token):
    a = TokenAmount(usdc, 300)
    b = TokenAmount(usdc, 200)
    assert a + b == TokenAmount(usdc, 500)
    assert a - b == TokenAmount(usdc, 100)
    with pytest.raises(ValueError):
        b - a
    with pytest.raises(ValueError):
        a + TokenAmount(weth, 1)


def test_token_amount_validation(usdc: Token):
    TokenAmount(usdc, MAX_UINT256)
    with pytest.raises(ValueError):
        TokenAmount(usdc, MAX_UINT256 + 1)
    with pytest.raises(ValueError):
        TokenAmount(usdc, -1)
    with pytest.raises(ValueError):
        TokenAmount(usdc, 1.5)
