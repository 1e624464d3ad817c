import pytest

from ammcat.fetcher.chains import ChainId
from ammcat.fetcher.decimals import DecimalsCache
from ammcat.fetcher.pairs import PairsService
from ammcat.fetcher.tokens import Token, TokensService
from fixtures.w3 import AsyncWeb3Mock

WETH_ADDRESS = "0xc02aaa39b223fe8d0a0e5c4f27ead9083c756cc2"
USDC_ADDRESS = "0xa0b86991c6218b36c1d19d4a2e9eb0ce3606eb48"
DAI_ADDRESS = "0x6b175474e89094c44da98b954eedeac495271d0f"
UNI_ADDRESS = "0x1f9840a85d5af5bf1d1762f925bdaddc4201f984"
# Mainnet Uniswap V2 USDC/WETH pair
USDC_WETH_PAIR_ADDRESS = "0xb4e16d0168e52d35cacd2c6185b44281ec28c9dc"


@pytest.fixture
def tokens_service(
    decimals_cache: DecimalsCache, w3_mock: AsyncWeb3Mock
) -> TokensService:
    """
    Instance of tokens.TokensService backed by the web3 mock
    """
    return TokensService(decimals_cache, w3=w3_mock)


@pytest.fixture
def pairs_service(w3_mock: AsyncWeb3Mock) -> PairsService:
    """
    Instance of pairs.PairsService backed by the web3 mock
    """
    return PairsService(w3=w3_mock)


@pytest.fixture
def weth() -> Token:
    return Token(ChainId.MAINNET, WETH_ADDRESS, 18, "WETH", "Wrapped Ether")


@pytest.fixture
def usdc() -> Token:
    return Token(ChainId.MAINNET, USDC_ADDRESS, 6, "USDC", "USD Coin")


@pytest.fixture
def dai() -> Token:
    return Token(ChainId.MAINNET, DAI_ADDRESS, 18, "DAI", "Dai Stablecoin")
