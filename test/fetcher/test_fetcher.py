import asyncio
import pytest

from ammcat.fetcher.chains import ChainId
from ammcat.fetcher.decimals import DecimalsCache
from ammcat.fetcher.errors import ChainMismatchError, FetcherError, MetadataFetchError
from ammcat.fetcher.fetcher import Fetcher
from ammcat.fetcher.options import FetchOptions
from fixtures.tokens import UNI_ADDRESS, USDC_ADDRESS, WETH_ADDRESS
from fixtures.w3 import AsyncWeb3Mock


def test_fetch_tokens_then_pair(w3_mock: AsyncWeb3Mock):
    fetcher = Fetcher(w3=w3_mock)
    w3_mock.decimals[UNI_ADDRESS] = 18

    async def main():
        uni = await fetcher.fetch_token_data(
            ChainId.MAINNET, UNI_ADDRESS, FetchOptions(symbol="UNI")
        )
        weth = await fetcher.fetch_token_data(ChainId.MAINNET, WETH_ADDRESS)
        address = fetcher.pairs.get_address(uni, weth)
        w3_mock.reserves[address.lower()] = (3, 4)
        return uni, weth, await fetcher.fetch_pair_data(weth, uni)

    uni, weth, pair = asyncio.run(main())
    assert uni.symbol == "UNI"
    # 0x1f98... sorts before 0xc02a...
    assert pair.reserve_of(uni).raw == 3
    assert pair.reserve_of(weth).raw == 4
    assert w3_mock.number_of_calls == 2


def test_fetchers_have_isolated_caches(w3_mock: AsyncWeb3Mock):
    w3_mock.decimals[UNI_ADDRESS] = 18
    f1 = Fetcher(w3=w3_mock)
    f2 = Fetcher(w3=w3_mock)
    asyncio.run(f1.fetch_token_data(ChainId.MAINNET, UNI_ADDRESS))
    asyncio.run(f2.fetch_token_data(ChainId.MAINNET, UNI_ADDRESS))
    assert w3_mock.number_of_calls == 2
    assert len(f1.decimals_cache) == len(f2.decimals_cache)


def test_empty_cache_fetches_seeded_tokens(w3_mock: AsyncWeb3Mock):
    w3_mock.decimals[USDC_ADDRESS] = 6
    fetcher = Fetcher(DecimalsCache(), w3=w3_mock)
    usdc = asyncio.run(fetcher.fetch_token_data(ChainId.MAINNET, USDC_ADDRESS))
    assert usdc.decimals == 6
    assert w3_mock.number_of_calls == 1


def test_errors_share_base_class(w3_mock: AsyncWeb3Mock):
    fetcher = Fetcher(w3=w3_mock)
    with pytest.raises(FetcherError):
        asyncio.run(fetcher.fetch_token_data(ChainId.MAINNET, UNI_ADDRESS))
    assert issubclass(MetadataFetchError, FetcherError)
    assert issubclass(ChainMismatchError, FetcherError)


def test_custom_deployment_is_passed_to_pairs(w3_mock: AsyncWeb3Mock):
    fetcher = Fetcher(
        w3=w3_mock, factory_address="0x" + "fa" * 20, init_code_hash="0x" + "cd" * 32
    )
    deployment = fetcher.pairs.deployment_for(ChainId.BINANCE_TESTNET)
    assert deployment.factory_address == "0x" + "fa" * 20
