import asyncio
import pytest
from web3 import AsyncWeb3

from ammcat.fetcher.chains import DEFAULT_RPCS, ChainId, to_chain_id
from ammcat.fetcher.core import Core, web3_cache
from fixtures.w3 import AsyncWeb3Mock

MAINNET_RPC = "http://mainnet.local"


def test_injected_w3_wins(w3_mock: AsyncWeb3Mock, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("WEB3_PROVIDER_URI", "http://localhost:1111")
    core = Core(rpc="http://localhost:2222", w3=w3_mock)
    assert core.w3_for(ChainId.MAINNET) is w3_mock
    assert core.w3_for(ChainId.GOERLI) is w3_mock


def test_explicit_rpc_wins(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("WEB3_PROVIDER_URI_1", "http://localhost:1111")
    core = Core(rpc="http://localhost:2222")
    assert core.rpc_for(ChainId.MAINNET) == "http://localhost:2222"


def test_rpc_from_env(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("WEB3_PROVIDER_URI", "http://localhost:1111")
    monkeypatch.setenv("WEB3_PROVIDER_URI_5", "http://localhost:5555")
    core = Core()
    assert core.rpc_for(ChainId.GOERLI) == "http://localhost:5555"
    assert core.rpc_for(ChainId.MAINNET) == "http://localhost:1111"


def test_default_rpc():
    core = Core()
    assert core.rpc_for(ChainId.MAINNET) == DEFAULT_RPCS[ChainId.MAINNET]
    with pytest.raises(ValueError):
        core.rpc_for(ChainId.KOVAN)


def test_w3_is_cached_by_rpc():
    w3 = Core(rpc="http://localhost:8545").w3_for(ChainId.MAINNET)
    assert isinstance(w3, AsyncWeb3)
    assert Core(rpc="http://localhost:8545").w3_for(ChainId.GOERLI) is w3
    assert Core(rpc="http://localhost:8546").w3_for(ChainId.MAINNET) is not w3


def test_to_chain_id():
    assert to_chain_id(1) is ChainId.MAINNET
    assert to_chain_id(80001) is ChainId.POLYGON_MUMBAI
    with pytest.raises(ValueError):
        to_chain_id(31337)


def test_connect_verifies_chain_of_rpc(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("WEB3_PROVIDER_URI", MAINNET_RPC)
    mainnet = AsyncWeb3Mock(ChainId.MAINNET)
    web3_cache[MAINNET_RPC] = mainnet

    assert asyncio.run(Core().connect(ChainId.MAINNET)) is mainnet
    with pytest.raises(ValueError):
        asyncio.run(Core().connect(ChainId.POLYGON_MUMBAI))
    # chain id is read once per rpc url
    assert mainnet.number_of_chain_id_calls == 1


def test_connect_with_explicit_rpc_on_other_chain():
    mainnet = AsyncWeb3Mock(ChainId.MAINNET)
    web3_cache[MAINNET_RPC] = mainnet
    with pytest.raises(ValueError):
        asyncio.run(Core(rpc=MAINNET_RPC).connect(ChainId.GOERLI))


def test_connect_trusts_injected_w3(w3_mock: AsyncWeb3Mock):
    assert asyncio.run(Core(w3=w3_mock).connect(ChainId.GOERLI)) is w3_mock
    assert w3_mock.number_of_chain_id_calls == 0
