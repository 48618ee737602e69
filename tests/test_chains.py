import pytest

from wallet_api.services.chains import (
    CHAIN_REGISTRY,
    Chain,
    get_chain_name,
    is_supported_chain,
)


def test_supported_chain_flags():
    assert is_supported_chain("1") is True
    assert is_supported_chain("8453") is True
    assert is_supported_chain("146") is True
    assert is_supported_chain("534352") is False
    assert is_supported_chain("") is False


def test_chain_names():
    assert get_chain_name("56") == "BNB Chain"
    assert get_chain_name("324") == "zkSync Era"


def test_unknown_chain_name_never_fails():
    assert get_chain_name("999999") == "Unknown Chain (999999)"


def test_registry_order_and_labels():
    assert len(CHAIN_REGISTRY) == 11
    labels = CHAIN_REGISTRY.labels()
    assert labels[0] == "Ethereum (1)"
    assert labels[-1] == "Sonic (146)"
    assert "Base (8453)" in labels


def test_registry_is_read_only():
    chain = CHAIN_REGISTRY.get("1")
    assert chain == Chain("1", "Ethereum")
    with pytest.raises(AttributeError):
        chain.name = "Mainnet"
    with pytest.raises(TypeError):
        CHAIN_REGISTRY._by_id["999"] = Chain("999", "Fake")
