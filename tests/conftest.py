"""Shared pytest fixtures for deploy-networks tests."""

import pytest

from deploy_networks.constants import (
    CHAIN_CONFIG,
    DEPLOYER_KEY_ENV,
    RPC_PROVIDER_KEY_ENV,
)
from deploy_networks.registry import ChainRegistry
from deploy_networks.types import ChainDescriptor, CredentialBundle, ExplorerDescriptor

SECRET_ENV_VARS = [DEPLOYER_KEY_ENV, RPC_PROVIDER_KEY_ENV] + sorted(
    {
        config["explorer"]["key_env"]
        for config in CHAIN_CONFIG.values()
        if config["explorer"] is not None
    }
)


@pytest.fixture
def clean_env(monkeypatch):
    """Remove all secret variables from os.environ, restoring them afterwards."""
    for name in SECRET_ENV_VARS:
        # setenv first so monkeypatch also undoes values added by load_dotenv
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    return monkeypatch


@pytest.fixture
def provider_chain() -> ChainDescriptor:
    """Chain whose endpoint needs the RPC-provider key."""
    return ChainDescriptor(
        name="A",
        chain_id=10,
        endpoint="https://a/{key}",
        explorer=ExplorerDescriptor(
            api_url="https://api.a-scan.io/api",
            browser_url="https://a-scan.io",
            key_env="A_EXPLORER_KEY",
        ),
    )


@pytest.fixture
def static_chain() -> ChainDescriptor:
    """Chain with a static endpoint and no block explorer."""
    return ChainDescriptor(name="B", chain_id=20, endpoint="https://b")


@pytest.fixture
def small_registry(provider_chain: ChainDescriptor, static_chain: ChainDescriptor) -> ChainRegistry:
    """Two-chain registry: A needs the provider key, B does not."""
    return ChainRegistry([provider_chain, static_chain])


@pytest.fixture
def full_credentials() -> CredentialBundle:
    """Credentials with every secret present."""
    return CredentialBundle(
        deployer_key="0xdeployer",
        rpc_provider_key="infura123",
        explorer_keys={
            "mainnet": "etherscan-key",
            "sepolia": "etherscan-key",
            "bera": "berascan-key",
            "bera-bartio": "bartio-key",
            "story": "storyscan-key",
            "tac-spb": "tac-key",
        },
    )
