"""Data types and dataclasses for deploy-networks library."""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import List, Mapping, Optional, Tuple

from .constants import LOCAL_CHAIN_ID, LOCAL_NETWORK_NAME
from .exceptions import NetworkNotFoundError


@dataclass(frozen=True)
class ExplorerDescriptor:
    """Block explorer used to verify contracts on a chain."""

    api_url: str  # e.g., "https://api.berascan.com/api"
    browser_url: str  # e.g., "https://berascan.com"
    key_env: str  # Environment variable holding the explorer API key
    custom: bool = True  # False for explorers the verifier knows natively


@dataclass(frozen=True)
class ChainDescriptor:
    """Static metadata for one chain in the registry."""

    name: str  # e.g., "mainnet", "bera"
    chain_id: int
    endpoint: str  # Static URL or template containing "{key}"
    explorer: Optional[ExplorerDescriptor] = None

    def __post_init__(self):
        if not self.name:
            raise ValueError("Chain name must not be empty")
        if (
            isinstance(self.chain_id, bool)
            or not isinstance(self.chain_id, int)
            or self.chain_id <= 0
        ):
            raise ValueError(
                f"Chain ID for '{self.name}' must be a positive integer, got {self.chain_id!r}"
            )


@dataclass(frozen=True)
class CredentialBundle:
    """
    Secrets supplied by the environment.

    Empty strings are treated the same as missing values. Secret values are
    excluded from ``repr()``.
    """

    deployer_key: Optional[str] = field(default=None, repr=False)
    rpc_provider_key: Optional[str] = field(default=None, repr=False)
    explorer_keys: Mapping[str, Optional[str]] = field(
        default_factory=dict, repr=False
    )

    def __post_init__(self):
        object.__setattr__(
            self, "explorer_keys", MappingProxyType(dict(self.explorer_keys))
        )

    @property
    def has_deployer_key(self) -> bool:
        return bool(self.deployer_key)

    @property
    def has_rpc_provider_key(self) -> bool:
        return bool(self.rpc_provider_key)

    def explorer_key(self, chain: str) -> str:
        """
        Get the explorer API key for a chain.

        Args:
            chain: Chain name

        Returns:
            API key, or empty string when none is configured
        """
        return self.explorer_keys.get(chain) or ""


@dataclass(frozen=True)
class NetworkConfig:
    """Connection parameters for one deployable network."""

    chain_id: int
    url: str
    accounts: Tuple[str, ...] = field(default=(), repr=False)


@dataclass(frozen=True)
class LocalNetworkConfig(NetworkConfig):
    """Simulated in-process network that needs no secrets."""

    chain_id: int = LOCAL_CHAIN_ID
    url: str = ""
    gas: str = "auto"
    gas_price: str = "auto"
    allow_unlimited_contract_size: bool = False


@dataclass(frozen=True)
class VerificationConfig:
    """Parameters for verifying contract sources on a block explorer."""

    chain_id: int
    api_url: str
    browser_url: str
    api_key: str = field(default="", repr=False)  # "" means no key configured
    custom: bool = True


@dataclass(frozen=True)
class CompilerSettings:
    """Solidity compiler settings, passed through to the compiler unchanged."""

    version: str = "0.8.20"
    optimizer_enabled: bool = True
    optimizer_runs: int = 100


@dataclass(frozen=True)
class ProjectPaths:
    """Project directory layout used by the build toolchain."""

    artifacts: str = "./artifacts"
    cache: str = "./cache"
    sources: str = "./contracts"
    tests: str = "./test"


@dataclass(frozen=True)
class ToolchainSettings:
    """Static settings for the collaborators around compilation."""

    paths: ProjectPaths = field(default_factory=ProjectPaths)
    test_parallel: bool = False
    test_timeout: int = 100000000  # milliseconds
    typechain_out_dir: str = "typechain"
    typechain_target: str = "ethers-v6"
    gas_reporter_enabled: bool = False
    sourcify_enabled: bool = False


@dataclass(frozen=True)
class ResolvedEnvironment:
    """
    Result of configuration resolution.

    Always contains the local network. Mappings are read-only, so the
    environment can be shared freely once built.
    """

    networks: Mapping[str, NetworkConfig]
    verification: Mapping[str, VerificationConfig]
    compiler: CompilerSettings = field(default_factory=CompilerSettings)
    toolchain: ToolchainSettings = field(default_factory=ToolchainSettings)
    local_network_name: str = LOCAL_NETWORK_NAME

    def __post_init__(self):
        object.__setattr__(self, "networks", MappingProxyType(dict(self.networks)))
        object.__setattr__(
            self, "verification", MappingProxyType(dict(self.verification))
        )
        if self.local_network_name not in self.networks:
            raise ValueError(
                f"Resolved environment is missing local network '{self.local_network_name}'"
            )

    def has_network(self, name: str) -> bool:
        """
        Check if a network was resolved.

        Args:
            name: Network name to check

        Returns:
            True if network is present, False otherwise
        """
        return name in self.networks

    def network(self, name: str) -> NetworkConfig:
        """
        Get the resolved configuration of a network.

        Args:
            name: Network name

        Returns:
            NetworkConfig for the network

        Raises:
            NetworkNotFoundError: If network was not resolved
        """
        if name not in self.networks:
            raise NetworkNotFoundError(name, self.network_names())
        return self.networks[name]

    def network_names(self) -> List[str]:
        """Get names of all resolved networks, local network last."""
        return list(self.networks.keys())

    @property
    def local_network(self) -> NetworkConfig:
        return self.network(self.local_network_name)

    def remote_networks(self) -> Mapping[str, NetworkConfig]:
        """Get all resolved networks except the local one."""
        return MappingProxyType(
            {
                name: config
                for name, config in self.networks.items()
                if name != self.local_network_name
            }
        )

    def verification_for(self, name: str) -> VerificationConfig:
        """
        Get verification parameters for a network.

        Args:
            name: Network name

        Returns:
            VerificationConfig for the network

        Raises:
            NetworkNotFoundError: If network has no block explorer configured
        """
        if name not in self.verification:
            raise NetworkNotFoundError(name, list(self.verification.keys()))
        return self.verification[name]
