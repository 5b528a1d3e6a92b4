"""
deploy-networks: Python library for resolving per-network deployment configuration
"""

from importlib.metadata import PackageNotFoundError, version

from .credentials import load_credentials
from .exceptions import (
    MissingCredentialError,
    NetworkConfigError,
    NetworkNotFoundError,
    RegistryConflictError,
)
from .export import to_hardhat_config
from .registry import ChainRegistry, default_registry
from .resolver import ConfigResolver, load_environment, resolve_environment
from .types import (
    ChainDescriptor,
    CompilerSettings,
    CredentialBundle,
    ExplorerDescriptor,
    LocalNetworkConfig,
    NetworkConfig,
    ResolvedEnvironment,
    ToolchainSettings,
    VerificationConfig,
)

try:
    __version__ = version("deploy-networks")
except PackageNotFoundError:
    __version__ = None

__all__ = [
    "ChainRegistry",
    "ConfigResolver",
    "default_registry",
    "load_credentials",
    "load_environment",
    "resolve_environment",
    "to_hardhat_config",
    "ChainDescriptor",
    "ExplorerDescriptor",
    "CredentialBundle",
    "NetworkConfig",
    "LocalNetworkConfig",
    "VerificationConfig",
    "CompilerSettings",
    "ToolchainSettings",
    "ResolvedEnvironment",
    "NetworkConfigError",
    "MissingCredentialError",
    "RegistryConflictError",
    "NetworkNotFoundError",
]
