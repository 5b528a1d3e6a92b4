"""Network configuration resolution for deploy-networks library."""

import logging
from pathlib import Path
from typing import Dict, List, Mapping, Optional, Tuple, Union

from .constants import LOCAL_CHAIN_ID, LOCAL_NETWORK_NAME, RPC_PROVIDER_KEY_ENV
from .credentials import load_credentials
from .endpoints import mask_endpoint, render_endpoint, requires_provider_key
from .exceptions import MissingCredentialError, RegistryConflictError
from .registry import ChainRegistry, default_registry
from .types import (
    ChainDescriptor,
    CompilerSettings,
    CredentialBundle,
    LocalNetworkConfig,
    NetworkConfig,
    ResolvedEnvironment,
    ToolchainSettings,
    VerificationConfig,
)

logger = logging.getLogger(__name__)


class ConfigResolver:
    """Turns a chain registry and a set of secrets into per-network configuration."""

    def __init__(
        self,
        registry: Optional[ChainRegistry] = None,
        credentials: Optional[CredentialBundle] = None,
        compiler: Optional[CompilerSettings] = None,
        toolchain: Optional[ToolchainSettings] = None,
        local_network: Optional[NetworkConfig] = None,
        local_network_name: str = LOCAL_NETWORK_NAME,
    ):
        """
        Initialize the resolver.

        Args:
            registry: Chain registry (defaults to the built-in registry)
            credentials: Secrets (defaults to an empty bundle)
            compiler: Compiler settings (defaults to CompilerSettings())
            toolchain: Toolchain settings (defaults to ToolchainSettings())
            local_network: Simulated network config (defaults to chain ID 1337)
            local_network_name: Name of the simulated network

        Raises:
            RegistryConflictError: If a registered chain uses the local network name
        """
        if registry is None:
            registry = default_registry()

        if local_network_name in registry:
            raise RegistryConflictError(
                "name", local_network_name, "local network", local_network_name
            )

        self.registry = registry
        self.credentials = credentials if credentials is not None else CredentialBundle()
        self.compiler = compiler if compiler is not None else CompilerSettings()
        self.toolchain = toolchain if toolchain is not None else ToolchainSettings()
        self.local_network = (
            local_network
            if local_network is not None
            else LocalNetworkConfig(chain_id=LOCAL_CHAIN_ID)
        )
        self.local_network_name = local_network_name

    def _endpoint_for(self, descriptor: ChainDescriptor) -> str:
        if (
            requires_provider_key(descriptor.endpoint)
            and not self.credentials.has_rpc_provider_key
        ):
            raise MissingCredentialError(descriptor.name, RPC_PROVIDER_KEY_ENV)
        return render_endpoint(descriptor.endpoint, self.credentials.rpc_provider_key)

    def resolve_networks(self) -> Dict[str, NetworkConfig]:
        """
        Resolve connection parameters for every network.

        Without a deployer key only the local network is returned. With one,
        every registered chain is resolved in registry order.

        Returns:
            Dictionary mapping network name to NetworkConfig, local network last

        Raises:
            MissingCredentialError: If a chain needs the RPC-provider key and it is missing
        """
        candidates: List[Tuple[str, NetworkConfig]] = []

        if self.credentials.has_deployer_key:
            accounts = (self.credentials.deployer_key,)
            for descriptor in self.registry:
                url = self._endpoint_for(descriptor)
                candidates.append(
                    (
                        descriptor.name,
                        NetworkConfig(
                            chain_id=descriptor.chain_id, url=url, accounts=accounts
                        ),
                    )
                )
                logger.debug(
                    "Resolved network %s (chain %d) at %s",
                    descriptor.name,
                    descriptor.chain_id,
                    mask_endpoint(descriptor.endpoint),
                )
        else:
            logger.info(
                "No deployer key set; only local network '%s' is available",
                self.local_network_name,
            )

        candidates.append((self.local_network_name, self.local_network))
        return dict(candidates)

    def resolve_verification(self) -> Dict[str, VerificationConfig]:
        """
        Resolve contract verification parameters.

        Every chain with a block explorer gets an entry, with an empty API key
        when none is configured. Chains without an explorer are omitted.

        Returns:
            Dictionary mapping network name to VerificationConfig
        """
        verification: Dict[str, VerificationConfig] = {}
        for descriptor in self.registry:
            explorer = descriptor.explorer
            if explorer is None:
                continue

            api_key = self.credentials.explorer_key(descriptor.name)
            if not api_key:
                logger.debug(
                    "No explorer key for %s (%s)", descriptor.name, explorer.key_env
                )

            verification[descriptor.name] = VerificationConfig(
                chain_id=descriptor.chain_id,
                api_url=explorer.api_url,
                browser_url=explorer.browser_url,
                api_key=api_key,
                custom=explorer.custom,
            )
        return verification

    def resolve(self) -> ResolvedEnvironment:
        """
        Resolve the complete environment.

        Returns:
            ResolvedEnvironment with networks, verification, compiler and toolchain settings

        Raises:
            MissingCredentialError: If a chain needs the RPC-provider key and it is missing
        """
        networks = self.resolve_networks()
        verification = self.resolve_verification()

        logger.info(
            "Resolved %d network(s): %s", len(networks), ", ".join(networks.keys())
        )

        return ResolvedEnvironment(
            networks=networks,
            verification=verification,
            compiler=self.compiler,
            toolchain=self.toolchain,
            local_network_name=self.local_network_name,
        )


def resolve_environment(
    registry: Optional[ChainRegistry] = None,
    credentials: Optional[CredentialBundle] = None,
    compiler: Optional[CompilerSettings] = None,
    toolchain: Optional[ToolchainSettings] = None,
) -> ResolvedEnvironment:
    """
    Resolve an environment from a registry and a set of secrets.

    Args:
        registry: Chain registry (defaults to the built-in registry)
        credentials: Secrets (defaults to an empty bundle)
        compiler: Compiler settings (defaults to CompilerSettings())
        toolchain: Toolchain settings (defaults to ToolchainSettings())

    Returns:
        ResolvedEnvironment

    Raises:
        MissingCredentialError: If a chain needs the RPC-provider key and it is missing
    """
    return ConfigResolver(
        registry=registry,
        credentials=credentials,
        compiler=compiler,
        toolchain=toolchain,
    ).resolve()


def load_environment(
    environ: Optional[Mapping[str, str]] = None,
    dotenv_path: Optional[Union[Path, str]] = None,
    registry: Optional[ChainRegistry] = None,
) -> ResolvedEnvironment:
    """
    Read secrets from the environment and resolve them.

    Args:
        environ: Mapping to read from (defaults to os.environ plus .env)
        dotenv_path: Path to .env file
        registry: Chain registry (defaults to the built-in registry)

    Returns:
        ResolvedEnvironment

    Raises:
        MissingCredentialError: If a chain needs the RPC-provider key and it is missing
    """
    if registry is None:
        registry = default_registry()

    credentials = load_credentials(environ, registry=registry, dotenv_path=dotenv_path)
    return resolve_environment(registry, credentials)
