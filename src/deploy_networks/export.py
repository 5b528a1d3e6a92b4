"""Hardhat-shaped export of a resolved environment."""

from typing import Any, Dict, List

from .types import LocalNetworkConfig, NetworkConfig, ResolvedEnvironment


def _network_entry(config: NetworkConfig) -> Dict[str, Any]:
    if isinstance(config, LocalNetworkConfig):
        return {
            "chainId": config.chain_id,
            "gas": config.gas,
            "gasPrice": config.gas_price,
            "allowUnlimitedContractSize": config.allow_unlimited_contract_size,
        }

    return {
        "chainId": config.chain_id,
        "url": config.url,
        "accounts": list(config.accounts),
    }


def to_hardhat_config(environment: ResolvedEnvironment) -> Dict[str, Any]:
    """
    Render a resolved environment as a hardhat user config dictionary.

    Secrets are included verbatim, since the build tool needs them. The
    result is plain data; serializing it is up to the caller.

    Args:
        environment: Resolved environment

    Returns:
        Dictionary with paths, solidity, networks, etherscan, sourcify,
        gasReporter, mocha and typechain sections
    """
    compiler = environment.compiler
    toolchain = environment.toolchain

    custom_chains: List[Dict[str, Any]] = [
        {
            "network": name,
            "chainId": verification.chain_id,
            "urls": {
                "apiURL": verification.api_url,
                "browserURL": verification.browser_url,
            },
        }
        for name, verification in environment.verification.items()
        if verification.custom
    ]

    return {
        "paths": {
            "artifacts": toolchain.paths.artifacts,
            "cache": toolchain.paths.cache,
            "sources": toolchain.paths.sources,
            "tests": toolchain.paths.tests,
        },
        "solidity": {
            "compilers": [
                {
                    "version": compiler.version,
                    "settings": {
                        "optimizer": {
                            "enabled": compiler.optimizer_enabled,
                            "runs": compiler.optimizer_runs,
                        },
                    },
                }
            ],
        },
        "networks": {
            name: _network_entry(config)
            for name, config in environment.networks.items()
        },
        "etherscan": {
            "apiKey": {
                name: verification.api_key
                for name, verification in environment.verification.items()
            },
            "customChains": custom_chains,
        },
        "sourcify": {"enabled": toolchain.sourcify_enabled},
        "gasReporter": {"enabled": toolchain.gas_reporter_enabled},
        "mocha": {
            "parallel": toolchain.test_parallel,
            "timeout": toolchain.test_timeout,
        },
        "typechain": {
            "outDir": toolchain.typechain_out_dir,
            "target": toolchain.typechain_target,
        },
    }
