"""Credential loading for deploy-networks library."""

import logging
import os
from pathlib import Path
from typing import Dict, Mapping, Optional, Union

from dotenv import find_dotenv, load_dotenv

from .constants import DEPLOYER_KEY_ENV, RPC_PROVIDER_KEY_ENV
from .registry import ChainRegistry, default_registry
from .types import CredentialBundle

logger = logging.getLogger(__name__)


def _read(environ: Mapping[str, str], name: str) -> Optional[str]:
    value = environ.get(name)
    return value or None


def load_credentials(
    environ: Optional[Mapping[str, str]] = None,
    registry: Optional[ChainRegistry] = None,
    dotenv_path: Optional[Union[Path, str]] = None,
    use_dotenv: bool = True,
) -> CredentialBundle:
    """
    Collect secrets from environment variables.

    Reads $DEPLOYER_KEY, $INFURA_KEY and the explorer key variable of every
    registered chain that has a block explorer. When no mapping is given,
    variables from a .env file are loaded into the process environment
    first; variables already set are not overridden.

    Args:
        environ: Mapping to read from (defaults to os.environ)
        registry: Chain registry (defaults to the built-in registry)
        dotenv_path: Path to .env file (defaults to searching from cwd)
        use_dotenv: Whether to load a .env file when reading os.environ

    Returns:
        CredentialBundle with empty values treated as missing
    """
    if registry is None:
        registry = default_registry()

    if environ is None:
        if use_dotenv:
            if dotenv_path is None:
                dotenv_path = find_dotenv(usecwd=True)
            loaded = load_dotenv(dotenv_path)
            logger.debug("Loaded .env file: %s", loaded)
        environ = os.environ

    explorer_keys: Dict[str, Optional[str]] = {}
    for descriptor in registry:
        if descriptor.explorer is not None:
            explorer_keys[descriptor.name] = _read(environ, descriptor.explorer.key_env)

    credentials = CredentialBundle(
        deployer_key=_read(environ, DEPLOYER_KEY_ENV),
        rpc_provider_key=_read(environ, RPC_PROVIDER_KEY_ENV),
        explorer_keys=explorer_keys,
    )

    logger.debug(
        "Credentials present: %s=%s, %s=%s, explorer keys for %s",
        DEPLOYER_KEY_ENV,
        credentials.has_deployer_key,
        RPC_PROVIDER_KEY_ENV,
        credentials.has_rpc_provider_key,
        sorted(name for name, key in explorer_keys.items() if key),
    )
    return credentials
