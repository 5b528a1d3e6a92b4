"""Static chain registry for deploy-networks library."""

from functools import lru_cache
from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple

from .constants import CHAIN_CONFIG
from .exceptions import NetworkNotFoundError, RegistryConflictError
from .types import ChainDescriptor, ExplorerDescriptor


class ChainRegistry:
    """Read-only catalog of known chains, kept in insertion order."""

    def __init__(self, descriptors: Iterable[ChainDescriptor]):
        """
        Build the registry.

        Args:
            descriptors: Chain descriptors, in the order they should be resolved

        Raises:
            RegistryConflictError: If two descriptors share a name or chain ID
        """
        by_name: Dict[str, ChainDescriptor] = {}
        by_chain_id: Dict[int, ChainDescriptor] = {}

        for descriptor in descriptors:
            if descriptor.name in by_name:
                raise RegistryConflictError(
                    "name", descriptor.name, by_name[descriptor.name].name, descriptor.name
                )
            if descriptor.chain_id in by_chain_id:
                raise RegistryConflictError(
                    "chain_id",
                    descriptor.chain_id,
                    by_chain_id[descriptor.chain_id].name,
                    descriptor.name,
                )
            by_name[descriptor.name] = descriptor
            by_chain_id[descriptor.chain_id] = descriptor

        self._by_name = by_name
        self._by_chain_id = by_chain_id
        self._descriptors: Tuple[ChainDescriptor, ...] = tuple(by_name.values())

    def lookup(self, name: str) -> ChainDescriptor:
        """
        Get the descriptor of a registered chain.

        Args:
            name: Chain name

        Returns:
            ChainDescriptor

        Raises:
            NetworkNotFoundError: If chain is not registered
        """
        if name not in self._by_name:
            raise NetworkNotFoundError(name, self.names())
        return self._by_name[name]

    def by_chain_id(self, chain_id: int) -> Optional[ChainDescriptor]:
        """Get the descriptor with a given chain ID, or None."""
        return self._by_chain_id.get(chain_id)

    def all(self) -> Tuple[ChainDescriptor, ...]:
        """Get all descriptors in insertion order."""
        return self._descriptors

    def names(self) -> List[str]:
        """Get all chain names in insertion order."""
        return [d.name for d in self._descriptors]

    def has_chain(self, name: str) -> bool:
        """Check if a chain is registered."""
        return name in self._by_name

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def __iter__(self) -> Iterator[ChainDescriptor]:
        return iter(self._descriptors)

    def __len__(self) -> int:
        return len(self._descriptors)

    def __repr__(self) -> str:
        return f"ChainRegistry({self.names()!r})"


def descriptor_from_config(name: str, config: Dict[str, Any]) -> ChainDescriptor:
    """
    Build a ChainDescriptor from a catalog entry.

    Args:
        name: Chain name
        config: Entry with chain_id, endpoint and optional explorer dict

    Returns:
        ChainDescriptor
    """
    explorer_config = config.get("explorer")
    explorer = None
    if explorer_config is not None:
        explorer = ExplorerDescriptor(
            api_url=explorer_config["api_url"],
            browser_url=explorer_config["browser_url"],
            key_env=explorer_config["key_env"],
            custom=explorer_config.get("custom", True),
        )

    return ChainDescriptor(
        name=name,
        chain_id=config["chain_id"],
        endpoint=config["endpoint"],
        explorer=explorer,
    )


@lru_cache(maxsize=None)
def default_registry() -> ChainRegistry:
    """Get the built-in chain registry."""
    return ChainRegistry(
        descriptor_from_config(name, config) for name, config in CHAIN_CONFIG.items()
    )
