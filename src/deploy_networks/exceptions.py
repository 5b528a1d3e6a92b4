"""Custom exception classes for deploy-networks library."""


class NetworkConfigError(Exception):
    """Base exception for network configuration errors."""

    pass


class MissingCredentialError(NetworkConfigError, ValueError):
    """Raised when a chain needs a secret that is not present in the environment."""

    def __init__(self, chain: str, secret: str):
        self.chain = chain
        self.secret = secret
        super().__init__(
            f"Network '{chain}' requires secret '{secret}', which is not set"
        )


class RegistryConflictError(NetworkConfigError, ValueError):
    """Raised when two chain descriptors share a name or chain ID."""

    def __init__(self, field: str, value, existing: str, duplicate: str):
        self.field = field
        self.value = value
        self.existing = existing
        self.duplicate = duplicate
        super().__init__(
            f"Duplicate {field} {value!r} in chain registry: "
            f"'{duplicate}' conflicts with '{existing}'"
        )


class NetworkNotFoundError(NetworkConfigError, KeyError):
    """Raised when requested network is not registered."""

    def __init__(self, name: str, available=()):
        self.name = name
        self.available = tuple(available)
        message = f"Network '{name}' not found"
        if self.available:
            message += f" (available: {', '.join(self.available)})"
        super().__init__(message)

    def __str__(self) -> str:
        # KeyError would quote the message
        return str(self.args[0])
