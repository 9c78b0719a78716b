"""Custom exception classes for tron-tornado-deployments."""


class DeploymentError(Exception):
    """Base exception for deployment-related errors."""

    pass


class ConfigurationError(DeploymentError, ValueError):
    """Raised when a required environment value is missing or invalid."""

    pass


class ArtifactNotFoundError(DeploymentError, FileNotFoundError):
    """Raised when a compiled contract artifact is not found."""

    pass


class InvalidArtifactError(DeploymentError, ValueError):
    """Raised when a compiled artifact lacks its ABI or bytecode."""

    pass


class AddressStoreError(DeploymentError, ValueError):
    """Raised when the address store file cannot be parsed."""

    pass


class InvalidAddressError(DeploymentError, ValueError):
    """Raised when an address is neither valid base58check nor hex."""

    pass


class RPCError(DeploymentError, RuntimeError):
    """Raised when the full node rejects a request or cannot be reached."""

    pass


class TransactionFailedError(RPCError):
    """Raised when a broadcast transaction is confirmed as failed."""

    pass
