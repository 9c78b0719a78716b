"""
tron-tornado-deployments: resumable deployment of the Tornado contracts to TRON
"""

from importlib.metadata import PackageNotFoundError, version

from .client import TronClient
from .config import Settings, build_run_context
from .deployments import DEPLOYMENT_STEPS, DeploymentStep, run_deployment
from .exceptions import (
    AddressStoreError,
    ArtifactNotFoundError,
    ConfigurationError,
    DeploymentError,
    InvalidAddressError,
    InvalidArtifactError,
    RPCError,
    TransactionFailedError,
)
from .store import AddressStore
from .types import ContractArtifact, ContractHandle, Deployed, Reused, RunContext

try:
    __version__ = version("tron-tornado-deployments")
except PackageNotFoundError:
    __version__ = None

__all__ = [
    "run_deployment",
    "build_run_context",
    "DEPLOYMENT_STEPS",
    "DeploymentStep",
    "AddressStore",
    "Settings",
    "TronClient",
    "ContractArtifact",
    "ContractHandle",
    "Deployed",
    "Reused",
    "RunContext",
    "DeploymentError",
    "ConfigurationError",
    "ArtifactNotFoundError",
    "InvalidArtifactError",
    "AddressStoreError",
    "InvalidAddressError",
    "RPCError",
    "TransactionFailedError",
]
