"""Data types and dataclasses for tron-tornado-deployments."""

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Union

if TYPE_CHECKING:
    from .client import TronClient
    from .config import Settings
    from .store import AddressStore


@dataclass(frozen=True)
class ContractArtifact:
    """Compiled contract as produced by the build step."""

    name: str  # e.g., "Hasher"
    abi: List[Dict[str, Any]]
    bytecode: str  # Bare hex, no 0x prefix


@dataclass(frozen=True)
class ContractHandle:
    """Local handle to a contract at a known address."""

    abi: List[Dict[str, Any]]
    address: str  # Base58check, e.g., "TR7NHqjeKQxGTCi8q8ZY4pL8otSzgjLj6t"


@dataclass(frozen=True)
class Reused:
    """Step outcome: address already recorded, nothing was sent."""

    key: str
    contract: ContractHandle

    @property
    def address(self) -> str:
        return self.contract.address


@dataclass(frozen=True)
class Deployed:
    """Step outcome: contract created by this run."""

    key: str
    contract: ContractHandle
    txid: str

    @property
    def address(self) -> str:
        return self.contract.address


StepResult = Union[Reused, Deployed]


@dataclass(frozen=True)
class RunContext:
    """Everything a deployment run needs, derived once per invocation."""

    network: str
    reset: bool
    client: "TronClient"
    store: "AddressStore"
    settings: "Settings"
    artifacts_dir: Optional[Path] = None
