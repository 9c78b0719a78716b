"""Compiled artifact loading for tron-tornado-deployments."""

import json
from pathlib import Path
from typing import Optional, Union

from .exceptions import ArtifactNotFoundError, InvalidArtifactError
from .paths import get_artifact_path
from .types import ContractArtifact


def parse_artifact(file_path: Path, name: Optional[str] = None) -> ContractArtifact:
    """
    Parse a Truffle build artifact.

    Args:
        file_path: Path to {Name}.json
        name: Contract name (defaults to "contractName" or the file stem)

    Returns:
        ContractArtifact with bare-hex bytecode

    Raises:
        ArtifactNotFoundError: If the file does not exist
        InvalidArtifactError: If abi or bytecode is missing
    """
    if not file_path.exists():
        raise ArtifactNotFoundError(
            f"Contract artifact not found at {file_path}. "
            "Compile the contracts before deploying."
        )

    with open(file_path) as f:
        data = json.load(f)

    if name is None:
        name = data.get("contractName") or file_path.stem

    abi = data.get("abi")
    bytecode = data.get("bytecode")
    if not abi or not bytecode:
        raise InvalidArtifactError(f"Artifact {file_path} is missing abi or bytecode")

    # Truffle writes 0x-prefixed bytecode; the node expects bare hex
    if bytecode.startswith("0x"):
        bytecode = bytecode[2:]

    return ContractArtifact(name=name, abi=abi, bytecode=bytecode)


def load_artifact(
    name: str, artifacts_dir: Optional[Union[Path, str]] = None
) -> ContractArtifact:
    """
    Load a compiled contract by name.

    Args:
        name: Contract name, e.g. "ETHTornado"
        artifacts_dir: Directory holding {name}.json (defaults to ./build/contracts)

    Returns:
        ContractArtifact
    """
    return parse_artifact(get_artifact_path(name, artifacts_dir), name)
