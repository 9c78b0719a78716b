"""Path management utilities for tron-tornado-deployments."""

from pathlib import Path
from typing import Optional, Union


def get_default_addresses_path() -> Path:
    """
    Get default address store path.

    Returns:
        Path to ./addresses.json
    """
    return Path.cwd() / "addresses.json"


def get_default_artifacts_dir() -> Path:
    """
    Get default compiled artifacts directory.

    Returns:
        Path to ./build/contracts
    """
    return Path.cwd() / "build" / "contracts"


def get_artifact_path(name: str, artifacts_dir: Optional[Union[Path, str]] = None) -> Path:
    """
    Get the artifact file for a compiled contract.

    Args:
        name: Contract name (e.g., "Hasher")
        artifacts_dir: Custom artifacts directory (defaults to ./build/contracts)

    Returns:
        Path to {artifacts_dir}/{name}.json
    """
    if artifacts_dir is None:
        artifacts_dir = get_default_artifacts_dir()
    else:
        artifacts_dir = Path(artifacts_dir).absolute()

    return artifacts_dir / f"{name}.json"
