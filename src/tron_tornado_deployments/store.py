"""Persistent address store for deployed contracts."""

import copy
import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

from .constants import EXCHANGES_KEY
from .exceptions import AddressStoreError

logger = logging.getLogger(__name__)


class AddressStore:
    """
    Network -> contract key -> base58 address, backed by one JSON file.

    The file is read once and rewritten in full on every save(), so progress
    survives an interrupted run.
    """

    def __init__(self, path: Union[Path, str], data: Optional[Dict[str, Any]] = None):
        self.path = Path(path)
        self._data: Dict[str, Any] = data if data is not None else {}

    @classmethod
    def load(cls, path: Union[Path, str]) -> "AddressStore":
        """
        Load the address store, or start an empty one.

        Args:
            path: Path to addresses.json

        Returns:
            AddressStore; empty if the file doesn't exist

        Raises:
            AddressStoreError: If the file or any network record is not a JSON object
        """
        path = Path(path)
        try:
            with open(path) as f:
                data = json.load(f)
        except FileNotFoundError:
            logger.info("No address store at %s, starting empty", path)
            return cls(path, {})
        except json.JSONDecodeError as e:
            raise AddressStoreError(f"Address store {path} is not valid JSON: {e}") from e

        if not isinstance(data, dict):
            raise AddressStoreError(f"Address store {path} must contain a JSON object")

        for network, record in data.items():
            if not isinstance(record, dict):
                raise AddressStoreError(
                    f"Address store {path}: network '{network}' must be a JSON object"
                )

        return cls(path, data)

    def has_network(self, network: str) -> bool:
        return network in self._data

    def ensure_network(self, network: str) -> Dict[str, Any]:
        """
        Create an empty namespace for a network if it is absent.

        Args:
            network: Network name (e.g., "shasta")

        Returns:
            The network's record
        """
        if not self.has_network(network):
            self._data[network] = {EXCHANGES_KEY: {}}
        return self._data[network]

    def get(self, network: str, key: str) -> Optional[str]:
        """
        Get a recorded address.

        Args:
            network: Network name
            key: Contract key (e.g., "hasher")

        Returns:
            Base58 address, or None if absent or empty
        """
        address = self._data.get(network, {}).get(key)
        return address or None

    def set(self, network: str, key: str, address: str) -> None:
        self.ensure_network(network)[key] = address

    def as_dict(self) -> Dict[str, Any]:
        return copy.deepcopy(self._data)

    def save(self) -> None:
        """
        Write the full store to disk, replacing the previous file.

        Creates parent directories if they don't exist.
        """
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w") as f:
            json.dump(self._data, f, indent=2)
        logger.debug("Saved address store to %s", self.path)
