"""Environment-driven configuration for tron-tornado-deployments."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from dotenv import find_dotenv, load_dotenv

from .client import TronClient
from .constants import DEFAULT_NETWORK, DEFAULT_PRIVATE_KEY_ENV, NETWORK_CONFIG
from .exceptions import ConfigurationError
from .paths import get_default_addresses_path, get_default_artifacts_dir
from .store import AddressStore
from .types import RunContext

logger = logging.getLogger(__name__)


def get_full_node_url(network: str) -> str:
    """
    Get the full-node base URL for a network.

    Args:
        network: Network name (e.g., "mainnet", "shasta")

    Returns:
        Configured URL, or https://api.{network}.trongrid.io for unlisted networks
    """
    if network in NETWORK_CONFIG:
        return NETWORK_CONFIG[network]["full_node_url"]
    return f"https://api.{network}.trongrid.io"


def get_private_key_env(network: str) -> str:
    """Name of the environment variable holding the signing key for a network."""
    return NETWORK_CONFIG.get(network, {}).get("private_key_env", DEFAULT_PRIVATE_KEY_ENV)


@dataclass(frozen=True)
class Settings:
    """Raw configuration values, read once from the environment."""

    network: str
    private_key: Optional[str] = None
    eth_amount: Optional[str] = None
    token_amount: Optional[str] = None
    merkle_tree_height: Optional[str] = None
    erc20_token: Optional[str] = None
    api_key: Optional[str] = None
    addresses_path: Optional[Path] = None
    artifacts_dir: Optional[Path] = None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """
        Read settings from the environment.

        Args:
            environ: Mapping to read from (defaults to os.environ after loading .env)

        Returns:
            Settings
        """
        if environ is None:
            load_dotenv(find_dotenv(usecwd=True))
            environ = os.environ

        network = environ.get("TRON_NETWORK") or DEFAULT_NETWORK
        addresses_file = environ.get("ADDRESSES_FILE")
        artifacts_dir = environ.get("ARTIFACTS_DIR")

        return cls(
            network=network,
            private_key=environ.get(get_private_key_env(network)) or None,
            eth_amount=environ.get("ETH_AMOUNT") or None,
            token_amount=environ.get("TOKEN_AMOUNT") or None,
            merkle_tree_height=environ.get("MERKLE_TREE_HEIGHT") or None,
            erc20_token=environ.get("ERC20_TOKEN") or None,
            api_key=environ.get("TRONGRID_API_KEY") or None,
            addresses_path=Path(addresses_file) if addresses_file else get_default_addresses_path(),
            artifacts_dir=Path(artifacts_dir) if artifacts_dir else get_default_artifacts_dir(),
        )

    def require(self, field_name: str, env_name: str) -> str:
        """
        Get a value that the current step cannot do without.

        Raises:
            ConfigurationError: If the value is not set
        """
        value = getattr(self, field_name)
        if value is None:
            raise ConfigurationError(f"${env_name} is required for this deployment step")
        return value

    def require_int(self, field_name: str, env_name: str) -> int:
        """
        Get a required integer value.

        Raises:
            ConfigurationError: If the value is not set or not an integer
        """
        value = self.require(field_name, env_name)
        try:
            return int(value)
        except ValueError as e:
            raise ConfigurationError(f"${env_name} must be an integer, got {value!r}") from e


def build_client(settings: Settings) -> TronClient:
    """
    Create a client bound to the configured network and signing key.

    Raises:
        ConfigurationError: If the signing key is not set
    """
    if settings.private_key is None:
        raise ConfigurationError(
            f"${get_private_key_env(settings.network)} must be set to deploy "
            f"on '{settings.network}'"
        )

    full_node_url = get_full_node_url(settings.network)
    logger.info("Create TronClient: %s", full_node_url)
    client = TronClient(full_node_url, settings.private_key, api_key=settings.api_key)
    logger.info("Deployer address: %s", client.owner_address)
    return client


def build_run_context(
    reset: bool = False,
    settings: Optional[Settings] = None,
    client: Optional[TronClient] = None,
) -> RunContext:
    """
    Derive everything a run needs from the environment.

    Args:
        reset: Force redeployment of every contract
        settings: Pre-built settings (defaults to Settings.from_env())
        client: Pre-built client (defaults to one built from settings)

    Returns:
        RunContext with the address store loaded from disk
    """
    if settings is None:
        settings = Settings.from_env()
    if client is None:
        client = build_client(settings)

    addresses_path = settings.addresses_path or get_default_addresses_path()
    store = AddressStore.load(addresses_path)

    return RunContext(
        network=settings.network,
        reset=reset,
        client=client,
        store=store,
        settings=settings,
        artifacts_dir=settings.artifacts_dir,
    )
