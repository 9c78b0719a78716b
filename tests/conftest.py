"""Shared pytest fixtures for tron-tornado-deployments tests."""

import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Set, Tuple

import pytest

from tron_tornado_deployments.config import Settings
from tron_tornado_deployments.exceptions import RPCError
from tron_tornado_deployments.store import AddressStore
from tron_tornado_deployments.types import ContractArtifact, ContractHandle, RunContext

# secp256k1 key 1; its address is the well-known 0x7E5F...5Bdf
PRIVATE_KEY = "0x" + "00" * 31 + "01"
OWNER_HEX = "417e5f4552091a69125d5dfcb7b8c2659029395bdf"

# Mainnet USDT and the zero ("black hole") address
USDT_MAINNET = "TR7NHqjeKQxGTCi8q8ZY4pL8otSzgjLj6t"
USDT_MAINNET_HEX = "41a614f803b6fd780986a42c78ec9c7f77e6ded13c"
ZERO_ADDRESS = "T9yD14Nj9j7xAB4dbGeiX9h8unkKHxuWwb"
ZERO_ADDRESS_HEX = "41" + "00" * 20

CONSTRUCTOR_INPUTS = {
    "ERC20Mock": [
        {"name": "name", "type": "string"},
        {"name": "symbol", "type": "string"},
        {"name": "decimals", "type": "uint8"},
    ],
    "Hasher": None,
    "Verifier": None,
    "ETHTornado": [
        {"name": "_verifier", "type": "address", "internalType": "contract IVerifier"},
        {"name": "_hasher", "type": "address", "internalType": "contract IHasher"},
        {"name": "_denomination", "type": "uint256"},
        {"name": "_merkleTreeHeight", "type": "uint32"},
    ],
    "ERC20Tornado": [
        {"name": "_verifier", "type": "address", "internalType": "contract IVerifier"},
        {"name": "_hasher", "type": "address", "internalType": "contract IHasher"},
        {"name": "_denomination", "type": "uint256"},
        {"name": "_merkleTreeHeight", "type": "uint32"},
        {"name": "_token", "type": "address"},
    ],
}


def make_abi(name: str) -> List[Dict[str, Any]]:
    """Minimal ABI: a constructor (where the contract has one) and a mint function."""
    abi: List[Dict[str, Any]] = [
        {
            "type": "function",
            "name": "mint",
            "inputs": [
                {"name": "to", "type": "address"},
                {"name": "amount", "type": "uint256"},
            ],
            "outputs": [],
            "stateMutability": "nonpayable",
        }
    ]
    inputs = CONSTRUCTOR_INPUTS[name]
    if inputs is not None:
        abi.insert(0, {"type": "constructor", "inputs": inputs, "stateMutability": "nonpayable"})
    return abi


class FakeClient:
    """Stands in for TronClient; records every call."""

    def __init__(self, fail_on: Optional[Set[str]] = None):
        self.fail_on = fail_on or set()
        self.deploy_calls: List[Tuple[str, List[Any]]] = []
        self.send_calls: List[Tuple[str, str, List[Any]]] = []
        self._counter = 0

    def contract(self, abi, address) -> ContractHandle:
        return ContractHandle(abi=abi, address=address)

    def deploy_contract(
        self, artifact: ContractArtifact, parameters: Sequence[Any] = (), call_value: int = 0
    ) -> Tuple[str, str]:
        self.deploy_calls.append((artifact.name, list(parameters)))
        if artifact.name in self.fail_on:
            raise RPCError(f"deploy of {artifact.name} failed")
        self._counter += 1
        return "41" + f"{self._counter:040x}", f"{self._counter:064x}"

    def send(self, contract, function_signature, args=(), call_value=0) -> Dict[str, Any]:
        self.send_calls.append((contract.address, function_signature, list(args)))
        if "mint" in self.fail_on:
            raise RPCError("mint failed")
        return {"id": "ff" * 32, "receipt": {"result": "SUCCESS"}}

    @property
    def deployed_names(self) -> List[str]:
        return [name for name, _ in self.deploy_calls]


@pytest.fixture
def artifacts_dir(tmp_path: Path) -> Path:
    """Write the five compiled artifacts in Truffle layout."""
    build_dir = tmp_path / "build" / "contracts"
    build_dir.mkdir(parents=True)
    for name in CONSTRUCTOR_INPUTS:
        with open(build_dir / f"{name}.json", "w") as f:
            json.dump(
                {"contractName": name, "abi": make_abi(name), "bytecode": "0x608060405234"},
                f,
                indent=2,
            )
    return build_dir


@pytest.fixture
def addresses_path(tmp_path: Path) -> Path:
    return tmp_path / "addresses.json"


def make_settings(
    network: str,
    addresses_path: Path,
    artifacts_dir: Path,
    **overrides: Any,
) -> Settings:
    values: Dict[str, Any] = {
        "network": network,
        "private_key": PRIVATE_KEY,
        "eth_amount": "100000000",
        "token_amount": "1000000",
        "merkle_tree_height": "20",
        "erc20_token": USDT_MAINNET,
        "addresses_path": addresses_path,
        "artifacts_dir": artifacts_dir,
    }
    values.update(overrides)
    return Settings(**values)


def make_context(
    network: str,
    addresses_path: Path,
    artifacts_dir: Path,
    client: FakeClient,
    reset: bool = False,
    **overrides: Any,
) -> RunContext:
    settings = make_settings(network, addresses_path, artifacts_dir, **overrides)
    return RunContext(
        network=network,
        reset=reset,
        client=client,  # type: ignore[arg-type]
        store=AddressStore.load(addresses_path),
        settings=settings,
        artifacts_dir=artifacts_dir,
    )


def read_json(path: Path) -> Dict[str, Any]:
    with open(path) as f:
        return json.load(f)
