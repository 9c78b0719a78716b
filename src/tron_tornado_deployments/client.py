"""TronGrid full-node HTTP client for tron-tornado-deployments."""

import json
import logging
import time
from typing import Any, Dict, List, Optional, Sequence, Tuple

import requests

from .addresses import address_from_private_key, load_private_key, to_hex
from .constants import (
    API_KEY_HEADER,
    DEFAULT_FEE_LIMIT,
    DEFAULT_ORIGIN_ENERGY_LIMIT,
    DEFAULT_USER_FEE_PERCENTAGE,
    POLL_INTERVAL,
    REQUEST_TIMEOUT,
)
from .encoding import encode_constructor_args, encode_function_args
from .exceptions import RPCError, TransactionFailedError
from .types import ContractArtifact, ContractHandle

logger = logging.getLogger(__name__)


def decode_node_message(message: Optional[str]) -> str:
    """
    Decode an error message returned by the node.

    The node hex-encodes most messages; anything that isn't hex is
    returned as-is.
    """
    if not message:
        return ""
    try:
        return bytes.fromhex(message).decode("utf-8", errors="replace")
    except ValueError:
        return message


class TronClient:
    """Builds, signs, broadcasts and confirms transactions on one network."""

    def __init__(
        self,
        full_node_url: str,
        private_key: str,
        api_key: Optional[str] = None,
        fee_limit: int = DEFAULT_FEE_LIMIT,
        poll_interval: float = POLL_INTERVAL,
    ):
        """
        Initialize the client.

        Args:
            full_node_url: Base URL of the full node (e.g., https://api.shasta.trongrid.io)
            private_key: 32-byte hex signing key
            api_key: Optional TronGrid API key
            fee_limit: Maximum fee per transaction, in sun
            poll_interval: Seconds between confirmation polls

        Raises:
            InvalidAddressError: If the private key is malformed
        """
        self.full_node_url = full_node_url.rstrip("/")
        self.owner_address = address_from_private_key(private_key)
        self._key = load_private_key(private_key)
        self.fee_limit = fee_limit
        self.poll_interval = poll_interval

        self._headers = {"Content-Type": "application/json"}
        if api_key:
            self._headers[API_KEY_HEADER] = api_key

    @property
    def owner_hex(self) -> str:
        return to_hex(self.owner_address)

    def _post(self, path: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        """
        POST to a full-node endpoint.

        Raises:
            RPCError: On network errors, non-200 status, non-JSON body, or an "Error" field
        """
        url = f"{self.full_node_url}{path}"
        try:
            response = requests.post(
                url, json=payload, headers=self._headers, timeout=REQUEST_TIMEOUT
            )
        except requests.RequestException as e:
            raise RPCError(f"Network error calling {path}: {e}") from e

        if response.status_code != 200:
            raise RPCError(f"{path} failed with status {response.status_code}")

        try:
            result = response.json()
        except ValueError as e:
            raise RPCError(f"{path} returned a non-JSON response: {e}") from e

        if "Error" in result:
            raise RPCError(f"{path} error: {result['Error']}")
        return result

    def contract(self, abi: List[Dict[str, Any]], address: str) -> ContractHandle:
        """Handle to an existing contract; no request is made."""
        return ContractHandle(abi=abi, address=address)

    def sign_transaction(self, transaction: Dict[str, Any]) -> Dict[str, Any]:
        """
        Sign a transaction built by the node.

        Args:
            transaction: Transaction JSON with "txID"

        Returns:
            Copy of the transaction with the signature appended
        """
        signature = self._key.sign_msg_hash(bytes.fromhex(transaction["txID"]))
        signed = dict(transaction)
        signed["signature"] = list(transaction.get("signature", [])) + [
            signature.to_bytes().hex()
        ]
        return signed

    def broadcast(self, signed: Dict[str, Any]) -> str:
        """
        Broadcast a signed transaction.

        Returns:
            Transaction id

        Raises:
            RPCError: If the node rejects the transaction
        """
        result = self._post("/wallet/broadcasttransaction", signed)
        if not result.get("result"):
            raise RPCError(
                f"Broadcast of {signed.get('txID')} rejected: "
                f"{result.get('code', 'UNKNOWN')} {decode_node_message(result.get('message'))}"
            )
        txid = result.get("txid") or signed["txID"]
        logger.info("Broadcast transaction %s", txid)
        return txid

    def wait_for_transaction(self, txid: str) -> Dict[str, Any]:
        """
        Poll until the transaction is included in a block.

        There is no overall timeout; a transaction that never confirms
        blocks the caller.

        Returns:
            Transaction info as returned by gettransactioninfobyid
        """
        while True:
            info = self._post("/wallet/gettransactioninfobyid", {"value": txid})
            if info:
                return info
            logger.debug("Transaction %s not confirmed yet", txid)
            time.sleep(self.poll_interval)

    @staticmethod
    def check_receipt(info: Dict[str, Any], action: str) -> None:
        """
        Raise if a confirmed transaction did not succeed.

        Raises:
            TransactionFailedError: If the result is FAILED or the receipt is not SUCCESS
        """
        receipt_result = info.get("receipt", {}).get("result")
        if info.get("result") == "FAILED" or (receipt_result and receipt_result != "SUCCESS"):
            raise TransactionFailedError(
                f"{action} failed in transaction {info.get('id')}: "
                f"{receipt_result or 'FAILED'} {decode_node_message(info.get('resMessage'))}".rstrip()
            )

    def deploy_contract(
        self,
        artifact: ContractArtifact,
        parameters: Sequence[Any] = (),
        call_value: int = 0,
    ) -> Tuple[str, str]:
        """
        Create a contract and wait for it to be confirmed.

        Args:
            artifact: Compiled contract
            parameters: Constructor arguments, in ABI order
            call_value: Sun sent with the creation

        Returns:
            Tuple of (hex_address, txid) where hex_address is 41-prefixed

        Raises:
            RPCError: If the node rejects the request or broadcast
            TransactionFailedError: If the constructor reverts
        """
        payload = {
            "owner_address": self.owner_hex,
            "abi": json.dumps(artifact.abi),
            "bytecode": artifact.bytecode,
            "parameter": encode_constructor_args(artifact.abi, parameters),
            "call_value": call_value,
            "fee_limit": self.fee_limit,
            "consume_user_resource_percent": DEFAULT_USER_FEE_PERCENTAGE,
            "origin_energy_limit": DEFAULT_ORIGIN_ENERGY_LIMIT,
            "name": artifact.name,
            "visible": False,
        }
        transaction = self._post("/wallet/deploycontract", payload)

        contract_address = transaction.get("contract_address")
        if not contract_address or "txID" not in transaction:
            raise RPCError(f"deploycontract returned no transaction for {artifact.name}")

        txid = self.broadcast(self.sign_transaction(transaction))
        info = self.wait_for_transaction(txid)
        self.check_receipt(info, f"Deploy of {artifact.name}")

        return contract_address, txid

    def send(
        self,
        contract: ContractHandle,
        function_signature: str,
        args: Sequence[Any] = (),
        call_value: int = 0,
    ) -> Dict[str, Any]:
        """
        Call a state-changing function and wait for confirmation.

        Args:
            contract: Target contract
            function_signature: e.g. "mint(address,uint256)"
            args: Function arguments
            call_value: Sun sent with the call

        Returns:
            Confirmed transaction info

        Raises:
            RPCError: If the node rejects the call or broadcast
            TransactionFailedError: If the call reverts
        """
        payload = {
            "owner_address": self.owner_hex,
            "contract_address": to_hex(contract.address),
            "function_selector": function_signature,
            "parameter": encode_function_args(function_signature, args),
            "call_value": call_value,
            "fee_limit": self.fee_limit,
            "visible": False,
        }
        response = self._post("/wallet/triggersmartcontract", payload)

        result = response.get("result", {})
        if not result.get("result") or "transaction" not in response:
            raise RPCError(
                f"{function_signature} rejected: "
                f"{result.get('code', 'UNKNOWN')} {decode_node_message(result.get('message'))}"
            )

        txid = self.broadcast(self.sign_transaction(response["transaction"]))
        info = self.wait_for_transaction(txid)
        self.check_receipt(info, function_signature)
        return info
