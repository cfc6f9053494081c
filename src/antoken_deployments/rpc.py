"""JSON-RPC network client for antoken-deployments library."""

import itertools
import logging
import time
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Union

import requests
from eth_abi import encode
from eth_account import Account
from eth_utils import function_signature_to_4byte_selector

from .artifacts import load_artifact
from .constants import DEFAULT_POLL_INTERVAL, RPC_REQUEST_TIMEOUT
from .exceptions import (
    ConfirmationTimeoutError,
    CredentialsNotFoundError,
    RpcError,
    SubmissionError,
    TransactionRevertedError,
)

logger = logging.getLogger(__name__)


def _to_hex(data: bytes) -> str:
    return "0x" + bytes(data).hex()


def signature_types(method_signature: str) -> List[str]:
    """
    Extract argument types from a method signature.

    Args:
        method_signature: e.g. "transferOwnership(address)"

    Returns:
        List of ABI type strings, e.g. ["address"]
    """
    inner = method_signature[method_signature.index("(") + 1 : method_signature.rindex(")")]
    return [t.strip() for t in inner.split(",") if t.strip()]


class JsonRpcNetwork:
    """
    Signs and broadcasts transactions through a JSON-RPC endpoint.

    Each instance owns its HTTP session, signing account and request ids, so
    concurrent deployments need separate instances.
    """

    def __init__(
        self,
        rpc_url: str,
        private_key: str,
        chain_id: int,
        artifacts_dir: Optional[Union[Path, str]] = None,
        poll_interval: float = DEFAULT_POLL_INTERVAL,
        session: Optional[requests.Session] = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.rpc_url = rpc_url
        self.chain_id = chain_id
        self.artifacts_dir = artifacts_dir
        self.poll_interval = poll_interval
        try:
            self._account = Account.from_key(private_key)
        except (TypeError, ValueError) as e:
            raise CredentialsNotFoundError(
                "Signing key is not a valid private key: expected 32 bytes of hex"
            ) from e
        self._session = session if session is not None else requests.Session()
        self._sleep = sleep
        self._ids = itertools.count(1)

    @property
    def address(self) -> str:
        """Address of the signing account."""
        return self._account.address

    def call(self, method: str, params: List[Any]) -> Any:
        """
        Perform a single JSON-RPC request.

        Raises:
            RpcError: On HTTP errors, RPC errors or network failures
        """
        try:
            response = self._session.post(
                self.rpc_url,
                json={
                    "jsonrpc": "2.0",
                    "method": method,
                    "params": params,
                    "id": next(self._ids),
                },
                timeout=RPC_REQUEST_TIMEOUT,
            )

            if response.status_code != 200:
                raise RpcError(f"RPC request failed with status {response.status_code}")

            result = response.json()

            if "error" in result:
                raise RpcError(f"RPC error: {result['error']}")

            return result.get("result")

        except requests.RequestException as e:
            raise RpcError(f"Network error during RPC call: {e}") from e

    def submit_contract_creation(self, artifact_name: str, constructor_args: List[str]) -> str:
        """
        Broadcast a contract-creation transaction.

        Constructor arguments are encoded with the types declared in the
        artifact's constructor ABI.

        Returns:
            Transaction hash

        Raises:
            SubmissionError: If encoding, signing or broadcasting fails
        """
        artifact = load_artifact(artifact_name, self.artifacts_dir)

        types = [item["type"] for item in artifact["constructor_inputs"]]
        if not types:
            types = ["address"] * len(constructor_args)
        if len(types) != len(constructor_args):
            raise SubmissionError(
                f"{artifact_name} constructor takes {len(types)} argument(s), "
                f"got {len(constructor_args)}"
            )

        data = artifact["bytecode"] + bytes(encode(types, constructor_args)).hex()
        return self._send({"data": data})

    def submit_transaction(
        self, contract_address: str, method_signature: str, args: List[Any]
    ) -> str:
        """
        Broadcast a call to a method of a deployed contract.

        Returns:
            Transaction hash

        Raises:
            SubmissionError: If signing or broadcasting fails
        """
        selector = function_signature_to_4byte_selector(method_signature)
        payload = encode(signature_types(method_signature), args)
        return self._send({"to": contract_address, "data": _to_hex(selector + payload)})

    def await_confirmation(self, tx_hash: str, timeout: float) -> Dict[str, Any]:
        """
        Poll for a transaction receipt until it is mined or the deadline passes.

        Args:
            tx_hash: Transaction hash
            timeout: Seconds to wait before giving up

        Returns:
            Transaction receipt

        Raises:
            ConfirmationTimeoutError: If no receipt appeared in time
            TransactionRevertedError: If the receipt reports failure
            RpcError: If polling fails
        """
        deadline = time.monotonic() + timeout
        while True:
            receipt = self.call("eth_getTransactionReceipt", [tx_hash])
            if receipt is not None:
                if not isinstance(receipt, dict):
                    raise RpcError(f"Malformed receipt for {tx_hash}: {receipt!r}")
                if receipt.get("status") == "0x0":
                    raise TransactionRevertedError(f"Transaction {tx_hash} reverted")
                return receipt

            if time.monotonic() >= deadline:
                raise ConfirmationTimeoutError(
                    f"Transaction {tx_hash} not confirmed within {timeout} seconds"
                )
            self._sleep(self.poll_interval)

    def _quantity(self, method: str, params: List[Any]) -> int:
        value = self.call(method, params)
        if not isinstance(value, str):
            raise RpcError(f"{method} returned no quantity: {value!r}")
        try:
            return int(value, 16)
        except ValueError as e:
            raise RpcError(f"{method} returned a malformed quantity: {value!r}") from e

    def _send(self, fields: Dict[str, Any]) -> str:
        try:
            nonce = self._quantity("eth_getTransactionCount", [self.address, "pending"])
            gas_price = self._quantity("eth_gasPrice", [])
            gas = self._quantity("eth_estimateGas", [{"from": self.address, **fields}])

            tx = {
                "chainId": self.chain_id,
                "nonce": nonce,
                "gasPrice": gas_price,
                "gas": gas,
                "value": 0,
                **fields,
            }
            signed = self._account.sign_transaction(tx)

            tx_hash = self.call("eth_sendRawTransaction", [_to_hex(signed.raw_transaction)])
            if not isinstance(tx_hash, str):
                raise RpcError(f"eth_sendRawTransaction returned no transaction hash: {tx_hash!r}")
        except RpcError as e:
            raise SubmissionError(str(e)) from e

        logger.debug("Broadcast %s (nonce %d, gas %d)", tx_hash, nonce, gas)
        return tx_hash
