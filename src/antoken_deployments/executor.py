"""Deployment execution for antoken-deployments library."""

import logging
from typing import Any, Dict, List, Optional

from eth_utils import to_checksum_address

from .constants import DEFAULT_CONFIRMATION_TIMEOUT, OWNERSHIP_TRANSFER_SIGNATURE, VARIANT_ARTIFACTS
from .exceptions import DeploymentError, OwnershipTransferError, SubmissionError
from .resolver import validate_address
from .types import (
    ContractVariant,
    DeploymentResult,
    DeploymentState,
    NetworkClient,
    OwnershipHandoff,
)

logger = logging.getLogger(__name__)


class DeploymentExecutor:
    """Deploys a contract and optionally hands its ownership to a beneficiary."""

    def __init__(
        self,
        network: NetworkClient,
        confirmation_timeout: float = DEFAULT_CONFIRMATION_TIMEOUT,
        network_name: Optional[str] = None,
        block_explorer_url: str = "",
        report_gas: bool = False,
    ):
        """
        Initialize the executor.

        Args:
            network: Client used to broadcast and confirm transactions
            confirmation_timeout: Seconds to wait for each confirmation
            network_name: Name recorded in results and logs
            block_explorer_url: Explorer base URL used to build result links
            report_gas: Log gas usage of confirmed transactions
        """
        self.network = network
        self.confirmation_timeout = confirmation_timeout
        self.network_name = network_name
        self.block_explorer_url = block_explorer_url
        self.report_gas = report_gas

    def execute(
        self,
        variant: ContractVariant,
        ordered_args: List[str],
        handoff: Optional[OwnershipHandoff] = None,
    ) -> DeploymentResult:
        """
        Deploy a contract variant and run the optional ownership handoff.

        Network failures do not raise: they end the result in FAILED state
        (nothing deployed) or leave the deployed address alongside an
        OwnershipTransferError. Nothing is retried.

        A deployment can only be safely abandoned before this method
        broadcasts the creation transaction. Once broadcast it cannot be
        withdrawn, and running the deployment again creates a second contract.

        Args:
            variant: Contract variant to deploy
            ordered_args: Constructor arguments from resolve()
            handoff: Ownership transfer policy (disabled when None)

        Returns:
            DeploymentResult describing every step that ran

        Raises:
            InvalidAddressFormatError: If the handoff beneficiary is malformed
                (checked before any network call)
        """
        handoff = handoff or OwnershipHandoff()
        beneficiary = None
        if handoff.enabled:
            beneficiary = validate_address(handoff.beneficiary, "ownership beneficiary")

        result = DeploymentResult(
            variant=variant,
            network=self.network_name,
            constructor_args=list(ordered_args),
        )

        if not self._deploy(result):
            return result

        if beneficiary is not None:
            self._transfer_ownership(result, beneficiary, handoff.wait_for_confirmation)
            if result.error is not None:
                return result

        result.state = DeploymentState.DONE
        return result

    def _deploy(self, result: DeploymentResult) -> bool:
        artifact_name = VARIANT_ARTIFACTS[result.variant]
        logger.info(
            "Deploying %s (%s) to %s with %d constructor argument(s)",
            result.variant.value,
            artifact_name,
            self.network_name or "network",
            len(result.constructor_args),
        )

        try:
            result.deployment_tx_hash = self.network.submit_contract_creation(
                artifact_name, result.constructor_args
            )
        except DeploymentError as e:
            logger.error("Deployment of %s failed before broadcast: %s", artifact_name, e)
            result.state = DeploymentState.FAILED
            result.error = e
            return False

        result.state = DeploymentState.SUBMITTED
        logger.info("Deployment transaction: %s", result.deployment_tx_hash)

        try:
            receipt = self.network.await_confirmation(
                result.deployment_tx_hash, self.confirmation_timeout
            )
        except DeploymentError as e:
            logger.error("Deployment %s not confirmed: %s", result.deployment_tx_hash, e)
            result.state = DeploymentState.FAILED
            result.error = e
            return False

        if not receipt.get("contractAddress"):
            result.state = DeploymentState.FAILED
            result.error = SubmissionError(
                f"Receipt for {result.deployment_tx_hash} has no contract address"
            )
            logger.error("%s", result.error)
            return False

        result.contract_address = to_checksum_address(receipt["contractAddress"])
        result.deployment_confirmed = True
        result.state = DeploymentState.CONFIRMED
        if self.block_explorer_url:
            result.url = f"{self.block_explorer_url}/address/{result.contract_address}"
        if "gasUsed" in receipt:
            result.gas_used = int(receipt["gasUsed"], 16)
        self._report_gas("deployment", receipt)

        logger.info("Deployed to: %s", result.contract_address)
        return True

    def _transfer_ownership(
        self, result: DeploymentResult, beneficiary: str, wait_for_confirmation: bool
    ) -> None:
        result.state = DeploymentState.OWNERSHIP_PENDING
        logger.info("Transferring ownership of %s to %s", result.contract_address, beneficiary)

        try:
            result.ownership_transfer_tx_hash = self.network.submit_transaction(
                result.contract_address, OWNERSHIP_TRANSFER_SIGNATURE, [beneficiary]
            )
        except DeploymentError as e:
            result.ownership_transfer_confirmed = False
            result.error = OwnershipTransferError(
                f"Ownership transfer of {result.contract_address} failed: {e}"
            )
            result.error.__cause__ = e
            logger.error("%s", result.error)
            return

        result.state = DeploymentState.OWNERSHIP_SUBMITTED
        result.ownership_transfer_confirmed = False
        logger.info("Ownership transfer transaction: %s", result.ownership_transfer_tx_hash)

        if not wait_for_confirmation:
            return

        try:
            receipt = self.network.await_confirmation(
                result.ownership_transfer_tx_hash, self.confirmation_timeout
            )
        except DeploymentError as e:
            result.error = OwnershipTransferError(
                f"Ownership transfer {result.ownership_transfer_tx_hash} not confirmed: {e}"
            )
            result.error.__cause__ = e
            logger.error("%s", result.error)
            return

        result.ownership_transfer_confirmed = True
        result.state = DeploymentState.OWNERSHIP_CONFIRMED
        self._report_gas("ownership transfer", receipt)

    def _report_gas(self, label: str, receipt: Dict[str, Any]) -> None:
        if not self.report_gas or "gasUsed" not in receipt:
            return
        gas_used = int(receipt["gasUsed"], 16)
        price = receipt.get("effectiveGasPrice")
        if price is None:
            logger.info("Gas used by %s: %d", label, gas_used)
            return
        cost_wei = gas_used * int(price, 16)
        logger.info(
            "Gas used by %s: %d at %.2f gwei (%.6f native)",
            label,
            gas_used,
            int(price, 16) / 1e9,
            cost_wei / 1e18,
        )
