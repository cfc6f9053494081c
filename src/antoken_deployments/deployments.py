"""Main API for antoken-deployments library."""

from pathlib import Path
from typing import Dict, Optional, Union

from .config import load_network_settings, load_ownership_beneficiary, load_role_values
from .constants import DEFAULT_CONFIRMATION_TIMEOUT, DEFAULT_NETWORK, DEFAULT_POLL_INTERVAL
from .executor import DeploymentExecutor
from .resolver import resolve
from .rpc import JsonRpcNetwork
from .types import (
    ContractVariant,
    DeploymentRequest,
    DeploymentResult,
    NetworkClient,
    OwnershipHandoff,
)


def build_request(
    variant: ContractVariant,
    role_values: Optional[Dict[str, Optional[str]]] = None,
    beneficiary: Optional[str] = None,
    wait_for_ownership: bool = True,
) -> DeploymentRequest:
    """
    Build a deployment request from explicit values and the environment.

    Explicit role values and beneficiary win over $RELAYER_ADDRESS,
    $COMMISSION_RECIPIENT_ADDRESS, $LIQUIDITY_PROVIDER_ADDRESS and
    $OWNERSHIP_BENEFICIARY. The ownership handoff is enabled exactly when a
    beneficiary is configured.

    Args:
        variant: Contract variant to deploy
        role_values: Role name -> address overrides
        beneficiary: Ownership beneficiary override
        wait_for_ownership: Wait for the ownership transfer to confirm

    Returns:
        DeploymentRequest
    """
    beneficiary = load_ownership_beneficiary(beneficiary)
    return DeploymentRequest(
        variant=variant,
        role_values=load_role_values(role_values),
        handoff=OwnershipHandoff(
            enabled=beneficiary is not None,
            beneficiary=beneficiary,
            wait_for_confirmation=wait_for_ownership,
        ),
    )


def deploy_contract(
    variant: ContractVariant,
    network: str = DEFAULT_NETWORK,
    role_values: Optional[Dict[str, Optional[str]]] = None,
    beneficiary: Optional[str] = None,
    wait_for_ownership: bool = True,
    artifacts_dir: Optional[Union[Path, str]] = None,
    confirmation_timeout: float = DEFAULT_CONFIRMATION_TIMEOUT,
    poll_interval: float = DEFAULT_POLL_INTERVAL,
    client: Optional[NetworkClient] = None,
) -> DeploymentResult:
    """
    Deploy one contract variant to a network.

    Constructor arguments are resolved before anything touches the network,
    so configuration errors never leave a half-finished deployment.

    Args:
        variant: Contract variant to deploy
        network: Network name (defaults to the local Hardhat node)
        role_values: Role name -> address overrides (defaults to environment)
        beneficiary: Ownership beneficiary (defaults to $OWNERSHIP_BENEFICIARY)
        wait_for_ownership: Wait for the ownership transfer to confirm
        artifacts_dir: Hardhat artifacts directory (defaults to ./artifacts)
        confirmation_timeout: Seconds to wait for each confirmation
        poll_interval: Seconds between receipt polls
        client: Network client to use instead of a JSON-RPC client built
                from the network settings

    Returns:
        DeploymentResult

    Raises:
        NetworkNotFoundError: If network is not in the catalogue
        CredentialsNotFoundError: If no usable signing key is configured
        InvalidAddressFormatError: If a role or beneficiary address is malformed
        MissingRequiredRoleError: If the role set does not fit the variant
    """
    request = build_request(variant, role_values, beneficiary, wait_for_ownership)
    ordered_args = resolve(request.variant, request.role_values)

    settings = load_network_settings(network)
    if client is None:
        client = JsonRpcNetwork(
            settings.rpc_url,
            settings.private_key,
            settings.chain_id,
            artifacts_dir=artifacts_dir,
            poll_interval=poll_interval,
        )

    executor = DeploymentExecutor(
        client,
        confirmation_timeout=confirmation_timeout,
        network_name=settings.name,
        block_explorer_url=settings.block_explorer_url,
        report_gas=settings.report_gas,
    )
    return executor.execute(request.variant, ordered_args, request.handoff)
