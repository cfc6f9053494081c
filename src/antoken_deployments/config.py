"""Credential and configuration loading for antoken-deployments library."""

import os
from pathlib import Path
from typing import Dict, Optional, Union

from dotenv import load_dotenv

from .constants import (
    NETWORK_CONFIG,
    OWNERSHIP_BENEFICIARY_ENV,
    PRIVATE_KEY_ENV,
    REPORT_GAS_ENV,
    ROLE_ENV_VARS,
)
from .exceptions import CredentialsNotFoundError, NetworkNotFoundError
from .types import NetworkSettings


def load_environment(env_file: Optional[Union[Path, str]] = None) -> None:
    """
    Load variables from a .env file into the process environment.

    Variables already set in the environment take precedence.

    Args:
        env_file: Path to .env file (defaults to searching from the working directory)
    """
    if env_file is None:
        load_dotenv()
    else:
        load_dotenv(dotenv_path=env_file)


def rpc_url_env_var(network: str) -> str:
    """Name of the environment variable overriding a network's RPC URL."""
    return f"{network.upper()}_RPC_URL"


def load_network_settings(network: str) -> NetworkSettings:
    """
    Build endpoint and credential settings for a network.

    Args:
        network: Network name from NETWORK_CONFIG

    Returns:
        NetworkSettings

    Raises:
        NetworkNotFoundError: If network is not in the catalogue
        CredentialsNotFoundError: If $PRIVATE_KEY is not set
    """
    if network not in NETWORK_CONFIG:
        raise NetworkNotFoundError(
            f"Network '{network}' not found. Available: {', '.join(NETWORK_CONFIG)}"
        )
    network_config = NETWORK_CONFIG[network]

    private_key = os.environ.get(PRIVATE_KEY_ENV)
    if not private_key:
        raise CredentialsNotFoundError(
            f"Signing key required: set ${PRIVATE_KEY_ENV} environment variable or add it to .env"
        )

    return NetworkSettings(
        name=network,
        rpc_url=os.environ.get(rpc_url_env_var(network)) or network_config["rpc_url"],
        chain_id=network_config["chain_id"],
        private_key=private_key,
        block_explorer_url=network_config["block_explorer_url"],
        report_gas=os.environ.get(REPORT_GAS_ENV, "").lower() == "true",
    )


def load_role_values(overrides: Optional[Dict[str, Optional[str]]] = None) -> Dict[str, str]:
    """
    Collect role addresses from the environment.

    Values are returned unvalidated; resolve() checks them.

    Args:
        overrides: Role name -> address, taking precedence over the
                   environment (None values are skipped)

    Returns:
        Role name -> address for every role that has a value
    """
    role_values: Dict[str, str] = {}
    for role_name, env_var in ROLE_ENV_VARS.items():
        value = os.environ.get(env_var)
        if value:
            role_values[role_name] = value

    for role_name, value in (overrides or {}).items():
        if value is not None:
            role_values[role_name] = value

    return role_values


def load_ownership_beneficiary(override: Optional[str] = None) -> Optional[str]:
    """Get the ownership beneficiary from the override or $OWNERSHIP_BENEFICIARY."""
    if override is not None:
        return override
    return os.environ.get(OWNERSHIP_BENEFICIARY_ENV) or None
