"""Command-line interface for antoken-deployments library.

Usage:
    antoken-deploy [--network NAME] basic-token [--transfer-ownership-to ADDRESS]
    antoken-deploy --network base multichain-token --relayer ADDRESS --commission-recipient ADDRESS
    antoken-deploy --network binance batch-sender --commission-recipient ADDRESS
"""

import argparse
import logging
import sys
from typing import List, Optional

from .config import load_environment
from .constants import (
    DEFAULT_CONFIRMATION_TIMEOUT,
    DEFAULT_NETWORK,
    DEFAULT_POLL_INTERVAL,
    NETWORK_CONFIG,
    VARIANT_ARTIFACTS,
)
from .deployments import deploy_contract
from .exceptions import DeploymentError
from .resolver import CONSTRUCTOR_PROFILES
from .types import ContractVariant, DeploymentResult, Role

VARIANT_COMMANDS = {
    "basic-token": ContractVariant.BASIC_TOKEN,
    "multichain-token": ContractVariant.MULTICHAIN_TOKEN,
    "data-registry": ContractVariant.DATA_REGISTRY,
    "batch-sender": ContractVariant.BATCH_SENDER,
}


def _role_flag(role: Role) -> str:
    return "--" + role.name.lower().replace("_", "-")


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with one subcommand per contract variant."""
    parser = argparse.ArgumentParser(
        prog="antoken-deploy",
        description="Deploy AN token family contracts to an EVM network.",
    )
    parser.add_argument(
        "--network",
        default=DEFAULT_NETWORK,
        choices=sorted(NETWORK_CONFIG),
        help=f"Target network (default: {DEFAULT_NETWORK})",
    )
    parser.add_argument("--env-file", help="Path to .env file with PRIVATE_KEY and role addresses")
    parser.add_argument("--artifacts-dir", help="Hardhat artifacts directory (default: ./artifacts)")
    parser.add_argument(
        "--timeout",
        type=float,
        default=DEFAULT_CONFIRMATION_TIMEOUT,
        help="Seconds to wait for each transaction to confirm",
    )
    parser.add_argument(
        "--poll-interval",
        type=float,
        default=DEFAULT_POLL_INTERVAL,
        help="Seconds between receipt polls",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", required=True)
    for command, variant in VARIANT_COMMANDS.items():
        sub = subparsers.add_parser(
            command, help=f"Deploy {variant.value} ({VARIANT_ARTIFACTS[variant]})"
        )
        for role in CONSTRUCTOR_PROFILES[variant].roles:
            sub.add_argument(
                _role_flag(role),
                dest=role.value,
                metavar="ADDRESS",
                help=f"{role.value} address",
            )
        sub.add_argument(
            "--transfer-ownership-to",
            dest="beneficiary",
            metavar="ADDRESS",
            help="Transfer ownership to this address after deployment",
        )
        sub.add_argument(
            "--no-wait-ownership",
            dest="wait_for_ownership",
            action="store_false",
            help="Do not wait for the ownership transfer to confirm",
        )
        sub.set_defaults(variant=variant)

    return parser


def report(result: DeploymentResult) -> int:
    """
    Print the outcome of a deployment.

    Returns:
        Process exit status (0 on success, 1 on any error)
    """
    if result.succeeded:
        print(f"Deployed to: {result.contract_address}")
        if result.url:
            print(f"Explorer: {result.url}")
        if result.ownership_transfer_tx_hash is not None:
            status = "confirmed" if result.ownership_transfer_confirmed else "submitted"
            print(f"Ownership transfer {status}: {result.ownership_transfer_tx_hash}")
        return 0

    print(f"Error [{type(result.error).__name__}]: {result.error}", file=sys.stderr)
    if result.contract_address is not None:
        print(f"Contract deployed to: {result.contract_address}", file=sys.stderr)
    elif result.deployment_tx_hash is not None:
        print(f"Deployment transaction: {result.deployment_tx_hash}", file=sys.stderr)
    if result.ownership_transfer_tx_hash is not None:
        print(f"Ownership transfer transaction: {result.ownership_transfer_tx_hash}", file=sys.stderr)
    return 1


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    load_environment(args.env_file)

    role_values = {
        role.value: getattr(args, role.value) for role in CONSTRUCTOR_PROFILES[args.variant].roles
    }

    try:
        result = deploy_contract(
            args.variant,
            network=args.network,
            role_values=role_values,
            beneficiary=args.beneficiary,
            wait_for_ownership=args.wait_for_ownership,
            artifacts_dir=args.artifacts_dir,
            confirmation_timeout=args.timeout,
            poll_interval=args.poll_interval,
        )
    except DeploymentError as e:
        print(f"Error [{type(e).__name__}]: {e}", file=sys.stderr)
        return 1

    return report(result)


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
