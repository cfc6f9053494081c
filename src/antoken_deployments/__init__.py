"""
antoken-deployments: deployment automation for the AN token contract family
"""

from importlib.metadata import PackageNotFoundError, version

from .deployments import build_request, deploy_contract
from .exceptions import (
    ArtifactNotFoundError,
    ConfirmationTimeoutError,
    CredentialsNotFoundError,
    DefectiveArtifactError,
    DeploymentError,
    InvalidAddressFormatError,
    MissingRequiredRoleError,
    NetworkNotFoundError,
    OwnershipTransferError,
    RpcError,
    SubmissionError,
    TransactionRevertedError,
)
from .executor import DeploymentExecutor
from .resolver import resolve
from .rpc import JsonRpcNetwork
from .types import (
    ContractVariant,
    DeploymentRequest,
    DeploymentResult,
    DeploymentState,
    OwnershipHandoff,
    Role,
)

try:
    __version__ = version("antoken-deployments")
except PackageNotFoundError:
    __version__ = None

__all__ = [
    "deploy_contract",
    "build_request",
    "resolve",
    "DeploymentExecutor",
    "JsonRpcNetwork",
    "ContractVariant",
    "Role",
    "OwnershipHandoff",
    "DeploymentRequest",
    "DeploymentResult",
    "DeploymentState",
    "DeploymentError",
    "InvalidAddressFormatError",
    "MissingRequiredRoleError",
    "SubmissionError",
    "TransactionRevertedError",
    "ConfirmationTimeoutError",
    "OwnershipTransferError",
    "RpcError",
    "NetworkNotFoundError",
    "CredentialsNotFoundError",
    "ArtifactNotFoundError",
    "DefectiveArtifactError",
]
