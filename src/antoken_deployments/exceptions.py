"""Custom exception classes for antoken-deployments library."""


class DeploymentError(Exception):
    """Base exception for deployment-related errors."""

    pass


class InvalidAddressFormatError(DeploymentError, ValueError):
    """Raised when a supplied value is not a well-formed account address."""

    pass


class MissingRequiredRoleError(DeploymentError, ValueError):
    """Raised when a constructor role is absent but a later role is supplied."""

    pass


class SubmissionError(DeploymentError, RuntimeError):
    """Raised when a transaction cannot be broadcast (network, funds, nonce)."""

    pass


class TransactionRevertedError(SubmissionError):
    """Raised when a transaction was mined but its receipt reports failure."""

    pass


class ConfirmationTimeoutError(DeploymentError, TimeoutError):
    """Raised when a transaction is not confirmed before the deadline."""

    pass


class OwnershipTransferError(DeploymentError, RuntimeError):
    """Raised when the post-deployment ownership handoff fails."""

    pass


class RpcError(DeploymentError, RuntimeError):
    """Raised when a JSON-RPC request fails at transport or protocol level."""

    pass


class NetworkNotFoundError(DeploymentError, ValueError):
    """Raised when requested network is not in the network catalogue."""

    pass


class CredentialsNotFoundError(DeploymentError, ValueError):
    """Raised when no signing credential is configured."""

    pass


class ArtifactNotFoundError(DeploymentError, FileNotFoundError):
    """Raised when a compilation artifact file is not found."""

    pass


class DefectiveArtifactError(DeploymentError, ValueError):
    """Raised when a compilation artifact has no creation bytecode."""

    pass
