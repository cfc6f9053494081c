"""Data types and dataclasses for antoken-deployments library."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, FrozenSet, List, Optional, Protocol, Tuple


class ContractVariant(Enum):
    """
    Deployable contract variants.

    Value strings are the names used on the command line and in logs.
    """

    BASIC_TOKEN = "BasicToken"
    MULTICHAIN_TOKEN = "MultichainToken"
    DATA_REGISTRY = "DataRegistry"
    BATCH_SENDER = "BatchSender"


class Role(Enum):
    """Named account-address parameters accepted by variant constructors."""

    RELAYER = "relayer"
    COMMISSION_RECIPIENT = "commissionRecipient"
    LIQUIDITY_PROVIDER = "liquidityProvider"


class DeploymentState(Enum):
    """States a single deployment moves through."""

    PENDING = "pending"
    SUBMITTED = "submitted"
    CONFIRMED = "confirmed"
    OWNERSHIP_PENDING = "ownership-pending"
    OWNERSHIP_SUBMITTED = "ownership-submitted"
    OWNERSHIP_CONFIRMED = "ownership-confirmed"
    DONE = "done"
    FAILED = "failed"


@dataclass(frozen=True)
class ConstructorProfile:
    """Ordered constructor roles of a variant and the argument counts it accepts."""

    roles: Tuple[Role, ...]
    arities: FrozenSet[int]


@dataclass(frozen=True)
class OwnershipHandoff:
    """Post-deployment ownership transfer policy."""

    enabled: bool = False
    beneficiary: Optional[str] = None
    wait_for_confirmation: bool = True  # False = fire-and-forget


@dataclass(frozen=True)
class DeploymentRequest:
    """Everything needed to deploy one contract, built once per invocation."""

    variant: ContractVariant
    role_values: Dict[str, str] = field(default_factory=dict)
    handoff: OwnershipHandoff = field(default_factory=OwnershipHandoff)


@dataclass(frozen=True)
class NetworkSettings:
    """Endpoint and credential for one target network."""

    name: str
    rpc_url: str
    chain_id: int
    private_key: str = field(repr=False)
    block_explorer_url: str = ""
    report_gas: bool = False


@dataclass
class DeploymentResult:
    """Outcome of a deployment, including partial completion."""

    variant: ContractVariant
    state: DeploymentState = DeploymentState.PENDING
    network: Optional[str] = None

    # Deployment step
    contract_address: Optional[str] = None  # Checksummed, set once confirmed
    deployment_confirmed: bool = False
    deployment_tx_hash: Optional[str] = None
    constructor_args: List[str] = field(default_factory=list)
    gas_used: Optional[int] = None
    url: Optional[str] = None  # Block explorer URL

    # Ownership handoff step (None when the step never ran)
    ownership_transfer_tx_hash: Optional[str] = None
    ownership_transfer_confirmed: Optional[bool] = None

    error: Optional[Exception] = None

    @property
    def succeeded(self) -> bool:
        return self.error is None


class NetworkClient(Protocol):
    """Operations the executor needs from a blockchain network."""

    def submit_contract_creation(self, artifact_name: str, constructor_args: List[str]) -> str:
        """Broadcast a contract-creation transaction and return its hash."""
        ...

    def await_confirmation(self, tx_hash: str, timeout: float) -> Dict[str, Any]:
        """Block until the transaction is mined and return its receipt."""
        ...

    def submit_transaction(
        self, contract_address: str, method_signature: str, args: List[Any]
    ) -> str:
        """Broadcast a contract method call and return its hash."""
        ...
