"""Shared pytest fixtures for antoken-deployments tests."""

from pathlib import Path
from typing import Any, Dict, List, Optional

import pytest

from antoken_deployments.constants import OWNERSHIP_BENEFICIARY_ENV, PRIVATE_KEY_ENV, REPORT_GAS_ENV, ROLE_ENV_VARS

# Hardhat's first default account; never holds real funds
TEST_PRIVATE_KEY = "0xac0974bec39a17e36ba4a6b4d238ff944bacb478cbed5efcae784d7bf4f2ff80"
TEST_SENDER = "0xf39Fd6e51aad88F6F4ce6aB8827279cffFb92266"

RELAYER = "0x0591e2b1d3bba5bd6f6a0a5e1ee01c8b2a4cb5e0"
COMMISSION_RECIPIENT = "0x437c5d2e9a0b7f3c1e8d6a4b2f0e9c7a5d38ff11"
LIQUIDITY_PROVIDER = "0x9abc7c604c27622f9cd56bd1628f6321c32bbbf6"
BENEFICIARY = "0x69e08874eaf3ef3af428f7f4da2156028b3ead90"
CONTRACT_ADDRESS = "0x5fbdb2315678afecb367f032d93f642f64180aa3"

DEPLOY_TX = "0x" + "11" * 32
OWNERSHIP_TX = "0x" + "22" * 32


class FakeNetwork:
    """In-memory network client recording every call made by the executor."""

    def __init__(self):
        self.calls: List[tuple] = []
        self.creation_error: Optional[Exception] = None
        self.transaction_error: Optional[Exception] = None
        self.confirmation_errors: Dict[str, Exception] = {}
        self.receipts: Dict[str, Dict[str, Any]] = {}

    def submit_contract_creation(self, artifact_name: str, constructor_args: List[str]) -> str:
        self.calls.append(("submit_contract_creation", artifact_name, list(constructor_args)))
        if self.creation_error is not None:
            raise self.creation_error
        return DEPLOY_TX

    def await_confirmation(self, tx_hash: str, timeout: float) -> Dict[str, Any]:
        self.calls.append(("await_confirmation", tx_hash, timeout))
        if tx_hash in self.confirmation_errors:
            raise self.confirmation_errors[tx_hash]
        if tx_hash in self.receipts:
            return self.receipts[tx_hash]
        if tx_hash == DEPLOY_TX:
            return {
                "status": "0x1",
                "contractAddress": CONTRACT_ADDRESS,
                "gasUsed": "0x1e8480",
                "effectiveGasPrice": "0x3b9aca00",
            }
        return {"status": "0x1", "contractAddress": None, "gasUsed": "0x6d60"}

    def submit_transaction(self, contract_address: str, method_signature: str, args: List[Any]) -> str:
        self.calls.append(("submit_transaction", contract_address, method_signature, list(args)))
        if self.transaction_error is not None:
            raise self.transaction_error
        return OWNERSHIP_TX

    def call_names(self) -> List[str]:
        return [call[0] for call in self.calls]


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def artifacts_dir(fixtures_dir: Path) -> Path:
    """Return the path to the sample Hardhat artifacts directory."""
    return fixtures_dir / "artifacts"


@pytest.fixture
def fake_network() -> FakeNetwork:
    """Return a fresh in-memory network client."""
    return FakeNetwork()


@pytest.fixture
def clean_env(monkeypatch):
    """Remove every environment variable the library reads."""
    for var in [PRIVATE_KEY_ENV, REPORT_GAS_ENV, OWNERSHIP_BENEFICIARY_ENV, *ROLE_ENV_VARS.values()]:
        # setenv first so teardown also removes values written by load_dotenv
        monkeypatch.setenv(var, "")
        monkeypatch.delenv(var)
    return monkeypatch


@pytest.fixture
def signing_env(clean_env):
    """Environment with a test signing key configured."""
    clean_env.setenv(PRIVATE_KEY_ENV, TEST_PRIVATE_KEY)
    return clean_env
