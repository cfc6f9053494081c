"""Integration tests for the command-line interface."""

import pytest

from antoken_deployments import cli
from antoken_deployments.exceptions import (
    ConfirmationTimeoutError,
    MissingRequiredRoleError,
    OwnershipTransferError,
    SubmissionError,
)
from antoken_deployments.types import ContractVariant, DeploymentResult, DeploymentState

from conftest import BENEFICIARY, COMMISSION_RECIPIENT, DEPLOY_TX, OWNERSHIP_TX, RELAYER

DEPLOYED = "0x5FbDB2315678afecb367f032d93F642f64180aa3"


@pytest.fixture
def captured(monkeypatch):
    """Replace deploy_contract and record the arguments it receives."""
    calls = []
    outcome = {"result": None, "error": None}

    def fake_deploy(variant, **kwargs):
        calls.append((variant, kwargs))
        if outcome["error"] is not None:
            raise outcome["error"]
        return outcome["result"] or DeploymentResult(
            variant=variant,
            state=DeploymentState.DONE,
            contract_address=DEPLOYED,
            deployment_confirmed=True,
        )

    monkeypatch.setattr(cli, "deploy_contract", fake_deploy)
    monkeypatch.setattr(cli, "load_environment", lambda env_file=None: None)
    return calls, outcome


class TestArgumentParsing:
    """Test how command-line arguments reach deploy_contract."""

    def test_basic_token_defaults(self, captured):
        """Test defaults for a variant without roles."""
        calls, _ = captured

        assert cli.main(["basic-token"]) == 0

        variant, kwargs = calls[0]
        assert variant == ContractVariant.BASIC_TOKEN
        assert kwargs["network"] == "hardhat"
        assert kwargs["role_values"] == {}
        assert kwargs["beneficiary"] is None
        assert kwargs["wait_for_ownership"] is True
        assert kwargs["confirmation_timeout"] == 120.0

    def test_multichain_token_roles(self, captured):
        """Test that role flags map to role names."""
        calls, _ = captured

        cli.main(
            [
                "--network",
                "polygon",
                "multichain-token",
                "--relayer",
                RELAYER,
                "--commission-recipient",
                COMMISSION_RECIPIENT,
            ]
        )

        variant, kwargs = calls[0]
        assert variant == ContractVariant.MULTICHAIN_TOKEN
        assert kwargs["network"] == "polygon"
        assert kwargs["role_values"] == {
            "relayer": RELAYER,
            "commissionRecipient": COMMISSION_RECIPIENT,
            "liquidityProvider": None,
        }

    def test_ownership_flags(self, captured):
        """Test beneficiary and fire-and-forget flags."""
        calls, _ = captured

        cli.main(
            [
                "--timeout",
                "30",
                "data-registry",
                "--transfer-ownership-to",
                BENEFICIARY,
                "--no-wait-ownership",
            ]
        )

        _, kwargs = calls[0]
        assert kwargs["beneficiary"] == BENEFICIARY
        assert kwargs["wait_for_ownership"] is False
        assert kwargs["confirmation_timeout"] == 30.0

    def test_role_flags_only_where_declared(self, captured):
        """Test that variants reject role flags they do not use."""
        with pytest.raises(SystemExit):
            cli.main(["basic-token", "--relayer", RELAYER])

    def test_unknown_network_rejected(self, captured):
        """Test that the network must come from the catalogue."""
        with pytest.raises(SystemExit):
            cli.main(["--network", "mainnet-beta", "basic-token"])

    def test_command_required(self, captured):
        """Test that a variant subcommand is required."""
        with pytest.raises(SystemExit):
            cli.main([])


class TestReporting:
    """Test exit status and printed output."""

    def test_success_output(self, captured, capsys):
        """Test that the deployed address is printed."""
        assert cli.main(["basic-token"]) == 0

        assert f"Deployed to: {DEPLOYED}" in capsys.readouterr().out

    def test_success_with_ownership(self, captured, capsys):
        """Test that the ownership transfer status is printed."""
        _, outcome = captured
        outcome["result"] = DeploymentResult(
            variant=ContractVariant.BASIC_TOKEN,
            state=DeploymentState.DONE,
            contract_address=DEPLOYED,
            deployment_confirmed=True,
            ownership_transfer_tx_hash=OWNERSHIP_TX,
            ownership_transfer_confirmed=True,
            url=f"https://basescan.org/address/{DEPLOYED}",
        )

        assert cli.main(["basic-token"]) == 0

        out = capsys.readouterr().out
        assert f"Ownership transfer confirmed: {OWNERSHIP_TX}" in out
        assert "Explorer: https://basescan.org/address/" in out

    def test_configuration_error_exit_status(self, captured, capsys):
        """Test that errors raised before deployment exit non-zero."""
        _, outcome = captured
        outcome["error"] = MissingRequiredRoleError("role 'relayer' is required")

        assert cli.main(["multichain-token"]) == 1

        assert "MissingRequiredRoleError" in capsys.readouterr().err

    def test_failed_deployment(self, captured, capsys):
        """Test that a failed submission exits non-zero with the error kind."""
        _, outcome = captured
        outcome["result"] = DeploymentResult(
            variant=ContractVariant.BATCH_SENDER,
            state=DeploymentState.FAILED,
            error=SubmissionError("insufficient funds"),
        )

        assert cli.main(["batch-sender"]) == 1

        err = capsys.readouterr().err
        assert "SubmissionError" in err
        assert "Contract deployed to" not in err

    def test_unconfirmed_deployment_reports_hash(self, captured, capsys):
        """Test that a timed-out deployment prints its transaction hash."""
        _, outcome = captured
        outcome["result"] = DeploymentResult(
            variant=ContractVariant.BASIC_TOKEN,
            state=DeploymentState.FAILED,
            deployment_tx_hash=DEPLOY_TX,
            error=ConfirmationTimeoutError("not confirmed"),
        )

        assert cli.main(["basic-token"]) == 1

        err = capsys.readouterr().err
        assert "ConfirmationTimeoutError" in err
        assert f"Deployment transaction: {DEPLOY_TX}" in err

    def test_partial_deployment_reports_address(self, captured, capsys):
        """Test that a failed handoff still prints the deployed address."""
        _, outcome = captured
        outcome["result"] = DeploymentResult(
            variant=ContractVariant.BASIC_TOKEN,
            state=DeploymentState.OWNERSHIP_SUBMITTED,
            contract_address=DEPLOYED,
            deployment_confirmed=True,
            ownership_transfer_tx_hash=OWNERSHIP_TX,
            ownership_transfer_confirmed=False,
            error=OwnershipTransferError("not confirmed"),
        )

        assert cli.main(["basic-token", "--transfer-ownership-to", BENEFICIARY]) == 1

        err = capsys.readouterr().err
        assert "OwnershipTransferError" in err
        assert f"Contract deployed to: {DEPLOYED}" in err
        assert f"Ownership transfer transaction: {OWNERSHIP_TX}" in err


class TestCredentialErrors:
    """Test credential problems reported without a traceback."""

    def test_malformed_private_key(self, signing_env, capsys):
        """Test that an unusable signing key exits non-zero with its error kind."""
        signing_env.setattr(cli, "load_environment", lambda env_file=None: None)
        signing_env.setenv("PRIVATE_KEY", "not-a-key")

        assert cli.main(["basic-token"]) == 1

        err = capsys.readouterr().err
        assert "Error [CredentialsNotFoundError]" in err
        assert "not-a-key" not in err

    def test_missing_private_key(self, clean_env, capsys):
        """Test that a missing signing key exits non-zero with its error kind."""
        clean_env.setattr(cli, "load_environment", lambda env_file=None: None)

        assert cli.main(["basic-token"]) == 1

        assert "Error [CredentialsNotFoundError]" in capsys.readouterr().err
