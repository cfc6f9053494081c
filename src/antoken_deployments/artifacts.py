"""Hardhat compilation artifact parsing for antoken-deployments library."""

import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from .exceptions import ArtifactNotFoundError, DefectiveArtifactError
from .paths import get_artifact_path


def parse_hardhat_artifact(file_path: Path) -> Dict[str, Any]:
    """
    Parse a Hardhat compilation artifact.

    Args:
        file_path: Path to artifacts/contracts/<Name>.sol/<Name>.json

    Returns:
        Dictionary with canonical field names:
        - contract_name, abi, bytecode (0x-prefixed)
        - constructor_inputs: list of constructor input ABI entries
          (empty if the contract declares no constructor)

    Raises:
        ArtifactNotFoundError: If the artifact file does not exist
        DefectiveArtifactError: If the artifact has no creation bytecode
    """
    try:
        with open(file_path) as f:
            data = json.load(f)
    except FileNotFoundError as e:
        raise ArtifactNotFoundError(
            f"Artifact not found at {file_path}. Run `npx hardhat compile` first."
        ) from e

    bytecode = data.get("bytecode") or ""
    if bytecode in ("", "0x"):
        # Interfaces and abstract contracts compile to empty bytecode
        raise DefectiveArtifactError(f"Missing creation bytecode in artifact: {file_path}")
    if not bytecode.startswith("0x"):
        bytecode = "0x" + bytecode

    abi: List[Dict[str, Any]] = data.get("abi", [])

    return {
        "contract_name": data.get("contractName", Path(file_path).stem),
        "abi": abi,
        "bytecode": bytecode,
        "constructor_inputs": constructor_inputs(abi),
    }


def constructor_inputs(abi: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Return the constructor's input entries, or [] if there is no constructor."""
    for item in abi:
        if item.get("type") == "constructor":
            return item.get("inputs", [])
    return []


def load_artifact(
    contract_name: str, artifacts_root: Optional[Union[Path, str]] = None
) -> Dict[str, Any]:
    """
    Locate and parse the artifact of a contract.

    Args:
        contract_name: Contract name, e.g. "Multisender"
        artifacts_root: Custom artifacts directory (defaults to ./artifacts)
    """
    return parse_hardhat_artifact(get_artifact_path(contract_name, artifacts_root))
