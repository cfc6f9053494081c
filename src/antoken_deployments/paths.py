"""Path management utilities for antoken-deployments library."""

from pathlib import Path
from typing import Optional, Union


def get_default_artifacts_dir() -> Path:
    """
    Get default Hardhat artifacts directory.

    Returns:
        Path to ./artifacts
    """
    return Path.cwd() / "artifacts"


def get_artifact_path(
    contract_name: str, artifacts_root: Optional[Union[Path, str]] = None
) -> Path:
    """
    Get path of a contract's compilation artifact.

    Hardhat writes one artifact per contract under
    contracts/<Name>.sol/<Name>.json.

    Args:
        contract_name: Contract name, e.g. "ANToken"
        artifacts_root: Custom artifacts directory (defaults to ./artifacts)

    Returns:
        Path to the artifact JSON file
    """
    if artifacts_root is None:
        artifacts_root = get_default_artifacts_dir()
    else:
        artifacts_root = Path(artifacts_root).absolute()

    return artifacts_root / "contracts" / f"{contract_name}.sol" / f"{contract_name}.json"
