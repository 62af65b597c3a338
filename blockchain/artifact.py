"""
Contract Artifact
Loads compiled contract JSON (abi + bytecode) from disk
"""

import json
from dataclasses import dataclass
from typing import Any, List, Union
from loguru import logger


@dataclass(frozen=True)
class ContractArtifact:
    """Compiled contract: interface description and deployment bytecode"""

    abi: List[Any]
    bytecode: str


def _extract_bytecode(raw: Union[str, dict]) -> str:
    """Accept both "0x..." strings and solc/forge {"object": "0x..."} entries"""
    if isinstance(raw, dict):
        return raw['object']
    return raw


def load_artifact(path: str) -> ContractArtifact:
    """
    Load a contract artifact file

    Args:
        path: Path to the JSON artifact

    Returns:
        ContractArtifact

    Raises:
        FileNotFoundError: artifact does not exist
        json.JSONDecodeError: artifact is not valid JSON
        KeyError: abi or bytecode field missing
    """
    with open(path, 'r') as f:
        contract_json = json.load(f)

    artifact = ContractArtifact(
        abi=contract_json['abi'],
        bytecode=_extract_bytecode(contract_json['bytecode'])
    )

    logger.debug(f"Loaded artifact {path} ({len(artifact.bytecode)} bytecode chars)")
    return artifact
