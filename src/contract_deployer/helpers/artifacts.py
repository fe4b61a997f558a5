"""
Contract artifacts: ABI + creation bytecode.

Artifacts come from a compiler output JSON (Hardhat or Foundry layout) or
from compiling a Solidity source with py-solc-x.
"""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

DEFAULT_SOLC_VERSION = "0.8.24"


@dataclass(frozen=True)
class ContractArtifact:
    name: str
    abi: list[dict[str, Any]]
    bytecode: str

    @property
    def constructor_inputs(self) -> list[dict[str, Any]]:
        for entry in self.abi:
            if entry.get("type") == "constructor":
                return list(entry.get("inputs", []))
        return []


def _prefixed(bytecode: str) -> str:
    bytecode = str(bytecode).strip()
    if not bytecode.startswith("0x"):
        bytecode = "0x" + bytecode
    return bytecode


def default_artifact_path(contract: str, root: str | Path = ".") -> Path:
    """Hardhat layout: artifacts/contracts/<C>.sol/<C>.json"""
    return Path(root) / "artifacts" / "contracts" / f"{contract}.sol" / f"{contract}.json"


def load_artifact(path: str | Path, contract: str | None = None) -> ContractArtifact:
    """Load abi/bytecode from a compiler artifact JSON.

    Raises:
        FileNotFoundError: If the artifact does not exist.
        ValueError: If abi or bytecode are missing.
    """
    artifact_path = Path(path)
    if not artifact_path.exists():
        raise FileNotFoundError(f"Artifact not found: {artifact_path}. Compile the contract first or pass --source.")

    art = json.loads(artifact_path.read_text())
    abi = art.get("abi")
    bytecode = art.get("bytecode")
    if isinstance(bytecode, dict):
        bytecode = bytecode.get("object")
    if not bytecode:
        bytecode = art.get("evm", {}).get("bytecode", {}).get("object")
    if not abi or not bytecode or bytecode in ("0x", "0x0"):
        raise ValueError(f"Failed to load abi/bytecode from artifact JSON: {artifact_path}")

    name = contract or art.get("contractName") or artifact_path.stem
    return ContractArtifact(name=name, abi=abi, bytecode=_prefixed(bytecode))


def compile_artifact(source_path: str | Path, contract: str, solc_version: str | None = None) -> ContractArtifact:
    """Compile a Solidity source file with py-solc-x and return the named contract."""
    from solcx import compile_source, install_solc

    version = solc_version or DEFAULT_SOLC_VERSION
    source = Path(source_path)
    if not source.exists():
        raise FileNotFoundError(f"Contract source not found: {source}")

    logger.info(f"Compiling {contract} with solc {version}...")
    install_solc(version)
    compiled = compile_source(
        source.read_text(),
        output_values=["abi", "bin"],
        solc_version=version,
        optimize=True,
        optimize_runs=200,
    )

    contract_id = f"<stdin>:{contract}"
    if contract_id not in compiled:
        available = ", ".join(k.split(":", 1)[-1] for k in compiled)
        raise ValueError(f"Contract {contract} not found in {source}. Available: {available}")

    data = compiled[contract_id]
    logger.info(f"Bytecode size: {len(data['bin']) // 2} bytes")
    return ContractArtifact(name=contract, abi=data["abi"], bytecode=_prefixed(data["bin"]))


def resolve_artifact(
    contract: str,
    artifact_path: str | None = None,
    source_path: str | None = None,
    solc_version: str | None = None,
) -> ContractArtifact:
    """Pick the artifact for a deployment: explicit artifact, source compile, or Hardhat default."""
    if source_path:
        return compile_artifact(source_path, contract, solc_version)
    return load_artifact(artifact_path or default_artifact_path(contract), contract)
