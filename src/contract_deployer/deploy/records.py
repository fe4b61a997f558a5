"""Deployment records written after a confirmed deployment."""
from __future__ import annotations

import json
import os
import tempfile
from dataclasses import dataclass, asdict, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional


def _utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


@dataclass
class DeploymentResult:
    """Result of a deployment."""
    contract: str
    address: str
    deployer: str
    network: str
    chain_id: int
    tx_hash: str
    constructor_args: list[str]
    block_number: Optional[int] = None
    gas_used: Optional[int] = None
    explorer: Optional[str] = None
    timestamp: str = field(default_factory=_utc_now_iso)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def write_json_atomic(path: Path, data: dict[str, Any]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp_fd, tmp_path = tempfile.mkstemp(prefix="deployment_", suffix=".tmp", dir=str(path.parent))
    try:
        with os.fdopen(tmp_fd, "w") as f:
            json.dump(data, f, indent=2)
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp_path, path)
    finally:
        if os.path.exists(tmp_path):
            os.remove(tmp_path)


def deployment_filename(result: DeploymentResult) -> str:
    ts = int(datetime.now().timestamp())
    return f"{result.contract.lower()}_{result.network}_{ts}.json"


def save_deployment(result: DeploymentResult, directory: str | Path = "deployments") -> Path:
    """Save deployment result to a JSON file and return its path.

    Never overwrites an earlier record written in the same second.
    """
    out_dir = Path(directory)
    path = out_dir / deployment_filename(result)
    base = path.stem
    counter = 1
    while path.exists():
        path = out_dir / f"{base}.{counter}.json"
        counter += 1
    write_json_atomic(path, result.to_dict())
    return path


def load_deployment(path: str | Path) -> dict[str, Any]:
    with open(path) as f:
        return json.load(f)
