"""
Deployment configuration.

Builds a validated DeploymentConfig from CLI values and the environment.
Everything here runs before any network access, so a missing or blank
constructor parameter stops the run with a clear message instead of reaching
the contract constructor.

Precedence for every value: explicit argument > environment variable > default.
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Mapping, Sequence

from eth_utils import is_address, remove_0x_prefix, to_checksum_address

from .contracts import DEFAULT_CONTRACT, get_contract_profile
from .network import DEFAULT_NETWORK, NETWORKS

logger = logging.getLogger(__name__)

# web3's own default for wait_for_transaction_receipt
DEFAULT_RECEIPT_TIMEOUT = 120.0
DEFAULT_DEPLOYER = "0"
DEFAULT_DEPLOYMENTS_DIR = "deployments"


class ConfigurationError(ValueError):
    """Raised when deployment inputs are missing or malformed."""


@dataclass(frozen=True)
class DeploymentConfig:
    contract: str
    constructor_args: tuple[str, ...]
    network: str = DEFAULT_NETWORK
    deployer: str = DEFAULT_DEPLOYER
    private_key: str | None = field(default=None, repr=False)
    artifact_path: str | None = None
    source_path: str | None = None
    solc_version: str | None = None
    timeout: float = DEFAULT_RECEIPT_TIMEOUT
    dry_run: bool = False
    save: bool = True
    deployments_dir: str = DEFAULT_DEPLOYMENTS_DIR


def normalize_private_key(pk: str) -> str:
    """Return a 0x-prefixed 32-byte private key hex string or raise ConfigurationError."""
    pk = remove_0x_prefix(pk.strip())
    if len(pk) != 64:
        raise ConfigurationError("private key hex must be 64 characters (32 bytes)")
    try:
        int(pk, 16)
    except ValueError:
        raise ConfigurationError("private key must be a hex string") from None
    return "0x" + pk


def normalize_deployer_ref(ref: str) -> str:
    """Accept an account index ("0", "1", ...) or an address; return it normalized."""
    ref = ref.strip()
    if ref.isdigit():
        return str(int(ref))
    if is_address(ref):
        return to_checksum_address(ref)
    raise ConfigurationError(
        f"Invalid deployer reference {ref!r}: expected an account index or a 0x address"
    )


def parse_param_pairs(pairs: Sequence[str]) -> dict[str, str]:
    """Parse repeated KEY=VALUE strings into a dict."""
    out: dict[str, str] = {}
    for pair in pairs:
        if "=" not in pair:
            raise ConfigurationError(f"Invalid --param {pair!r}: expected KEY=VALUE")
        key, value = pair.split("=", 1)
        key = key.strip()
        if not key:
            raise ConfigurationError(f"Invalid --param {pair!r}: empty key")
        out[key] = value
    return out


def resolve_constructor_args(
    contract: str,
    params: Mapping[str, str] | None = None,
    args: Sequence[str] | None = None,
    env: Mapping[str, str] | None = None,
) -> tuple[str, ...]:
    """Resolve the ordered constructor arguments for a contract.

    Profiled contracts take named params (or their env vars). Contracts without
    a profile take positional args. Every value must be non-empty.
    """
    env = os.environ if env is None else env
    params = dict(params or {})
    profile = get_contract_profile(contract)

    if profile is None:
        if params:
            raise ConfigurationError(
                f"Contract {contract!r} has no registered parameter names; pass constructor values with --arg"
            )
        values = tuple(args or ())
        blank = [str(i) for i, v in enumerate(values) if not v.strip()]
        if blank:
            raise ConfigurationError(
                f"Constructor arguments for {contract} must be non-empty (blank positions: {', '.join(blank)})"
            )
        return values

    if args:
        if params:
            raise ConfigurationError("Use either --param or --arg, not both")
        if len(args) != len(profile.params):
            raise ConfigurationError(
                f"{contract} takes {len(profile.params)} constructor arguments "
                f"({', '.join(profile.params)}), got {len(args)}"
            )
        params = dict(zip(profile.params, args))

    unknown = sorted(set(params) - set(profile.params))
    if unknown:
        raise ConfigurationError(
            f"Unknown parameter(s) for {contract}: {', '.join(unknown)}. Expected: {', '.join(profile.params)}"
        )

    values: list[str] = []
    missing: list[str] = []
    for name, env_var in zip(profile.params, profile.env_vars):
        value = params.get(name)
        if value is None:
            value = env.get(env_var, "")
        if not value.strip():
            missing.append(f"{name} (--param {name}=... or {env_var})")
            continue
        values.append(value)

    if missing:
        raise ConfigurationError(
            f"Missing constructor parameter(s) for {contract}: {'; '.join(missing)}"
        )
    return tuple(values)


def build_deployment_config(
    contract: str | None = None,
    params: Mapping[str, str] | None = None,
    args: Sequence[str] | None = None,
    network: str | None = None,
    deployer: str | None = None,
    private_key: str | None = None,
    artifact_path: str | None = None,
    source_path: str | None = None,
    solc_version: str | None = None,
    timeout: float | None = None,
    dry_run: bool = False,
    save: bool = True,
    deployments_dir: str | None = None,
    env: Mapping[str, str] | None = None,
) -> DeploymentConfig:
    """Merge explicit values with the environment and validate the result."""
    env = os.environ if env is None else env

    contract = (contract or env.get("DEPLOY_CONTRACT") or DEFAULT_CONTRACT).strip()
    if not contract:
        raise ConfigurationError("Contract identifier must be non-empty")

    network = (network or env.get("DEPLOY_NETWORK") or DEFAULT_NETWORK).strip().lower()
    if network not in NETWORKS:
        raise ConfigurationError(f"Unsupported network: {network}. Supported: {list(NETWORKS.keys())}")

    constructor_args = resolve_constructor_args(contract, params, args, env)

    pk = private_key or env.get("DEPLOYER_PRIVATE_KEY") or env.get("PRIVATE_KEY")
    pk = normalize_private_key(pk) if pk else None

    deployer_setting = deployer or env.get("DEPLOYER")
    deployer_ref = normalize_deployer_ref(deployer_setting or DEFAULT_DEPLOYER)
    if pk and deployer_setting:
        logger.warning(
            f"Private key set; ignoring deployer reference {deployer_ref!r}. "
            "Unset DEPLOYER_PRIVATE_KEY/PRIVATE_KEY to deploy from a node account."
        )

    if timeout is None:
        timeout = DEFAULT_RECEIPT_TIMEOUT
    if timeout <= 0:
        raise ConfigurationError("Receipt timeout must be positive")

    if artifact_path and source_path:
        raise ConfigurationError("Use either --artifact or --source, not both")

    return DeploymentConfig(
        contract=contract,
        constructor_args=constructor_args,
        network=network,
        deployer=deployer_ref,
        private_key=pk,
        artifact_path=artifact_path,
        source_path=source_path,
        solc_version=solc_version or env.get("SOLC_VERSION"),
        timeout=float(timeout),
        dry_run=dry_run,
        save=save,
        deployments_dir=deployments_dir or DEFAULT_DEPLOYMENTS_DIR,
    )
