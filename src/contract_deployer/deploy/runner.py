"""
Deployment runner
=================

Deploys one contract with a fixed set of constructor arguments and reports
the deployer and the deployed address:

    Deploying contract with the account: 0x...
    Contract deployed at: 0x...

The contract address is only printed after the receipt confirms a successful
creation. Failures are not classified or retried here; they propagate to the
CLI, which turns them into exit status 1.
"""
from __future__ import annotations

import logging
from typing import Any, Callable, Sequence

from web3 import Web3

from contract_deployer.config.deployment import ConfigurationError, DeploymentConfig
from contract_deployer.config.network import explorer_address_link, explorer_tx_link, get_network_config
from contract_deployer.helpers.artifacts import ContractArtifact, resolve_artifact
from contract_deployer.helpers.signers import Signer, resolve_signer, secondary_signer
from contract_deployer.helpers.web3_setup import check_chain_id, get_web3_instance

from .records import DeploymentResult, save_deployment

logger = logging.getLogger(__name__)


# --------------------------------------------------------------------------- #
# Constants                                                                   #
# --------------------------------------------------------------------------- #

GAS_LIMIT_BUFFER = 1.2  # 20% on top of the node's estimate

DEPLOYER_LINE = "Deploying contract with the account: {address}"
DEPLOYED_LINE = "Contract deployed at: {address}"


class DeploymentError(RuntimeError):
    """Raised when a contract-creation transaction is mined but fails."""


# --------------------------------------------------------------------------- #
# Transaction Submission                                                      #
# --------------------------------------------------------------------------- #

def check_constructor_args(artifact: ContractArtifact, constructor_args: Sequence[Any]) -> None:
    inputs = artifact.constructor_inputs
    if len(inputs) != len(constructor_args):
        names = ", ".join(i.get("name") or i.get("type", "?") for i in inputs) or "none"
        raise ConfigurationError(
            f"{artifact.name} constructor takes {len(inputs)} argument(s) ({names}), got {len(constructor_args)}"
        )


def submit_deployment(w3: Web3, artifact: ContractArtifact, constructor_args: Sequence[Any], signer: Signer) -> bytes:
    """Send the contract-creation transaction and return its hash."""
    factory = w3.eth.contract(abi=artifact.abi, bytecode=artifact.bytecode)
    constructor = factory.constructor(*constructor_args)

    if not signer.is_local:
        return constructor.transact({"from": signer.address})

    tx = constructor.build_transaction({
        "from": signer.address,
        "nonce": w3.eth.get_transaction_count(signer.address),
        "chainId": w3.eth.chain_id,
    })
    tx["gas"] = int(tx["gas"] * GAS_LIMIT_BUFFER)
    logger.debug(f"Gas limit: {tx['gas']:,}")

    signed = signer.account.sign_transaction(tx)
    return w3.eth.send_raw_transaction(signed.raw_transaction)


def estimate_deployment_gas(w3: Web3, artifact: ContractArtifact, constructor_args: Sequence[Any], signer: Signer) -> int:
    factory = w3.eth.contract(abi=artifact.abi, bytecode=artifact.bytecode)
    return factory.constructor(*constructor_args).estimate_gas({"from": signer.address})


def deploy_contract(
    w3: Web3,
    artifact: ContractArtifact,
    constructor_args: Sequence[Any],
    signer: Signer,
    network: str,
    timeout: float = 120,
) -> DeploymentResult:
    """Submit the deployment and block until the receipt arrives.

    Raises:
        DeploymentError: If the transaction was mined with a failed status.
    """
    tx_hash = submit_deployment(w3, artifact, constructor_args, signer)
    tx_hex = w3.to_hex(tx_hash)
    logger.info(f"Deploy tx sent: {tx_hex}")
    tx_link = explorer_tx_link(network, tx_hex)
    if tx_link:
        logger.info(f"Explorer: {tx_link}")

    logger.info("Waiting for confirmation...")
    receipt = w3.eth.wait_for_transaction_receipt(tx_hash, timeout=timeout)

    if receipt["status"] != 1 or not receipt["contractAddress"]:
        raise DeploymentError(f"Deployment of {artifact.name} failed, tx {tx_hex} status={receipt['status']}")

    address = receipt["contractAddress"]
    return DeploymentResult(
        contract=artifact.name,
        address=address,
        deployer=signer.address,
        network=network,
        chain_id=w3.eth.chain_id,
        tx_hash=tx_hex,
        constructor_args=[str(a) for a in constructor_args],
        block_number=receipt["blockNumber"],
        gas_used=receipt["gasUsed"],
        explorer=explorer_address_link(network, address),
    )


# --------------------------------------------------------------------------- #
# Main Deployment Flow                                                        #
# --------------------------------------------------------------------------- #

def run_deployment(
    config: DeploymentConfig,
    w3: Web3 | None = None,
    emit: Callable[[str], None] = print,
) -> DeploymentResult | None:
    """Run one deployment described by config.

    Returns the result, or None for a dry run. emit receives the two
    operator-facing lines.
    """
    network = get_network_config(config.network)

    artifact = resolve_artifact(
        config.contract,
        artifact_path=config.artifact_path,
        source_path=config.source_path,
        solc_version=config.solc_version,
    )
    check_constructor_args(artifact, config.constructor_args)

    if w3 is None:
        w3 = get_web3_instance(config.network)

    signer = resolve_signer(w3, config.deployer, config.private_key)
    emit(DEPLOYER_LINE.format(address=signer.address))

    chain_id = check_chain_id(w3, config.network)
    logger.info(f"Network: {network['name']} (chain id {chain_id})")
    balance = w3.from_wei(w3.eth.get_balance(signer.address), "ether")
    logger.info(f"Balance: {balance} {network['currency']}")
    if not signer.is_local:
        other = secondary_signer(w3, signer)
        if other:
            logger.debug(f"Secondary account available: {other}")

    args_display = ", ".join(repr(a) for a in config.constructor_args)
    logger.info(f"Deploying {artifact.name}({args_display})")

    if config.dry_run:
        gas = estimate_deployment_gas(w3, artifact, config.constructor_args, signer)
        logger.info(f"Dry run: estimated gas {gas:,}, nothing submitted")
        return None

    result = deploy_contract(
        w3,
        artifact,
        config.constructor_args,
        signer,
        network=config.network,
        timeout=config.timeout,
    )

    # Contract is on-chain here; record write failures are warnings only
    if config.save:
        try:
            path = save_deployment(result, config.deployments_dir)
            logger.info(f"Deployment info saved to: {path}")
        except OSError as e:
            logger.warning(
                f"Could not save deployment record for {result.address} (tx {result.tx_hash}): {e}"
            )

    emit(DEPLOYED_LINE.format(address=result.address))
    logger.info(f"Gas used: {result.gas_used:,}")
    if result.explorer:
        logger.info(f"Explorer: {result.explorer}")

    return result
