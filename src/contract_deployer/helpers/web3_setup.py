"""
Web3 setup helper - builds the web3 instance a deployment talks to.

Public API
----------
get_web3_instance(network=None, rpc_url=None)
    Return a connected Web3 instance for a configured network. The "tester"
    network gets a fresh in-process EthereumTesterProvider chain on every
    call; every other network goes through an HTTPProvider.
"""
from __future__ import annotations

import logging
from typing import Optional

from web3 import Web3

from contract_deployer.config.network import get_network_config, get_rpc_url

__all__ = ["get_web3_instance", "check_chain_id"]

logger = logging.getLogger(__name__)


def _tester_provider():
    # eth-tester/py-evm ship with the optional "tester" extra
    from web3 import EthereumTesterProvider

    return EthereumTesterProvider()


def get_web3_instance(network: str | None = None, rpc_url: Optional[str] = None) -> Web3:
    """
    Get a Web3 instance connected to the given network.

    Args:
        network: Network name from the registry. Defaults to DEPLOY_NETWORK / "tester".
        rpc_url: Optional RPC URL overriding the registry and environment.

    Returns:
        Web3 instance

    Raises:
        ConnectionError: If the node cannot be reached
    """
    config = get_network_config(network)

    if config["key"] == "tester" and rpc_url is None:
        logger.debug("Starting in-process tester chain")
        return Web3(_tester_provider())

    url = rpc_url or get_rpc_url(config["key"])
    if not url:
        raise ConnectionError(f"No RPC URL available for {config['name']}. Set RPC_URL.")

    w3 = Web3(Web3.HTTPProvider(url))
    if not w3.is_connected():
        raise ConnectionError(f"Failed to connect to {config['name']} RPC: {url}")

    logger.debug(f"Connected to {config['name']} via {url}")
    return w3


def check_chain_id(w3: Web3, network: str) -> int:
    """Return the node's chain id, warning when it differs from the registry."""
    chain_id = w3.eth.chain_id
    expected = get_network_config(network)["chain_id"]
    if expected is not None and chain_id != expected:
        logger.warning(f"Chain ID mismatch: expected {expected} for {network}, node reports {chain_id}")
    return chain_id
