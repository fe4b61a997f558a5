"""
Network configuration for contract deployments.

Holds RPC URLs and block explorer endpoints for every network a deployment
can target, from the in-process simulated chain up to public testnets.
"""

import os
from typing import Any


# =============================================================================
# NETWORK CONFIGURATIONS
# =============================================================================

# "tester" runs an in-process simulated chain (eth-tester + py-evm), so it has
# no RPC URL and no fixed chain id.
NETWORKS: dict[str, dict[str, Any]] = {
    "tester": {
        "chain_id": None,
        "name": "In-process Tester",
        "currency": "ETH",
        "simulated": True,
        "rpc_urls": [],
        "explorer": None,
    },
    "localhost": {
        "chain_id": 31337,
        "name": "Local Node",
        "currency": "ETH",
        "simulated": True,
        "rpc_urls": [
            "http://127.0.0.1:8545",
        ],
        "explorer": None,
    },
    "sepolia": {
        "chain_id": 11155111,
        "name": "Sepolia",
        "currency": "ETH",
        "simulated": False,
        "rpc_urls": [
            "https://ethereum-sepolia-rpc.publicnode.com",
            "https://rpc.sepolia.org",
        ],
        "explorer": {
            "name": "Etherscan Sepolia",
            "url": "https://sepolia.etherscan.io",
        },
    },
    "goerli": {
        "chain_id": 5,
        "name": "Goerli",
        "currency": "ETH",
        "simulated": False,
        "rpc_urls": [
            "https://ethereum-goerli-rpc.publicnode.com",
        ],
        "explorer": {
            "name": "Etherscan Goerli",
            "url": "https://goerli.etherscan.io",
        },
    },
}

DEFAULT_NETWORK = "tester"

# Chain ID to name mapping
CHAIN_ID_TO_NAME: dict[int, str] = {
    config["chain_id"]: name for name, config in NETWORKS.items() if config["chain_id"] is not None
}


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================

def get_network_config(network: str | int | None = None) -> dict[str, Any]:
    """Get configuration for a specific network.

    Args:
        network: Network name (e.g., 'tester', 'sepolia') or chain ID.
                 If None, uses DEPLOY_NETWORK environment variable or defaults to 'tester'.

    Returns:
        Network configuration dictionary, with its registry key under 'key'.

    Raises:
        ValueError: If network is not supported.
    """
    if network is None:
        network = os.getenv("DEPLOY_NETWORK", DEFAULT_NETWORK)

    if isinstance(network, int):
        name = CHAIN_ID_TO_NAME.get(network)
        if name is None:
            raise ValueError(f"Unsupported chain ID: {network}")
        network = name

    network = network.strip().lower()
    if network not in NETWORKS:
        raise ValueError(f"Unsupported network: {network}. Supported: {list(NETWORKS.keys())}")

    return {"key": network, **NETWORKS[network]}


def get_rpc_url(network: str | int | None = None) -> str | None:
    """Get the RPC URL for a network.

    Precedence: <NETWORK>_RPC_URL > RPC_URL > first default. The simulated
    tester network has no RPC URL and always returns None.
    """
    config = get_network_config(network)
    if config["key"] == "tester":
        return None

    env_rpc = os.getenv(f"{config['key'].upper()}_RPC_URL") or os.getenv("RPC_URL")
    if env_rpc:
        return env_rpc

    return config["rpc_urls"][0]


def get_chain_id(network: str | None = None) -> int | None:
    """Get the expected chain ID for a network name."""
    config = get_network_config(network)
    return config["chain_id"]


def get_explorer_url(network: str | int | None = None) -> str | None:
    """Get the block explorer URL for a network, if it has one."""
    config = get_network_config(network)
    explorer = config["explorer"]
    return explorer["url"] if explorer else None


def explorer_address_link(network: str | int | None, address: str) -> str | None:
    base = get_explorer_url(network)
    if base is None:
        return None
    return f"{base}/address/{address}"


def explorer_tx_link(network: str | int | None, tx_hash: str) -> str | None:
    base = get_explorer_url(network)
    if base is None:
        return None
    return f"{base}/tx/{tx_hash}"
