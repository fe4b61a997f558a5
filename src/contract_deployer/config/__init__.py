"""
Configuration package for contract deployments.
"""

from contract_deployer.config.network import (
    NETWORKS,
    DEFAULT_NETWORK,
    get_network_config,
    get_chain_id,
    get_rpc_url,
    get_explorer_url,
    explorer_address_link,
    explorer_tx_link,
)

from contract_deployer.config.contracts import (
    CONTRACT_PROFILES,
    DEFAULT_CONTRACT,
    ContractProfile,
    get_contract_profile,
    register_contract_profile,
)

from contract_deployer.config.deployment import (
    ConfigurationError,
    DeploymentConfig,
    build_deployment_config,
    parse_param_pairs,
)

__all__ = [
    # Network
    'NETWORKS',
    'DEFAULT_NETWORK',
    'get_network_config',
    'get_chain_id',
    'get_rpc_url',
    'get_explorer_url',
    'explorer_address_link',
    'explorer_tx_link',

    # Contracts
    'CONTRACT_PROFILES',
    'DEFAULT_CONTRACT',
    'ContractProfile',
    'get_contract_profile',
    'register_contract_profile',

    # Deployment
    'ConfigurationError',
    'DeploymentConfig',
    'build_deployment_config',
    'parse_param_pairs',
]
