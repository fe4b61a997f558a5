"""Deployment runner, records and CLI."""

from contract_deployer.deploy.records import DeploymentResult, save_deployment
from contract_deployer.deploy.runner import DeploymentError, deploy_contract, run_deployment

__all__ = [
    'DeploymentError',
    'DeploymentResult',
    'deploy_contract',
    'run_deployment',
    'save_deployment',
]
