"""
Blockchain Interaction Package
Handles artifact loading, deployment transaction policy and contract deployment
"""

from .artifact import ContractArtifact, load_artifact
from .transaction_builder import DeploymentPolicy
from .contract_deployer import ContractDeployer, DeploymentError, DeploymentResult

__all__ = [
    'ContractArtifact',
    'load_artifact',
    'DeploymentPolicy',
    'ContractDeployer',
    'DeploymentError',
    'DeploymentResult'
]
