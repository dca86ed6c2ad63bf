"""
Blockchain Interaction Package
Handles artifact lookup, contract deployment and the deployer wallet
"""

from .artifact_registry import ArtifactRegistry
from .contract_factory import ContractFactory, DeployedContract
from .wallet_manager import WalletManager

__all__ = ['ArtifactRegistry', 'ContractFactory', 'DeployedContract', 'WalletManager']
