"""
Deploy Environment
Runtime handed to deploy scripts: network, deployer wallet and artifacts
"""

from typing import Dict, Optional
from web3 import Web3
from loguru import logger

from .artifact_registry import ArtifactRegistry
from .contract_factory import ContractFactory
from .wallet_manager import WalletManager
from utils.gas_calculator import GasCalculator
from utils.network_config import NetworkManager


class DeployEnvironment:
    """
    Everything a deploy script needs to create contracts on one network
    """

    def __init__(
        self,
        w3: Web3,
        network: Dict,
        artifacts: ArtifactRegistry,
        wallet_manager: WalletManager,
        settings: Optional[Dict] = None
    ):
        """
        Initialize Deploy Environment

        Args:
            w3: Connected Web3 instance
            network: Network config
            artifacts: Compiled artifact lookup
            wallet_manager: Deployer wallet
            settings: Deployment settings (gas buffer, timeouts)
        """
        self.w3 = w3
        self.network = network
        self.artifacts = artifacts
        self.wallet_manager = wallet_manager
        self.settings = settings or {}

        self.gas_calculator = GasCalculator(
            w3,
            network,
            gas_buffer=self.settings.get('gas_buffer', 1.2)
        )

    @classmethod
    def from_network(
        cls,
        network_name: Optional[str] = None,
        config_path: str = 'config/networks.json'
    ) -> 'DeployEnvironment':
        """
        Build an environment from the networks config

        Args:
            network_name: Network to deploy to (None = DEPLOY_NETWORK or default)
            config_path: Path to the networks config file
        """
        network_manager = NetworkManager(config_path)
        network = network_manager.get_network(network_name)
        w3 = network_manager.connect(network)

        settings = network_manager.deployment_settings
        artifacts = ArtifactRegistry(settings.get('artifacts_dir', 'artifacts'))
        wallet_manager = WalletManager(w3, network_manager.get_private_key(network))

        logger.debug(f"Deploy environment ready on {network['key']}")
        return cls(w3, network, artifacts, wallet_manager, settings)

    def get_contract_factory(self, name: str) -> ContractFactory:
        """
        Factory for a compiled contract

        Args:
            name: Bare or fully qualified contract name

        Raises:
            ArtifactNotFoundError: Contract has not been compiled
        """
        artifact = self.artifacts.get_artifact(name)

        return ContractFactory(
            self.w3,
            artifact,
            self.wallet_manager,
            self.gas_calculator,
            chain_id=self.network.get('chain_id'),
            confirmations=self.network.get('confirmations', 1),
            timeout=self.settings.get('timeout_seconds', 300),
            poll_latency=self.settings.get('poll_latency_seconds', 2)
        )
