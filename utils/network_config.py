"""
Network Manager
Network selection and RPC connection for deployments
"""

import os
import json
from typing import Dict, Optional
from web3 import Web3
from loguru import logger
from dotenv import load_dotenv

from blockchain.errors import NetworkConfigError, NetworkConnectionError

load_dotenv()


class NetworkManager:
    """
    Loads named networks from config/networks.json

    Each network names the environment variable holding its RPC URL
    (http_url_env), a literal http_url fallback, or both, plus the
    expected chain id and confirmation depth.
    """

    def __init__(self, config_path: str = 'config/networks.json'):
        """
        Initialize Network Manager

        Args:
            config_path: Path to the networks config file
        """
        with open(config_path, 'r') as f:
            self.config = json.load(f)

        self.networks = self.config['networks']
        self.deployment_settings = self.config.get('deployment', {})

        logger.debug(f"Network Manager loaded {len(self.networks)} networks")

    def resolve_network_name(self, name: Optional[str] = None) -> str:
        """Explicit name, then DEPLOY_NETWORK, then the configured default"""
        return name or os.getenv('DEPLOY_NETWORK') or self.config['default_network']

    def get_network(self, name: Optional[str] = None) -> Dict:
        """
        Get configuration for a network

        Args:
            name: Network name (None = DEPLOY_NETWORK or default)

        Returns:
            Network config dict, with 'key' set to the network name
        """
        network_name = self.resolve_network_name(name)

        if network_name not in self.networks:
            available = ', '.join(sorted(self.networks))
            raise NetworkConfigError(
                f"Unknown network '{network_name}' (available: {available})"
            )

        network = dict(self.networks[network_name])
        network['key'] = network_name
        return network

    def get_rpc_url(self, network: Dict) -> str:
        """RPC URL from its environment variable, falling back to the config literal"""
        env_var = network.get('http_url_env')
        rpc_url = (os.getenv(env_var) if env_var else None) or network.get('http_url')

        if not rpc_url:
            raise NetworkConfigError(
                f"{env_var or 'http_url'} must be set to deploy to {network['key']}"
            )

        return rpc_url

    def get_private_key(self, network: Dict) -> Optional[str]:
        """Deployer key from the network's private_key_env, if any"""
        env_var = network.get('private_key_env')
        if not env_var:
            return None

        return os.getenv(env_var) or None

    def connect(self, network: Dict) -> Web3:
        """
        Connect to a network and verify its chain id

        Args:
            network: Network config from get_network()

        Returns:
            Connected Web3 instance
        """
        rpc_url = self.get_rpc_url(network)
        w3 = Web3(Web3.HTTPProvider(rpc_url))

        if not w3.is_connected():
            raise NetworkConnectionError(f"Failed to connect to {network['name']}")

        expected_chain_id = network.get('chain_id')
        if expected_chain_id is not None:
            chain_id = w3.eth.chain_id
            if chain_id != expected_chain_id:
                raise NetworkConfigError(
                    f"{network['name']} reports chain id {chain_id}, "
                    f"expected {expected_chain_id}"
                )

        logger.debug(f"Connected to {network['name']}")
        return w3
