"""
Network Manager Tests
"""

import json
import pytest
from unittest.mock import patch

from utils.network_config import NetworkManager
from blockchain.errors import NetworkConfigError, NetworkConnectionError


@pytest.fixture
def config_path(tmp_path):
    config = {
        "default_network": "localhost",
        "networks": {
            "localhost": {
                "name": "Hardhat Localhost",
                "http_url": "http://127.0.0.1:8545",
                "chain_id": 31337,
                "confirmations": 1
            },
            "sepolia": {
                "name": "Ethereum Sepolia",
                "http_url_env": "SEPOLIA_RPC_URL",
                "private_key_env": "DEPLOYER_PRIVATE_KEY",
                "chain_id": 11155111,
                "confirmations": 2
            }
        },
        "deployment": {"artifacts_dir": "artifacts", "gas_buffer": 1.2}
    }
    path = tmp_path / 'networks.json'
    path.write_text(json.dumps(config))
    return str(path)


@pytest.fixture
def manager(config_path, monkeypatch):
    monkeypatch.delenv('DEPLOY_NETWORK', raising=False)
    return NetworkManager(config_path)


class TestNetworkSelection:

    def test_default_network(self, manager):
        network = manager.get_network()

        assert network['key'] == 'localhost'
        assert network['chain_id'] == 31337

    def test_env_override(self, manager, monkeypatch):
        monkeypatch.setenv('DEPLOY_NETWORK', 'sepolia')

        assert manager.get_network()['key'] == 'sepolia'

    def test_explicit_name_wins(self, manager, monkeypatch):
        monkeypatch.setenv('DEPLOY_NETWORK', 'sepolia')

        assert manager.get_network('localhost')['key'] == 'localhost'

    def test_unknown_network(self, manager):
        with pytest.raises(NetworkConfigError, match='mainnet'):
            manager.get_network('mainnet')

    def test_deployment_settings(self, manager):
        assert manager.deployment_settings['gas_buffer'] == 1.2


class TestNetworkSecrets:

    def test_literal_rpc_url(self, manager):
        assert manager.get_rpc_url(manager.get_network('localhost')) == 'http://127.0.0.1:8545'

    def test_rpc_url_from_env(self, manager, monkeypatch):
        monkeypatch.setenv('SEPOLIA_RPC_URL', 'https://sepolia.example/rpc')

        assert manager.get_rpc_url(manager.get_network('sepolia')) == 'https://sepolia.example/rpc'

    def test_rpc_url_env_missing(self, manager, monkeypatch):
        monkeypatch.delenv('SEPOLIA_RPC_URL', raising=False)

        with pytest.raises(NetworkConfigError, match='SEPOLIA_RPC_URL'):
            manager.get_rpc_url(manager.get_network('sepolia'))

    def test_private_key(self, manager, monkeypatch):
        monkeypatch.setenv('DEPLOYER_PRIVATE_KEY', '0xabc')

        assert manager.get_private_key(manager.get_network('sepolia')) == '0xabc'
        assert manager.get_private_key(manager.get_network('localhost')) is None


class TestConnect:

    @patch('utils.network_config.Web3')
    def test_connected(self, mock_web3, manager):
        w3 = mock_web3.return_value
        w3.is_connected.return_value = True
        w3.eth.chain_id = 31337

        assert manager.connect(manager.get_network('localhost')) is w3
        mock_web3.HTTPProvider.assert_called_once_with('http://127.0.0.1:8545')

    @patch('utils.network_config.Web3')
    def test_unreachable(self, mock_web3, manager):
        mock_web3.return_value.is_connected.return_value = False

        with pytest.raises(NetworkConnectionError):
            manager.connect(manager.get_network('localhost'))

    @patch('utils.network_config.Web3')
    def test_wrong_chain(self, mock_web3, manager):
        w3 = mock_web3.return_value
        w3.is_connected.return_value = True
        w3.eth.chain_id = 1

        with pytest.raises(NetworkConfigError, match='chain id 1'):
            manager.connect(manager.get_network('localhost'))


def test_env_url_overrides_literal(config_path, monkeypatch):
    monkeypatch.setenv('SEPOLIA_RPC_URL', 'https://sepolia.example/rpc')
    manager = NetworkManager(config_path)
    network = dict(manager.get_network('sepolia'), http_url='http://fallback:8545')

    assert manager.get_rpc_url(network) == 'https://sepolia.example/rpc'

    monkeypatch.delenv('SEPOLIA_RPC_URL')
    assert manager.get_rpc_url(network) == 'http://fallback:8545'
