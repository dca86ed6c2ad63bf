"""
Wallet Manager
Holds the deployer account used to sign and send creation transactions
"""

from typing import Dict, Optional
from decimal import Decimal
from web3 import Web3
from eth_account import Account
from loguru import logger


class WalletManager:
    """
    Deployer wallet with two modes:
    - Local key: transactions are signed here and sent raw
    - Node account: the node's first unlocked account signs (Hardhat's default signer)
    """

    def __init__(self, w3: Web3, private_key: Optional[str] = None):
        """
        Initialize wallet manager

        Args:
            w3: Web3 instance
            private_key: Deployer private key (None = use the node's unlocked account)
        """
        self.w3 = w3

        if private_key:
            self.account = Account.from_key(private_key)
            self.deployer_address = self.account.address
        else:
            accounts = w3.eth.accounts
            if not accounts:
                raise ValueError(
                    "No deployer account: set the network's private key variable in .env "
                    "or connect to a node with unlocked accounts"
                )
            self.account = None
            self.deployer_address = Web3.to_checksum_address(accounts[0])

        logger.debug(f"Deployer wallet: {self.deployer_address}")

    @property
    def signs_locally(self) -> bool:
        return self.account is not None

    def sign_transaction(self, transaction: Dict):
        """
        Sign a transaction with the deployer key

        Args:
            transaction: Transaction dict

        Returns:
            Signed transaction
        """
        if not self.signs_locally:
            raise ValueError("Wallet has no local key; transactions are signed by the node")

        if 'nonce' not in transaction:
            transaction = dict(transaction)
            transaction['nonce'] = self.w3.eth.get_transaction_count(
                self.deployer_address,
                'pending'
            )

        return self.account.sign_transaction(transaction)

    def send_transaction(self, transaction: Dict) -> bytes:
        """
        Send a transaction from the deployer

        Args:
            transaction: Transaction dict

        Returns:
            Transaction hash
        """
        if self.signs_locally:
            signed_tx = self.sign_transaction(transaction)
            tx_hash = self.w3.eth.send_raw_transaction(signed_tx.raw_transaction)
        else:
            tx_hash = self.w3.eth.send_transaction(transaction)

        logger.debug(f"Transaction sent: {tx_hash.hex()}")
        return tx_hash

    def get_balance(self) -> Decimal:
        """Native balance of the deployer in ether"""
        balance_wei = self.w3.eth.get_balance(self.deployer_address)
        return Decimal(str(Web3.from_wei(balance_wei, 'ether')))
