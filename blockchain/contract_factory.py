"""
Contract Factory
Deploys compiled contracts and tracks their creation transactions
"""

import time
from typing import Dict, Optional
from web3 import Web3
from loguru import logger

from .errors import (
    DeploymentFailedError,
    DeploymentNotConfirmedError,
    DeploymentTimeoutError,
)


class DeployedContract:
    """
    Handle for a contract whose creation transaction has been sent

    The address is only available once wait_for_deployment() has returned.
    """

    def __init__(
        self,
        w3: Web3,
        artifact: Dict,
        tx_hash: bytes,
        constructor_args: tuple,
        confirmations: int = 1,
        timeout: float = 300,
        poll_latency: float = 2
    ):
        self.w3 = w3
        self.artifact = artifact
        self.tx_hash = tx_hash
        self.constructor_args = constructor_args
        self.confirmations = max(confirmations, 1)
        self.timeout = timeout
        self.poll_latency = poll_latency

        self.receipt = None

    @property
    def contract_name(self) -> str:
        return self.artifact.get('contractName', 'contract')

    @property
    def deployed(self) -> bool:
        return self.receipt is not None

    def wait_for_deployment(self) -> 'DeployedContract':
        """
        Block until the creation transaction is mined and confirmed

        Returns:
            This handle, now carrying the receipt

        Raises:
            DeploymentFailedError: Transaction reverted or created no contract
            DeploymentTimeoutError: Confirmation depth not reached in time
            web3.exceptions.TimeExhausted: Transaction never mined
        """
        if self.receipt is not None:
            return self

        deadline = time.monotonic() + self.timeout

        logger.debug(f"Waiting for {self.contract_name} deployment: {self.tx_hash.hex()}")
        receipt = self.w3.eth.wait_for_transaction_receipt(
            self.tx_hash,
            timeout=self.timeout,
            poll_latency=self.poll_latency
        )

        if receipt['status'] != 1:
            raise DeploymentFailedError(
                f"{self.contract_name} deployment reverted (tx {self.tx_hash.hex()})"
            )

        if not receipt.get('contractAddress'):
            raise DeploymentFailedError(
                f"{self.contract_name} deployment receipt has no contract address "
                f"(tx {self.tx_hash.hex()})"
            )

        self._wait_for_confirmations(receipt['blockNumber'], deadline)

        logger.debug(
            f"{self.contract_name} mined in block {receipt['blockNumber']}, "
            f"gas used: {receipt['gasUsed']}"
        )

        self.receipt = receipt
        return self

    def _wait_for_confirmations(self, block_number: int, deadline: float):
        """Poll until the receipt block is buried under the required depth"""
        while True:
            depth = self.w3.eth.block_number - block_number + 1

            if depth >= self.confirmations:
                return

            if time.monotonic() >= deadline:
                raise DeploymentTimeoutError(
                    f"{self.contract_name} reached {depth}/{self.confirmations} "
                    f"confirmations before timeout"
                )

            logger.debug(f"Confirmations: {depth}/{self.confirmations}")
            time.sleep(self.poll_latency)

    def get_address(self) -> str:
        """Checksummed address of the deployed contract"""
        if self.receipt is None:
            raise DeploymentNotConfirmedError(
                f"{self.contract_name} address is unavailable until wait_for_deployment() completes"
            )

        return Web3.to_checksum_address(self.receipt['contractAddress'])

    @property
    def instance(self):
        """web3 contract bound to the deployed address"""
        return self.w3.eth.contract(address=self.get_address(), abi=self.artifact['abi'])


class ContractFactory:
    """
    Deploys new instances of one compiled contract
    """

    def __init__(
        self,
        w3: Web3,
        artifact: Dict,
        wallet_manager,
        gas_calculator,
        chain_id: Optional[int] = None,
        confirmations: int = 1,
        timeout: float = 300,
        poll_latency: float = 2
    ):
        """
        Initialize Contract Factory

        Args:
            w3: Web3 instance
            artifact: Compiled artifact (abi + bytecode)
            wallet_manager: Deployer wallet used to send
            gas_calculator: Gas limit and fee source
            chain_id: Chain id stamped on transactions
            confirmations: Blocks required before the deployment counts as final
            timeout: Seconds to wait for mining and confirmations
            poll_latency: Seconds between receipt/block polls
        """
        self.w3 = w3
        self.artifact = artifact
        self.wallet_manager = wallet_manager
        self.gas_calculator = gas_calculator
        self.chain_id = chain_id
        self.confirmations = confirmations
        self.timeout = timeout
        self.poll_latency = poll_latency

        self.contract = w3.eth.contract(abi=artifact['abi'], bytecode=artifact['bytecode'])

    @property
    def contract_name(self) -> str:
        return self.artifact.get('contractName', 'contract')

    def _constructor_inputs(self) -> list:
        for entry in self.artifact['abi']:
            if entry.get('type') == 'constructor':
                return entry.get('inputs', [])
        return []

    def deploy(self, *args) -> DeployedContract:
        """
        Send the creation transaction

        Args:
            *args: Constructor arguments

        Returns:
            Handle to await with wait_for_deployment()
        """
        expected = len(self._constructor_inputs())
        if len(args) != expected:
            raise ValueError(
                f"{self.contract_name} constructor takes {expected} argument(s), got {len(args)}"
            )

        deployer = self.wallet_manager.deployer_address
        constructor = self.contract.constructor(*args)

        # Reverting constructors fail here, before anything is sent
        gas_estimate = constructor.estimate_gas({'from': deployer})
        gas_limit = self.gas_calculator.apply_buffer(gas_estimate)

        tx_params = {
            'from': deployer,
            'gas': gas_limit,
        }
        tx_params.update(self.gas_calculator.get_fee_params())
        if self.chain_id is not None:
            tx_params['chainId'] = self.chain_id

        logger.debug(f"Deploying {self.contract_name} with gas limit {gas_limit}")

        transaction = constructor.build_transaction(tx_params)
        tx_hash = self.wallet_manager.send_transaction(transaction)

        return DeployedContract(
            self.w3,
            self.artifact,
            tx_hash,
            constructor_args=args,
            confirmations=self.confirmations,
            timeout=self.timeout,
            poll_latency=self.poll_latency
        )
