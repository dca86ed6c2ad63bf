"""
Gas Calculator
Gas limit and fee parameters for contract creation transactions
"""

from typing import Dict
from web3 import Web3
from loguru import logger


class GasCalculator:
    """
    Derives gas settings for a deployment from the network config

    Fee selection:
    - Network pins gas_price_gwei: legacy gasPrice
    - Latest block has baseFeePerGas: EIP-1559 fees
    - Otherwise: legacy gasPrice from the node
    """

    def __init__(self, w3: Web3, network: Dict, gas_buffer: float = 1.2):
        """
        Initialize Gas Calculator

        Args:
            w3: Web3 instance
            network: Network configuration
            gas_buffer: Multiplier applied to the gas estimate
        """
        self.w3 = w3
        self.gas_buffer = gas_buffer

        self.gas_price_gwei = network.get('gas_price_gwei')
        self.priority_fee_gwei = network.get('priority_fee_gwei', 1.5)
        self.max_gas_price_gwei = network.get('max_gas_price_gwei')

    def apply_buffer(self, gas_estimate: int) -> int:
        """Gas limit with the configured buffer on top of the estimate"""
        return int(gas_estimate * self.gas_buffer)

    def get_fee_params(self) -> Dict[str, int]:
        """
        Get fee fields for the next transaction

        Returns:
            Dict with gasPrice, or maxFeePerGas and maxPriorityFeePerGas, in wei
        """
        if self.gas_price_gwei is not None:
            return {'gasPrice': Web3.to_wei(self.gas_price_gwei, 'gwei')}

        latest_block = self.w3.eth.get_block('latest')
        base_fee_wei = latest_block.get('baseFeePerGas')

        if base_fee_wei is None:
            gas_price_wei = self.w3.eth.gas_price
            logger.debug(f"Legacy gas price: {Web3.from_wei(gas_price_wei, 'gwei')} gwei")
            return {'gasPrice': gas_price_wei}

        priority_fee_wei = Web3.to_wei(self.priority_fee_gwei, 'gwei')

        # Headroom for two full blocks of base fee growth
        max_fee_wei = (base_fee_wei * 2) + priority_fee_wei

        if self.max_gas_price_gwei is not None:
            max_fee_wei = min(max_fee_wei, Web3.to_wei(self.max_gas_price_gwei, 'gwei'))
            priority_fee_wei = min(priority_fee_wei, max_fee_wei)

        logger.debug(
            f"EIP-1559 fees: max {Web3.from_wei(max_fee_wei, 'gwei')} gwei, "
            f"priority {Web3.from_wei(priority_fee_wei, 'gwei')} gwei"
        )

        return {
            'maxFeePerGas': int(max_fee_wei),
            'maxPriorityFeePerGas': int(priority_fee_wei)
        }
