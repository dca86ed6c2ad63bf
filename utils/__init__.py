"""
Utilities Package
Network selection and gas settings for deployments
"""

from .gas_calculator import GasCalculator
from .network_config import NetworkManager

__all__ = [
    'GasCalculator',
    'NetworkManager'
]
