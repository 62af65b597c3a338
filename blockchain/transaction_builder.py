"""
Transaction Builder
Fixed deployment transaction policy (nonce, gas limit, gas price)
"""

import os
from dataclasses import dataclass
from typing import Dict, Optional
from loguru import logger
from dotenv import load_dotenv

load_dotenv()

# Mainnet deposit contract was deployed with gasLimit 3,141,592 at 147 gwei
DEFAULT_NONCE = 0
DEFAULT_GAS = 3141592
DEFAULT_GAS_PRICE = 147000000000


def _env_int(name: str, default: int) -> int:
    """Read a non-negative integer from the environment"""
    value = os.getenv(name)
    if value is None or value == '':
        return default

    parsed = int(value)
    if parsed < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")
    return parsed


@dataclass(frozen=True)
class DeploymentPolicy:
    """
    Transaction parameters used for the deployment

    The nonce is not fetched from the node. The default of 0 only works
    for a sending account that has never sent a transaction.
    """

    nonce: int = DEFAULT_NONCE
    gas: int = DEFAULT_GAS
    gas_price: int = DEFAULT_GAS_PRICE

    @classmethod
    def from_env(
        cls,
        nonce: Optional[int] = None,
        gas: Optional[int] = None,
        gas_price: Optional[int] = None
    ) -> 'DeploymentPolicy':
        """
        Build policy from explicit values, falling back to
        DEPLOY_NONCE / DEPLOY_GAS / DEPLOY_GAS_PRICE, then defaults
        """
        return cls(
            nonce=nonce if nonce is not None else _env_int('DEPLOY_NONCE', DEFAULT_NONCE),
            gas=gas if gas is not None else _env_int('DEPLOY_GAS', DEFAULT_GAS),
            gas_price=gas_price if gas_price is not None else _env_int('DEPLOY_GAS_PRICE', DEFAULT_GAS_PRICE)
        )

    def build_params(self, sender: str) -> Dict:
        """
        Build transaction params for a constructor call

        Args:
            sender: Account the node signs with

        Returns:
            Transaction dict
        """
        tx = {
            'from': sender,
            'nonce': self.nonce,
            'gas': self.gas,
            'gasPrice': self.gas_price
        }

        logger.debug(f"Deployment tx params: {tx}")
        return tx
