"""
Contract Deployer
Submits a contract creation transaction through a node-managed account
"""

from dataclasses import dataclass
from typing import Any, Callable, Optional
from web3 import Web3
from loguru import logger

from .artifact import ContractArtifact
from .transaction_builder import DeploymentPolicy


class DeploymentError(Exception):
    """Deployment could not be submitted or did not create a contract"""


@dataclass(frozen=True)
class DeploymentResult:
    """Outcome of one deployment transaction"""

    transaction_hash: str
    block_number: int
    contract_address: str


class ContractDeployer:
    """
    Deploys a compiled contract using the first account exposed by the node
    """

    def __init__(self, w3: Web3, policy: Optional[DeploymentPolicy] = None):
        """
        Initialize Contract Deployer

        Args:
            w3: Web3 instance
            policy: Transaction parameters (defaults to DeploymentPolicy())
        """
        self.w3 = w3
        self.policy = policy or DeploymentPolicy()

    def get_sender(self) -> str:
        """Return the first account managed by the node"""
        accounts = self.w3.eth.accounts

        if not accounts:
            raise DeploymentError("Endpoint exposes no accounts to deploy from")

        sender = accounts[0]
        logger.info(f"Deploying from: {sender}")
        return sender

    def submit(self, artifact: ContractArtifact) -> str:
        """
        Send the constructor transaction

        Args:
            artifact: Compiled contract

        Returns:
            Transaction hash as 0x-prefixed hex
        """
        sender = self.get_sender()

        contract = self.w3.eth.contract(abi=artifact.abi, bytecode=artifact.bytecode)
        tx_hash = contract.constructor().transact(self.policy.build_params(sender))

        tx_hash_hex = Web3.to_hex(tx_hash)
        logger.info(f"Transaction sent: {tx_hash_hex}")
        return tx_hash_hex

    def wait_for_receipt(self, tx_hash: str) -> Any:
        """
        Block until the transaction is included

        Raises:
            DeploymentError: transaction reverted
            web3.exceptions.TimeExhausted: receipt not available in time
        """
        logger.info("Waiting for confirmation...")
        receipt = self.w3.eth.wait_for_transaction_receipt(tx_hash)

        if receipt['status'] != 1:
            raise DeploymentError(
                f"Deployment transaction {tx_hash} reverted in block {receipt['blockNumber']}"
            )

        if not receipt.get('contractAddress'):
            raise DeploymentError(f"Receipt for {tx_hash} carries no contract address")

        logger.success(f"Included in block {receipt['blockNumber']} (gas used: {receipt.get('gasUsed')})")
        return receipt

    def deploy(
        self,
        artifact: ContractArtifact,
        on_transaction: Optional[Callable[[str], None]] = None,
        on_receipt: Optional[Callable[[Any], None]] = None
    ) -> DeploymentResult:
        """
        Deploy the artifact and wait for inclusion

        Args:
            artifact: Compiled contract
            on_transaction: Called with the tx hash once the node accepts it
            on_receipt: Called with the receipt once the tx is included

        Returns:
            DeploymentResult
        """
        tx_hash = self.submit(artifact)
        if on_transaction:
            on_transaction(tx_hash)

        receipt = self.wait_for_receipt(tx_hash)
        if on_receipt:
            on_receipt(receipt)

        return DeploymentResult(
            transaction_hash=tx_hash,
            block_number=int(receipt['blockNumber']),
            contract_address=receipt['contractAddress']
        )
