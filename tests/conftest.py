"""
Shared fixtures
"""

import json
import pytest
from unittest.mock import Mock

SENDER = '0x90F8bf6A479f320ead074411a4B0e7944Ea8c9C1'
CONTRACT_ADDRESS = '0xe78A0F7E598Cc8b0Bb87894B0F60dD2a88d6a8Ab'
TX_HASH = bytes.fromhex('e75fb554e433e03763a1560646ee22dcb74e5274b34c5ad644e7c0f619a7e1d0')

# Init code that deploys a contract whose runtime is a single STOP
MINIMAL_BYTECODE = '0x6001600c60003960016000f300'


@pytest.fixture
def artifact_file(tmp_path):
    """Artifact in the hardhat/truffle layout"""
    path = tmp_path / 'deposit_contract.json'
    path.write_text(json.dumps({'abi': [], 'bytecode': MINIMAL_BYTECODE}))
    return path


@pytest.fixture
def receipt():
    return {
        'status': 1,
        'blockNumber': 7,
        'contractAddress': CONTRACT_ADDRESS,
        'gasUsed': 53000
    }


@pytest.fixture
def w3(receipt):
    """Mock Web3 instance backed by a node with one unlocked account"""
    w3 = Mock()
    w3.eth.accounts = [SENDER]
    w3.eth.contract.return_value.constructor.return_value.transact.return_value = TX_HASH
    w3.eth.wait_for_transaction_receipt.return_value = receipt
    return w3
