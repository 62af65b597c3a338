"""
Smart Contract Deployment Script
Deploys a compiled contract (e.g. the deposit contract) through a node account
and writes the contract address and block number to files
"""

import argparse
import os
import sys
from typing import List, Optional
from loguru import logger

from blockchain import ContractDeployer, DeploymentPolicy, load_artifact
from blockchain.transaction_builder import DEFAULT_GAS, DEFAULT_GAS_PRICE, DEFAULT_NONCE
from utils import check_endpoint, configure_logging, connect, default_log_level, log_level


def _endpoint(value: str) -> str:
    try:
        return check_endpoint(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


def _non_negative_int(value: str) -> int:
    try:
        parsed = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}")
    if parsed < 0:
        raise argparse.ArgumentTypeError(f"must be non-negative: {value}")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='deploy-deposit-contract',
        description='Deploy a compiled contract and record its address and block number',
        epilog=(
            'The sender is the first account of the node. The nonce is not read from '
            'the node: the default of 0 requires an account with no prior transactions.'
        )
    )
    parser.add_argument(
        '--endpoint',
        required=True,
        type=_endpoint,
        help='HTTP endpoint (or IPC path) to which you want to deploy the contract'
    )
    parser.add_argument(
        '--file', '-f',
        required=True,
        help='Contract JSON file path (with abi and bytecode)'
    )
    parser.add_argument(
        '--address-out',
        required=True,
        help='The file path to write the contract address'
    )
    parser.add_argument(
        '--block-out',
        required=True,
        help='The file path to write the contract block number'
    )
    parser.add_argument(
        '--nonce',
        type=_non_negative_int,
        default=os.getenv('DEPLOY_NONCE') or None,
        help=f'Sender nonce (env DEPLOY_NONCE, default {DEFAULT_NONCE})'
    )
    parser.add_argument(
        '--gas',
        type=_non_negative_int,
        default=os.getenv('DEPLOY_GAS') or None,
        help=f'Gas limit (env DEPLOY_GAS, default {DEFAULT_GAS})'
    )
    parser.add_argument(
        '--gas-price',
        type=_non_negative_int,
        default=os.getenv('DEPLOY_GAS_PRICE') or None,
        help=f'Gas price in wei (env DEPLOY_GAS_PRICE, default {DEFAULT_GAS_PRICE})'
    )
    parser.add_argument(
        '--log-level',
        type=log_level,
        default=default_log_level(),
        help='Log level for stderr diagnostics (env LOG_LEVEL, default INFO)'
    )
    return parser


def write_output(path: str, value: str):
    """Write value with no trailing newline"""
    with open(path, 'w') as f:
        f.write(value)
    logger.debug(f"Wrote {path}")


def main(argv: Optional[List[str]] = None) -> int:
    """Deploy the contract, returns process exit status"""
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    logger.info("Starting contract deployment...")

    try:
        artifact = load_artifact(args.file)
        policy = DeploymentPolicy.from_env(args.nonce, args.gas, args.gas_price)
        logger.info(f"Nonce: {policy.nonce}, gas limit: {policy.gas}, gas price: {policy.gas_price} wei")

        deployer = ContractDeployer(connect(args.endpoint), policy)

        def on_transaction(tx_hash: str):
            print('transaction', tx_hash, flush=True)

        def on_receipt(receipt):
            block_number = str(receipt['blockNumber'])
            print('block_number', block_number, flush=True)
            write_output(args.block_out, block_number)

        result = deployer.deploy(artifact, on_transaction=on_transaction, on_receipt=on_receipt)

        print('address', result.contract_address, flush=True)
        write_output(args.address_out, result.contract_address)

    except Exception as e:
        logger.error(f"Deployment failed: {e}")
        raise

    logger.success("Contract deployed successfully")
    return 0


if __name__ == "__main__":
    sys.exit(main())
