"""
Config Fill Script
Appends the deployed deposit contract address to a client config file
"""

import argparse
import sys
from typing import List, Optional
from loguru import logger

from utils import append_config_line, configure_logging, default_log_level, log_level


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='fill-lighthouse-config',
        description='Append DEPOSIT_CONTRACT_ADDRESS to a config file'
    )
    parser.add_argument(
        '--address-file',
        required=True,
        help='Deposit contract address file'
    )
    parser.add_argument(
        '--config-file',
        required=True,
        help='Lighthouse config file'
    )
    parser.add_argument(
        '--log-level',
        type=log_level,
        default=default_log_level(),
        help='Log level for stderr diagnostics (env LOG_LEVEL, default INFO)'
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    try:
        append_config_line(args.address_file, args.config_file)
    except OSError as e:
        logger.error(f"Could not update {args.config_file}: {e}")
        raise

    return 0


if __name__ == "__main__":
    sys.exit(main())
