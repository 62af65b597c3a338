"""
Config Patcher
Appends the deposit contract address to a client config file
"""

from loguru import logger

CONFIG_KEY = 'DEPOSIT_CONTRACT_ADDRESS'


def format_config_line(address: bytes) -> bytes:
    """Format the config entry, keeping the address bytes untouched"""
    return CONFIG_KEY.encode() + b': "' + address + b'"'


def append_config_line(address_file: str, config_file: str) -> bytes:
    """
    Append DEPOSIT_CONTRACT_ADDRESS: "<address>" to a config file

    The address file is read as-is (no trimming). No newline is added and
    existing entries are not checked, so repeated runs append duplicates.
    The config file is created if missing.

    Args:
        address_file: File holding the contract address
        config_file: Config file to append to

    Returns:
        Bytes appended
    """
    with open(address_file, 'rb') as f:
        address = f.read()

    line = format_config_line(address)

    with open(config_file, 'ab') as f:
        f.write(line)

    logger.success(f"Appended {CONFIG_KEY} to {config_file}")
    return line
