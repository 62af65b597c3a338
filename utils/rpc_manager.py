"""
RPC Manager
Creates the Web3 connection for a single endpoint
"""

from urllib.parse import urlparse
from web3 import Web3
from loguru import logger

HTTP_SCHEMES = ('http', 'https')


def check_endpoint(endpoint: str) -> str:
    """
    Validate an endpoint before any request is made

    Accepts http(s) URLs and bare filesystem paths (IPC sockets).

    Raises:
        ValueError: empty endpoint or unsupported URL scheme (e.g. ws://)
    """
    if not endpoint or not endpoint.strip():
        raise ValueError("endpoint must not be empty")

    scheme = urlparse(endpoint).scheme.lower()
    if scheme and scheme not in HTTP_SCHEMES:
        raise ValueError(f"unsupported endpoint scheme: {scheme}")

    return endpoint


def connect(endpoint: str) -> Web3:
    """
    Create a Web3 instance for an endpoint

    HTTP(S) URLs use HTTPProvider, bare paths use IPCProvider. No request
    is made here; connection errors surface on the first call.

    Args:
        endpoint: Node URL or IPC path

    Returns:
        Web3 instance
    """
    check_endpoint(endpoint)

    if urlparse(endpoint).scheme.lower() in HTTP_SCHEMES:
        provider = Web3.HTTPProvider(endpoint)
    else:
        provider = Web3.IPCProvider(endpoint)

    logger.info(f"Connecting to {endpoint} ({type(provider).__name__})")
    return Web3(provider)
