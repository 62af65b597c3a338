"""
Utilities Package
Endpoint connection, config patching and logging setup
"""

from .rpc_manager import check_endpoint, connect
from .config_patcher import CONFIG_KEY, append_config_line, format_config_line
from .logging_config import configure_logging, default_log_level, log_level

__all__ = [
    'check_endpoint',
    'connect',
    'CONFIG_KEY',
    'append_config_line',
    'format_config_line',
    'configure_logging',
    'default_log_level',
    'log_level'
]
