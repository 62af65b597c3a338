"""
Unit Tests for endpoint connection
"""

import pytest
from web3 import Web3

from utils import check_endpoint, connect


class TestConnect:
    """Test provider selection"""

    @pytest.mark.parametrize('endpoint', ['http://127.0.0.1:8545', 'HTTPS://rpc.example.org'])
    def test_http_endpoint(self, endpoint):
        w3 = connect(endpoint)

        assert isinstance(w3, Web3)
        assert isinstance(w3.provider, Web3.HTTPProvider)

    def test_ipc_path(self, tmp_path):
        w3 = connect(str(tmp_path / 'geth.ipc'))

        assert isinstance(w3.provider, Web3.IPCProvider)

    def test_empty_endpoint(self):
        with pytest.raises(ValueError):
            connect('')

    def test_bare_relative_path_is_ipc(self):
        w3 = connect('data/geth.ipc')

        assert isinstance(w3.provider, Web3.IPCProvider)

    @pytest.mark.parametrize('endpoint', ['ws://127.0.0.1:8546', 'wss://rpc.example.org', 'ftp://host/x'])
    def test_unsupported_scheme(self, endpoint):
        with pytest.raises(ValueError, match='unsupported endpoint scheme'):
            connect(endpoint)


class TestCheckEndpoint:
    """Test endpoint validation"""

    @pytest.mark.parametrize('endpoint', ['http://127.0.0.1:8545', '/tmp/geth.ipc'])
    def test_accepted(self, endpoint):
        assert check_endpoint(endpoint) == endpoint

    @pytest.mark.parametrize('endpoint', ['', '   '])
    def test_empty(self, endpoint):
        with pytest.raises(ValueError, match='empty'):
            check_endpoint(endpoint)
