import pytest

from chainrelay.allowlist import Allowlist


@pytest.fixture
def allowlist():
    return Allowlist(hosts=["localhost", "127.0.0.1", "conway1.linera.blockhunters.services"])


@pytest.fixture
def anyio_backend():
    return 'asyncio'
