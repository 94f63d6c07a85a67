import os

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport


# Set test environment variables before imports
os.environ['ENV_FILE'] = '.env.test'
os.environ['MAINNET_RPC_URL'] = 'http://mainnet.test'
os.environ['SEPOLIA_RPC_URL'] = 'http://sepolia.test'
os.environ['GOERLI_RPC_URL'] = 'http://goerli.test'
os.environ['LOCALHOST_RPC_URL'] = 'http://localhost:8545'

from dishka import Provider, Scope, provide, make_async_container  # noqa: E402
from dishka.integrations.fastapi import FastapiProvider  # noqa: E402

from contract_info.providers import ContractInfoProvider  # noqa: E402
from contract_info.services import RPCClientFactory  # noqa: E402
from core.environment.providers import EnvironmentProvider  # noqa: E402
from core.logging.providers import LoggerProvider  # noqa: E402
from tests.stubs import StubLedgerNode, StubRPCClientFactory  # noqa: E402


class StubRPCProvider(Provider):
    """Replaces the RPC client factory with the stub one."""

    component = "contract_info"

    def __init__(self, rpc_clients: StubRPCClientFactory):
        super().__init__()
        self.rpc_clients = rpc_clients

    @provide(scope=Scope.APP, override=True)
    def get_rpc_client_factory(self) -> RPCClientFactory:
        return self.rpc_clients


@pytest.fixture
def ledger() -> StubLedgerNode:
    """Stub ledger node with canned values."""
    return StubLedgerNode()


@pytest.fixture
def rpc_clients(ledger: StubLedgerNode) -> StubRPCClientFactory:
    """Stub RPC client factory bound to the ledger fixture."""
    return StubRPCClientFactory(ledger)


@pytest_asyncio.fixture
async def client(rpc_clients: StubRPCClientFactory):
    """
    Fixture for async test client backed by the stub ledger node.

    Parameters
    ----------
    rpc_clients : StubRPCClientFactory
        Stub RPC client factory

    Yields
    ------
    AsyncClient
        Async HTTP client for testing
    """
    from main import create_app

    container = make_async_container(
        FastapiProvider(),
        EnvironmentProvider(),
        LoggerProvider(),
        ContractInfoProvider(),
        StubRPCProvider(rpc_clients)
    )
    app = create_app(container)

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    await container.close()
