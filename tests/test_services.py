import logging
from unittest.mock import AsyncMock, patch

import pytest
from web3 import AsyncHTTPProvider, AsyncWeb3

from contract_info.abi_service import ABIService
from contract_info.categories import (
    CATEGORIES,
    ContractCall,
    UNKNOWN_CATEGORY_MESSAGE,
    resolve_category
)
from contract_info.services import RPCClientFactory, Web3Service, format_ether
from core.environment.config import Settings
from tests.stubs import StubLedgerNode, StubWeb3


logger = logging.getLogger("tests")


class TestCategories:
    """Tests for the category strategy map."""

    @pytest.mark.parametrize("contract_type, display_name", [
        ("dETH", "dETH"),
        ("SETH", "sETH"),
        ("governance", "Governance"),
        ("stakingDASHBOARD", "StakingDashboard"),
    ])
    def test_resolve_category_ignores_case(self, contract_type: str, display_name: str):
        assert resolve_category(contract_type).display_name == display_name

    def test_resolve_unknown_category(self):
        assert resolve_category("erc721") is None

    def test_unknown_category_message_lists_supported_types(self):
        assert UNKNOWN_CATEGORY_MESSAGE == (
            "Unknown contract type. Supported types: dETH, sETH, Governance, StakingDashboard"
        )

    def test_single_output_is_stringified(self):
        call = ContractCall(function="totalSupply", outputs=("totalSupply",))
        assert call.unpack(10 ** 30) == {"totalSupply": "1000000000000000000000000000000"}

    def test_tuple_output_is_spread_in_order(self):
        call = ContractCall(function="getStakingStats", outputs=("a", "b", "c"))
        assert call.unpack((1, 2, 3)) == {"a": "1", "b": "2", "c": "3"}

    def test_tuple_output_arity_mismatch(self):
        call = ContractCall(function="getStakingStats", outputs=("a", "b", "c"))
        with pytest.raises(ValueError, match="returned 2 values, expected 3"):
            call.unpack((1, 2))

    def test_output_keys_follow_call_order(self):
        assert CATEGORIES["seth"].output_keys == [
            "name", "symbol", "decimals", "totalSupply", "owner",
            "totalStaked", "totalStakers", "averageStake"
        ]


class TestABIService:
    """Tests for static ABI loading."""

    def test_every_category_call_is_declared_in_its_abi(self):
        """
        Test that the shipped ABIs declare every function the categories call.
        """
        abi_service = ABIService(logger=logger)
        abi_service.load([category.abi_name for category in CATEGORIES.values()])

        for category in CATEGORIES.values():
            abi = abi_service.get_abi(category.abi_name)
            functions = {item["name"]: item for item in abi if item.get("type") == "function"}
            for call in category.calls:
                assert call.function in functions
                assert functions[call.function]["stateMutability"] == "view"
                assert len(functions[call.function]["outputs"]) == len(call.outputs)

    def test_missing_abi_raises(self, tmp_path):
        abi_service = ABIService(logger=logger, abi_dir=tmp_path)
        with pytest.raises(FileNotFoundError):
            abi_service.get_abi("missing")

    def test_abi_must_be_a_list(self, tmp_path):
        (tmp_path / "broken.json").write_text('{"abi": []}', encoding="utf-8")
        abi_service = ABIService(logger=logger, abi_dir=tmp_path)
        with pytest.raises(ValueError):
            abi_service.get_abi("broken")


class TestFormatEther:
    """Tests for wei to ether rendering."""

    @pytest.mark.parametrize("wei, expected", [
        (0, "0.0"),
        (10 ** 18, "1.0"),
        (1500000000000000000, "1.5"),
        (1, "0.000000000000000001"),
        ("25000000000000000000", "25.0"),
    ])
    def test_format_ether(self, wei, expected: str):
        assert format_ether(wei) == expected


class TestWeb3Service:
    """Tests for raw reads against the stub ledger node."""

    @pytest.mark.asyncio
    async def test_get_account_facts(self):
        node = StubLedgerNode()
        node.values["getCode"] = b""
        node.values["getBalance"] = 0

        facts = await Web3Service(logger=logger).get_account_facts(StubWeb3(node), "0x0")

        assert facts.has_code is False
        assert facts.code_length == 2
        assert facts.balance == "0.0"
        assert facts.transaction_count == 1
        assert facts.current_block_number == 19000000
        assert node.calls == ["getCode", "getBalance", "getTransactionCount", "blockNumber"]

    @pytest.mark.asyncio
    async def test_read_contract_stops_at_first_failure(self):
        node = StubLedgerNode()
        node.failures["decimals"] = RuntimeError("execution reverted")
        category = CATEGORIES["deth"]

        with pytest.raises(RuntimeError, match="execution reverted"):
            await Web3Service(logger=logger).read_contract(
                StubWeb3(node), "0x0", [], category.calls
            )

        assert node.calls == ["name", "symbol", "decimals"]

    @pytest.mark.asyncio
    async def test_read_contract_collects_governance_values(self):
        node = StubLedgerNode()
        category = CATEGORIES["governance"]

        values = await Web3Service(logger=logger).read_contract(
            StubWeb3(node), "0x0", [], category.calls
        )

        assert values["proposalCount"] == "12"
        assert values["quorum"] == "40000000000000000000000"
        assert list(values) == category.output_keys


class TestSettings:
    """Tests for network to RPC URL resolution."""

    def test_known_network(self):
        settings = Settings(sepolia_rpc_url="http://sepolia.node")
        assert settings.get_rpc_url("sepolia") == "http://sepolia.node"

    @pytest.mark.parametrize("network", ["unknown-network-name", "", None, "Mainnet"])
    def test_unknown_network_falls_back_to_localhost(self, network):
        settings = Settings(localhost_rpc_url="http://node:8545")
        assert settings.get_rpc_url(network) == "http://node:8545"

    def test_defaults(self):
        settings = Settings()
        assert settings.rpc_timeout == 30.0
        assert list(settings.rpc_urls) == ["mainnet", "sepolia", "goerli", "localhost"]


class TestRPCClientFactory:
    """Tests for per-request Web3 connections."""

    @pytest.mark.asyncio
    async def test_connect_builds_provider_with_timeout_and_disconnects(self):
        """
        Test that a connection targets the URL, carries the timeout and is closed on exit.
        """
        factory = RPCClientFactory(timeout=5.0, logger=logger)

        with patch.object(AsyncHTTPProvider, "disconnect", new_callable=AsyncMock) as disconnect:
            async with factory.connect("http://127.0.0.1:9") as web3:
                assert isinstance(web3, AsyncWeb3)
                assert isinstance(web3.provider, AsyncHTTPProvider)
                assert web3.provider.endpoint_uri == "http://127.0.0.1:9"
                request_kwargs = dict(web3.provider.get_request_kwargs())
                assert request_kwargs["timeout"].total == 5.0
                disconnect.assert_not_awaited()

        disconnect.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_connect_disconnects_when_body_raises(self):
        factory = RPCClientFactory(timeout=5.0, logger=logger)

        with patch.object(AsyncHTTPProvider, "disconnect", new_callable=AsyncMock) as disconnect:
            with pytest.raises(RuntimeError, match="boom"):
                async with factory.connect("http://127.0.0.1:9"):
                    raise RuntimeError("boom")

        disconnect.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_unreachable_node_raises_from_read(self):
        """
        Test that reads against a closed port fail and the connection still closes.
        """
        factory = RPCClientFactory(timeout=2.0, logger=logger)

        with pytest.raises(Exception):
            async with factory.connect("http://127.0.0.1:9") as web3:
                await web3.eth.block_number
