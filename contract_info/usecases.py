import logging
from datetime import datetime, timezone

from web3 import AsyncWeb3

from contract_info.abi_service import ABIService
from contract_info.categories import (
    ContractCategory,
    UNKNOWN_CATEGORY_MESSAGE,
    resolve_category
)
from contract_info.schemas import ContractInfo, ContractInfoResponse
from contract_info.services import RPCClientFactory, Web3Service, format_ether
from core.environment.config import Settings
from core.exceptions import ContractInfoFetchException, InvalidRequestException


class GetProjectContractInfoUseCase:
    """
    Use case collecting generic and category specific contract information.

    Generic facts are fetched as one group: if any read fails, none of them
    are reported and the category reads are skipped. Category reads are
    isolated from the request: a failing call replaces the whole category
    payload with its error message.

    Parameters
    ----------
    web3_service : Web3Service
        Web3 service instance
    rpc_clients : RPCClientFactory
        Factory opening per-request RPC connections
    abi_service : ABIService
        Static ABI registry
    settings : Settings
        Application settings
    logger : logging.Logger
        Logger instance
    """

    SUCCESS_MESSAGE = "Project contract information retrieved successfully"

    def __init__(
        self,
        web3_service: Web3Service,
        rpc_clients: RPCClientFactory,
        abi_service: ABIService,
        settings: Settings,
        logger: logging.Logger
    ):
        self.web3_service = web3_service
        self.rpc_clients = rpc_clients
        self.abi_service = abi_service
        self.settings = settings
        self.logger = logger

    async def __call__(
        self,
        contract_type: str | None,
        contract_address: str | None,
        network: str | None
    ) -> ContractInfoResponse:
        """
        Execute use case.

        Parameters
        ----------
        contract_type : str | None
            Contract category, any case
        contract_address : str | None
            Contract address
        network : str | None
            Network name

        Returns
        -------
        ContractInfoResponse
            Contract information response

        Raises
        ------
        InvalidRequestException
            If contract type or address is missing
        ContractInfoFetchException
            If the request failed outside the isolated read groups
        """
        if not contract_type or not contract_address:
            raise InvalidRequestException()

        self.logger.info("=== Project Contract Information ===")
        self.logger.info(f"Contract Type: {contract_type}")
        self.logger.info(f"Contract Address: {contract_address}")
        self.logger.info(f"Network: {network}")

        try:
            contract_info = await self._collect(contract_type, contract_address, network)
        except Exception as e:
            self.logger.exception(f"Failed to collect contract information: {e}")
            raise ContractInfoFetchException(str(e)) from e

        return ContractInfoResponse(
            success=True,
            message=self.SUCCESS_MESSAGE,
            data=contract_info
        )

    async def _collect(
        self,
        contract_type: str,
        contract_address: str,
        network: str | None
    ) -> ContractInfo:
        rpc_url = self.settings.get_rpc_url(network)
        contract_info = ContractInfo(
            contract_type=contract_type,
            address=contract_address,
            network=network,
            timestamp=datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z"),
            provider=rpc_url
        )

        async with self.rpc_clients.connect(rpc_url) as web3:
            try:
                checksum_address = AsyncWeb3.to_checksum_address(contract_address)
                facts = await self.web3_service.get_account_facts(web3, checksum_address)
            except Exception as e:
                self.logger.warning(f"Error fetching contract details: {e}")
                contract_info.error = str(e)
            else:
                contract_info.has_code = facts.has_code
                contract_info.code_length = facts.code_length
                contract_info.balance = facts.balance
                contract_info.transaction_count = facts.transaction_count
                contract_info.current_block_number = facts.current_block_number
                contract_info.contract_data = await self._fetch_contract_data(
                    web3, contract_type, checksum_address
                )

        self.logger.info("Basic Contract Info:")
        self.logger.info(f"  Has Code: {contract_info.has_code}")
        self.logger.info(f"  Balance (ETH): {contract_info.balance}")
        self.logger.info(f"  Transaction Count: {contract_info.transaction_count}")
        self.logger.info(f"  Current Block: {contract_info.current_block_number}")
        self.logger.info(f"Timestamp: {contract_info.timestamp}")

        return contract_info

    async def _fetch_contract_data(
        self,
        web3: AsyncWeb3,
        contract_type: str,
        address: str
    ) -> dict[str, str]:
        """
        Run the category routine for the contract type.

        Parameters
        ----------
        web3 : AsyncWeb3
            Web3 client instance
        contract_type : str
            Contract category, any case
        address : str
            Checksum contract address

        Returns
        -------
        dict[str, str]
            Category values, or a single ``error`` entry
        """
        category = resolve_category(contract_type)
        if category is None:
            self.logger.warning(f"Unknown contract type: {contract_type}")
            return {"error": UNKNOWN_CATEGORY_MESSAGE}

        try:
            contract_data = await self.web3_service.read_contract(
                web3,
                address,
                self.abi_service.get_abi(category.abi_name),
                category.calls
            )
        except Exception as e:
            self.logger.warning(f"Error fetching {category.display_name} data: {e}")
            return {"error": str(e)}

        self._log_contract_data(category, contract_data)
        return contract_data

    def _log_contract_data(self, category: ContractCategory, contract_data: dict[str, str]) -> None:
        self.logger.info(f"{category.display_name} Contract Data:")
        for key in category.output_keys:
            value = contract_data[key]
            if key in category.ether_outputs:
                self.logger.info(f"  {key}: {value} wei ({format_ether(value)} ETH)")
            else:
                self.logger.info(f"  {key}: {value}")
