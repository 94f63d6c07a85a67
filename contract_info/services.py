import logging
from contextlib import asynccontextmanager
from decimal import Decimal
from typing import AsyncIterator

import aiohttp
from web3 import AsyncWeb3

from contract_info.categories import ContractCall
from contract_info.entities import AccountFactsEntity


def format_ether(value: int | str) -> str:
    """
    Render a wei amount as an ether decimal string.

    Parameters
    ----------
    value : int | str
        Amount in wei

    Returns
    -------
    str
        Amount in ether, always with a fractional part (``"1.5"``, ``"0.0"``)
    """
    ether = Decimal(AsyncWeb3.from_wei(int(value), "ether"))
    text = format(ether, "f")
    return text if "." in text else f"{text}.0"


class RPCClientFactory:
    """
    Factory opening a dedicated Web3 connection per request.

    Parameters
    ----------
    timeout : float
        Total timeout in seconds for every outbound RPC request
    logger : logging.Logger
        Logger instance
    """

    def __init__(self, timeout: float, logger: logging.Logger):
        self.timeout = timeout
        self.logger = logger

    @asynccontextmanager
    async def connect(self, rpc_url: str) -> AsyncIterator[AsyncWeb3]:
        """
        Open a Web3 client for the RPC URL and close it on exit.

        Parameters
        ----------
        rpc_url : str
            RPC endpoint URL

        Yields
        ------
        AsyncWeb3
            Web3 client instance
        """
        web3 = AsyncWeb3(
            AsyncWeb3.AsyncHTTPProvider(
                rpc_url,
                request_kwargs={"timeout": aiohttp.ClientTimeout(total=self.timeout)}
            )
        )
        self.logger.debug(f"Opened RPC connection to {rpc_url}")
        try:
            yield web3
        finally:
            await web3.provider.disconnect()
            self.logger.debug(f"Closed RPC connection to {rpc_url}")


class Web3Service:
    """
    Service for reading state from blockchain networks.

    Parameters
    ----------
    logger : logging.Logger
        Logger instance
    """

    def __init__(self, logger: logging.Logger):
        self.logger = logger

    async def get_account_facts(
        self,
        web3: AsyncWeb3,
        address: str
    ) -> AccountFactsEntity:
        """
        Read code, balance, nonce and current block for an address.

        Parameters
        ----------
        web3 : AsyncWeb3
            Web3 client instance
        address : str
            Checksum address

        Returns
        -------
        AccountFactsEntity
            Generic account facts
        """
        code = await web3.eth.get_code(address)
        balance_wei = await web3.eth.get_balance(address)
        nonce = await web3.eth.get_transaction_count(address)
        block_number = await web3.eth.block_number

        return AccountFactsEntity(
            has_code=len(code) > 0,
            code_length=2 + 2 * len(code),
            balance=format_ether(balance_wei),
            transaction_count=int(nonce),
            current_block_number=int(block_number)
        )

    async def read_contract(
        self,
        web3: AsyncWeb3,
        address: str,
        abi: list[dict[str, any]],
        calls: tuple[ContractCall, ...]
    ) -> dict[str, str]:
        """
        Issue read-only calls in order and collect their results.

        The first failing call propagates; nothing read so far is returned.

        Parameters
        ----------
        web3 : AsyncWeb3
            Web3 client instance
        address : str
            Checksum contract address
        abi : list[dict[str, any]]
            Contract ABI
        calls : tuple[ContractCall, ...]
            Calls to issue

        Returns
        -------
        dict[str, str]
            Output key to stringified value
        """
        contract = web3.eth.contract(address=address, abi=abi)

        values = {}
        for call in calls:
            function = getattr(contract.functions, call.function)
            result = await function().call()
            self.logger.debug(f"{call.function}() -> {result}")
            values.update(call.unpack(result))
        return values
