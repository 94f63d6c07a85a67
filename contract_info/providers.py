from dishka import Provider, Scope, provide, FromComponent
from contract_info.abi_service import ABIService
from contract_info.categories import CATEGORIES
from contract_info.services import RPCClientFactory, Web3Service
from contract_info.usecases import GetProjectContractInfoUseCase
from typing import Annotated
from core.environment.config import Settings
import logging


class ContractInfoProvider(Provider):
    """
    Provider for contract information dependencies.
    """

    component = "contract_info"

    @provide(scope=Scope.APP)
    def get_abi_service(
        self,
        logger: Annotated[logging.Logger, FromComponent("logger")]
    ) -> ABIService:
        """
        Provide ABI service with every category ABI loaded.

        Parameters
        ----------
        logger : logging.Logger
            Logger instance

        Returns
        -------
        ABIService
            ABI service instance
        """
        abi_service = ABIService(logger=logger)
        abi_service.load([category.abi_name for category in CATEGORIES.values()])
        return abi_service

    @provide(scope=Scope.APP)
    def get_rpc_client_factory(
        self,
        settings: Annotated[Settings, FromComponent("environment")],
        logger: Annotated[logging.Logger, FromComponent("logger")]
    ) -> RPCClientFactory:
        """
        Provide factory of per-request RPC connections.

        Parameters
        ----------
        settings : Settings
            Application settings
        logger : logging.Logger
            Logger instance

        Returns
        -------
        RPCClientFactory
            RPC client factory
        """
        return RPCClientFactory(timeout=settings.rpc_timeout, logger=logger)

    @provide(scope=Scope.APP)
    def get_web3_service(
        self,
        logger: Annotated[logging.Logger, FromComponent("logger")]
    ) -> Web3Service:
        """
        Provide Web3 service.

        Parameters
        ----------
        logger : logging.Logger
            Logger instance

        Returns
        -------
        Web3Service
            Web3 service instance
        """
        return Web3Service(logger=logger)

    @provide(scope=Scope.REQUEST)
    def get_project_contract_info_use_case(
        self,
        web3_service: Annotated[Web3Service, FromComponent("contract_info")],
        rpc_clients: Annotated[RPCClientFactory, FromComponent("contract_info")],
        abi_service: Annotated[ABIService, FromComponent("contract_info")],
        settings: Annotated[Settings, FromComponent("environment")],
        logger: Annotated[logging.Logger, FromComponent("logger")]
    ) -> GetProjectContractInfoUseCase:
        """
        Provide get project contract info use case.

        Parameters
        ----------
        web3_service : Web3Service
            Web3 service instance
        rpc_clients : RPCClientFactory
            RPC client factory
        abi_service : ABIService
            ABI service instance
        settings : Settings
            Application settings
        logger : logging.Logger
            Logger instance

        Returns
        -------
        GetProjectContractInfoUseCase
            Get project contract info use case
        """
        return GetProjectContractInfoUseCase(
            web3_service=web3_service,
            rpc_clients=rpc_clients,
            abi_service=abi_service,
            settings=settings,
            logger=logger
        )
