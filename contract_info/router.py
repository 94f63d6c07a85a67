from fastapi import APIRouter
from dishka.integrations.fastapi import inject
from dishka import FromComponent
from typing import Annotated
from contract_info.schemas import GetProjectContractRequest, ContractInfoResponse
from contract_info.usecases import GetProjectContractInfoUseCase

router = APIRouter(tags=["Project Contracts"])


@router.post(
    "/project-contract",
    response_model=ContractInfoResponse,
    response_model_exclude_none=True
)
@inject
async def get_project_contract_info(
    use_case: Annotated[
        GetProjectContractInfoUseCase, FromComponent("contract_info")
    ],
    request: GetProjectContractRequest | None = None
) -> ContractInfoResponse:
    """
    Get generic and category specific information about a project contract.

    Parameters
    ----------
    use_case : GetProjectContractInfoUseCase
        Use case for collecting contract information
    request : GetProjectContractRequest | None
        Request with contract type, contract address and network;
        a request without body is treated as an empty one

    Returns
    -------
    ContractInfoResponse
        Contract information
    """
    if request is None:
        request = GetProjectContractRequest()
    return await use_case(
        contract_type=request.contract_type,
        contract_address=request.contract_address,
        network=request.network
    )
