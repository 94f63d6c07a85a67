from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class GetProjectContractRequest(BaseModel):
    """
    Request schema for project contract information.

    Contract type and address are optional here so that their absence is
    reported as a bad request by the use case instead of a validation error.

    Attributes
    ----------
    contract_type : str | None
        Contract category (dETH, sETH, Governance, StakingDashboard), any case
    contract_address : str | None
        Contract address
    network : str | None
        Network name; unknown, empty or null names resolve to the local node
    """
    contract_type: str | None = Field(
        default=None,
        description="Contract category: dETH, sETH, Governance or StakingDashboard"
    )
    contract_address: str | None = Field(
        default=None,
        description="Contract address"
    )
    network: str | None = Field(
        default="mainnet",
        description="Network to query (mainnet, sepolia, goerli, localhost)"
    )

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ContractInfo(BaseModel):
    """
    Aggregated contract information.

    Generic facts stay unset when any of them could not be fetched; in that
    case ``error`` carries the reason and ``contract_data`` is unset too.

    Attributes
    ----------
    contract_type : str
        Contract type as requested
    address : str
        Contract address as requested
    network : str | None
        Network name as requested, omitted from the response when null
    timestamp : str
        ISO-8601 UTC time of the request
    provider : str
        RPC URL used
    has_code : bool | None
        Whether bytecode is deployed at the address
    code_length : int | None
        Length of the 0x-prefixed hex bytecode (2 for no code)
    balance : str | None
        Native balance in ether
    transaction_count : int | None
        Address nonce
    current_block_number : int | None
        Latest block number
    contract_data : dict[str, str] | None
        Category specific values, or ``{"error": ...}``
    error : str | None
        Reason the generic facts could not be fetched
    """
    contract_type: str
    address: str
    network: str | None
    timestamp: str
    provider: str
    has_code: bool | None = None
    code_length: int | None = None
    balance: str | None = None
    transaction_count: int | None = None
    current_block_number: int | None = None
    contract_data: dict[str, str] | None = None
    error: str | None = None

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True
    )


class ContractInfoResponse(BaseModel):
    """
    Response envelope for project contract information.

    Attributes
    ----------
    success : bool
        Always true for answered requests
    message : str
        Human readable status message
    data : ContractInfo
        Aggregated contract information
    """
    success: bool = True
    message: str
    data: ContractInfo

    model_config = ConfigDict(from_attributes=True)
