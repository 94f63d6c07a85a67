from typing import Any
from pydantic import BaseModel, ConfigDict


class ContractCall(BaseModel):
    """
    A single read-only call issued against a contract.

    Attributes
    ----------
    function : str
        Contract function name as declared in the ABI
    outputs : tuple[str, ...]
        Response keys the result is stored under; more than one key
        means the function returns a tuple that is spread in order
    ether_outputs : frozenset[str]
        Keys holding wei amounts, shown in ether in the logs
    """
    function: str
    outputs: tuple[str, ...]
    ether_outputs: frozenset[str] = frozenset()

    model_config = ConfigDict(frozen=True)

    def unpack(self, result: Any) -> dict[str, str]:
        """
        Map a call result onto its output keys as strings.

        Parameters
        ----------
        result : Any
            Value returned by the contract call

        Returns
        -------
        dict[str, str]
            Output key to stringified value

        Raises
        ------
        ValueError
            If a tuple result does not match the declared outputs
        """
        if len(self.outputs) == 1:
            return {self.outputs[0]: str(result)}

        values = list(result)
        if len(values) != len(self.outputs):
            raise ValueError(
                f"{self.function}() returned {len(values)} values, "
                f"expected {len(self.outputs)}"
            )
        return {key: str(value) for key, value in zip(self.outputs, values)}


class ContractCategory(BaseModel):
    """
    Category of project contract and the reads issued for it.

    Attributes
    ----------
    display_name : str
        Human readable category name
    abi_name : str
        ABI file name (without extension) under ``contract_info/abis``
    calls : tuple[ContractCall, ...]
        Calls issued in order
    """
    display_name: str
    abi_name: str
    calls: tuple[ContractCall, ...]

    model_config = ConfigDict(frozen=True)

    @property
    def output_keys(self) -> list[str]:
        return [key for call in self.calls for key in call.outputs]

    @property
    def ether_outputs(self) -> frozenset[str]:
        return frozenset().union(*(call.ether_outputs for call in self.calls))


def _token_calls() -> tuple[ContractCall, ...]:
    return (
        ContractCall(function="name", outputs=("name",)),
        ContractCall(function="symbol", outputs=("symbol",)),
        ContractCall(function="decimals", outputs=("decimals",)),
        ContractCall(
            function="totalSupply",
            outputs=("totalSupply",),
            ether_outputs=frozenset({"totalSupply"})
        ),
        ContractCall(function="owner", outputs=("owner",)),
    )


CATEGORIES: dict[str, ContractCategory] = {
    "deth": ContractCategory(
        display_name="dETH",
        abi_name="dETH",
        calls=_token_calls() + (
            ContractCall(
                function="getContractETHBalance",
                outputs=("ethBalance",),
                ether_outputs=frozenset({"ethBalance"})
            ),
        )
    ),
    "seth": ContractCategory(
        display_name="sETH",
        abi_name="sETH",
        calls=_token_calls() + (
            ContractCall(
                function="getStakingStats",
                outputs=("totalStaked", "totalStakers", "averageStake"),
                ether_outputs=frozenset({"totalStaked", "averageStake"})
            ),
        )
    ),
    "governance": ContractCategory(
        display_name="Governance",
        abi_name="governance",
        calls=(
            ContractCall(function="proposalCount", outputs=("proposalCount",)),
            ContractCall(function="votingPeriod", outputs=("votingPeriod",)),
            ContractCall(function="executionDelay", outputs=("executionDelay",)),
            ContractCall(
                function="quorum",
                outputs=("quorum",),
                ether_outputs=frozenset({"quorum"})
            ),
            ContractCall(function="owner", outputs=("owner",)),
        )
    ),
    "stakingdashboard": ContractCategory(
        display_name="StakingDashboard",
        abi_name="stakingDashboard",
        calls=(
            ContractCall(
                function="getStakingOverview",
                outputs=(
                    "totalETHDeposited",
                    "totalETHStaked",
                    "totalStakers",
                    "averageStakeAmount"
                ),
                ether_outputs=frozenset({
                    "totalETHDeposited",
                    "totalETHStaked",
                    "averageStakeAmount"
                })
            ),
        )
    ),
}

UNKNOWN_CATEGORY_MESSAGE = (
    "Unknown contract type. Supported types: "
    + ", ".join(category.display_name for category in CATEGORIES.values())
)


def resolve_category(contract_type: str) -> ContractCategory | None:
    """
    Find category by contract type, ignoring case.

    Parameters
    ----------
    contract_type : str
        Contract type from the request

    Returns
    -------
    ContractCategory | None
        Matching category or None for unknown types
    """
    return CATEGORIES.get(contract_type.lower())
