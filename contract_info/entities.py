from pydantic import BaseModel, ConfigDict


class AccountFactsEntity(BaseModel):
    """
    Entity representing generic on-chain facts about an address.

    Attributes
    ----------
    has_code : bool
        Whether bytecode is deployed at the address
    code_length : int
        Length of the 0x-prefixed hex bytecode string (2 for no code)
    balance : str
        Native balance in ether as a decimal string
    transaction_count : int
        Nonce of the address
    current_block_number : int
        Latest block height seen by the node
    """
    has_code: bool
    code_length: int
    balance: str
    transaction_count: int
    current_block_number: int

    model_config = ConfigDict(from_attributes=True)
