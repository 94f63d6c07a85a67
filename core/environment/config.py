import os
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings using Pydantic Settings.

    Attributes
    ----------
    mainnet_rpc_url : str
        RPC URL for Ethereum mainnet
    sepolia_rpc_url : str
        RPC URL for the Sepolia testnet
    goerli_rpc_url : str
        RPC URL for the Goerli testnet
    localhost_rpc_url : str
        RPC URL of a local node, also used for unknown networks
    rpc_timeout : float
        Total timeout in seconds for a single outbound RPC request
    log_level : str
        Logging level name
    """

    mainnet_rpc_url: str = "https://eth.llamarpc.com"
    sepolia_rpc_url: str = "https://ethereum-sepolia-rpc.publicnode.com"
    goerli_rpc_url: str = "https://ethereum-goerli-rpc.publicnode.com"
    localhost_rpc_url: str = "http://localhost:8545"

    rpc_timeout: float = 30.0

    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=os.getenv("ENV_FILE", ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False
    )

    @property
    def rpc_urls(self) -> dict[str, str]:
        """
        Known networks and their RPC URLs.

        Returns
        -------
        dict[str, str]
            Mapping of network name to RPC URL
        """
        return {
            "mainnet": self.mainnet_rpc_url,
            "sepolia": self.sepolia_rpc_url,
            "goerli": self.goerli_rpc_url,
            "localhost": self.localhost_rpc_url
        }

    def get_rpc_url(self, network: str | None) -> str:
        """
        Get RPC URL for specific network.

        Unknown or empty network names resolve to the localhost node
        instead of raising.

        Parameters
        ----------
        network : str | None
            Network name (mainnet, sepolia, goerli, localhost)

        Returns
        -------
        str
            RPC URL
        """
        return self.rpc_urls.get(network or "", self.localhost_rpc_url)
