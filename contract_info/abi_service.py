import json
import logging
from pathlib import Path


ABI_DIR = Path(__file__).resolve().parent / "abis"


class ABIService:
    """
    Service serving static contract ABIs shipped with the application.

    ABIs are read from JSON files once and kept in memory; they never
    change while the process runs.

    Parameters
    ----------
    logger : logging.Logger
        Logger instance
    abi_dir : Path
        Directory holding ``<name>.json`` ABI files
    """

    def __init__(self, logger: logging.Logger, abi_dir: Path = ABI_DIR):
        self.logger = logger
        self.abi_dir = abi_dir
        self._abis: dict[str, list[dict[str, any]]] = {}

    def load(self, names: list[str]) -> None:
        """
        Read ABI files into memory.

        Parameters
        ----------
        names : list[str]
            ABI names (file names without extension)

        Raises
        ------
        FileNotFoundError
            If an ABI file is missing
        ValueError
            If a file does not contain a JSON list
        """
        for name in names:
            path = self.abi_dir / f"{name}.json"
            with path.open(encoding="utf-8") as f:
                abi = json.load(f)

            if not isinstance(abi, list):
                raise ValueError(f"ABI file {path} must contain a JSON list")

            functions = [item["name"] for item in abi if item.get("type") == "function"]
            self.logger.info(f"Loaded ABI '{name}': {len(functions)} functions {functions}")
            self._abis[name] = abi

    def get_abi(self, name: str) -> list[dict[str, any]]:
        """
        Get ABI by name.

        Parameters
        ----------
        name : str
            ABI name

        Returns
        -------
        list[dict[str, any]]
            Contract ABI
        """
        if name not in self._abis:
            self.load([name])
        return self._abis[name]
