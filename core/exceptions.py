from abc import ABC


class BaseCustomException(Exception, ABC):
    """
    Base class for all custom exceptions.
    """

    def __init__(self, message: str | None = None):
        self.message = message or self.get_default_message()
        super().__init__(self.message)

    def get_default_message(self) -> str:
        """
        Return default error message.

        Returns
        -------
        str
            Default error message
        """
        return "error.unknown"

    def get_status_code(self) -> int:
        """
        Return HTTP status code for exception.

        Returns
        -------
        int
            HTTP status code
        """
        return 500


class BadRequestException(BaseCustomException):
    """Bad request exception (400)."""

    def get_status_code(self) -> int:
        return 400


class InvalidRequestException(BadRequestException):
    """Required request fields are missing."""

    def get_default_message(self) -> str:
        return "Contract type and address are required"


class ContractInfoFetchException(BaseCustomException):
    """Contract information could not be collected (500)."""

    def get_default_message(self) -> str:
        return "error.contract_info.failed"
