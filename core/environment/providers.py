from dishka import Provider, Scope, provide
from core.environment.config import Settings


class EnvironmentProvider(Provider):
    """
    Provider for environment configuration.

    Settings are read once per process and shared by every request,
    including the network name to RPC URL table.
    """

    component = "environment"
    scope = Scope.APP

    @provide
    def get_settings(self) -> Settings:
        """
        Provide application settings.

        Returns
        -------
        Settings
            Application settings instance
        """
        return Settings()
