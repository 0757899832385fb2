from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv, find_dotenv
from typing import Optional

_env_path = find_dotenv(usecwd=True)  # locate a .env file in the working dir or its parents
if _env_path:
    load_dotenv(_env_path)

# well-known audience for Azure SQL Database tokens
AZURE_SQL_SCOPE = "https://database.windows.net/.default"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    # Database related
    # `ConnectionStrings__SqlDatabase` is how the ConnectionStrings:SqlDatabase key
    # is spelled in a container environment.
    SQL_CONNECTION_STRING: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("SQL_CONNECTION_STRING", "ConnectionStrings__SqlDatabase"),
    )
    # override only for non-public clouds (e.g. https://database.usgovcloudapi.net/.default)
    SQL_TOKEN_SCOPE: str = AZURE_SQL_SCOPE
    ODBC_DRIVER: str = "ODBC Driver 18 for SQL Server"

    # Page / runtime
    # fixed page heading; overridable so one image can serve several clusters
    GREETING: str = "Hello World from AKS!"
    LOG_LEVEL: str = "INFO"

    @property
    def database_configured(self) -> bool:
        return bool(self.SQL_CONNECTION_STRING)


def get_settings() -> Settings:
    """Read settings once from the environment (and .env, if any)."""
    return Settings()
