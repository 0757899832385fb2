from contextlib import closing
from typing import Optional

from hello_world_app.clients.identity_client import IdentityTokenClient
from hello_world_app.clients.sql_client import SqlClient
from hello_world_app.config.settings import Settings
from hello_world_app.core.result import Result
from hello_world_app.schemas.probe import Failure, NotConfigured, ProbeResult, Success
from hello_world_app.utils.log import app_logger

PROBE_QUERY = "SELECT GETDATE() as CurrentDateTime"


class DatabaseProbeService:
    """Best-effort database reachability check, run once per request.

    Steps, each returning a Result; the first Err ends the chain:
    1. bearer token for the SQL audience
    2. connection opened with that token
    3. one scalar query returning the server time

    Nothing here raises: every outcome is a ProbeResult. No retries.
    """

    def __init__(
        self,
        settings: Settings,
        token_client: Optional[IdentityTokenClient] = None,
        sql_client: Optional[SqlClient] = None,
    ):
        self.settings = settings
        self.token_client = token_client or IdentityTokenClient()
        self.sql_client = sql_client or SqlClient(driver=settings.ODBC_DRIVER)

    def _query(self, connection) -> Result:
        # connection is closed on every path, including a failed query
        with closing(connection):
            return self.sql_client.execute_scalar(connection, PROBE_QUERY)

    def _connect_and_query(self, connection_string: str, token: str) -> Result:
        return self.sql_client.open(connection_string, token).and_then(self._query)

    def probe(self) -> ProbeResult:
        connection_string = self.settings.SQL_CONNECTION_STRING
        if not connection_string:
            app_logger.warning("probe.not_configured")
            return NotConfigured()

        outcome = self.token_client.get_token(self.settings.SQL_TOKEN_SCOPE).and_then(
            lambda token: self._connect_and_query(connection_string, token)
        )

        if not outcome.is_ok:
            app_logger.error(
                "probe.failed",
                step=type(outcome.error).__name__,
                error=outcome.error.message,
            )
            return Failure(message=outcome.error.message)

        app_logger.info("probe.success", database_time=outcome.value)
        return Success(timestamp=outcome.value)
