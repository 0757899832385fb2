import struct
from typing import Any, Callable, Optional

from sqlalchemy import create_engine, text
from sqlalchemy.engine import URL, Connection, Engine
from sqlalchemy.exc import DBAPIError
from sqlalchemy.pool import NullPool

from hello_world_app.core.exceptions.exceptions import DatabaseConnectionError, QueryExecutionError
from hello_world_app.core.result import Result, capture
from hello_world_app.utils.parser import ConnectionStringParser
from hello_world_app.utils.log import app_logger

# msodbcsql pre-connect attribute carrying an Entra ID access token
SQL_COPT_SS_ACCESS_TOKEN = 1256


def pack_access_token(token: str) -> bytes:
    """ODBC expects the token as UTF-16-LE bytes prefixed with their length."""
    raw = token.encode("utf-16-le")
    return struct.pack(f"<I{len(raw)}s", len(raw), raw)


def error_message(exc: Exception) -> str:
    # SQLAlchemy decorates driver errors with SQL text and a docs link; the
    # driver's own message is what the page reports.
    if isinstance(exc, DBAPIError) and exc.orig is not None:
        return str(exc.orig)
    return str(exc)


class SqlClient:
    """Token-authenticated SQL Server access through SQLAlchemy + pyodbc.

    No pooling: every `open` builds a `NullPool` engine, so closing the returned
    connection closes the underlying ODBC connection.
    """

    def __init__(self, driver: str, engine_factory: Callable[..., Engine] = create_engine):
        self.driver = driver
        self.engine_factory = engine_factory

    def build_engine(self, connection_string: str, token: str) -> Engine:
        odbc_connect, timeout = ConnectionStringParser(connection_string).to_odbc(self.driver)
        connect_args = {"attrs_before": {SQL_COPT_SS_ACCESS_TOKEN: pack_access_token(token)}}
        if timeout is not None:
            connect_args["timeout"] = timeout
        url = URL.create("mssql+pyodbc", query={"odbc_connect": odbc_connect})
        return self.engine_factory(url, poolclass=NullPool, connect_args=connect_args)

    def open(self, connection_string: str, token: str) -> Result[Connection, DatabaseConnectionError]:
        server = ConnectionStringParser(connection_string).server()
        app_logger.debug("sql.open", server=server)
        return capture(
            lambda: self.build_engine(connection_string, token).connect(),
            lambda e: DatabaseConnectionError(server, error_message(e)),
        )

    def execute_scalar(self, connection: Connection, query: str) -> Result[Optional[Any], QueryExecutionError]:
        app_logger.debug("sql.execute_scalar", query=query)
        return capture(
            lambda: connection.execute(text(query)).scalar(),
            lambda e: QueryExecutionError(query, error_message(e)),
        )
