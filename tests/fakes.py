from hello_world_app.core.exceptions.exceptions import (
    DatabaseConnectionError,
    QueryExecutionError,
    TokenAcquisitionError,
)
from hello_world_app.core.result import Err, Ok

CONNECTION_STRING = (
    "Server=tcp:demo-sql.database.windows.net,1433;Initial Catalog=demo-db;"
    "Encrypt=True;TrustServerCertificate=False;Connection Timeout=30;"
)


class FakeTokenClient:
    def __init__(self, token="fake-token", error=None):
        self.token = token
        self.error = error
        self.scopes = []

    def get_token(self, scope):
        self.scopes.append(scope)
        if self.error is not None:
            return Err(TokenAcquisitionError(scope, self.error))
        return Ok(self.token)


class FakeConnection:
    def __init__(self):
        self.closed = False

    def close(self):
        self.closed = True


class FakeSqlClient:
    def __init__(self, value="2026-10-18 12:00:00", open_error=None, query_error=None):
        self.value = value
        self.open_error = open_error
        self.query_error = query_error
        self.opened = []
        self.queries = []
        self.connections = []

    def open(self, connection_string, token):
        self.opened.append((connection_string, token))
        if self.open_error is not None:
            return Err(DatabaseConnectionError("demo-sql", self.open_error))
        connection = FakeConnection()
        self.connections.append(connection)
        return Ok(connection)

    def execute_scalar(self, connection, query):
        self.queries.append(query)
        if self.query_error is not None:
            return Err(QueryExecutionError(query, self.query_error))
        return Ok(self.value)
