class AppError(Exception):
    """Base class for all application-level errors."""
    pass


class ConfigurationError(AppError):
    """Base for errors in the values the service was configured with."""
    pass

class ConnectionStringError(ConfigurationError):
    def __init__(self, detail: str):
        self.message = f"Invalid database connection string: {detail}"
        super().__init__(self.message)



class InfrastructureError(AppError):
    """Base for infrastructure-related errors (identity provider, DB).

    `message` is the underlying library message, kept verbatim so it can be
    shown to the caller as-is.
    """
    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)

class TokenAcquisitionError(InfrastructureError):
    def __init__(self, scope: str, message: str):
        self.scope = scope
        super().__init__(message)

class DatabaseConnectionError(InfrastructureError):
    def __init__(self, server: str, message: str):
        self.server = server
        super().__init__(message)

class QueryExecutionError(InfrastructureError):
    def __init__(self, query: str, message: str):
        self.query = query
        super().__init__(message)
