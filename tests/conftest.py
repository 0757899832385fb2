import pytest
from fastapi.testclient import TestClient

from hello_world_app.config.settings import Settings
from hello_world_app.main import create_app
from tests.fakes import CONNECTION_STRING


@pytest.fixture
def make_client():
    """Build a TestClient around explicit settings and fake collaborators."""
    def _make(connection_string=CONNECTION_STRING, token_client=None, sql_client=None, **overrides):
        settings = Settings(SQL_CONNECTION_STRING=connection_string, **overrides)
        app = create_app(settings, token_client=token_client, sql_client=sql_client)
        return TestClient(app)
    return _make
