import pytest

from hello_world_app.core.exceptions.exceptions import ConnectionStringError
from hello_world_app.utils.parser import ConnectionStringParser

DRIVER = "ODBC Driver 18 for SQL Server"


def test_ado_style_string_is_translated():
    raw = (
        "Server=tcp:demo-sql.database.windows.net,1433;Initial Catalog=demo-db;"
        "Persist Security Info=False;MultipleActiveResultSets=False;Encrypt=True;"
        "TrustServerCertificate=False;Connection Timeout=30;"
    )
    odbc, timeout = ConnectionStringParser(raw).to_odbc(DRIVER)
    assert odbc == (
        "Driver={ODBC Driver 18 for SQL Server};Server=tcp:demo-sql.database.windows.net,1433;"
        "Database=demo-db;Encrypt=True;TrustServerCertificate=False;"
    )
    assert timeout == 30


def test_credentials_are_dropped():
    raw = "Data Source=db.example;Database=app;User ID=sa;Password=secret;Authentication=Active Directory Default"
    attrs, timeout = ConnectionStringParser(raw).parse()
    assert attrs == {"Server": "db.example", "Database": "app"}
    assert timeout is None


def test_keys_are_case_and_space_insensitive():
    attrs, _ = ConnectionStringParser(" data  source = db.example ; INITIAL CATALOG=app ").parse()
    assert attrs == {"Server": "db.example", "Database": "app"}


def test_explicit_driver_is_kept():
    odbc, _ = ConnectionStringParser("Driver={ODBC Driver 17 for SQL Server};Server=db").to_odbc(DRIVER)
    assert odbc == "Driver={ODBC Driver 17 for SQL Server};Server=db;"


def test_braced_value_with_semicolon():
    attrs, _ = ConnectionStringParser("Server=db;APP={my;app}").parse()
    assert attrs["APP"] == "my;app"
    odbc, _ = ConnectionStringParser("Server=db;APP={my;app}").to_odbc(DRIVER)
    assert "APP={my;app};" in odbc


@pytest.mark.parametrize("raw", ["Database=app", "Server=;Database=app", "no-equals-sign", ""])
def test_invalid_strings_raise(raw):
    with pytest.raises(ConnectionStringError):
        ConnectionStringParser(raw).parse()


def test_bad_timeout_raises():
    with pytest.raises(ConnectionStringError):
        ConnectionStringParser("Server=db;Connect Timeout=soon").parse()


def test_server_never_raises():
    assert ConnectionStringParser("Server=tcp:db,1433").server() == "tcp:db,1433"
    assert ConnectionStringParser("garbage").server() == "(unknown)"


def test_unbraced_closing_brace_does_not_swallow_semicolon():
    attrs, _ = ConnectionStringParser("Server=db;APP=x}").parse()
    assert attrs == {"Server": "db", "APP": "x}"}


def test_escaped_brace_survives_translation():
    attrs, _ = ConnectionStringParser("Server=db;APP={a}}b}").parse()
    assert attrs["APP"] == "a}b"
    odbc, _ = ConnectionStringParser("Server=db;APP={a}}b}").to_odbc("D")
    assert odbc == "Driver={D};Server=db;APP={a}}b};"


def test_unbraced_value_with_brace_is_braced_on_output():
    odbc, _ = ConnectionStringParser("Server=db;APP=x}").to_odbc("D")
    assert odbc == "Driver={D};Server=db;APP={x}}};"


@pytest.mark.parametrize("raw", ["Server={db", "Server={db}x;Database=app", "=db"])
def test_malformed_braces_and_keys_raise(raw):
    with pytest.raises(ConnectionStringError):
        ConnectionStringParser(raw).parse()
