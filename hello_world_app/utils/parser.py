from typing import Dict, Optional, Tuple

from hello_world_app.core.exceptions.exceptions import ConnectionStringError


class ConnectionStringParser:
    """Translate an ADO.NET-style SQL Server connection string into ODBC form.

    - `Data Source`, `Address`, `Addr` and `Server` all become `Server`;
      `Initial Catalog` becomes `Database`.
    - Credential keys are dropped: the access token replaces them.
    - `Connection Timeout` / `Connect Timeout` are not ODBC keywords; the value
      is returned separately so it can be handed to the driver as login timeout.
    - `Driver={...}` is prepended unless the string already names one.
    - A value starting with `{` runs to the matching `}`, with `}}` standing
      for a literal `}`; such values may contain `;`.
    """

    SYNONYMS = {
        "data source": "Server",
        "address": "Server",
        "addr": "Server",
        "network address": "Server",
        "server": "Server",
        "initial catalog": "Database",
        "database": "Database",
        "driver": "Driver",
        "encrypt": "Encrypt",
        "trustservercertificate": "TrustServerCertificate",
        "trust server certificate": "TrustServerCertificate",
        "hostnameincertificate": "HostNameInCertificate",
        "host name in certificate": "HostNameInCertificate",
        "applicationintent": "ApplicationIntent",
        "application intent": "ApplicationIntent",
        "multisubnetfailover": "MultiSubnetFailover",
        "multi subnet failover": "MultiSubnetFailover",
        "application name": "APP",
        "app": "APP",
    }
    CREDENTIAL_KEYS = {
        "user id", "userid", "uid", "user", "password", "pwd", "authentication",
        "persist security info", "persistsecurityinfo", "integrated security", "trusted_connection",
    }
    TIMEOUT_KEYS = {"connection timeout", "connect timeout", "timeout"}
    IGNORED_KEYS = {"multipleactiveresultsets", "multiple active result sets", "pooling", "max pool size", "min pool size"}

    def __init__(self, raw: str):
        self.raw = raw or ""

    def _unquote(self, value: str) -> str:
        if len(value) >= 2 and value[0] == value[-1] and value[0] in ("'", '"'):
            return value[1:-1]
        return value

    def _braced(self, start: int) -> Tuple[str, int]:
        # `start` is just past the opening brace; `}}` is a literal `}`
        raw = self.raw
        buf = []
        i = start
        while i < len(raw):
            if raw[i] == "}":
                if raw[i + 1:i + 2] == "}":
                    buf.append("}")
                    i += 2
                    continue
                return "".join(buf), i + 1
            buf.append(raw[i])
            i += 1
        raise ConnectionStringError("unterminated '{' in value")

    def _pairs(self):
        raw = self.raw
        i = 0
        while i < len(raw):
            semi = raw.find(";", i)
            eq = raw.find("=", i)
            if eq == -1 or (semi != -1 and semi < eq):
                end = len(raw) if semi == -1 else semi
                chunk = raw[i:end].strip()
                if chunk:
                    raise ConnectionStringError(f"segment '{chunk}' is not a key=value pair")
                i = end + 1
                continue

            key = " ".join(raw[i:eq].split()).lower()
            if not key:
                raise ConnectionStringError("empty key")
            j = eq + 1
            while j < len(raw) and raw[j] in " \t":
                j += 1

            if raw[j:j + 1] == "{":
                value, j = self._braced(j + 1)
                end = raw.find(";", j)
                end = len(raw) if end == -1 else end
                if raw[j:end].strip():
                    raise ConnectionStringError(f"unexpected text after braced value of '{key}'")
            else:
                end = raw.find(";", j)
                end = len(raw) if end == -1 else end
                value = self._unquote(raw[j:end].strip())
            i = end + 1
            yield key, value

    def parse(self) -> Tuple[Dict[str, str], Optional[int]]:
        """Return the ODBC attributes (ordered) and the login timeout, if one was given."""
        attrs: Dict[str, str] = {}
        timeout: Optional[int] = None
        for key, value in self._pairs():
            if key in self.CREDENTIAL_KEYS or key in self.IGNORED_KEYS:
                continue
            if key in self.TIMEOUT_KEYS:
                try:
                    timeout = int(value)
                except ValueError:
                    raise ConnectionStringError(f"timeout '{value}' is not an integer")
                continue
            attrs[self.SYNONYMS.get(key, key)] = value

        if not attrs.get("Server"):
            raise ConnectionStringError("no server specified")
        return attrs, timeout

    def to_odbc(self, driver: str) -> Tuple[str, Optional[int]]:
        attrs, timeout = self.parse()
        if "Driver" not in attrs:
            attrs = {"Driver": driver, **attrs}
        parts = []
        for key, value in attrs.items():
            # braces protect values containing ; braces or edge spaces, and driver names
            if key == "Driver" or any(c in value for c in ";{}") or value != value.strip():
                value = "{" + value.replace("}", "}}") + "}"
            parts.append(f"{key}={value}")
        return ";".join(parts) + ";", timeout

    def server(self) -> str:
        """Server name for log lines; never raises."""
        try:
            attrs, _ = self.parse()
            return attrs["Server"]
        except ConnectionStringError:
            return "(unknown)"
