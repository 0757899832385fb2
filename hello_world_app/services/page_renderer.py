from hello_world_app.schemas.probe import Failure, NotConfigured, ProbeResult, Success


def render_probe(result: ProbeResult) -> str:
    """HTML fragment for a probe outcome.

    The failure message goes in unescaped, exactly as the error reported it.
    """
    if isinstance(result, Success):
        return (
            "<p style='color: green;'>✓ Database connection successful!</p>"
            f"<p>Database time: {result.timestamp}</p>"
        )
    if isinstance(result, Failure):
        return f"<p style='color: red;'>✗ Database connection failed: {result.message}</p>"
    if isinstance(result, NotConfigured):
        return "<p style='color: orange;'>⚠ No database connection string configured</p>"
    raise TypeError(f"unknown probe result: {result!r}")


def render_page(greeting: str, result: ProbeResult) -> str:
    return f"<html><body><h1>{greeting}</h1>{render_probe(result)}</body></html>"
