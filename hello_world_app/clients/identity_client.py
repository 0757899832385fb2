from typing import Callable, Optional

from azure.core.credentials import TokenCredential
from azure.identity import DefaultAzureCredential

from hello_world_app.core.exceptions.exceptions import TokenAcquisitionError
from hello_world_app.core.result import Result, capture
from hello_world_app.utils.log import app_logger


class IdentityTokenClient:
    """Bearer tokens from the ambient Azure identity.

    Uses `DefaultAzureCredential`, which discovers workload identity (federated
    token file on AKS), managed identity, environment credentials or a local
    `az login`. A fresh credential is built for every call and closed right
    after, so nothing is shared between requests.
    """

    def __init__(self, credential_factory: Optional[Callable[[], TokenCredential]] = None):
        self.credential_factory = credential_factory or DefaultAzureCredential

    def _fetch(self, scope: str) -> str:
        credential = self.credential_factory()
        try:
            return credential.get_token(scope).token
        finally:
            close = getattr(credential, "close", None)
            if close is not None:
                close()

    def get_token(self, scope: str) -> Result[str, TokenAcquisitionError]:
        app_logger.debug("identity.get_token", scope=scope)
        return capture(
            lambda: self._fetch(scope),
            lambda e: TokenAcquisitionError(scope, str(e)),
        )
