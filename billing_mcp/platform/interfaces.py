from abc import ABC, abstractmethod

from billing_mcp.manifest import CapabilityManifest
from billing_mcp.models import CreatedServer, UserUrl


class IPlatformClient(ABC):
    """Narrow view of the automation platform used by setup and generate.

    Implementations raise ``PlatformError`` for every failure.
    """

    @abstractmethod
    def create_server(
        self, name: str, manifest: CapabilityManifest, *, managed_auth: bool = True
    ) -> CreatedServer:
        raise NotImplementedError

    @abstractmethod
    def generate_url(
        self, user_id: str, server_id: str, *, managed_auth: bool = True
    ) -> UserUrl:
        raise NotImplementedError
