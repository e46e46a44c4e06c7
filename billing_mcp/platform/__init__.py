from billing_mcp.platform.composio import ComposioClient, client_factory
from billing_mcp.platform.interfaces import IPlatformClient

__all__ = ["ComposioClient", "IPlatformClient", "client_factory"]
