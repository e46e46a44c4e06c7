"""Composio SDK adapter for the MCP server endpoints."""

import logging
from typing import Any, Optional

from composio import Composio

from billing_mcp.constants import DEFAULT_BASE_URL
from billing_mcp.errors import PlatformError
from billing_mcp.manifest import CapabilityManifest
from billing_mcp.models import CreatedServer, UserUrl
from billing_mcp.platform.interfaces import IPlatformClient
from billing_mcp.settings import Settings

logger = logging.getLogger(__name__)


class ComposioClient(IPlatformClient):
    def __init__(
        self,
        api_key: str,
        *,
        base_url: str = DEFAULT_BASE_URL,
        timeout: Optional[float] = None,
        sdk: Any = None,
    ) -> None:
        self._api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._sdk = sdk

    @property
    def sdk(self) -> Any:
        if self._sdk is None:
            options: dict[str, Any] = {"api_key": self._api_key}
            if self.base_url != DEFAULT_BASE_URL:
                options["base_url"] = self.base_url
            if self.timeout is not None:
                options["timeout"] = self.timeout
            self._sdk = Composio(**options)
        return self._sdk

    def create_server(
        self, name: str, manifest: CapabilityManifest, *, managed_auth: bool = True
    ) -> CreatedServer:
        logger.debug("mcp.create %s", name)
        try:
            created = self.sdk.mcp.create(
                name,
                toolkits=manifest.toolkit_slugs(),
                allowed_tools=list(manifest.allowed_tools),
                manually_manage_connections=not managed_auth,
            )
        except Exception as exc:
            raise to_platform_error(exc) from exc

        server_id = _field(created, "id")
        if not isinstance(server_id, str) or not server_id:
            raise PlatformError("Malformed create server response: missing id")
        server_name = _field(created, "name")
        return CreatedServer(
            id=server_id,
            name=server_name if isinstance(server_name, str) and server_name else name,
        )

    def generate_url(
        self, user_id: str, server_id: str, *, managed_auth: bool = True
    ) -> UserUrl:
        logger.debug("mcp.generate for server %s", server_id)
        try:
            instance = self.sdk.mcp.generate(
                user_id,
                server_id,
                manually_manage_connections=not managed_auth,
            )
        except Exception as exc:
            raise to_platform_error(exc) from exc

        url = _field(instance, "url")
        if not isinstance(url, str) or not url:
            raise PlatformError("Malformed generate URL response: missing url")
        return UserUrl(url=url)


def _field(payload: Any, name: str) -> Any:
    if isinstance(payload, dict):
        return payload.get(name)
    return getattr(payload, name, None)


def to_platform_error(exc: BaseException) -> PlatformError:
    """Translate an SDK or transport exception, keeping status and error slug."""
    if isinstance(exc, PlatformError):
        return exc
    status = getattr(exc, "status_code", None)
    if status is None:
        response = getattr(exc, "response", None)
        status = getattr(response, "status_code", None)

    message = str(getattr(exc, "message", None) or exc) or type(exc).__name__
    code: Optional[str] = None
    body = getattr(exc, "body", None)
    if isinstance(body, dict):
        detail = body.get("error", body)
        if isinstance(detail, dict):
            if isinstance(detail.get("message"), str):
                message = detail["message"]
            slug = detail.get("slug") or detail.get("code")
            if slug is not None:
                code = str(slug)
        elif isinstance(detail, str):
            message = detail
    if code is None and getattr(exc, "code", None) is not None:
        code = str(exc.code)  # type: ignore[attr-defined]

    if isinstance(status, int):
        return PlatformError(f"HTTP {status}: {message}", status=status, code=code)
    return PlatformError(message, code=code)


def client_factory(api_key: str, settings: Optional[Settings] = None) -> IPlatformClient:
    settings = settings or Settings.from_env()
    return ComposioClient(api_key, base_url=settings.base_url, timeout=settings.timeout)
