"""Creation of the billing MCP server on the automation platform."""

from __future__ import annotations

import logging
from typing import Optional

from billing_mcp.constants import DEFAULT_SERVER_NAME
from billing_mcp.errors import (
    CredentialError,
    MissingCredentialError,
    ProvisioningError,
    ServerConflictError,
    is_auth_failure,
    is_name_conflict,
)
from billing_mcp.manifest import DEFAULT_MANIFEST
from billing_mcp.models import ProvisionRequest, ProvisionResult
from billing_mcp.platform import IPlatformClient, client_factory
from billing_mcp.settings import Settings, require_api_key

logger = logging.getLogger(__name__)


def _validate(request: ProvisionRequest) -> None:
    if not request.credential or not request.credential.strip():
        raise MissingCredentialError("credential", "Composio API key is required")
    if not request.server_name or not request.server_name.strip():
        raise MissingCredentialError("server_name", "Server name is required")


def provision(
    request: ProvisionRequest, client: Optional[IPlatformClient] = None
) -> ProvisionResult:
    """Create the MCP server described by ``request.manifest``.

    Authentication handoff for the configured toolkits is left to chat time.
    The returned toolkit and tool lists are the requested manifest, not the
    platform echo.
    """
    _validate(request)
    manifest = request.manifest
    platform = client or client_factory(request.credential, Settings.from_env())

    logger.debug(
        "creating MCP server %s with %d toolkits and %d tools",
        request.server_name,
        len(manifest.toolkits),
        len(manifest.allowed_tools),
    )
    try:
        created = platform.create_server(request.server_name, manifest, managed_auth=True)
    except Exception as exc:
        if is_name_conflict(exc):
            raise ServerConflictError(request.server_name, exc) from exc
        if is_auth_failure(exc):
            raise CredentialError("Invalid Composio API key", exc) from exc
        raise ProvisioningError(f"Failed to create MCP server: {exc}", exc) from exc

    logger.info("created MCP server %s (%s)", created.name, created.id)
    return ProvisionResult(
        server_id=created.id,
        server_name=created.name,
        toolkits=manifest.toolkit_slugs(),
        allowed_tools=list(manifest.allowed_tools),
    )


def setup_from_env(
    server_name: Optional[str] = None,
    settings: Optional[Settings] = None,
    client: Optional[IPlatformClient] = None,
) -> ProvisionResult:
    settings = settings or Settings.from_env()
    api_key = require_api_key(settings.api_key)
    request = ProvisionRequest(
        credential=api_key,
        server_name=server_name or DEFAULT_SERVER_NAME,
        manifest=DEFAULT_MANIFEST,
    )
    return provision(request, client=client or client_factory(api_key, settings))
