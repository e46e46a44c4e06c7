"""User-scoped MCP URLs and the client config documents built from them."""

from __future__ import annotations

import json
import logging
from typing import Any, Optional

from billing_mcp.constants import API_KEY_HEADER, API_KEY_PLACEHOLDER, DEFAULT_SERVER_LABEL
from billing_mcp.errors import (
    CredentialError,
    GenerationError,
    MissingCredentialError,
    MissingFieldError,
    is_auth_failure,
)
from billing_mcp.models import GeneratedEndpoint, RenderedConfigs, UrlRequest
from billing_mcp.platform import IPlatformClient, client_factory
from billing_mcp.settings import Settings
from billing_mcp.targets.catalog import ClientTarget
from billing_mcp.targets.schema import TargetSchemaValidator

logger = logging.getLogger(__name__)

_validator = TargetSchemaValidator()


def _validate(request: UrlRequest) -> None:
    if not request.credential or not request.credential.strip():
        raise MissingCredentialError("credential", "Composio API key is required")
    if not request.server_id or not request.server_id.strip():
        raise MissingFieldError("server_id", "Server ID is required")
    if not request.user_id or not request.user_id.strip():
        raise MissingFieldError("user_id", "User ID is required")


def generate_endpoint(
    request: UrlRequest, client: Optional[IPlatformClient] = None
) -> GeneratedEndpoint:
    _validate(request)
    platform = client or client_factory(request.credential, Settings.from_env())

    logger.debug("generating MCP URL for server %s", request.server_id)
    try:
        user_url = platform.generate_url(
            request.user_id, request.server_id, managed_auth=True
        )
    except Exception as exc:
        if is_auth_failure(exc):
            raise CredentialError("Invalid Composio API key", exc) from exc
        raise GenerationError(f"Failed to generate MCP URL: {exc}", exc) from exc

    logger.info("generated MCP URL for server %s", request.server_id)
    return GeneratedEndpoint(
        url=user_url.url, headers={API_KEY_HEADER: request.credential}
    )


def _headers_with_key(headers: dict[str, str]) -> dict[str, str]:
    out = dict(headers)
    out[API_KEY_HEADER] = headers.get(API_KEY_HEADER) or API_KEY_PLACEHOLDER
    return out


def _http_descriptor(endpoint: GeneratedEndpoint) -> dict[str, Any]:
    return {
        "type": "http",
        "url": endpoint.url,
        "headers": _headers_with_key(endpoint.headers),
    }


def render_config(
    endpoint: GeneratedEndpoint,
    target: ClientTarget,
    label: str = DEFAULT_SERVER_LABEL,
) -> dict[str, Any]:
    # Claude Desktop also accepts command/args descriptors; the URL form is the
    # only one produced here.
    document = {"mcpServers": {label: _http_descriptor(endpoint)}}
    detail = _validator.first_error(target, document)
    if detail is not None:
        raise GenerationError(f"Invalid {target.value} config ({detail})")
    return document


def render_configs(
    endpoint: GeneratedEndpoint, label: str = DEFAULT_SERVER_LABEL
) -> RenderedConfigs:
    return RenderedConfigs(
        primary=render_config(endpoint, ClientTarget.VSCODE, label),
        secondary=render_config(endpoint, ClientTarget.KIRO, label),
        extended=render_config(endpoint, ClientTarget.CLAUDE_DESKTOP, label),
    )


def generate_with_configs(
    request: UrlRequest,
    label: str = DEFAULT_SERVER_LABEL,
    client: Optional[IPlatformClient] = None,
) -> tuple[GeneratedEndpoint, RenderedConfigs]:
    endpoint = generate_endpoint(request, client=client)
    return endpoint, render_configs(endpoint, label)


def format_as_text(document: Any) -> str:
    return json.dumps(document, indent=2, ensure_ascii=False)
