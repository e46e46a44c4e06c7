import pytest

from billing_mcp.targets import ClientTarget, config_path_for, target_metadata
from billing_mcp.targets.schema import TargetSchemaValidator


@pytest.mark.parametrize(
    ("target", "path"),
    [
        ("vscode", ".vscode/mcp.json"),
        ("kiro", ".kiro/settings/mcp.json"),
        (
            "claudeDesktop",
            "~/Library/Application Support/Claude/claude_desktop_config.json",
        ),
        (ClientTarget.KIRO, ".kiro/settings/mcp.json"),
    ],
)
def test_config_path_for_known_targets(target, path: str) -> None:
    assert config_path_for(target) == path


@pytest.mark.parametrize("target", ["cursor", "", "VSCODE", "claude_desktop"])
def test_config_path_for_unknown_target_falls_back(target: str) -> None:
    assert config_path_for(target) == "mcp.json"


def test_target_metadata_labels() -> None:
    assert [target_metadata(target).label for target in ClientTarget] == [
        "VSCode",
        "Kiro",
        "Claude Desktop",
    ]


def _http_document(**server) -> dict:
    entry = {"type": "http", "url": "https://host/mcp", "headers": {"x-api-key": "k"}}
    entry.update(server)
    return {"mcpServers": {"billing-agent": entry}}


def test_http_schema_accepts_rendered_shape() -> None:
    validator = TargetSchemaValidator()
    assert validator.first_error(ClientTarget.VSCODE, _http_document()) is None
    assert validator.first_error(ClientTarget.KIRO, _http_document()) is None


def test_http_schema_rejects_command_descriptor() -> None:
    validator = TargetSchemaValidator()
    document = {"mcpServers": {"local": {"command": "npx", "args": ["server"]}}}

    assert validator.first_error(ClientTarget.VSCODE, document) is not None
    assert validator.first_error(ClientTarget.CLAUDE_DESKTOP, document) is None


def test_http_schema_requires_api_key_header() -> None:
    validator = TargetSchemaValidator()
    error = validator.first_error(ClientTarget.KIRO, _http_document(headers={}))

    assert error is not None
    assert "x-api-key" in error


def test_claude_desktop_schema_requires_url_or_command() -> None:
    validator = TargetSchemaValidator()
    document = {"mcpServers": {"billing-agent": {"type": "http"}}}

    assert validator.first_error(ClientTarget.CLAUDE_DESKTOP, document) is not None
