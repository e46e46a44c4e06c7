from dataclasses import dataclass
from enum import Enum

from billing_mcp.constants import FALLBACK_CONFIG_PATH


class ClientTarget(str, Enum):
    VSCODE = "vscode"
    KIRO = "kiro"
    CLAUDE_DESKTOP = "claudeDesktop"


@dataclass(frozen=True)
class TargetMetadata:
    target: ClientTarget
    label: str
    config_path: str
    schema_file: str


TARGET_CATALOG: dict[ClientTarget, TargetMetadata] = {
    ClientTarget.VSCODE: TargetMetadata(
        target=ClientTarget.VSCODE,
        label="VSCode",
        config_path=".vscode/mcp.json",
        schema_file="http_mcp.schema.json",
    ),
    ClientTarget.KIRO: TargetMetadata(
        target=ClientTarget.KIRO,
        label="Kiro",
        config_path=".kiro/settings/mcp.json",
        schema_file="http_mcp.schema.json",
    ),
    ClientTarget.CLAUDE_DESKTOP: TargetMetadata(
        target=ClientTarget.CLAUDE_DESKTOP,
        label="Claude Desktop",
        config_path="~/Library/Application Support/Claude/claude_desktop_config.json",
        schema_file="claude_desktop.schema.json",
    ),
}


def target_metadata(target: ClientTarget | str) -> TargetMetadata:
    target_id = target if isinstance(target, ClientTarget) else ClientTarget(target)
    return TARGET_CATALOG[target_id]


def config_path_for(target: ClientTarget | str) -> str:
    try:
        return target_metadata(target).config_path
    except ValueError:
        return FALLBACK_CONFIG_PATH
