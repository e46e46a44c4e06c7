from dataclasses import dataclass, field
from typing import Any

from billing_mcp.manifest import DEFAULT_MANIFEST, CapabilityManifest
from billing_mcp.targets.catalog import ClientTarget


@dataclass(frozen=True)
class ProvisionRequest:
    credential: str
    server_name: str
    manifest: CapabilityManifest = DEFAULT_MANIFEST


@dataclass(frozen=True)
class ProvisionResult:
    server_id: str
    server_name: str
    toolkits: list[str]
    allowed_tools: list[str]


@dataclass(frozen=True)
class UrlRequest:
    credential: str
    server_id: str
    user_id: str


@dataclass(frozen=True)
class GeneratedEndpoint:
    url: str
    headers: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class CreatedServer:
    id: str
    name: str


@dataclass(frozen=True)
class UserUrl:
    url: str


@dataclass(frozen=True)
class RenderedConfigs:
    primary: dict[str, Any]
    secondary: dict[str, Any]
    extended: dict[str, Any]

    def for_target(self, target: ClientTarget) -> dict[str, Any]:
        by_target = {
            ClientTarget.VSCODE: self.primary,
            ClientTarget.KIRO: self.secondary,
            ClientTarget.CLAUDE_DESKTOP: self.extended,
        }
        return by_target[target]

    def items(self) -> list[tuple[ClientTarget, dict[str, Any]]]:
        return [(target, self.for_target(target)) for target in ClientTarget]
