import sys
from pathlib import Path
from typing import Any, Optional

from click.testing import CliRunner
import pytest


def _ensure_repo_on_path() -> None:
    repo_root = Path(__file__).resolve().parent.parent
    if str(repo_root) not in sys.path:
        sys.path.insert(0, str(repo_root))


_ensure_repo_on_path()

from billing_mcp.manifest import CapabilityManifest  # noqa: E402
from billing_mcp.models import CreatedServer, UserUrl  # noqa: E402
from billing_mcp.platform.interfaces import IPlatformClient  # noqa: E402


class StubPlatformClient(IPlatformClient):
    def __init__(
        self,
        server: Optional[CreatedServer] = None,
        url: str = "https://host/v3/mcp/srv-1?user_id=u@example.com",
        error: Optional[Exception] = None,
    ) -> None:
        self.server = server or CreatedServer(id="srv-1", name="billing-invoice-automation")
        self.url = url
        self.error = error
        self.calls: list[tuple[str, tuple[Any, ...], dict[str, Any]]] = []

    def create_server(
        self, name: str, manifest: CapabilityManifest, *, managed_auth: bool = True
    ) -> CreatedServer:
        self.calls.append(("create_server", (name, manifest), {"managed_auth": managed_auth}))
        if self.error is not None:
            raise self.error
        return self.server

    def generate_url(
        self, user_id: str, server_id: str, *, managed_auth: bool = True
    ) -> UserUrl:
        self.calls.append(("generate_url", (user_id, server_id), {"managed_auth": managed_auth}))
        if self.error is not None:
            raise self.error
        return UserUrl(url=self.url)


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setattr(Path, "home", lambda: tmp_path)
    monkeypatch.chdir(tmp_path)
    for name in ("COMPOSIO_API_KEY", "COMPOSIO_BASE_URL", "COMPOSIO_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def stub_client() -> StubPlatformClient:
    return StubPlatformClient()


@pytest.fixture
def cli_stub(monkeypatch, stub_client: StubPlatformClient) -> StubPlatformClient:
    created: list[tuple[str, Any]] = []

    def _factory(api_key: str, settings: Any = None) -> StubPlatformClient:
        created.append((api_key, settings))
        return stub_client

    monkeypatch.setattr("billing_mcp.__main__.client_factory", _factory)
    stub_client.factory_calls = created  # type: ignore[attr-defined]
    return stub_client


@pytest.fixture
def cli_runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def make_client():
    return StubPlatformClient
