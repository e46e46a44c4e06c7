from dataclasses import dataclass

from billing_mcp.constants import DEFAULT_SERVER_NAME


@dataclass(frozen=True)
class Toolkit:
    slug: str
    label: str

    @property
    def tool_prefix(self) -> str:
        return f"{self.slug.upper()}_"


@dataclass(frozen=True)
class CapabilityManifest:
    """Toolkits a server exposes and the tools it may call within them.

    Every allowed tool must belong to one of the listed toolkits, judged by the
    platform naming convention ``<TOOLKIT>_<ACTION>``.
    """

    name: str
    toolkits: tuple[Toolkit, ...]
    allowed_tools: tuple[str, ...]

    def __post_init__(self) -> None:
        slugs = [toolkit.slug for toolkit in self.toolkits]
        duplicates = sorted({slug for slug in slugs if slugs.count(slug) > 1})
        if duplicates:
            raise ValueError(f"Duplicate toolkit in manifest: {', '.join(duplicates)}")
        for tool in self.allowed_tools:
            if self._owner_of(tool) is None:
                raise ValueError(f"Tool does not belong to any listed toolkit: {tool}")

    def _owner_of(self, tool: str) -> Toolkit | None:
        for toolkit in self.toolkits:
            if tool.startswith(toolkit.tool_prefix):
                return toolkit
        return None

    def toolkit_slugs(self) -> list[str]:
        return [toolkit.slug for toolkit in self.toolkits]

    def tools_for(self, slug: str) -> list[str]:
        tools: list[str] = []
        for tool in self.allowed_tools:
            owner = self._owner_of(tool)
            if owner is not None and owner.slug == slug:
                tools.append(tool)
        return tools


BILLING_TOOLKITS: tuple[Toolkit, ...] = (
    Toolkit(slug="gmail", label="Gmail"),
    Toolkit(slug="googlesheets", label="Google Sheets"),
    Toolkit(slug="googledrive", label="Google Drive"),
    Toolkit(slug="outlook", label="Outlook"),
    Toolkit(slug="xero", label="Xero"),
)

BILLING_ALLOWED_TOOLS: tuple[str, ...] = (
    "GMAIL_FETCH_EMAILS",
    "GMAIL_GET_ATTACHMENT",
    "GMAIL_SEND_EMAIL",
    "GOOGLESHEETS_BATCH_UPDATE",
    "GOOGLESHEETS_CREATE_GOOGLE_SHEET1",
    "GOOGLEDRIVE_DOWNLOAD_FILE",
    "GOOGLEDRIVE_UPLOAD_FILE",
    "OUTLOOK_SEARCH_MESSAGES",
    "OUTLOOK_GET_ATTACHMENT",
    "XERO_LIST_INVOICES",
    "XERO_CREATE_INVOICE",
)

DEFAULT_MANIFEST = CapabilityManifest(
    name=DEFAULT_SERVER_NAME,
    toolkits=BILLING_TOOLKITS,
    allowed_tools=BILLING_ALLOWED_TOOLS,
)
