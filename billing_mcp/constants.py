from typing import Final


API_KEY_ENV: Final[str] = "COMPOSIO_API_KEY"
BASE_URL_ENV: Final[str] = "COMPOSIO_BASE_URL"
TIMEOUT_ENV: Final[str] = "COMPOSIO_TIMEOUT"

DEFAULT_BASE_URL: Final[str] = "https://backend.composio.dev"

API_KEY_HEADER: Final[str] = "x-api-key"
API_KEY_PLACEHOLDER: Final[str] = "YOUR_COMPOSIO_API_KEY"

DEFAULT_SERVER_NAME: Final[str] = "billing-invoice-automation"
DEFAULT_SERVER_LABEL: Final[str] = "billing-agent"

FALLBACK_CONFIG_PATH: Final[str] = "mcp.json"
