from rich.console import Console
from rich.text import Text

from billing_mcp.generator import format_as_text
from billing_mcp.models import GeneratedEndpoint, ProvisionResult, RenderedConfigs
from billing_mcp.targets.catalog import target_metadata
from billing_mcp.tui.enums import UIStyle
from billing_mcp.tui.sections import UISection


class BillingConsoleUI:
    def __init__(
        self, console: Console | None = None, error_console: Console | None = None
    ) -> None:
        self.console = console or Console()
        self.error_console = error_console or Console(stderr=True)

    def render_setup_started(self) -> None:
        self.console.print("Setting up billing MCP server...", style=UIStyle.DIM.value)

    def render_setup_result(self, result: ProvisionResult) -> None:
        table = UISection.fields(
            [
                ("Server ID", result.server_id),
                ("Server Name", result.server_name),
                ("Toolkits", ", ".join(result.toolkits)),
            ]
        )
        self.console.print(
            UISection.wrap(
                "MCP server created", table, style=UIStyle.GREEN.value
            )
        )

        tools_text = "\n".join([f"- {tool}" for tool in result.allowed_tools])
        self.console.print(
            UISection.note(
                f"allowed tools ({len(result.allowed_tools)})",
                tools_text,
                style=UIStyle.CYAN.value,
            )
        )
        self.console.print(
            UISection.note(
                "next",
                "Generate a URL for a user.\n"
                f"- billing-mcp generate <userId> --server-id {result.server_id}",
                style=UIStyle.DIM.value,
            )
        )

    def render_generate_started(self, user_id: str) -> None:
        self.console.print(
            Text(f"Generating MCP URL for user: {user_id}", style=UIStyle.DIM.value)
        )

    def render_generate_result(
        self, endpoint: GeneratedEndpoint, configs: RenderedConfigs
    ) -> None:
        self.console.print("MCP URL generated successfully!", style=UIStyle.GREEN.value)
        self._print_heading("MCP URL:")
        self._print_raw(endpoint.url)

        for target, document in configs.items():
            metadata = target_metadata(target)
            self._print_heading(
                f"{metadata.label} Configuration ({metadata.config_path}):"
            )
            self._print_raw(format_as_text(document))

        self.console.print(
            UISection.note(
                "note",
                "Replace YOUR_COMPOSIO_API_KEY with your actual API key\n"
                "if the placeholder is shown in the configuration above.",
                style=UIStyle.DIM.value,
            )
        )

    def render_error(self, prefix: str, message: str) -> None:
        self.error_console.print(
            Text(f"{prefix}: {message}", style=UIStyle.RED.value), soft_wrap=True
        )

    def _print_heading(self, text: str) -> None:
        self.console.rule(style=UIStyle.BLUE.value)
        self.console.print(Text(text, style="bold"), soft_wrap=True)

    def _print_raw(self, text: str) -> None:
        self.console.print(text, markup=False, highlight=False, soft_wrap=True)
