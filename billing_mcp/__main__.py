import logging
from typing import NoReturn

import click
from rich.console import Console
from rich.logging import RichHandler

from billing_mcp import __version__
from billing_mcp.constants import DEFAULT_SERVER_LABEL, DEFAULT_SERVER_NAME
from billing_mcp.errors import UNEXPECTED_ERROR_PREFIX, BillingMCPError, error_prefix
from billing_mcp.generator import generate_with_configs
from billing_mcp.models import ProvisionRequest, UrlRequest
from billing_mcp.platform import client_factory
from billing_mcp.provisioner import provision
from billing_mcp.settings import Settings, load_env_file, require_api_key
from billing_mcp.tui import BillingConsoleUI

logger = logging.getLogger("billing_mcp")


def _configure_logging(verbose: bool) -> None:
    handler = RichHandler(console=Console(stderr=True), show_path=False)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.handlers[:] = [handler]
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.propagate = False


def _fail(ui: BillingConsoleUI, exc: Exception) -> NoReturn:
    if isinstance(exc, BillingMCPError):
        ui.render_error(error_prefix(exc.kind), exc.message)
    else:
        logger.debug("unexpected failure", exc_info=exc)
        ui.render_error(UNEXPECTED_ERROR_PREFIX, str(exc) or type(exc).__name__)
    raise click.exceptions.Exit(1)


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(__version__, prog_name="billing-mcp")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """Create and configure a Composio MCP server for billing automation."""
    _configure_logging(verbose)


@cli.command(help="Create and configure the MCP server with billing toolkits.")
@click.option(
    "-n",
    "--name",
    "server_name",
    default=DEFAULT_SERVER_NAME,
    show_default=True,
    help="Custom server name.",
)
def setup(server_name: str) -> None:
    ui = BillingConsoleUI()
    ui.render_setup_started()
    try:
        settings = Settings.from_env()
        api_key = require_api_key(settings.api_key)
        result = provision(
            ProvisionRequest(credential=api_key, server_name=server_name),
            client=client_factory(api_key, settings),
        )
    except Exception as exc:
        _fail(ui, exc)
    ui.render_setup_result(result)


@cli.command(help="Generate MCP URL and IDE configuration for a user.")
@click.argument("user_id", metavar="USER_ID")
@click.option(
    "-s",
    "--server-id",
    required=True,
    help="MCP server ID (from the setup command).",
)
@click.option(
    "-l",
    "--label",
    default=DEFAULT_SERVER_LABEL,
    show_default=True,
    help="Server label for IDE configs.",
)
def generate(user_id: str, server_id: str, label: str) -> None:
    ui = BillingConsoleUI()
    ui.render_generate_started(user_id)
    try:
        settings = Settings.from_env()
        api_key = require_api_key(settings.api_key)
        endpoint, configs = generate_with_configs(
            UrlRequest(credential=api_key, server_id=server_id, user_id=user_id),
            label=label,
            client=client_factory(api_key, settings),
        )
    except Exception as exc:
        _fail(ui, exc)
    ui.render_generate_result(endpoint, configs)


def main() -> int:
    load_env_file()
    try:
        code = cli(standalone_mode=False)
    except click.exceptions.Exit as exc:
        code = exc.exit_code
        return code if isinstance(code, int) else 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.exceptions.Abort:
        return 1
    return code if isinstance(code, int) else 0


if __name__ == "__main__":
    raise SystemExit(main())
