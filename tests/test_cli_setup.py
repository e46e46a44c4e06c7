"""Tests for the setup command."""

from billing_mcp.__main__ import cli
from billing_mcp.errors import PlatformError


def test_setup_prints_created_server(cli_runner, cli_stub) -> None:
    result = cli_runner.invoke(cli, ["setup"], env={"COMPOSIO_API_KEY": "k1"})

    assert result.exit_code == 0, result.output
    assert "srv-1" in result.output
    assert "billing-invoice-automation" in result.output
    assert "gmail, googlesheets, googledrive, outlook, xero" in result.output
    assert "allowed tools (11)" in result.output
    assert "XERO_CREATE_INVOICE" in result.output
    assert cli_stub.factory_calls[0][0] == "k1"
    assert cli_stub.calls[0][1][0] == "billing-invoice-automation"


def test_setup_custom_name(cli_runner, cli_stub) -> None:
    result = cli_runner.invoke(
        cli, ["setup", "--name", "acme-billing"], env={"COMPOSIO_API_KEY": "k1"}
    )

    assert result.exit_code == 0, result.output
    assert cli_stub.calls[0][1][0] == "acme-billing"


def test_setup_short_name_flag(cli_runner, cli_stub) -> None:
    result = cli_runner.invoke(cli, ["setup", "-n", "short"], env={"COMPOSIO_API_KEY": "k1"})

    assert result.exit_code == 0, result.output
    assert cli_stub.calls[0][1][0] == "short"


def test_setup_without_api_key_fails(cli_runner, cli_stub) -> None:
    result = cli_runner.invoke(cli, ["setup"])

    assert result.exit_code == 1
    assert "API Key Error" in result.output
    assert cli_stub.calls == []


def test_setup_blank_api_key_fails(cli_runner, cli_stub) -> None:
    result = cli_runner.invoke(cli, ["setup"], env={"COMPOSIO_API_KEY": "   "})

    assert result.exit_code == 1
    assert "cannot be empty" in result.output
    assert cli_stub.calls == []


def test_setup_name_conflict(cli_runner, cli_stub) -> None:
    cli_stub.error = PlatformError("Server billing already exists")

    result = cli_runner.invoke(cli, ["setup"], env={"COMPOSIO_API_KEY": "k1"})

    assert result.exit_code == 1
    assert "Server Error" in result.output
    assert "already exists" in result.output


def test_setup_unauthorized(cli_runner, cli_stub) -> None:
    cli_stub.error = PlatformError("HTTP 401: Unauthorized", status=401)

    result = cli_runner.invoke(cli, ["setup"], env={"COMPOSIO_API_KEY": "bad"})

    assert result.exit_code == 1
    assert "API Key Error" in result.output
    assert "Invalid Composio API key" in result.output


def test_setup_unexpected_failure(cli_runner, cli_stub) -> None:
    cli_stub.error = PlatformError("HTTP 500: boom", status=500)

    result = cli_runner.invoke(cli, ["setup"], env={"COMPOSIO_API_KEY": "k1"})

    assert result.exit_code == 1
    assert "Server Error" in result.output
    assert "Failed to create MCP server" in result.output


def test_setup_invalid_timeout_is_unexpected_error(cli_runner, cli_stub) -> None:
    result = cli_runner.invoke(
        cli, ["setup"], env={"COMPOSIO_API_KEY": "k1", "COMPOSIO_TIMEOUT": "later"}
    )

    assert result.exit_code == 1
    assert "Unexpected error" in result.output


def test_setup_blank_name_fails_before_any_call(cli_runner, cli_stub) -> None:
    result = cli_runner.invoke(cli, ["setup", "--name", " "], env={"COMPOSIO_API_KEY": "k1"})

    assert result.exit_code == 1
    assert "Server name is required" in result.output
    assert cli_stub.calls == []
