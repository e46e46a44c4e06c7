from billing_mcp.tui.renderers import BillingConsoleUI

__all__ = ["BillingConsoleUI"]
