from billing_mcp.targets.catalog import (
    TARGET_CATALOG,
    ClientTarget,
    TargetMetadata,
    config_path_for,
    target_metadata,
)

__all__ = [
    "TARGET_CATALOG",
    "ClientTarget",
    "TargetMetadata",
    "config_path_for",
    "target_metadata",
]
