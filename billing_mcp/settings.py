"""Runtime configuration read from the process environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import find_dotenv, load_dotenv

from billing_mcp.constants import API_KEY_ENV, BASE_URL_ENV, DEFAULT_BASE_URL, TIMEOUT_ENV
from billing_mcp.errors import MissingCredentialError


@dataclass(frozen=True)
class Settings:
    api_key: Optional[str] = None
    base_url: str = DEFAULT_BASE_URL
    timeout: Optional[float] = None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ
        base_url = (env.get(BASE_URL_ENV) or "").strip() or DEFAULT_BASE_URL
        return cls(
            api_key=env.get(API_KEY_ENV),
            base_url=base_url.rstrip("/"),
            timeout=_parse_timeout(env.get(TIMEOUT_ENV)),
        )


def _parse_timeout(raw: Optional[str]) -> Optional[float]:
    if raw is None or not raw.strip():
        return None
    try:
        value = float(raw)
    except ValueError:
        raise ValueError(f"{TIMEOUT_ENV} must be a number of seconds, got: {raw!r}")
    if value <= 0:
        raise ValueError(f"{TIMEOUT_ENV} must be positive, got: {raw!r}")
    return value


def load_env_file() -> None:
    """Load a ``.env`` file from the working directory, keeping existing vars."""
    dotenv_path = find_dotenv(filename=".env", usecwd=True)
    if dotenv_path:
        load_dotenv(dotenv_path=dotenv_path, override=False)


def require_api_key(value: Optional[str]) -> str:
    if value is None:
        raise MissingCredentialError(
            "credential",
            f"{API_KEY_ENV} environment variable is required. "
            "Please set it before running this command.",
        )
    if not value.strip():
        raise MissingCredentialError(
            "credential", f"{API_KEY_ENV} environment variable cannot be empty."
        )
    return value
