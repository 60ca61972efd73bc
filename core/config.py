from __future__ import annotations
import os
from dataclasses import dataclass

DEFAULT_BASE_URL = "https://api.rogerroger.io"
DEFAULT_TIMEOUT_S = 30.0


def env(key: str, default: str | None = None) -> str | None:
    v = os.getenv(key)
    if v is None or v.strip() == "":
        return default
    return v.strip()


@dataclass(frozen=True)
class Settings:
    api_key: str = ""
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT_S
    service_name: str = "rogerroger-mcp"
    version: str = "1.0.0"

    @classmethod
    def from_env(cls) -> "Settings":
        # Missing API key is not fatal here; tools fail when they hit the network.
        return cls(
            api_key=env("ROGERROGER_API_KEY", "") or "",
            base_url=(env("ROGERROGER_BASE_URL", DEFAULT_BASE_URL) or DEFAULT_BASE_URL).rstrip("/"),
            timeout=float(env("ROGERROGER_TIMEOUT", str(DEFAULT_TIMEOUT_S))),
            service_name=env("SERVICE_NAME", "rogerroger-mcp"),
            version=env("VERSION", "1.0.0"),
        )


LOG_LEVEL = env("LOG_LEVEL", "INFO")
