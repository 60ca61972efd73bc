from __future__ import annotations
from typing import Optional


class RogerRogerError(Exception):
    """Base for every failure that ends up as an "Error: ..." envelope."""


class ConfigError(RogerRogerError):
    pass


class InvocationError(RogerRogerError):
    pass


class TransportError(RogerRogerError):
    pass


class DecodeError(RogerRogerError):
    pass


class ApiError(RogerRogerError):
    def __init__(self, status: int, body: str) -> None:
        super().__init__(f"HTTP {status}: {body}")
        self.status = status
        self.body = body


class CatalogError(Exception):
    """Tool catalog and handler table disagree. Raised at load time only."""

    def __init__(self, message: str, names: Optional[list[str]] = None) -> None:
        super().__init__(message)
        self.names = names or []
