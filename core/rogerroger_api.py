from __future__ import annotations
import logging
from typing import Any, Dict

import requests

from core.config import Settings
from core.errors import ApiError, ConfigError, DecodeError, TransportError
from core.models import RequestSpec

logger = logging.getLogger(__name__)


class RogerRogerAPI:
    def __init__(self, settings: Settings) -> None:
        self.settings = settings
        self.base = settings.base_url

    @property
    def headers(self) -> Dict[str, str]:
        return {
            "X-API-KEY": self.settings.api_key,
            "Content-Type": "application/json",
            "User-Agent": self.settings.service_name,
        }

    def _req(self, spec: RequestSpec) -> requests.Response:
        if not self.settings.api_key:
            raise ConfigError("ROGERROGER_API_KEY environment variable is required")

        url = spec.url(self.base)
        body = spec.json_body()
        logger.debug("%s %s", spec.method, url)
        try:
            r = requests.request(
                spec.method,
                url,
                headers=self.headers,
                data=body.encode("utf-8") if body is not None else None,
                timeout=self.settings.timeout,
            )
        except requests.RequestException as e:
            raise TransportError(str(e)) from e

        if not 200 <= r.status_code < 300:
            raise ApiError(r.status_code, r.text)
        return r

    def execute(self, spec: RequestSpec, parse: bool = True) -> Any:
        """Run one request. Returns the decoded JSON payload, or None when parse is off."""
        r = self._req(spec)
        if not parse:
            return None
        try:
            return r.json()
        except ValueError as e:
            raise DecodeError(str(e)) from e
