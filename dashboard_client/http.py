from __future__ import annotations

import logging
from typing import Any

import requests

from dashboard_client.config import AppSettings
from dashboard_client.models import TransportResult

logger = logging.getLogger(__name__)


class HttpClient:
    def __init__(self, settings: AppSettings, session: requests.Session | None = None):
        self._settings = settings
        self._session = session or requests.Session()
        self._session.headers.update(
            {
                "Accept": "application/json",
            }
        )

    def post(
        self,
        path: str,
        headers: dict[str, str] | None = None,
        auth: tuple[bytes, bytes] | None = None,
    ) -> TransportResult:
        url = f"{self._settings.base_url}{path}"
        request_kwargs: dict[str, Any] = {
            "headers": headers or {},
            "timeout": self._settings.timeout_seconds,
            "verify": self._settings.verify_tls,
        }
        if auth is not None:
            request_kwargs["auth"] = auth

        try:
            response = self._session.post(url, **request_kwargs)
        except requests.RequestException as exc:
            logger.warning("POST %s got no response: %s", url, type(exc).__name__)
            return TransportResult.no_response(f"{type(exc).__name__}: {exc}")

        logger.debug("POST %s -> HTTP %s", url, response.status_code)
        return TransportResult.from_status(
            response.status_code,
            reason=response.text[:500] if not response.ok else "",
        )
