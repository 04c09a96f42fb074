from __future__ import annotations

from typing import Callable, Optional

from dashboard_client.config import AppSettings
from dashboard_client.http import HttpClient
from dashboard_client.models import Credentials, TransportResult

TokenProvider = Callable[[], Optional[str]]


class StaticTokenProvider:
    def __init__(self, token: str | None):
        self._token = (token or "").strip() or None

    def __call__(self) -> str | None:
        return self._token


class AuthService:
    """Client for the remote login and logout endpoints.

    Both calls report their outcome as a TransportResult instead of raising,
    so every HTTP status and transport failure reaches the classifier.
    """

    def __init__(
        self,
        settings: AppSettings,
        http_client: HttpClient,
        token_provider: TokenProvider,
    ):
        self._settings = settings
        self._http_client = http_client
        self._token_provider = token_provider

    def login(self, credentials: Credentials) -> TransportResult:
        return self._http_client.post(
            self._settings.login_path,
            headers=self._build_headers(),
            # requests encodes str credentials as Latin-1.
            auth=(credentials.identifier.encode("utf-8"), credentials.secret.encode("utf-8")),
        )

    def logout(self) -> TransportResult:
        return self._http_client.post(
            self._settings.logout_path,
            headers=self._build_headers(),
        )

    def _build_headers(self) -> dict[str, str]:
        token = self._token_provider()
        if not token:
            return {}
        return {self._settings.csrf_header: token}
