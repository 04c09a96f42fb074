from __future__ import annotations

import pytest

from dashboard_client.config import AppSettings


class RecordingView:
    def __init__(self):
        self.calls: list[tuple[str, str | None]] = []

    def navigate(self, view_id: str) -> None:
        self.calls.append(("navigate", view_id))

    def show_message(self, text: str) -> None:
        self.calls.append(("show_message", text))

    def clear_message(self) -> None:
        self.calls.append(("clear_message", None))


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(
        base_url="https://localhost:8080/api",
        login_path="/login",
        logout_path="/logout",
        csrf_header="CSRF",
        csrf_token="csrf-abc",
        timeout_seconds=5,
        verify_tls=True,
        support_contact="[somebody]",
        log_level="INFO",
    )


@pytest.fixture
def view() -> RecordingView:
    return RecordingView()


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    for name in (
        "DASHBOARD_BASE_URL",
        "DASHBOARD_LOGIN_PATH",
        "DASHBOARD_LOGOUT_PATH",
        "DASHBOARD_CSRF_HEADER",
        "DASHBOARD_CSRF_TOKEN",
        "DASHBOARD_TIMEOUT_SECONDS",
        "DASHBOARD_VERIFY_TLS",
        "DASHBOARD_SUPPORT_CONTACT",
        "DASHBOARD_LOG_LEVEL",
        "DASHBOARD_ENV_FILE",
    ):
        # setenv first so teardown also removes values loaded from .env files.
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    # Only the temporary working directory is searched for .env files.
    monkeypatch.setattr(
        "dashboard_client.config._env_file_candidates",
        lambda: [tmp_path / ".env"],
    )
    return tmp_path
