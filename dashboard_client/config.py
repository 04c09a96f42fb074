from __future__ import annotations

from dataclasses import dataclass
import logging
import os
from pathlib import Path

from dotenv import load_dotenv


class ConfigurationError(ValueError):
    pass


_FALSE_VALUES = {"0", "false", "no", "off"}
_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


@dataclass(frozen=True)
class AppSettings:
    base_url: str
    login_path: str
    logout_path: str
    csrf_header: str
    csrf_token: str
    timeout_seconds: int
    verify_tls: bool
    support_contact: str
    log_level: str

    @staticmethod
    def from_env() -> "AppSettings":
        _load_env_files()

        base_url = os.getenv("DASHBOARD_BASE_URL", "https://localhost:8080/api").strip().rstrip("/")
        login_path = os.getenv("DASHBOARD_LOGIN_PATH", "/login").strip()
        logout_path = os.getenv("DASHBOARD_LOGOUT_PATH", "/logout").strip()

        csrf_header = os.getenv("DASHBOARD_CSRF_HEADER", "CSRF").strip()
        csrf_token = os.getenv("DASHBOARD_CSRF_TOKEN", "").strip()

        raw_timeout = os.getenv("DASHBOARD_TIMEOUT_SECONDS", "30").strip()
        try:
            timeout_seconds = int(raw_timeout)
        except ValueError:
            raise ConfigurationError(
                f"DASHBOARD_TIMEOUT_SECONDS must be an integer, got {raw_timeout!r}"
            ) from None

        verify_tls = os.getenv("DASHBOARD_VERIFY_TLS", "true").strip().lower() not in _FALSE_VALUES
        support_contact = os.getenv("DASHBOARD_SUPPORT_CONTACT", "[somebody]").strip()
        log_level = os.getenv("DASHBOARD_LOG_LEVEL", "INFO").strip().upper()

        settings = AppSettings(
            base_url=base_url,
            login_path=login_path,
            logout_path=logout_path,
            csrf_header=csrf_header,
            csrf_token=csrf_token,
            timeout_seconds=timeout_seconds,
            verify_tls=verify_tls,
            support_contact=support_contact,
            log_level=log_level,
        )
        settings.validate()
        return settings

    def validate(self) -> None:
        if not self.base_url.startswith(("http://", "https://")):
            raise ConfigurationError("DASHBOARD_BASE_URL must start with http:// or https://")

        path_fields = {
            "DASHBOARD_LOGIN_PATH": self.login_path,
            "DASHBOARD_LOGOUT_PATH": self.logout_path,
        }
        invalid_paths = [name for name, value in path_fields.items() if not value.startswith("/")]
        if invalid_paths:
            raise ConfigurationError(
                "Endpoint paths must start with '/': " + ", ".join(invalid_paths)
            )

        if self.timeout_seconds <= 0:
            raise ConfigurationError("DASHBOARD_TIMEOUT_SECONDS must be greater than 0")

        if not self.csrf_header:
            raise ConfigurationError("DASHBOARD_CSRF_HEADER must not be empty")

        if not self.support_contact:
            raise ConfigurationError("DASHBOARD_SUPPORT_CONTACT must not be empty")

        if self.log_level not in _LOG_LEVELS:
            raise ConfigurationError(
                "DASHBOARD_LOG_LEVEL must be one of: " + ", ".join(sorted(_LOG_LEVELS))
            )

        if not self.verify_tls:
            logging.getLogger(__name__).warning("TLS certificate verification is disabled")


def _load_env_files() -> None:
    for env_file in _env_file_candidates():
        if env_file.is_file():
            load_dotenv(env_file, override=False)


def _env_file_candidates() -> list[Path]:
    # Earlier files win since loading never overrides.
    candidates = [Path.cwd() / ".env", Path(__file__).resolve().parent.parent / ".env"]
    explicit = os.getenv("DASHBOARD_ENV_FILE", "").strip()
    if explicit:
        candidates.insert(0, Path(explicit).expanduser())
    return list(dict.fromkeys(path.resolve() for path in candidates))
