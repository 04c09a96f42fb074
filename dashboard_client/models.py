from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

LOGIN_VIEW = "/login"
DASHBOARD_VIEW = "/dashboard"


class OutcomeKind(Enum):
    SUCCESS = "success"
    INVALID_CREDENTIALS = "invalid_credentials"
    SERVER_ERROR = "server"
    NETWORK_ERROR = "network"


class Context(str, Enum):
    LOGIN = "login"
    LOGOUT = "logout"


@dataclass(frozen=True)
class Credentials:
    identifier: str
    secret: str = field(repr=False)


@dataclass(frozen=True)
class TransportResult:
    ok: bool
    status_code: int | None = None
    reason: str = ""

    def __post_init__(self):
        if self.status_code is not None and self.ok != _is_success_status(self.status_code):
            raise ValueError(
                f"ok={self.ok} contradicts HTTP status {self.status_code}"
            )

    @staticmethod
    def from_status(status_code: int, reason: str = "") -> "TransportResult":
        return TransportResult(
            ok=_is_success_status(status_code),
            status_code=status_code,
            reason=reason,
        )

    @staticmethod
    def no_response(reason: str = "") -> "TransportResult":
        return TransportResult(ok=False, status_code=None, reason=reason)

    @property
    def received_response(self) -> bool:
        return self.status_code is not None


def _is_success_status(status_code: int) -> bool:
    return 200 <= status_code < 300


@dataclass(frozen=True)
class Decision:
    navigate_to: str | None
    message: str = ""
