from __future__ import annotations

import logging
from typing import Protocol

from dashboard_client.auth import AuthService
from dashboard_client.models import Context, Credentials, Decision, OutcomeKind
from dashboard_client.outcomes import DEFAULT_CONTACT, classify, describe

logger = logging.getLogger(__name__)


class SessionView(Protocol):
    def navigate(self, view_id: str) -> None: ...

    def show_message(self, text: str) -> None: ...

    def clear_message(self) -> None: ...


class SessionDriver:
    def __init__(
        self,
        auth_service: AuthService,
        view: SessionView,
        support_contact: str = DEFAULT_CONTACT,
    ):
        self._auth_service = auth_service
        self._view = view
        self._support_contact = support_contact

    def submit_login(self, credentials: Credentials) -> Decision:
        result = self._auth_service.login(credentials)
        kind = classify(result)
        self._log_outcome(Context.LOGIN, kind, result.status_code, credentials.identifier)
        return self._apply(describe(kind, Context.LOGIN, self._support_contact))

    def submit_logout(self) -> Decision:
        result = self._auth_service.logout()
        kind = classify(result)
        self._log_outcome(Context.LOGOUT, kind, result.status_code)
        return self._apply(describe(kind, Context.LOGOUT, self._support_contact))

    def _apply(self, decision: Decision) -> Decision:
        self._view.clear_message()
        if decision.navigate_to is not None:
            self._view.navigate(decision.navigate_to)
        else:
            self._view.show_message(decision.message)
        return decision

    @staticmethod
    def _log_outcome(
        context: Context,
        kind: OutcomeKind,
        status_code: int | None,
        identifier: str | None = None,
    ) -> None:
        if identifier:
            logger.debug("%s attempt for %s: %s", context.value, identifier, kind.name)
        if kind is OutcomeKind.SUCCESS:
            logger.info("%s succeeded (HTTP %s)", context.value, status_code)
            return
        logger.warning(
            "%s failed: %s (HTTP %s)",
            context.value,
            kind.name,
            status_code if status_code is not None else "no response",
        )
