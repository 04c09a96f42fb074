from __future__ import annotations

from http import HTTPStatus

from dashboard_client.models import (
    DASHBOARD_VIEW,
    LOGIN_VIEW,
    Context,
    Decision,
    OutcomeKind,
    TransportResult,
)

DEFAULT_CONTACT = "[somebody]"
INVALID_CREDENTIALS_MESSAGE = "Invalid email/password."
UNEXPECTED_ERROR_TEMPLATE = "Unexpected {kind} error. Please contact {contact} for assistance."

_SUCCESS_ROUTES = {
    Context.LOGIN: DASHBOARD_VIEW,
    Context.LOGOUT: LOGIN_VIEW,
}


def classify(result: TransportResult) -> OutcomeKind:
    if result.ok:
        return OutcomeKind.SUCCESS
    if result.status_code == HTTPStatus.UNAUTHORIZED:
        return OutcomeKind.INVALID_CREDENTIALS
    if result.received_response:
        return OutcomeKind.SERVER_ERROR
    return OutcomeKind.NETWORK_ERROR


def describe(
    kind: OutcomeKind,
    context: Context | str,
    contact: str = DEFAULT_CONTACT,
) -> Decision:
    context = _coerce_context(context)

    if kind is OutcomeKind.SUCCESS:
        return Decision(navigate_to=_SUCCESS_ROUTES[context])

    if kind is OutcomeKind.INVALID_CREDENTIALS:
        # An expired session on logout ends up where a clean logout would.
        if context is Context.LOGOUT:
            return Decision(navigate_to=LOGIN_VIEW)
        return Decision(navigate_to=None, message=INVALID_CREDENTIALS_MESSAGE)

    if kind in (OutcomeKind.SERVER_ERROR, OutcomeKind.NETWORK_ERROR):
        return Decision(
            navigate_to=None,
            message=UNEXPECTED_ERROR_TEMPLATE.format(kind=kind.value, contact=contact),
        )

    raise ValueError(f"Unknown outcome kind: {kind!r}")


def decide(result: TransportResult, context: Context | str, contact: str = DEFAULT_CONTACT) -> Decision:
    return describe(classify(result), context, contact)


def _coerce_context(context: Context | str) -> Context:
    try:
        return Context(context)
    except ValueError:
        valid = ", ".join(member.value for member in Context)
        raise ValueError(f"Context must be one of: {valid}") from None
