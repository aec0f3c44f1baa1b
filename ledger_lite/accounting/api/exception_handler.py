# accounting/api/exception_handler.py

"""
PATH: accounting/api/exception_handler.py

STANDARD ERROR ENVELOPE (DRF EXCEPTION_HANDLER)

Every API failure is rendered as:
    {timestamp, status, error, message, path}

Mapping:
- LedgerError        -> status chosen by error.kind (never by class)
- ParseError         -> MalformedInputError (kind MALFORMED, 400)
- ValidationError    -> 400, first field error only
- Http404 / NotFound -> 404
- other APIException -> its own status code
Anything else is left to Django (500).
"""

from __future__ import annotations

import logging
from http import HTTPStatus

from django.http import Http404
from django.utils import timezone
from rest_framework import exceptions, status
from rest_framework.response import Response
from rest_framework.settings import api_settings

from accounting.services.exceptions import ErrorKind, LedgerError, MalformedInputError

logger = logging.getLogger(__name__)

STATUS_BY_KIND = {
    ErrorKind.VALIDATION: status.HTTP_400_BAD_REQUEST,
    ErrorKind.MALFORMED: status.HTTP_400_BAD_REQUEST,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.CONFLICT: status.HTTP_409_CONFLICT,
}

MSG_PARSE_FAILED = "Invalid request body (JSON parse failed)"
MSG_VALIDATION = "Validation error"


def _join(prefix: str, key) -> str:
    # list errors arrive either as lists or as dicts keyed by index
    if isinstance(key, int) or (isinstance(key, str) and key.isdigit()):
        return f"{prefix}[{key}]"
    return f"{prefix}.{key}" if prefix else str(key)


def _first_error(detail, prefix: str = "") -> str | None:
    if isinstance(detail, dict):
        for key, value in detail.items():
            if key == api_settings.NON_FIELD_ERRORS_KEY:
                label = prefix
            else:
                label = _join(prefix, key)
            found = _first_error(value, label)
            if found:
                return found
        return None

    if isinstance(detail, list):
        for index, value in enumerate(detail):
            label = f"{prefix}[{index}]" if isinstance(value, dict) else prefix
            found = _first_error(value, label)
            if found:
                return found
        return None

    message = str(detail)
    return f"{prefix}: {message}" if prefix else message


def build_error_body(*, status_code: int, message: str, path: str) -> dict:
    return {
        "timestamp": timezone.localtime().isoformat(),
        "status": status_code,
        "error": HTTPStatus(status_code).phrase,
        "message": message,
        "path": path,
    }


def _as_ledger_error(exc):
    if isinstance(exc, exceptions.ParseError):
        return MalformedInputError(MSG_PARSE_FAILED)
    return exc


def _classify(exc) -> tuple[int, str] | None:
    if isinstance(exc, LedgerError):
        return STATUS_BY_KIND[exc.kind], exc.message

    if isinstance(exc, exceptions.ValidationError):
        return status.HTTP_400_BAD_REQUEST, _first_error(exc.detail) or MSG_VALIDATION

    if isinstance(exc, Http404):
        return status.HTTP_404_NOT_FOUND, str(exc) or "Not found."

    if isinstance(exc, exceptions.APIException):
        return exc.status_code, _first_error(exc.detail) or str(exc)

    return None


def ledger_exception_handler(exc, context):
    exc = _as_ledger_error(exc)
    classified = _classify(exc)
    if classified is None:
        return None

    status_code, message = classified
    request = context.get("request")
    path = request.path if request is not None else ""

    logger.warning(
        "API request failed",
        extra={
            "status": status_code,
            "kind": getattr(getattr(exc, "kind", None), "value", type(exc).__name__),
            "path": path,
        },
    )

    response = Response(
        build_error_body(status_code=status_code, message=message, path=path),
        status=status_code,
    )

    # Keep DRF's auth/throttle headers (WWW-Authenticate, Retry-After)
    if isinstance(exc, exceptions.APIException):
        if getattr(exc, "auth_header", None):
            response["WWW-Authenticate"] = exc.auth_header
        if getattr(exc, "wait", None):
            response["Retry-After"] = "%d" % exc.wait

    return response
