"""Store-level exceptions and the API error renderer.

``ConstraintViolation`` and ``StoreError`` are raised by
``modules.core.db.translate_store_errors`` when the database rejects
a statement.  Domain modules subclass ``ConstraintViolation`` for
rule violations that the client caused (duplicate e-mail, unknown
category).  Views translate them to HTTP 400 / 500 respectively.
"""

from __future__ import annotations

from typing import Any, Optional

from rest_framework import exceptions as drf_exceptions
from rest_framework.response import Response
from rest_framework.views import exception_handler


class ConstraintViolation(Exception):
    """The store rejected a write due to a uniqueness, check or FK rule."""


class StoreError(Exception):
    """Any other persistence failure."""


def api_exception_handler(exc: Exception, context: dict[str, Any]) -> Optional[Response]:
    """Render DRF exceptions with the same ``{"error": ...}`` body as the views.

    Validation errors additionally carry the per-field messages under
    ``fields``.  Non-DRF exceptions are left to Django (HTTP 500).
    """
    response = exception_handler(exc, context)
    if response is None:
        return None

    if isinstance(exc, drf_exceptions.ValidationError):
        response.data = {"error": "Invalid request payload.", "fields": response.data}
    elif isinstance(response.data, dict) and "detail" in response.data:
        response.data = {"error": str(response.data["detail"])}
    else:
        response.data = {"error": str(response.data)}
    return response
