"""Translation of database driver errors into store exceptions."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

import structlog
from django.db import DatabaseError, IntegrityError

from modules.core.exceptions import ConstraintViolation, StoreError

logger = structlog.get_logger(__name__)


@contextmanager
def translate_store_errors() -> Iterator[None]:
    """Re-raise ``IntegrityError`` / ``DatabaseError`` as store exceptions.

    Usable as a decorator.  Apply it *outside* ``transaction.atomic`` so
    the transaction has already been rolled back when the translated
    exception reaches the caller.
    """
    try:
        yield
    except IntegrityError as exc:
        logger.warning("store.constraint_violation", error=str(exc))
        raise ConstraintViolation(str(exc)) from exc
    except DatabaseError as exc:
        logger.error("store.error", error=str(exc))
        raise StoreError(str(exc)) from exc
