"""Customer domain exceptions.

Raised by the Service Layer when business rules are violated.
The API layer (Views) catches these and translates them into
appropriate HTTP responses.
"""

from __future__ import annotations

from modules.core.exceptions import ConstraintViolation


class CustomerAlreadyExists(ConstraintViolation):
    """A customer with the same e-mail already exists."""


class CustomerNotFound(Exception):
    """The requested customer does not exist."""
