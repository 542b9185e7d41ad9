"""Product domain exceptions.

Raised by the Service Layer when business rules are violated.
The API layer (Views) catches these and translates them into
appropriate HTTP responses.
"""

from __future__ import annotations

from modules.core.exceptions import ConstraintViolation


class ProductNotFound(Exception):
    """The requested product does not exist."""


class CategoryNotFound(ConstraintViolation):
    """The category referenced by a new product does not exist."""
