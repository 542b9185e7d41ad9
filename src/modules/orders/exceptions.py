"""Order domain exceptions.

Raised by the Service Layer when business rules are violated.
The API layer (Views) catches these and translates them into
appropriate HTTP responses.
"""

from __future__ import annotations


class OrderNotFound(Exception):
    """The requested order does not exist."""


class InsufficientStock(Exception):
    """Not enough stock to fulfil the order."""


class ProductNotFound(Exception):
    """The product referenced by the order does not exist."""
