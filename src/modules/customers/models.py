"""Customer model.

Business rules implemented:
- E-mail must be unique in the system (DB unique index).
- Customers referenced by orders cannot be deleted (``PROTECT`` on
  ``Order.customer``); deletion is an administrative action only.
- E-mail is masked in ``__str__`` so admin/log output does not leak it.
"""

from __future__ import annotations

import structlog
from django.db import models

from modules.core.models import BaseModel

logger = structlog.get_logger(__name__)


class Customer(BaseModel):
    """Customer aggregate root.

    ``email`` is normalised (trimmed, lower-cased) on save so the unique
    index also catches case variants of an existing address.
    """

    name = models.CharField(max_length=255)
    email = models.EmailField(max_length=254, unique=True)

    class Meta:
        db_table = "customers"
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["-created_at"], name="customers_created_idx"),
        ]

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def save(self, *args, **kwargs) -> None:
        if self.email:
            self.email = self.email.strip().lower()
        super().save(*args, **kwargs)

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------

    @property
    def masked_email(self) -> str:
        local, _, domain = (self.email or "").partition("@")
        if not domain:
            return "***"
        return f"{local[:1]}***@{domain}"

    def __str__(self) -> str:
        return f"{self.name} ({self.masked_email})"
