"""Customer service layer (Use Cases).

Orchestrates business logic for the Customer aggregate, delegating
persistence to the injected ``ICustomerRepository``.

Business rules enforced here:
- E-mail must be unique (checked up front, backed by the DB index).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog
from django.db import IntegrityError, transaction

from modules.core.db import translate_store_errors
from modules.customers.exceptions import CustomerAlreadyExists, CustomerNotFound
from modules.customers.models import Customer

if TYPE_CHECKING:
    from modules.customers.dtos import CreateCustomerDTO
    from modules.customers.repositories.interfaces import ICustomerRepository

logger = structlog.get_logger(__name__)


class CustomerService:
    """Application service for Customer use-cases.

    Receives an ``ICustomerRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: ICustomerRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @translate_store_errors()
    def create_customer(self, dto: CreateCustomerDTO) -> Customer:
        """Create a new customer after enforcing e-mail uniqueness.

        A concurrent insert of the same address can pass the pre-check;
        the unique index then rejects it and the ``IntegrityError`` is
        reported as the same ``CustomerAlreadyExists``.

        Raises:
            CustomerAlreadyExists: if the e-mail is already taken.
        """
        log = logger.bind(email=dto.email)

        if self._repo.get_by_email(dto.email):
            log.warning("customer.duplicate_email")
            raise CustomerAlreadyExists("Email already registered.")

        customer = Customer(name=dto.name, email=dto.email)
        try:
            with transaction.atomic():
                customer = self._repo.save(customer)
        except IntegrityError as exc:
            log.warning("customer.duplicate_email", error=str(exc))
            raise CustomerAlreadyExists("Email already registered.") from exc

        log.info("customer.created", customer_id=str(customer.id))
        return customer

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_customer(self, id: str) -> Customer:
        """Retrieve a single customer by ID.

        Raises:
            CustomerNotFound: if the customer does not exist.
        """
        customer = self._repo.get_by_id(id)
        if not customer:
            raise CustomerNotFound(f"Customer {id} not found.")
        logger.info("customer.retrieved", customer_id=str(id))
        return customer
