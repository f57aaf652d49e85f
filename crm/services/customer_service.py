"""Customer service — use-case orchestration for customers.

Every method delegates to a single repository call. Errors are re-raised
with a context prefix via ``AppError.wrap`` so their class survives.
"""

import logging

from crm.domain.exceptions import AppError
from crm.repositories.customer_repository import CustomerRepository

logger = logging.getLogger(__name__)


class CustomerService:
    """Manages customer CRUD operations.

    Args:
        repository: Any ``CustomerRepository`` implementation.
    """

    def __init__(self, repository: CustomerRepository):
        self._repo = repository

    def get_customers(self) -> list[dict]:
        """Return all customers ordered by id."""
        try:
            customers = self._repo.find_all_customers()
        except AppError as err:
            raise err.wrap("could not list customers") from err
        return [c.to_dict() for c in customers]

    def get_customer_by_id(self, customer_id: int) -> dict:
        try:
            customer = self._repo.find_customer_by_id(customer_id)
        except AppError as err:
            raise err.wrap("no customer found with this id") from err
        return customer.to_dict()

    def get_customer_by_email(self, email: str) -> dict:
        try:
            customer = self._repo.find_customer_by_email(email)
        except AppError as err:
            raise err.wrap("no customer found with this email") from err
        return customer.to_dict()

    def create_customer(self, name: str, email: str, password: str) -> dict:
        """Create a new customer and return their dict representation."""
        try:
            customer = self._repo.create_new_customer(name, email, password)
            self._repo.commit()
        except AppError as err:
            raise err.wrap("no customer created") from err
        logger.info("Created customer id=%s", customer.id)
        return customer.to_dict()

    def update_customer(
        self, customer_id: int, name: str, email: str, password: str,
    ) -> dict:
        """Replace a customer's name, email and password."""
        try:
            customer = self._repo.update_existing_customer(customer_id, name, email, password)
            self._repo.commit()
        except AppError as err:
            raise err.wrap("no information has changed") from err
        logger.info("Updated customer id=%s", customer_id)
        return customer.to_dict()

    def delete_customer_by_email(self, email: str) -> None:
        try:
            self._repo.delete_customer_by_email(email)
            self._repo.commit()
        except AppError as err:
            raise err.wrap("no customer deleted") from err
        logger.info("Deleted customer email=%s", email)
