"""Customer repository.

Consumers depend on the abstract ``CustomerRepository`` contract;
``new_customer_repository`` hands out the SQL-backed implementation.
"""

import abc
import logging

from sqlalchemy.exc import NoResultFound, SQLAlchemyError

from crm.domain.exceptions import CustomerNotFoundError, StorageError
from crm.domain.models import Customer
from crm.repositories.base import BaseRepository
from crm.repositories.queries import CustomerQueries

logger = logging.getLogger(__name__)


class CustomerRepository(abc.ABC):
    """Data access contract for customer records."""

    @abc.abstractmethod
    def find_all_customers(self) -> list[Customer]:
        """Return every customer ordered by ascending id."""

    @abc.abstractmethod
    def find_customer_by_id(self, customer_id: int) -> Customer:
        """Return the customer with ``customer_id`` or raise not-found."""

    @abc.abstractmethod
    def find_customer_by_email(self, email: str) -> Customer:
        """Return the customer with ``email`` or raise not-found."""

    @abc.abstractmethod
    def create_new_customer(self, name: str, email: str, password: str) -> Customer:
        """Insert a customer and return it with its generated id."""

    @abc.abstractmethod
    def update_existing_customer(
        self, customer_id: int, name: str, email: str, password: str,
    ) -> Customer:
        """Replace all mutable fields of an existing customer."""

    @abc.abstractmethod
    def delete_customer_by_email(self, email: str) -> None:
        """Remove the customer with ``email`` or raise not-found."""

    @abc.abstractmethod
    def commit(self) -> None:
        """Commit pending writes."""


class SqlCustomerRepository(BaseRepository, CustomerRepository):
    """``CustomerRepository`` backed by the SQL query facade."""

    def __init__(self, queries: CustomerQueries):
        super().__init__(queries.session)
        self._queries = queries

    def find_all_customers(self) -> list[Customer]:
        try:
            return self._queries.list_customers()
        except SQLAlchemyError as err:
            raise self._storage_error("list customers", err) from err

    def find_customer_by_id(self, customer_id: int) -> Customer:
        try:
            return self._queries.get_customer_by_id(customer_id)
        except NoResultFound as err:
            raise CustomerNotFoundError(f"id={customer_id}") from err
        except SQLAlchemyError as err:
            raise self._storage_error("get customer by id", err) from err

    def find_customer_by_email(self, email: str) -> Customer:
        try:
            return self._queries.get_customer_by_email(email)
        except NoResultFound as err:
            raise CustomerNotFoundError(f"email={email}") from err
        except SQLAlchemyError as err:
            raise self._storage_error("get customer by email", err) from err

    def create_new_customer(self, name: str, email: str, password: str) -> Customer:
        try:
            return self._queries.create_customer(name, email, password)
        except SQLAlchemyError as err:
            raise self._storage_error("create customer", err) from err

    def update_existing_customer(
        self, customer_id: int, name: str, email: str, password: str,
    ) -> Customer:
        try:
            return self._queries.update_customer(customer_id, name, email, password)
        except NoResultFound as err:
            raise CustomerNotFoundError(f"id={customer_id}") from err
        except SQLAlchemyError as err:
            raise self._storage_error("update customer", err) from err

    def delete_customer_by_email(self, email: str) -> None:
        try:
            rows = self._queries.delete_customer_by_email(email)
        except SQLAlchemyError as err:
            raise self._storage_error("delete customer", err) from err
        if rows == 0:
            raise CustomerNotFoundError(f"email={email}")

    def commit(self) -> None:
        try:
            super().commit()
        except SQLAlchemyError as err:
            raise self._storage_error("commit", err) from err

    def _storage_error(self, operation: str, err: SQLAlchemyError) -> StorageError:
        """Roll back the failed transaction and wrap ``err``."""
        logger.warning("Customer storage failure during %s: %s", operation, err)
        self.rollback()
        return StorageError(operation, err)


def new_customer_repository(queries: CustomerQueries) -> CustomerRepository:
    """Build the SQL-backed customer repository."""
    return SqlCustomerRepository(queries)
