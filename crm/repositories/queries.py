"""Typed query facade over the ``customers`` table.

One method per parametrised statement. Lookups that find nothing raise
``sqlalchemy.exc.NoResultFound``; translating that is the repository's job.
"""

from sqlalchemy import delete, select
from sqlalchemy.orm import Session, scoped_session

from crm.domain.models import Customer, utcnow


class CustomerQueries:
    """Executes customer statements on the given session.

    Args:
        session: A SQLAlchemy session or scoped session (``db.session``).
    """

    def __init__(self, session: Session | scoped_session):
        self.session = session

    def create_customer(self, name: str, email: str, password: str) -> Customer:
        """INSERT a customer and flush to obtain its id and timestamps."""
        customer = Customer(name=name, email=email, password=password)
        self.session.add(customer)
        self.session.flush()
        return customer

    def get_customer_by_id(self, customer_id: int) -> Customer:
        stmt = select(Customer).where(Customer.id == customer_id).limit(1)
        return self.session.execute(stmt).scalar_one()

    def get_customer_by_email(self, email: str) -> Customer:
        stmt = select(Customer).where(Customer.email == email).limit(1)
        return self.session.execute(stmt).scalar_one()

    def list_customers(self) -> list[Customer]:
        stmt = select(Customer).order_by(Customer.id)
        return list(self.session.execute(stmt).scalars().all())

    def update_customer(
        self, customer_id: int, name: str, email: str, password: str,
    ) -> Customer:
        """Replace every mutable field and refresh ``updated_at``."""
        customer = self.get_customer_by_id(customer_id)
        customer.name = name
        customer.email = email
        customer.password = password
        customer.updated_at = utcnow()
        self.session.flush()
        return customer

    def delete_customer_by_email(self, email: str) -> int:
        """DELETE by email and return the number of affected rows."""
        stmt = (
            delete(Customer)
            .where(Customer.email == email)
            .execution_options(synchronize_session="evaluate")
        )
        return self.session.execute(stmt).rowcount
