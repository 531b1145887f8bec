"""SQLAlchemy-backed record store for customers.

Lookups by name or email are not unique; when several records match,
the earliest-created one is returned.
"""
import logging
from typing import Optional
from uuid import UUID

from sqlalchemy.orm import Session

from customer_api.models.customer import Customer

logger = logging.getLogger(__name__)


class CustomerStore:
    """Create, read, update and delete customer records."""

    def __init__(self, db: Session):
        self.db = db

    def create(self, customer: Customer) -> Customer:
        """Insert a new record. The id is generated on insert."""
        self.db.add(customer)
        self.db.commit()
        self.db.refresh(customer)
        return customer

    def find_by_id(self, customer_id) -> Optional[Customer]:
        return self.db.get(Customer, _key(customer_id))

    def find_by_name(self, name: str) -> Optional[Customer]:
        return (
            self.db.query(Customer)
            .filter(Customer.name == name)
            .order_by(Customer.created_at)
            .first()
        )

    def find_by_email(self, email: str) -> Optional[Customer]:
        return (
            self.db.query(Customer)
            .filter(Customer.email == email)
            .order_by(Customer.created_at)
            .first()
        )

    def find_by_name_and_email(self, name: str, email: str) -> Optional[Customer]:
        return (
            self.db.query(Customer)
            .filter(Customer.name == name, Customer.email == email)
            .order_by(Customer.created_at)
            .first()
        )

    def save(self, customer: Customer) -> Customer:
        """Persist changes to a record already loaded through this store."""
        self.db.add(customer)
        self.db.commit()
        self.db.refresh(customer)
        return customer

    def delete_by_id(self, customer_id) -> None:
        """Delete a record. Missing ids are ignored."""
        deleted = (
            self.db.query(Customer)
            .filter(Customer.id == _key(customer_id))
            .delete()
        )
        self.db.commit()
        if not deleted:
            logger.debug(f"No customer to delete for id {customer_id}")


def _key(customer_id) -> str:
    if isinstance(customer_id, UUID):
        return str(customer_id)
    return customer_id
