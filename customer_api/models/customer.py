"""
Customer data model
"""
import uuid
from datetime import datetime

from sqlalchemy import Column, String, Numeric, Date, DateTime
from customer_api.models.base import Base


def _new_id() -> str:
    return str(uuid.uuid4())


class Customer(Base):
    """Persisted customer record"""
    __tablename__ = "customers"

    id = Column(String(36), primary_key=True, default=_new_id)  # assigned on insert, never changed
    name = Column(String, nullable=False, index=True)
    email = Column(String, nullable=False, index=True)

    # Purchase behavior
    annual_spend = Column(Numeric(asdecimal=True), nullable=True)  # unscaled, no rounding to cents
    last_purchase_date = Column(Date, nullable=True)

    # Metadata
    created_at = Column(DateTime, default=datetime.utcnow, index=True)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    def __repr__(self) -> str:
        return f"<Customer id={self.id} name={self.name!r} email={self.email!r}>"
