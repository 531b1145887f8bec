"""
Customer Service

Composes request validation, tier classification and the record store
into the create/read/update/delete operations exposed over HTTP. Store
failures are not caught here.
"""
from datetime import date
from typing import Callable, Optional

from customer_api.exceptions import (
    CustomerNotFoundError,
    InvalidArgumentError,
    NoSuchElementError,
)
from customer_api.models.customer import Customer
from customer_api.schemas import CustomerEditRequest, CustomerView
from customer_api.services.tier_service import calculate_tier
from customer_api.services.validation_service import validate_email, validate_request
from customer_api.stores.customer_store import CustomerStore
from customer_api.utils.logger import log


class CustomerService:
    """Customer record operations with validation and tier derivation."""

    def __init__(self, store: CustomerStore, today: Callable[[], date] = date.today):
        self.store = store
        self._today = today

    def create_customer(self, request: Optional[CustomerEditRequest]) -> CustomerView:
        """Validate and persist a new customer."""
        log.debug(f"Validating email: {request.email if request else None}")
        validate_request(request)

        customer = Customer(
            name=request.name,
            email=request.email,
            annual_spend=request.annual_spend,
            last_purchase_date=request.last_purchase_date,
        )
        saved = self.store.create(customer)
        log.info(f"Saved customer with ID: {saved.id}")
        return self._to_view(saved)

    def get_customer_by_id(self, customer_id) -> CustomerView:
        _require_id(customer_id)
        log.debug(f"Fetching customer by ID: {customer_id}")
        customer = self.store.find_by_id(customer_id)
        if customer is None:
            raise CustomerNotFoundError("id")
        return self._to_view(customer)

    def get_by_name(self, name: Optional[str]) -> CustomerView:
        if name is None or not name.strip():
            raise InvalidArgumentError("Name must not be blank")
        log.debug(f"Fetching customer by name: {name}")
        customer = self.store.find_by_name(name)
        if customer is None:
            raise CustomerNotFoundError("name")
        return self._to_view(customer)

    def get_by_email(self, email: Optional[str]) -> CustomerView:
        validate_email(email)
        log.debug(f"Fetching customer by email: {email}")
        customer = self.store.find_by_email(email)
        if customer is None:
            raise CustomerNotFoundError("email")
        return self._to_view(customer)

    def get_by_name_and_email(self, name: Optional[str], email: Optional[str]) -> CustomerView:
        """Combined lookup. Neither field is validated first."""
        log.debug(f"Fetching customer by name and email: {name}, {email}")
        customer = self.store.find_by_name_and_email(name, email)
        if customer is None:
            raise NoSuchElementError()
        return self._to_view(customer)

    def update_customer(self, customer_id, request: Optional[CustomerEditRequest]) -> CustomerView:
        """Replace every editable field of an existing customer."""
        _require_id(customer_id)
        log.debug(f"Updating customer ID: {customer_id}")
        validate_request(request)

        customer = self.store.find_by_id(customer_id)
        if customer is None:
            raise CustomerNotFoundError("id")

        customer.name = request.name
        customer.email = request.email
        customer.annual_spend = request.annual_spend
        customer.last_purchase_date = request.last_purchase_date
        updated = self._to_view(self.store.save(customer))
        log.info(f"Customer updated with ID: {updated.id}")
        return updated

    def delete_customer(self, customer_id) -> None:
        """Delete a customer. Deleting an unknown id is not an error."""
        _require_id(customer_id)
        log.debug(f"Deleting customer ID: {customer_id}")
        self.store.delete_by_id(customer_id)

    def _to_view(self, customer: Customer) -> CustomerView:
        return CustomerView.from_record(customer, calculate_tier(customer, self._today()))


def _require_id(customer_id) -> None:
    if customer_id is None:
        raise InvalidArgumentError("Customer ID must not be null")
