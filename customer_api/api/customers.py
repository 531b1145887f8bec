"""
Customers API

Create, read, update and delete customer records. Service errors are
turned into responses by the handlers registered in customer_api.main.
"""
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response
from sqlalchemy.orm import Session

from customer_api.models.base import get_db
from customer_api.schemas import CustomerEditRequest, CustomerView
from customer_api.services.customer_service import CustomerService
from customer_api.services.validation_service import is_valid_email
from customer_api.stores.customer_store import CustomerStore
from customer_api.utils.logger import log

router = APIRouter(prefix="/customers", tags=["customers"])


def get_customer_service(db: Session = Depends(get_db)) -> CustomerService:
    """Dependency: a CustomerService bound to the request's session."""
    return CustomerService(CustomerStore(db))


@router.post("", status_code=201, response_model=CustomerView)
async def create_customer(
    body: CustomerEditRequest,
    service: CustomerService = Depends(get_customer_service),
):
    """Create a customer."""
    log.info(f"Creating new customer with name: {body.name}")

    # Duplicates the service's email rule; a malformed email here gets an empty 400
    if not is_valid_email(body.email):
        log.warning(f"Invalid email format received: {body.email}")
        return Response(status_code=400)

    return service.create_customer(body)


@router.get("/{customer_id}", response_model=CustomerView)
async def get_customer_by_id(
    customer_id: UUID,
    service: CustomerService = Depends(get_customer_service),
):
    """Fetch a customer by id."""
    log.info(f"Fetching customer by ID: {customer_id}")
    return service.get_customer_by_id(customer_id)


@router.get("", response_model=CustomerView)
async def get_customer(
    name: Optional[str] = Query(None, description="Customer name"),
    email: Optional[str] = Query(None, description="Customer email"),
    service: CustomerService = Depends(get_customer_service),
):
    """Fetch a customer by name, email, or both."""
    log.info(f"Fetching customer by query params: name={name}, email={email}")

    if name is not None and email is not None:
        return service.get_by_name_and_email(name, email)
    elif name is not None:
        return service.get_by_name(name)
    elif email is not None:
        return service.get_by_email(email)

    log.warning("No query parameters provided for customer fetch")
    return Response(status_code=400)


@router.put("/{customer_id}", response_model=CustomerView)
async def update_customer(
    customer_id: UUID,
    body: CustomerEditRequest,
    service: CustomerService = Depends(get_customer_service),
):
    """Replace a customer's editable fields."""
    log.info(f"Updating customer with ID: {customer_id}")
    updated = service.update_customer(customer_id, body)
    log.info(f"Customer updated successfully: {updated.id}")
    return updated


@router.delete("/{customer_id}", status_code=204)
async def delete_customer(
    customer_id: UUID,
    service: CustomerService = Depends(get_customer_service),
):
    """Delete a customer."""
    log.info(f"Deleting customer with ID: {customer_id}")
    service.delete_customer(customer_id)
    log.info("Customer deleted successfully")
    return Response(status_code=204)
