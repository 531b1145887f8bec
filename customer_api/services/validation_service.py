"""
Customer Request Validation

Structural checks a create or update request must pass before anything
is written. Rules run in order and the first failure is raised.
"""
import re
from decimal import Decimal
from typing import Optional

from customer_api.exceptions import InvalidArgumentError
from customer_api.schemas import CustomerEditRequest

EMAIL_PATTERN = re.compile(r"^[A-Za-z0-9+_.-]+@[A-Za-z0-9.-]+$")


def is_valid_email(email: Optional[str]) -> bool:
    """True when email looks like local-part@domain."""
    return email is not None and EMAIL_PATTERN.fullmatch(email) is not None


def validate_email(email: Optional[str]) -> None:
    """Raise InvalidArgumentError unless email looks like local-part@domain."""
    if not is_valid_email(email):
        raise InvalidArgumentError(f"Invalid email format: {email}")


def validate_request(request: Optional[CustomerEditRequest]) -> None:
    """
    Validate a customer create/update request.

    Rules:
    - request: required
    - name: required, at least one non-whitespace character
    - email: local-part@domain
    - annual_spend: required, non-negative
    - last_purchase_date: required
    """
    if request is None:
        raise InvalidArgumentError("Request must not be null")

    if request.name is None or not request.name.strip():
        raise InvalidArgumentError("Name must not be blank")

    validate_email(request.email)

    if request.annual_spend is None or request.annual_spend < Decimal("0"):
        raise InvalidArgumentError("Annual spend must not be null or negative")

    if request.last_purchase_date is None:
        raise InvalidArgumentError("Last purchase date must not be null")
