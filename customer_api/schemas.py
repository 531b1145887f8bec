"""Request and response payloads for customer records.

Field names are snake_case in Python and camelCase on the wire; both
spellings are accepted on input.
"""
from datetime import date
from decimal import Decimal
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_serializer


class CustomerEditRequest(BaseModel):
    """Editable customer fields, used for both create and update.

    Everything is optional here so that the service layer, not the
    parser, decides which rule a request breaks.
    """

    model_config = ConfigDict(populate_by_name=True)

    name: Optional[str] = None
    email: Optional[str] = None
    annual_spend: Optional[Decimal] = Field(default=None, alias="annualSpend")
    last_purchase_date: Optional[date] = Field(default=None, alias="lastPurchaseDate")


class CustomerView(BaseModel):
    """A stored customer plus its derived loyalty tier."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    email: str
    annual_spend: Optional[Decimal] = Field(default=None, alias="annualSpend")
    last_purchase_date: Optional[date] = Field(default=None, alias="lastPurchaseDate")
    tier: str

    @field_serializer("annual_spend")
    def _serialize_spend(self, value: Optional[Decimal]) -> Optional[Union[int, float]]:
        # Whole amounts go out as exact ints; fractional ones as floats (~15 significant digits)
        if value is None:
            return None
        if value == value.to_integral_value():
            return int(value)
        return float(value)

    @classmethod
    def from_record(cls, customer, tier: str) -> "CustomerView":
        return cls(
            id=str(customer.id),
            name=customer.name,
            email=customer.email,
            annual_spend=customer.annual_spend,
            last_purchase_date=customer.last_purchase_date,
            tier=tier,
        )
