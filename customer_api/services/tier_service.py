"""
Loyalty tier classification

Tier is derived from annual spend and how recently the customer last
bought something. It is never stored; every read recomputes it.

    Platinum : spend >= 10000 and a purchase within the last 6 months
    Gold     : 1000 <= spend < 10000 and a purchase within the last 12 months
    Silver   : everyone else, including customers with no spend data
"""
from datetime import date
from decimal import Decimal
from typing import Optional

from dateutil.relativedelta import relativedelta

PLATINUM = "Platinum"
GOLD = "Gold"
SILVER = "Silver"

PLATINUM_MIN_SPEND = Decimal("10000")
GOLD_MIN_SPEND = Decimal("1000")
PLATINUM_WINDOW_MONTHS = 6
GOLD_WINDOW_MONTHS = 12


def _purchased_within(last_purchase: Optional[date], months: int, today: date) -> bool:
    # Strictly after the cutoff; a purchase exactly on it does not count
    return last_purchase is not None and last_purchase > today - relativedelta(months=months)


def classify(annual_spend: Optional[Decimal], last_purchase_date: Optional[date], today: date) -> str:
    """Tier for the given spend and last purchase date as of today."""
    if annual_spend is None:
        return SILVER
    spend = Decimal(str(annual_spend))

    if spend >= PLATINUM_MIN_SPEND and _purchased_within(last_purchase_date, PLATINUM_WINDOW_MONTHS, today):
        return PLATINUM
    elif GOLD_MIN_SPEND <= spend < PLATINUM_MIN_SPEND and _purchased_within(last_purchase_date, GOLD_WINDOW_MONTHS, today):
        return GOLD
    return SILVER


def calculate_tier(customer, today: Optional[date] = None) -> str:
    """Tier for a customer record. today defaults to the local current date."""
    if today is None:
        today = date.today()
    return classify(customer.annual_spend, customer.last_purchase_date, today)
