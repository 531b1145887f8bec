"""Customer record stores."""

from customer_api.stores.customer_store import CustomerStore

__all__ = ["CustomerStore"]
