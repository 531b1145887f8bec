"""Error taxonomy for the customer service.

Every error raised by the service layer inherits from CustomerAPIError,
which carries the status_code the application's exception handlers use
to build the HTTP response. Store failures are not wrapped.
"""


class CustomerAPIError(Exception):
    """Base exception for all customer service errors."""

    status_code: int = 500

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class InvalidArgumentError(CustomerAPIError, ValueError):
    """Raised when caller-supplied input fails a structural or business rule."""

    status_code = 400


class RecordNotFoundError(CustomerAPIError):
    """Raised when a lookup finds no matching record.

    ``lookup`` names the key the lookup went through: "id", "name",
    "email" or "name_and_email".
    """

    status_code = 404

    def __init__(self, message: str, lookup: str) -> None:
        super().__init__(message)
        self.lookup = lookup


class CustomerNotFoundError(RecordNotFoundError):
    """Raised when an id, name or email lookup finds no customer."""

    def __init__(self, lookup: str = "id") -> None:
        super().__init__("Customer not found", lookup)


class NoSuchElementError(RecordNotFoundError):
    """Raised when the combined name and email lookup finds no customer."""

    def __init__(self) -> None:
        super().__init__("Customer not found with name and email", "name_and_email")
