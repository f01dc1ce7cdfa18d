"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class ProductNotFoundError(EntityNotFoundError):

    def __init__(self, name: str) -> None:
        super().__init__(f"Product '{name}' not found.")
        self.name = name


class DuplicateProductError(DomainException):

    def __init__(self, name: str) -> None:
        super().__init__(f"Product '{name}' already exists. Use edit instead.")
        self.name = name


class InsufficientStockError(DomainException):

    def __init__(self, name: str, requested: int, available: int) -> None:
        super().__init__(
            f"Not enough stock for {name} "
            f"(need {requested}, have {available})."
        )
        self.name = name
        self.requested = requested
        self.available = available


class AccessDeniedError(DomainException):

    def __init__(self) -> None:
        super().__init__("Access denied. Please authenticate first.")


class PersistenceError(DomainException):
    """Store state could not be written to disk."""
