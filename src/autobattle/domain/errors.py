"""Construction-time exceptions for domain values."""


class DomainError(ValueError):
    """Base exception for invalid domain values."""


class InvalidPositionError(DomainError):
    """Raised when a row/slot combination does not exist on a board."""


class InvalidUnitError(DomainError):
    """Raised when unit stats violate hp or attack bounds."""


class DuplicateUnitError(DomainError):
    """Raised when a unit id would occupy more than one slot of a board."""
