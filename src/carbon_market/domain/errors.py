"""Domain errors raised by application services."""


class NotFoundError(LookupError):
    """Raised when a requested entity does not exist."""


class ValidationError(ValueError):
    """Raised when a request breaks a business rule."""


class CatalogUnavailableError(RuntimeError):
    """Raised when the project catalog cannot be queried."""
