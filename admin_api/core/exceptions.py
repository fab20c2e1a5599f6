class BaseServiceError(Exception):
    """Base exception for all service-related errors."""
    pass

class NotFoundError(BaseServiceError):
    """Raised when the row targeted by an update or delete does not exist."""
    pass

class ProductNotFoundError(NotFoundError):
    """Raised when product is not found."""
    pass

class OrderNotFoundError(NotFoundError):
    """Raised when order is not found."""
    pass

class DataAccessError(BaseServiceError):
    """
    Raised for any failure coming out of the database layer: lost connections,
    constraint violations, malformed statements. The underlying driver error is
    chained as __cause__.
    """
    pass
