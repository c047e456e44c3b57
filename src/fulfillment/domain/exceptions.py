"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.

Note that an order line that cannot be served (out of stock, out of season,
expired) is NOT an exception: strategies report it through
``OrderProcessingResult.success``.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class UnsupportedProductTypeError(DomainException):
    """No fulfillment strategy is registered for a product type."""

    def __init__(self, product_type: object) -> None:
        self.product_type = product_type
        label = getattr(product_type, "value", product_type)
        super().__init__(f"Unsupported product type: {label}")
