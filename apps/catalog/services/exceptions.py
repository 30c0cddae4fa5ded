"""Domain-specific exceptions for catalog services."""

from apps.core.exceptions import InvalidInputError, NotFoundError


class ProductNotFoundError(NotFoundError):
    """Raised when a product does not exist in the requested scope."""
    code = 'product_not_found'
    default_message = 'Product not found'


class InvalidStockError(InvalidInputError):
    """Raised when a stock count is negative."""
    code = 'invalid_stock'
    default_message = 'Invalid stock'


class InvalidPriceError(InvalidInputError):
    """Raised when a price is negative."""
    code = 'invalid_price'
    default_message = 'Invalid price'
