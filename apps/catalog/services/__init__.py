"""Catalog app services layer."""

from .exceptions import (
    ProductNotFoundError,
    InvalidStockError,
    InvalidPriceError,
)
from .product_management import (
    create_product,
    get_product,
    list_products,
    delete_product,
    set_stock,
)

__all__ = [
    # Exceptions
    'ProductNotFoundError',
    'InvalidStockError',
    'InvalidPriceError',
    # Product management
    'create_product',
    'get_product',
    'list_products',
    'delete_product',
    'set_stock',
]
