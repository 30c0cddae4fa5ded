"""Product CRUD and stock operations service."""

import logging
from typing import Optional
from uuid import UUID

from django.db import transaction
from django.utils import timezone

from apps.catalog.models import Product
from apps.classrooms.services import resolve_classroom, scope_filter

from .exceptions import InvalidPriceError, InvalidStockError, ProductNotFoundError

logger = logging.getLogger(__name__)


@transaction.atomic
def create_product(
    *,
    name: str,
    price: int,
    stock: int,
    description: str = '',
    classroom_id: Optional[UUID] = None
) -> Product:
    """
    Create a shop product.

    Args:
        name: Product name
        price: Price in points (>= 0)
        stock: Units available (>= 0)
        description: Optional description
        classroom_id: Classroom scope (None for unscoped)

    Returns:
        Created Product instance

    Raises:
        InvalidPriceError: If price is negative
        InvalidStockError: If stock is negative
        ClassroomNotFoundError: If classroom_id doesn't exist
    """
    if price < 0:
        raise InvalidPriceError()
    if stock < 0:
        raise InvalidStockError()

    product = Product.objects.create(
        name=name,
        price=price,
        stock=stock,
        description=description,
        classroom=resolve_classroom(classroom_id),
    )
    logger.info("Created product %s (%s) price=%d stock=%d", product.name, product.id, price, stock)
    return product


def get_product(*, product_id: UUID, classroom_id: Optional[UUID] = None) -> Product:
    """
    Get a product by ID within a scope.

    Raises:
        ProductNotFoundError: If product doesn't exist in the scope
    """
    try:
        return Product.objects.get(id=product_id, **scope_filter(classroom_id))
    except Product.DoesNotExist:
        raise ProductNotFoundError()


def list_products(*, classroom_id: Optional[UUID] = None, in_stock_only: bool = False):
    """Return products in scope, newest first."""
    queryset = Product.objects.filter(**scope_filter(classroom_id))
    if in_stock_only:
        queryset = queryset.filter(stock__gt=0)
    return queryset.order_by('-created_at')


@transaction.atomic
def delete_product(*, product_id: UUID, classroom_id: Optional[UUID] = None) -> Product:
    """
    Delete a product.

    Pending requests for it stay in place with their snapshot and fail
    with ProductNotFoundError if a teacher later tries to approve them.

    Raises:
        ProductNotFoundError: If product doesn't exist in the scope
    """
    product = get_product(product_id=product_id, classroom_id=classroom_id)
    product.delete()
    logger.info("Deleted product %s (%s)", product.name, product_id)
    return product


@transaction.atomic
def set_stock(*, product_id: UUID, stock: int, classroom_id: Optional[UUID] = None) -> Product:
    """
    Overwrite a product's stock count.

    Raises:
        InvalidStockError: If stock is negative
        ProductNotFoundError: If product doesn't exist in the scope
    """
    if stock < 0:
        raise InvalidStockError()

    queryset = Product.objects.filter(id=product_id, **scope_filter(classroom_id))
    if not queryset.update(stock=stock, updated_at=timezone.now()):
        raise ProductNotFoundError()

    logger.info("Set stock of product %s to %d", product_id, stock)
    return queryset.get()
