import pytest
from rest_framework.test import APIClient
from apps.catalog.models import Product
from apps.classrooms.models import Classroom


@pytest.fixture
def api_client():
    """Return an API client; the API issues no credentials."""
    return APIClient()


@pytest.fixture
def classroom(db):
    """Create and return a classroom."""
    return Classroom.objects.create(name='Class 4B')


@pytest.fixture
def product(db):
    """Create an unscoped product."""
    return Product.objects.create(name='Pencil', price=10, stock=3)


@pytest.fixture
def sold_out_product(db):
    """Create an unscoped product with no stock left."""
    return Product.objects.create(name='Sticker', price=2, stock=0)


@pytest.fixture
def scoped_product(db, classroom):
    """Create a product in the classroom."""
    return Product.objects.create(name='Notebook', price=25, stock=5, classroom=classroom)
