import pytest
from rest_framework.test import APIClient
from apps.accounts.models import Account
from apps.catalog.models import Product
from apps.classrooms.models import Classroom, Teacher


@pytest.fixture
def api_client():
    """Return an API client; the API issues no credentials."""
    return APIClient()


@pytest.fixture
def classroom(db):
    """Create and return a classroom."""
    return Classroom.objects.create(
        name='Class 4B',
        description='Fourth grade, room 12',
    )


@pytest.fixture
def other_classroom(db):
    """Create and return a second, unrelated classroom."""
    return Classroom.objects.create(name='Class 6A')


@pytest.fixture
def teacher(db, classroom):
    """Create a teacher assigned to the classroom."""
    return Teacher.objects.create(
        password='teach-4b',
        name='Ms. Rivka',
        classroom=classroom,
    )


@pytest.fixture
def populated_classroom(db, classroom, teacher):
    """Classroom with a student and a product scoped to it."""
    Account.objects.create(code='101', name='Noa', balance=40, classroom=classroom)
    Product.objects.create(name='Eraser', price=5, stock=10, classroom=classroom)
    return classroom
