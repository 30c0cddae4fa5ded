import pytest
from rest_framework.test import APIClient
from apps.accounts.models import Account
from apps.classrooms.models import Classroom, Teacher


@pytest.fixture
def api_client():
    """Return an API client; the API issues no credentials."""
    return APIClient()


@pytest.fixture
def classroom(db):
    """Create and return a classroom."""
    return Classroom.objects.create(name='Class 4B')


@pytest.fixture
def student(db):
    """Create an unscoped student with 50 points."""
    return Account.objects.create(code='101', name='Yossi Cohen', balance=50)


@pytest.fixture
def scoped_student(db, classroom):
    """Student in a classroom, reusing the unscoped student's code."""
    return Account.objects.create(code='101', name='Tamar Katz', balance=10, classroom=classroom)


@pytest.fixture
def teacher(db, classroom):
    """Create a teacher assigned to the classroom."""
    return Teacher.objects.create(password='apple', name='Ms. Rivka', classroom=classroom)
