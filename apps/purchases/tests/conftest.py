import pytest
from rest_framework.test import APIClient
from apps.accounts.models import Account
from apps.catalog.models import Product
from apps.classrooms.models import Classroom
from apps.purchases.services import PurchaseWorkflowService


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
    """Unscoped student with 50 points."""
    return Account.objects.create(code='101', name='Yossi Cohen', balance=50)


@pytest.fixture
def poor_student(db):
    """Unscoped student with 20 points."""
    return Account.objects.create(code='102', name='Dani Levi', balance=20)


@pytest.fixture
def product(db):
    """Last unit of a 30 point product."""
    return Product.objects.create(name='Water Bottle', price=30, stock=1)


@pytest.fixture
def cheap_product(db):
    """Plenty of a 5 point product."""
    return Product.objects.create(name='Pencil', price=5, stock=10)


@pytest.fixture
def sold_out_product(db):
    return Product.objects.create(name='Sticker', price=1, stock=0)


@pytest.fixture
def pending_request(student, product):
    """Pending request by the student for the last water bottle."""
    return PurchaseWorkflowService.create_request(
        account_code=student.code,
        product_id=product.id,
    )


@pytest.fixture
def scoped_setup(db, classroom):
    """Student and product inside the classroom."""
    account = Account.objects.create(code='101', name='Tamar Katz', balance=100, classroom=classroom)
    item = Product.objects.create(name='Notebook', price=25, stock=5, classroom=classroom)
    return account, item
