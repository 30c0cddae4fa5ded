import pytest
from rest_framework.test import APIClient


@pytest.fixture
def api_client():
    """Return an API client; the API issues no credentials."""
    return APIClient()
