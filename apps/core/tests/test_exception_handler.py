"""
Tests for the failure envelope.

Every error leaving the API carries ``success: false``, a message, a
machine readable code and the matching HTTP status.
"""

import pytest
from unittest.mock import patch
from django.db import OperationalError
from django.urls import reverse
from rest_framework import status
from rest_framework.exceptions import MethodNotAllowed, ValidationError

from apps.core.exception_handler import ledger_exception_handler
from apps.core.exceptions import (
    ServiceError,
    NotFoundError,
    InvalidInputError,
    PreconditionFailedError,
    StorageError,
)


class TestServiceErrors:

    @pytest.mark.parametrize('error_class, expected_status', [
        (NotFoundError, 404),
        (InvalidInputError, 400),
        (PreconditionFailedError, 409),
        (StorageError, 503),
    ])
    def test_status_codes(self, error_class, expected_status):
        response = ledger_exception_handler(error_class(), {})

        assert response.status_code == expected_status
        assert response.data['success'] is False
        assert response.data['code'] == error_class.code

    def test_default_message(self):
        assert NotFoundError().message == 'Not found'

    def test_custom_message(self):
        response = ledger_exception_handler(ServiceError('Boom'), {})

        assert response.data == {'success': False, 'message': 'Boom', 'code': 'service_error'}
        assert response.status_code == 500


class TestFrameworkErrors:

    def test_validation_error(self):
        exc = ValidationError({'amount': ['A valid integer is required.']})

        response = ledger_exception_handler(exc, {})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['message'] == 'A valid integer is required.'
        assert response.data['code'] == 'invalid_input'
        assert 'amount' in response.data['errors']

    def test_method_not_allowed(self):
        response = ledger_exception_handler(MethodNotAllowed('PUT'), {})

        assert response.status_code == status.HTTP_405_METHOD_NOT_ALLOWED
        assert response.data['success'] is False
        assert response.data['code'] == 'method_not_allowed'

    def test_unhandled_exception_is_left_alone(self):
        assert ledger_exception_handler(KeyError('x'), {}) is None


@pytest.mark.django_db
class TestStorageFailures:

    def test_database_error_becomes_503(self, api_client):
        """Storage failures are logged and reported, never raised."""
        url = reverse('catalog:product-list')
        with patch('apps.catalog.views.list_products', side_effect=OperationalError('disk I/O error')), \
                patch('apps.core.exception_handler.logger') as mock_logger:
            response = api_client.get(url)

        assert response.status_code == status.HTTP_503_SERVICE_UNAVAILABLE
        assert response.data == {
            'success': False,
            'message': 'Storage is temporarily unavailable',
            'code': 'storage_error',
        }
        mock_logger.exception.assert_called_once_with('Storage failure in %s', 'ProductViewSet')


@pytest.mark.django_db
class TestHealthCheck:

    def test_health_check(self, api_client):
        response = api_client.get(reverse('health-check'))

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {'success': True, 'status': 'ok'}

    def test_health_check_database_down(self, api_client):
        with patch('config.views.connection') as mock_connection:
            mock_connection.cursor.side_effect = OperationalError('down')
            response = api_client.get(reverse('health-check'))

        assert response.status_code == status.HTTP_503_SERVICE_UNAVAILABLE
        assert response.json()['success'] is False
