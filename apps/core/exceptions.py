"""
Error taxonomy shared by every service layer.

Each app defines its concrete errors in ``services/exceptions.py`` by
subclassing one of the four categories below. Views never catch them:
``apps.core.exception_handler.ledger_exception_handler`` converts any
``ServiceError`` into the ``success: false`` response envelope.

Exception Hierarchy:
    ServiceError (base)
    ├── NotFoundError            -> 404
    ├── InvalidInputError        -> 400
    ├── PreconditionFailedError  -> 409
    └── StorageError             -> 503

Usage:
    from apps.core.exceptions import NotFoundError

    class ProductNotFoundError(NotFoundError):
        default_message = 'Product not found'
        code = 'product_not_found'
"""


class ServiceError(Exception):
    """
    Base exception for all service errors.

    Subclasses set ``code`` (machine readable) and ``default_message``
    (shown when raised without arguments).
    """

    status_code = 500
    code = 'service_error'
    default_message = 'Request could not be processed'

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)


class NotFoundError(ServiceError):
    """A referenced record does not exist in the requested scope."""

    status_code = 404
    code = 'not_found'
    default_message = 'Not found'


class InvalidInputError(ServiceError):
    """A required field is missing or a numeric field is malformed."""

    status_code = 400
    code = 'invalid_input'
    default_message = 'Invalid input'


class PreconditionFailedError(ServiceError):
    """A business rule rejected the operation."""

    status_code = 409
    code = 'precondition_failed'
    default_message = 'Operation not allowed in the current state'


class StorageError(ServiceError):
    """The database failed underneath a service call."""

    status_code = 503
    code = 'storage_error'
    default_message = 'Storage is temporarily unavailable'
