"""
Domain exceptions for purchases app.

This module defines the exception hierarchy for purchase-related errors,
providing specific error types for better error handling and testing.
Account and product lookups raise the errors of their own apps
(``AccountNotFoundError``, ``ProductNotFoundError``).
"""

from apps.core.exceptions import NotFoundError, PreconditionFailedError


class PurchaseRequestNotFoundError(NotFoundError):
    """Purchase request not found."""
    code = 'purchase_not_found'
    default_message = 'Purchase request not found'


class AlreadyProcessedError(PreconditionFailedError):
    """Purchase request was already approved or rejected."""
    code = 'already_processed'
    default_message = 'This purchase has already been processed'


class OutOfStockError(PreconditionFailedError):
    """Product has no units left."""
    code = 'out_of_stock'
    default_message = 'The product is out of stock'


class InsufficientBalanceError(PreconditionFailedError):
    """Student balance is below the price."""
    code = 'insufficient_balance'
    default_message = 'Not enough points for this purchase'
