"""Domain-specific exceptions for accounts services."""

from apps.core.exceptions import InvalidInputError, NotFoundError, PreconditionFailedError


class AccountNotFoundError(NotFoundError):
    """Raised when a student account does not exist in the requested scope."""
    code = 'account_not_found'
    default_message = 'Student not found'


class DuplicateAccountCodeError(PreconditionFailedError):
    """Raised when an account code is already used in the scope."""
    code = 'duplicate_account_code'
    default_message = 'This student code already exists'


class LoginNotFoundError(NotFoundError):
    """Raised when no resolver recognises a login code."""
    code = 'login_not_found'
    default_message = 'Login code not recognised'


class BalanceOutOfRangeError(InvalidInputError):
    """Raised when an adjustment would overflow the stored balance."""
    code = 'balance_out_of_range'
    default_message = 'Invalid amount'
