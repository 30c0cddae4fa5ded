"""Student account management service."""

import logging
from typing import Optional
from uuid import UUID

from django.db import transaction, IntegrityError

from apps.accounts.models import Account
from apps.classrooms.services import resolve_classroom, scope_filter

from .exceptions import AccountNotFoundError, DuplicateAccountCodeError

logger = logging.getLogger(__name__)


def create_account(
    *,
    code: str,
    name: str,
    balance: int = 0,
    classroom_id: Optional[UUID] = None
) -> Account:
    """
    Create a student account.

    Args:
        code: Login code, unique within the scope
        name: Display name
        balance: Starting balance
        classroom_id: Classroom scope (None for unscoped)

    Returns:
        Created Account instance

    Raises:
        DuplicateAccountCodeError: If the code already exists in the scope
        ClassroomNotFoundError: If classroom_id doesn't exist
    """
    classroom = resolve_classroom(classroom_id)

    if Account.objects.filter(code=code, **scope_filter(classroom_id)).exists():
        raise DuplicateAccountCodeError(f"Student code {code} already exists")

    try:
        with transaction.atomic():
            account = Account.objects.create(
                code=code,
                name=name,
                balance=balance,
                classroom=classroom,
            )
    except IntegrityError:
        raise DuplicateAccountCodeError(f"Student code {code} already exists")

    logger.info("Created account %s with balance %s", account.code, account.balance)
    return account


def get_account(*, code: str, classroom_id: Optional[UUID] = None) -> Account:
    """
    Get a student account by code within a scope.

    Raises:
        AccountNotFoundError: If no account has this code in the scope
    """
    try:
        return Account.objects.get(code=code, **scope_filter(classroom_id))
    except Account.DoesNotExist:
        raise AccountNotFoundError()


def list_accounts(*, classroom_id: Optional[UUID] = None):
    return Account.objects.filter(**scope_filter(classroom_id)).order_by('name')


@transaction.atomic
def delete_account(*, code: str, classroom_id: Optional[UUID] = None) -> Account:
    """
    Delete a student account.

    Cascading deletes remove the account's whole purchase history.

    Returns:
        The deleted Account instance (no longer persisted)

    Raises:
        AccountNotFoundError: If no account has this code in the scope
    """
    try:
        account = (
            Account.objects
            .select_for_update()
            .get(code=code, **scope_filter(classroom_id))
        )
    except Account.DoesNotExist:
        raise AccountNotFoundError()

    _, per_model = account.delete()
    logger.info("Deleted account %s: %s", code, per_model)
    return account
