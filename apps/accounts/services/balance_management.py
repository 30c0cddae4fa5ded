"""
Balance adjustment service.

Two modes: a relative adjustment that adds a signed delta and an absolute
set. Neither enforces a floor, so a teacher can drive a balance negative
as a penalty. Only the purchase approval path requires balance >= price.
"""

import logging
from typing import Optional
from uuid import UUID

from django.db import transaction
from django.db.models import F
from django.utils import timezone

from apps.accounts.models import Account
from apps.classrooms.services import scope_filter
from apps.core.serializers import INTEGER_MAX, INTEGER_MIN

from .exceptions import AccountNotFoundError, BalanceOutOfRangeError

logger = logging.getLogger(__name__)


@transaction.atomic
def adjust_balance(*, code: str, amount: int, classroom_id: Optional[UUID] = None) -> Account:
    """
    Add a signed amount to an account balance.

    The increment is a single ``UPDATE ... SET balance = balance + amount``
    so concurrent adjustments never lose an update.

    Returns:
        The refreshed Account instance

    Raises:
        AccountNotFoundError: If no account has this code in the scope
        BalanceOutOfRangeError: If the result would not fit the balance column
    """
    queryset = Account.objects.filter(code=code, **scope_filter(classroom_id))
    if amount >= 0:
        in_range = queryset.filter(balance__lte=INTEGER_MAX - amount)
    else:
        in_range = queryset.filter(balance__gte=INTEGER_MIN - amount)

    updated = in_range.update(balance=F('balance') + amount, updated_at=timezone.now())
    if not updated:
        if queryset.exists():
            raise BalanceOutOfRangeError()
        raise AccountNotFoundError()

    account = queryset.get()
    logger.info("Adjusted balance of %s by %+d to %d", code, amount, account.balance)
    return account


@transaction.atomic
def set_balance(*, code: str, balance: int, classroom_id: Optional[UUID] = None) -> Account:
    """
    Overwrite an account balance.

    Returns:
        The refreshed Account instance

    Raises:
        AccountNotFoundError: If no account has this code in the scope
    """
    queryset = Account.objects.filter(code=code, **scope_filter(classroom_id))
    updated = queryset.update(balance=balance, updated_at=timezone.now())
    if not updated:
        raise AccountNotFoundError()

    account = queryset.get()
    logger.info("Set balance of %s to %d", code, account.balance)
    return account
