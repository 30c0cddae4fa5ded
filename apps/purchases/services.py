"""
Purchase Services Module
=========================

This module provides the purchase request workflow: a student asks to
redeem points for one unit of a product, and a teacher approves or
rejects the request.

Validation runs twice. Creation performs a soft check against the state
at request time (nothing is reserved). Approval re-checks against live
state and is authoritative: it locks the request, account and product
rows and applies every mutation as a conditional single-row UPDATE, so a
stale read can never drive stock or balance below what the check saw.

Classes:
    PurchaseWorkflowService: Creates, decides, lists and purges requests.

Example:
    Request and approve a purchase::

        from apps.purchases.services import PurchaseWorkflowService

        purchase = PurchaseWorkflowService.create_request(
            account_code='101',
            product_id=pencil.id,
        )
        PurchaseWorkflowService.decide(request_id=purchase.id, approve=True)
        # balance -= purchase.price, stock -= 1, status == 'approved'
"""

import logging
from typing import Optional
from uuid import UUID

from django.db import transaction
from django.db.models import F
from django.utils import timezone

from apps.accounts.models import Account
from apps.accounts.services import AccountNotFoundError, get_account
from apps.catalog.models import Product
from apps.catalog.services import ProductNotFoundError, get_product
from apps.classrooms.services import scope_filter
from apps.core.exceptions import ServiceError

from .exceptions import (
    AlreadyProcessedError,
    InsufficientBalanceError,
    OutOfStockError,
    PurchaseRequestNotFoundError,
)
from .models import PurchaseRequest, PurchaseStatus

logger = logging.getLogger(__name__)


class PurchaseWorkflowService:
    """
    Service for the purchase request state machine.

    Status moves exactly once, from pending to approved or to rejected.
    An approval subtracts the snapshotted price from the student's
    balance and one unit from the product's stock in a single
    transaction; any failure leaves every record unchanged.

    Methods:
        create_request: Validate and insert a pending request.
        decide: Approve or reject a pending request.
        get_request: One request in scope.
        list_requests: Requests in scope, newest first.
        purge_history: Delete every request in scope.
    """

    @staticmethod
    def create_request(
        *,
        account_code: str,
        product_id: UUID,
        classroom_id: Optional[UUID] = None
    ) -> PurchaseRequest:
        """
        Create a pending purchase request.

        Preconditions are checked in order and the first failure wins:
        account exists, product exists, product in stock, balance covers
        the price. Neither stock nor balance is reserved.

        Args:
            account_code: Code of the requesting student
            product_id: Product to buy one unit of
            classroom_id: Classroom scope (None for unscoped)

        Returns:
            The created PurchaseRequest with its name and price snapshot

        Raises:
            AccountNotFoundError: If the student is not in the scope
            ProductNotFoundError: If the product is not in the scope
            OutOfStockError: If the product has no units left
            InsufficientBalanceError: If the balance is below the price
        """
        account = get_account(code=account_code, classroom_id=classroom_id)
        product = get_product(product_id=product_id, classroom_id=classroom_id)

        if not product.in_stock:
            raise OutOfStockError()
        if not account.can_afford(product.price):
            raise InsufficientBalanceError()

        purchase = PurchaseRequest.objects.create(
            classroom_id=classroom_id,
            account=account,
            product=product,
            account_code=account.code,
            account_name=account.name,
            product_name=product.name,
            price=product.price,
        )
        logger.info(
            "Purchase request %s: %s asked for %s (%d pts)",
            purchase.id, account.code, product.name, product.price
        )
        return purchase

    @staticmethod
    @transaction.atomic
    def decide(
        *,
        request_id: UUID,
        approve: bool,
        classroom_id: Optional[UUID] = None
    ) -> PurchaseRequest:
        """
        Approve or reject a pending purchase request.

        Rejection only stamps the status and ``decided_at``. Approval
        re-validates against live state, then subtracts the snapshotted
        price from the balance and one unit from the stock.

        Args:
            request_id: The purchase request's ID
            approve: True to approve, False to reject
            classroom_id: Classroom scope (None for unscoped)

        Returns:
            The updated PurchaseRequest

        Raises:
            PurchaseRequestNotFoundError: If the request is not in the scope
            AlreadyProcessedError: If the request is no longer pending
            AccountNotFoundError: If the student was deleted (approval only)
            ProductNotFoundError: If the product was deleted (approval only)
            OutOfStockError: If the product has no units left (approval only)
            InsufficientBalanceError: If the balance is below the snapshotted
                price (approval only)
        """
        purchase = PurchaseWorkflowService._lock_request(request_id, classroom_id)
        if not purchase.is_pending:
            raise AlreadyProcessedError()

        now = timezone.now()

        if not approve:
            PurchaseWorkflowService._transition(
                purchase, status=PurchaseStatus.REJECTED, decided_at=now
            )
            logger.info("Purchase request %s rejected", purchase.id)
            purchase.refresh_from_db()
            return purchase

        try:
            account = PurchaseWorkflowService._lock_account(purchase)
            product = PurchaseWorkflowService._lock_product(purchase)

            if not product.in_stock:
                raise OutOfStockError()
            if not account.can_afford(purchase.price):
                raise InsufficientBalanceError("The student does not have enough points")

            # Guarded writes: zero rows updated means the state moved under us
            updated = (
                Product.objects
                .filter(pk=product.pk, stock__gt=0)
                .update(stock=F('stock') - 1, updated_at=now)
            )
            if not updated:
                raise OutOfStockError()

            updated = (
                Account.objects
                .filter(pk=account.pk, balance__gte=purchase.price)
                .update(balance=F('balance') - purchase.price, updated_at=now)
            )
            if not updated:
                raise InsufficientBalanceError("The student does not have enough points")

            PurchaseWorkflowService._transition(
                purchase,
                status=PurchaseStatus.APPROVED,
                approved_at=now,
                decided_at=now,
            )
        except ServiceError as exc:
            logger.warning("Approval of purchase request %s refused: %s", purchase.id, exc.message)
            raise

        logger.info(
            "Purchase request %s approved: %s paid %d pts for %s",
            purchase.id, purchase.account_code, purchase.price, purchase.product_name
        )
        purchase.refresh_from_db()
        return purchase

    @staticmethod
    def get_request(*, request_id: UUID, classroom_id: Optional[UUID] = None) -> PurchaseRequest:
        """
        Get a purchase request by ID within a scope.

        Raises:
            PurchaseRequestNotFoundError: If the request is not in the scope
        """
        try:
            return PurchaseRequest.objects.get(id=request_id, **scope_filter(classroom_id))
        except PurchaseRequest.DoesNotExist:
            raise PurchaseRequestNotFoundError()

    @staticmethod
    def list_requests(
        *,
        classroom_id: Optional[UUID] = None,
        status: Optional[str] = None,
        account_code: Optional[str] = None
    ):
        """Return requests in scope, newest first, optionally filtered."""
        queryset = PurchaseRequest.objects.filter(**scope_filter(classroom_id))
        if status:
            queryset = queryset.filter(status=status)
        if account_code:
            queryset = queryset.filter(account_code=account_code)
        return queryset.order_by('-created_at')

    @staticmethod
    @transaction.atomic
    def purge_history(*, classroom_id: Optional[UUID] = None) -> int:
        """
        Delete every purchase request in the scope.

        Returns:
            Number of deleted requests
        """
        deleted, _ = PurchaseRequest.objects.filter(**scope_filter(classroom_id)).delete()
        logger.info("Purged %d purchase requests (classroom=%s)", deleted, classroom_id)
        return deleted

    # -------------------------------------------------------------------------
    # Row access
    # -------------------------------------------------------------------------

    @staticmethod
    def _lock_request(request_id, classroom_id):
        try:
            return (
                PurchaseRequest.objects
                .select_for_update()
                .get(id=request_id, **scope_filter(classroom_id))
            )
        except PurchaseRequest.DoesNotExist:
            raise PurchaseRequestNotFoundError()

    @staticmethod
    def _lock_account(purchase):
        try:
            return Account.objects.select_for_update().get(pk=purchase.account_id)
        except Account.DoesNotExist:
            raise AccountNotFoundError()

    @staticmethod
    def _lock_product(purchase):
        if purchase.product_id is None:
            raise ProductNotFoundError()
        try:
            return Product.objects.select_for_update().get(pk=purchase.product_id)
        except Product.DoesNotExist:
            raise ProductNotFoundError()

    @staticmethod
    def _transition(purchase, **fields):
        updated = (
            PurchaseRequest.objects
            .filter(pk=purchase.pk, status=PurchaseStatus.PENDING)
            .update(**fields)
        )
        if not updated:
            raise AlreadyProcessedError()
