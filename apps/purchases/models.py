from django.db import models
from django.core.validators import MinValueValidator
import uuid


class PurchaseStatus(models.TextChoices):
    PENDING = 'pending', 'Pending'
    APPROVED = 'approved', 'Approved'
    REJECTED = 'rejected', 'Rejected'


class PurchaseRequest(models.Model):
    """
    A student's request to redeem points for one unit of a product.

    Account and product details are snapshotted at request time. Status
    moves once from pending to approved or rejected and never back.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    classroom = models.ForeignKey(
        'classrooms.Classroom',
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name='purchase_requests'
    )

    # Deleting the student deletes their history
    account = models.ForeignKey(
        'accounts.Account',
        on_delete=models.CASCADE,
        related_name='purchase_requests'
    )
    # Deleting the product keeps the request and its snapshot
    product = models.ForeignKey(
        'catalog.Product',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='purchase_requests'
    )

    # Snapshot taken at request time
    account_code = models.CharField(max_length=64)
    account_name = models.CharField(max_length=100)
    product_name = models.CharField(max_length=200)
    price = models.IntegerField(validators=[MinValueValidator(0)])

    status = models.CharField(
        max_length=20,
        choices=PurchaseStatus.choices,
        default=PurchaseStatus.PENDING
    )

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True)
    approved_at = models.DateTimeField(null=True, blank=True)
    decided_at = models.DateTimeField(null=True, blank=True)

    class Meta:
        db_table = 'purchase_requests'
        indexes = [
            models.Index(fields=['classroom', 'status'], name='purchases_classroom_status_idx'),
            models.Index(fields=['account', 'created_at'], name='purchases_account_created_idx'),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.account_name} - {self.product_name} ({self.price} pts, {self.status})"

    @property
    def is_pending(self):
        return self.status == PurchaseStatus.PENDING
