from django.db import models
from django.db.models import Q
import uuid


class Account(models.Model):
    """Student points account, identified by its login code within a scope."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    code = models.CharField(max_length=64, db_index=True)
    name = models.CharField(max_length=100)

    # Points; admin adjustments may drive this below zero
    balance = models.IntegerField(default=0)

    classroom = models.ForeignKey(
        'classrooms.Classroom',
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name='accounts'
    )

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'accounts'
        constraints = [
            models.UniqueConstraint(
                fields=['classroom', 'code'],
                name='unique_account_code_per_classroom',
            ),
            models.UniqueConstraint(
                fields=['code'],
                condition=Q(classroom__isnull=True),
                name='unique_account_code_unscoped',
            ),
        ]
        indexes = [
            models.Index(fields=['classroom', 'name'], name='accounts_classroom_name_idx'),
        ]
        ordering = ['name']

    def __str__(self):
        return f"{self.name} ({self.code})"

    def can_afford(self, price):
        return self.balance >= price
