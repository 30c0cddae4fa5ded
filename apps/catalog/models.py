from django.db import models
from django.core.validators import MinValueValidator
import uuid


class Product(models.Model):
    """Shop item students can redeem points for."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=200)
    description = models.TextField(blank=True)

    # Price in points
    price = models.IntegerField(validators=[MinValueValidator(0)])

    # Units left; approvals take exactly one
    stock = models.IntegerField(default=0, validators=[MinValueValidator(0)])

    classroom = models.ForeignKey(
        'classrooms.Classroom',
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name='products'
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'products'
        constraints = [
            models.CheckConstraint(condition=models.Q(price__gte=0), name='product_price_non_negative'),
            models.CheckConstraint(condition=models.Q(stock__gte=0), name='product_stock_non_negative'),
        ]
        indexes = [
            models.Index(fields=['classroom', 'created_at'], name='products_classroom_created_idx'),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.name} ({self.price} pts, {self.stock} left)"

    @property
    def in_stock(self):
        return self.stock > 0
