# ==========================================
# apps/classrooms/models.py
# ==========================================

from django.db import models
import uuid


class Classroom(models.Model):
    """Tenant grouping students, products and purchase requests."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=200, unique=True)
    description = models.TextField(blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'classrooms'
        ordering = ['name']

    def __str__(self):
        return self.name


class Teacher(models.Model):
    """Teacher credential; the password doubles as the login code."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    password = models.CharField(max_length=128, unique=True)
    name = models.CharField(max_length=100, blank=True)
    classroom = models.ForeignKey(
        Classroom,
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name='teachers'
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'teachers'
        ordering = ['name', 'created_at']

    def __str__(self):
        return self.name or f"Teacher {str(self.id)[:8]}"
