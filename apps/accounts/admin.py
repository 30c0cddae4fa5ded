from django.contrib import admin
from .models import Account


@admin.register(Account)
class AccountAdmin(admin.ModelAdmin):
    """
    Admin interface for student accounts.

    Balance edits made here bypass the services and are not logged.
    """

    list_display = ['code', 'name', 'balance', 'classroom', 'created_at']
    list_filter = ['classroom']
    search_fields = ['code', 'name']
    readonly_fields = ['id', 'created_at', 'updated_at']
    ordering = ['classroom', 'name']
