from django.contrib import admin, messages
from django.utils.html import format_html

from apps.core.exceptions import ServiceError

from .models import PurchaseRequest, PurchaseStatus
from .services import PurchaseWorkflowService


@admin.register(PurchaseRequest)
class PurchaseRequestAdmin(admin.ModelAdmin):
    """
    Admin interface for purchase requests.

    Snapshot fields are read-only; decisions go through the workflow
    service so the admin obeys the same stock and balance rules as the API.
    """

    list_display = [
        'account_name',
        'account_code',
        'product_name',
        'price',
        'status_badge',
        'classroom',
        'created_at',
        'decided_at',
    ]

    list_filter = [
        'status',
        'classroom',
        'created_at',
    ]

    search_fields = [
        'account_code',
        'account_name',
        'product_name',
    ]

    readonly_fields = [
        'id',
        'account',
        'product',
        'classroom',
        'account_code',
        'account_name',
        'product_name',
        'price',
        'status',
        'created_at',
        'approved_at',
        'decided_at',
    ]

    date_hierarchy = 'created_at'
    ordering = ['-created_at']

    fieldsets = (
        ('Request', {
            'fields': (
                'account',
                'product',
                'classroom',
            )
        }),
        ('Snapshot', {
            'fields': (
                'account_code',
                'account_name',
                'product_name',
                'price',
            )
        }),
        ('Decision', {
            'fields': (
                'status',
                'approved_at',
                'decided_at',
            )
        }),
        ('Metadata', {
            'fields': ('id', 'created_at'),
            'classes': ('collapse',),
        }),
    )

    actions = ['approve_selected', 'reject_selected']

    def status_badge(self, obj):
        """Display request status as colored badge."""
        colors = {
            PurchaseStatus.PENDING: ('#E5C49A', '#2C1810'),
            PurchaseStatus.APPROVED: ('#6B8E5E', 'white'),
            PurchaseStatus.REJECTED: ('#B85C5C', 'white'),
        }
        bg, fg = colors.get(obj.status, ('#ccc', '#666'))
        return format_html(
            '<span style="background: {}; color: {}; padding: 3px 8px; '
            'border-radius: 10px; font-size: 11px;">{}</span>',
            bg, fg, obj.get_status_display()
        )
    status_badge.short_description = 'Status'
    status_badge.admin_order_field = 'status'

    def _decide(self, request, queryset, approve):
        done, failed = 0, []
        for purchase in queryset.filter(status=PurchaseStatus.PENDING):
            try:
                PurchaseWorkflowService.decide(
                    request_id=purchase.id,
                    approve=approve,
                    classroom_id=purchase.classroom_id,
                )
                done += 1
            except ServiceError as exc:
                failed.append(f'{purchase.account_name}: {exc.message}')

        verb = 'Approved' if approve else 'Rejected'
        self.message_user(request, f'{verb} {done} request(s).')
        if failed:
            self.message_user(request, '; '.join(failed), level=messages.WARNING)

    @admin.action(description='Approve selected pending requests')
    def approve_selected(self, request, queryset):
        self._decide(request, queryset, approve=True)

    @admin.action(description='Reject selected pending requests')
    def reject_selected(self, request, queryset):
        self._decide(request, queryset, approve=False)

    def has_add_permission(self, request):
        """Requests are created by students through the API."""
        return False

    def get_queryset(self, request):
        """Optimize query with select_related."""
        qs = super().get_queryset(request)
        return qs.select_related('account', 'product', 'classroom')
