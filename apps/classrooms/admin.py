# ==========================================
# apps/classrooms/admin.py
# ==========================================

from django.contrib import admin
from .models import Classroom, Teacher


class TeacherInline(admin.TabularInline):
    """Inline admin for teachers bound to a classroom."""
    model = Teacher
    extra = 0
    fields = ['name', 'password', 'created_at']
    readonly_fields = ['created_at']


@admin.register(Classroom)
class ClassroomAdmin(admin.ModelAdmin):
    """Admin interface for Classrooms."""

    list_display = ['name', 'get_student_count', 'get_product_count', 'created_at']
    search_fields = ['name', 'description']
    readonly_fields = ['id', 'created_at', 'updated_at']
    inlines = [TeacherInline]

    def get_student_count(self, obj):
        return obj.accounts.count()
    get_student_count.short_description = 'Students'

    def get_product_count(self, obj):
        return obj.products.count()
    get_product_count.short_description = 'Products'


@admin.register(Teacher)
class TeacherAdmin(admin.ModelAdmin):
    """Admin interface for Teachers."""

    list_display = ['__str__', 'classroom', 'created_at']
    list_filter = ['classroom']
    search_fields = ['name']
    readonly_fields = ['id', 'created_at']
