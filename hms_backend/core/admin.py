from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as DjangoUserAdmin

from .models import AuditLog, Role, User


@admin.register(Role)
class RoleAdmin(admin.ModelAdmin):
    list_display = ("name", "label")
    search_fields = ("name", "label")


@admin.register(User)
class UserAdmin(DjangoUserAdmin):
    list_display = ("username", "email", "first_name", "last_name", "role", "is_active")
    list_filter = ("role", "is_active", "is_staff")
    fieldsets = DjangoUserAdmin.fieldsets + (
        ("Role", {"fields": ("role",)}),
    )


@admin.register(AuditLog)
class AuditLogAdmin(admin.ModelAdmin):
    """Read-only view of the audit trail."""

    list_display = ("timestamp", "action", "role_name", "user", "target", "target_id", "patient_id")
    list_filter = ("action", "target", "role_name")
    search_fields = ("action", "user__username")
    readonly_fields = ("timestamp", "action", "role_name", "user", "target", "target_id", "patient_id", "meta")

    def has_add_permission(self, request):
        return False
