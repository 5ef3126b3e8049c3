# ==========================================================
# memberapp/admin.py
# ==========================================================
from django.contrib import admin

from .models import Member


# ==========================================================
# MEMBER ADMIN (tree fields are written by joins only)
# ==========================================================
@admin.register(Member)
class MemberAdmin(admin.ModelAdmin):
    list_display = (
        "member_code",
        "name",
        "email",
        "mobile",
        "sponsor",
        "left_child",
        "right_child",
        "left_count",
        "right_count",
        "created_at",
    )
    search_fields = ("member_code", "name", "email", "mobile")
    ordering = ("member_code",)
    readonly_fields = (
        "sponsor",
        "left_child",
        "right_child",
        "left_count",
        "right_count",
        "password",
        "created_at",
    )

    def has_add_permission(self, request):
        return False

    def has_delete_permission(self, request, obj=None):
        return False
