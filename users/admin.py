from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as DjangoUserAdmin

from core.mail import send_quietly
from .models import User
from .services import VERIFY, send_account_email


@admin.register(User)
class UserAdmin(DjangoUserAdmin):
    fieldsets = DjangoUserAdmin.fieldsets + (
        ("Marketplace", {"fields": ("phone", "is_vendor", "is_verified")}),
    )
    list_display = ("username", "email", "is_vendor", "is_verified", "is_staff", "is_active")
    list_filter = ("is_vendor", "is_verified", "is_staff", "is_active")

    @admin.action(description="Make vendor")
    def make_vendor(self, request, queryset):
        updated = queryset.update(is_vendor=True)
        self.message_user(request, f"Vendors assigned: {updated}")

    @admin.action(description="Resend verification email")
    def resend_verification(self, request, queryset):
        sent = 0
        for user in queryset.filter(is_verified=False).exclude(email=''):
            sent += send_quietly(send_account_email, user, VERIFY)
        self.message_user(request, f"Verification emails sent: {sent}")

    actions = ["make_vendor", "resend_verification"]
