"""Django admin configuration for the accounts app."""

from django.contrib import admin

from django_agenda.accounts.models import User


@admin.register(User)
class UserAdmin(admin.ModelAdmin):
    """Admin interface for attendee accounts.

    Passwords are never edited here; the hash is shown read-only.
    """

    list_display = ("email", "is_active", "is_staff", "date_joined", "last_login")
    list_filter = ("is_active", "is_staff")
    search_fields = ("email",)
    readonly_fields = ("password", "last_login", "date_joined")
    filter_horizontal = ("groups", "user_permissions")
