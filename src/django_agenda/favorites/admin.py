"""Django admin configuration for the favorites app."""

from django.contrib import admin

from django_agenda.favorites.models import Favorite


@admin.register(Favorite)
class FavoriteAdmin(admin.ModelAdmin):
    """Admin interface for browsing which users favorited which sessions."""

    list_display = ("session", "user", "created_at")
    list_select_related = ("session", "user")
    search_fields = ("session__title", "user__email")
    raw_id_fields = ("session", "user")
    readonly_fields = ("created_at",)
