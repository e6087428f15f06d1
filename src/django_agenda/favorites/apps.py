"""Django app configuration for the favorites app."""

from django.apps import AppConfig


class DjangoAgendaFavoritesConfig(AppConfig):
    """Configuration for the favorites app."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "django_agenda.favorites"
    label = "agenda_favorites"
    verbose_name = "Favorites"
