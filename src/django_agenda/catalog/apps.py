"""Django app configuration for the session catalog app."""

from django.apps import AppConfig


class DjangoAgendaCatalogConfig(AppConfig):
    """Configuration for the session catalog app."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "django_agenda.catalog"
    label = "agenda_catalog"
    verbose_name = "Session Catalog"
