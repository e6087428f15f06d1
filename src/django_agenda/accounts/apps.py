"""Django app configuration for the accounts app."""

from django.apps import AppConfig


class DjangoAgendaAccountsConfig(AppConfig):
    """Configuration for the accounts app."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "django_agenda.accounts"
    label = "agenda_accounts"
    verbose_name = "Accounts"
