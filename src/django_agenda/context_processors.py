"""Django context processors for django-agenda."""

from django.http import HttpRequest

from django_agenda.settings import FeaturesConfig, get_config


def agenda_features(request: HttpRequest) -> dict[str, FeaturesConfig]:  # noqa: ARG001
    """Expose feature toggle flags to templates.

    Add ``"django_agenda.context_processors.agenda_features"`` to the
    ``context_processors`` list in your ``TEMPLATES`` setting.

    Usage in templates::

        {% if agenda_features.favorites_enabled %}
            <button type="submit">Favorite</button>
        {% endif %}
    """
    return {"agenda_features": get_config().features}
