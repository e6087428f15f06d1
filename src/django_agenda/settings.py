"""Typed configuration for django-agenda.

Reads a single ``DJANGO_AGENDA`` dict from Django settings and exposes it as
composed, frozen dataclasses with sensible defaults.

Usage::

    from django_agenda.settings import get_config

    config = get_config()
    config.seed_data_dir
    config.features.favorites_enabled
"""

import functools
from collections.abc import Mapping
from dataclasses import dataclass, field

from django.conf import settings
from django.test.signals import setting_changed


@dataclass(frozen=True, slots=True)
class FeaturesConfig:
    """Feature toggles for enabling/disabling django-agenda modules.

    All features are enabled by default. Set to ``False`` in
    ``DJANGO_AGENDA['features']`` to disable.
    """

    favorites_enabled: bool = True
    public_ui_enabled: bool = True


@dataclass(frozen=True, slots=True)
class AgendaConfig:
    """Top-level django-agenda configuration."""

    features: FeaturesConfig = field(default_factory=FeaturesConfig)
    seed_data_dir: str = "confoo-2026-data"
    orphan_session_description: str = "Workshop session"
    fallback_duration_minutes: int = 60
    photo_content_type: str = "image/jpeg"


@functools.lru_cache(maxsize=1)
def get_config() -> AgendaConfig:
    """Build and return the agenda configuration.

    Reads ``settings.DJANGO_AGENDA`` (a plain dict) and returns a frozen
    :class:`AgendaConfig`.  The result is cached; the cache is cleared
    automatically when Django's ``setting_changed`` signal fires (e.g. inside
    ``override_settings``).
    """
    raw = getattr(settings, "DJANGO_AGENDA", {})
    if not isinstance(raw, Mapping):
        msg = "DJANGO_AGENDA must be a mapping (dict-like object)"
        raise TypeError(msg)
    raw_data = dict(raw)

    features_data = raw_data.pop("features", {})
    if not isinstance(features_data, Mapping):
        msg = "DJANGO_AGENDA['features'] must be a mapping (dict-like object)"
        raise TypeError(msg)

    config = AgendaConfig(
        features=FeaturesConfig(**dict(features_data)),
        **raw_data,
    )
    _validate_agenda_config(config)
    return config


def _validate_agenda_config(config: AgendaConfig) -> None:
    """Validate high-impact configuration values with clear error messages."""
    if not isinstance(config.fallback_duration_minutes, int) or config.fallback_duration_minutes <= 0:
        msg = "DJANGO_AGENDA['fallback_duration_minutes'] must be a positive integer"
        raise ValueError(msg)
    if not isinstance(config.orphan_session_description, str) or not config.orphan_session_description.strip():
        msg = "DJANGO_AGENDA['orphan_session_description'] must be a non-empty string"
        raise ValueError(msg)
    if not isinstance(config.seed_data_dir, str) or not config.seed_data_dir.strip():
        msg = "DJANGO_AGENDA['seed_data_dir'] must be a non-empty string"
        raise ValueError(msg)


def _clear_config_cache(*, setting: str, **kwargs: object) -> None:  # noqa: ARG001
    """Clear the cached config when Django settings change during tests."""
    if setting == "DJANGO_AGENDA":
        get_config.cache_clear()


setting_changed.connect(_clear_config_cache, dispatch_uid="django_agenda.settings.clear_config_cache")
