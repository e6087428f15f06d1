"""Tests for the catalog admin configuration."""

import pytest
from django.contrib.admin.sites import site
from django.test import RequestFactory
from django.urls import reverse

from django_agenda.catalog.models import ConferenceSession, Speaker


@pytest.fixture
def conference_session(db):
    speaker = Speaker.objects.create(name="Anna Lindqvist", bio="Refactoring enthusiast.")
    return ConferenceSession.objects.create(
        title="Taming Legacy Code",
        description="Changing old code safely.",
        slug="taming-legacy-code",
        speaker=speaker,
    )


@pytest.mark.django_db
class TestConferenceSessionAdmin:
    def test_slug_editable_on_add(self):
        model_admin = site._registry[ConferenceSession]
        request = RequestFactory().get("/")

        assert "slug" not in model_admin.get_readonly_fields(request)
        assert model_admin.get_prepopulated_fields(request) == {"slug": ("title",)}

    def test_slug_locked_after_creation(self, conference_session):
        model_admin = site._registry[ConferenceSession]
        request = RequestFactory().get("/")

        assert "slug" in model_admin.get_readonly_fields(request, conference_session)
        assert model_admin.get_prepopulated_fields(request, conference_session) == {}

    def test_change_page_renders(self, admin_client, conference_session):
        url = reverse("admin:agenda_catalog_conferencesession_change", args=[conference_session.pk])

        response = admin_client.get(url)

        assert response.status_code == 200
        assert "Taming Legacy Code" in response.content.decode()

    def test_speaker_changelist_renders(self, admin_client, conference_session):
        response = admin_client.get(reverse("admin:agenda_catalog_speaker_changelist"))

        assert response.status_code == 200
        assert "Anna Lindqvist" in response.content.decode()
