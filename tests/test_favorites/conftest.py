import pytest
from django.contrib.auth import get_user_model

from django_agenda.catalog.models import ConferenceSession, Speaker

User = get_user_model()


@pytest.fixture
def user(db):
    return User.objects.create_user(email="reader@example.com", password="secret")


@pytest.fixture
def other_user(db):
    return User.objects.create_user(email="other@example.com", password="secret")


@pytest.fixture
def speaker(db):
    return Speaker.objects.create(name="Anna Lindqvist", bio="Refactoring enthusiast.")


@pytest.fixture
def conference_session(speaker):
    return ConferenceSession.objects.create(
        title="Taming Legacy Code",
        description="Changing old code safely.",
        slug="taming-legacy-code",
        speaker=speaker,
    )


@pytest.fixture
def second_session(speaker):
    return ConferenceSession.objects.create(
        title="Agentic AI in Practice",
        description="Shipping agents.",
        slug="agentic-ai-in-practice",
        speaker=speaker,
    )
