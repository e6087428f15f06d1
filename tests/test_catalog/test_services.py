"""Tests for session construction and scheduling helpers."""

from datetime import date, time

import pytest
from django.core.exceptions import NON_FIELD_ERRORS, ValidationError

from django_agenda.catalog.exceptions import AlreadyScheduled, DuplicateSlug, SlotConflict
from django_agenda.catalog.models import ConferenceSession, ScheduleEntry, Speaker
from django_agenda.catalog.services import build_session, create_session, schedule_session


@pytest.fixture
def speaker(db):
    return Speaker.objects.create(name="Anna Lindqvist", bio="Refactoring enthusiast.")


@pytest.fixture
def legacy(speaker):
    return create_session(title="Taming Legacy Code", description="Changing old code.", speaker=speaker)


@pytest.fixture
def agentic(speaker):
    return create_session(title="Agentic AI in Practice", description="Shipping agents.", speaker=speaker)


class TestBuildSession:
    def test_derives_slug_from_title(self):
        session = build_session(title="My Great Talk", description="d", speaker=Speaker(name="x", bio="y"))
        assert session.slug == "my-great-talk"
        assert session.pk is None

    def test_keeps_explicit_slug(self):
        session = build_session(
            title="My Great Talk", description="d", speaker=Speaker(name="x", bio="y"), slug="custom-slug"
        )
        assert session.slug == "custom-slug"

    def test_deduplicates_and_sorts_tags(self):
        session = build_session(
            title="t", description="d", speaker=Speaker(name="x", bio="y"), tags=["php", "ai", "php", " "]
        )
        assert session.tags == ["ai", "php"]


@pytest.mark.django_db
class TestCreateSession:
    def test_generates_slug_from_title(self, speaker):
        session = create_session(title="My Great Talk", description="A description", speaker=speaker)
        session.refresh_from_db()
        assert session.slug == "my-great-talk"

    def test_does_not_overwrite_explicit_slug(self, speaker):
        session = create_session(
            title="My Great Talk", description="A description", speaker=speaker, slug="custom-slug"
        )
        session.refresh_from_db()
        assert session.slug == "custom-slug"

    def test_duplicate_slug_raises(self, speaker, legacy):
        with pytest.raises(DuplicateSlug) as exc_info:
            create_session(title="Different Title", description="Desc", speaker=speaker, slug=legacy.slug)
        assert "slug" in exc_info.value.message_dict
        assert exc_info.value.error_dict["slug"][0].code == "unique"
        assert ConferenceSession.objects.count() == 1

    def test_duplicate_derived_slug_is_not_disambiguated(self, speaker, legacy):
        with pytest.raises(DuplicateSlug):
            create_session(title="Taming  Legacy  Code!", description="Desc", speaker=speaker)
        assert list(ConferenceSession.objects.values_list("slug", flat=True)) == ["taming-legacy-code"]

    def test_duplicate_slug_is_a_validation_error(self, speaker, legacy):
        with pytest.raises(ValidationError):
            create_session(title="Taming Legacy Code", description="Desc", speaker=speaker)

    def test_missing_title_is_a_field_error(self, speaker):
        with pytest.raises(ValidationError) as exc_info:
            create_session(title="", description="Desc", speaker=speaker)
        assert "title" in exc_info.value.message_dict
        assert not ConferenceSession.objects.exists()

    def test_missing_description_is_a_field_error(self, speaker):
        with pytest.raises(ValidationError) as exc_info:
            create_session(title="Title", description="", speaker=speaker)
        assert "description" in exc_info.value.message_dict


@pytest.mark.django_db
class TestScheduleSession:
    def test_creates_entry(self, legacy):
        entry = schedule_session(
            legacy, day=date(2026, 2, 25), start_time=time(9), end_time=time(10, 30), room="ST-Laurent 5"
        )
        assert entry.pk is not None
        assert legacy.schedule_entry == entry

    def test_occupied_slot_raises_slot_conflict(self, legacy, agentic):
        schedule_session(legacy, day=date(2026, 2, 25), start_time=time(9), end_time=time(10), room="Room 1")
        with pytest.raises(SlotConflict) as exc_info:
            schedule_session(agentic, day=date(2026, 2, 25), start_time=time(9), end_time=time(11), room="Room 1")
        assert NON_FIELD_ERRORS in exc_info.value.message_dict
        assert ScheduleEntry.objects.get(room="Room 1").session == legacy

    def test_same_time_different_room_is_allowed(self, legacy, agentic):
        schedule_session(legacy, day=date(2026, 2, 25), start_time=time(9), end_time=time(10), room="Room 1")
        schedule_session(agentic, day=date(2026, 2, 25), start_time=time(9), end_time=time(10), room="Room 2")
        assert ScheduleEntry.objects.count() == 2

    def test_same_room_different_day_is_allowed(self, legacy, agentic):
        schedule_session(legacy, day=date(2026, 2, 25), start_time=time(9), end_time=time(10), room="Room 1")
        schedule_session(agentic, day=date(2026, 2, 26), start_time=time(9), end_time=time(10), room="Room 1")
        assert ScheduleEntry.objects.count() == 2

    def test_second_entry_for_session_raises(self, legacy):
        schedule_session(legacy, day=date(2026, 2, 25), start_time=time(9), end_time=time(10), room="Room 1")
        with pytest.raises(AlreadyScheduled) as exc_info:
            schedule_session(legacy, day=date(2026, 2, 26), start_time=time(9), end_time=time(10), room="Room 1")
        assert "session" in exc_info.value.message_dict

    def test_day_outside_event_is_rejected(self, legacy):
        with pytest.raises(ValidationError) as exc_info:
            schedule_session(legacy, day=date(2026, 3, 2), start_time=time(9), end_time=time(10), room="Room 1")
        assert "day" in exc_info.value.message_dict
        assert not ScheduleEntry.objects.exists()
