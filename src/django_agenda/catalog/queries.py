"""Read-side query functions for the session catalog and schedule grid.

Every function returns a fully evaluated list so callers get a concrete
sequence of model instances rather than a lazily composed queryset.
"""

import datetime

from django_agenda.catalog.models import ConferenceSession, ScheduleEntry


def _entries():
    return ScheduleEntry.objects.select_related("session", "session__speaker").order_by("day", "start_time", "pk")


def chronological() -> list[ScheduleEntry]:
    """Return all schedule entries ordered by day, then start time.

    Entries sharing a day and start time keep their insertion order.
    """
    return list(_entries())


def on_day(day: datetime.date) -> list[ScheduleEntry]:
    """Return the entries scheduled on *day*, in chronological order."""
    return list(_entries().filter(day=day))


def in_room(room: str) -> list[ScheduleEntry]:
    """Return the entries held in *room*, in chronological order."""
    return list(_entries().filter(room=room))


def matching(day: datetime.date | None = None, room: str | None = None) -> list[ScheduleEntry]:
    """Return the entries on *day* and in *room*, in chronological order.

    Either filter may be omitted; with neither, this is :func:`chronological`.
    """
    entries = _entries()
    if day is not None:
        entries = entries.filter(day=day)
    if room:
        entries = entries.filter(room=room)
    return list(entries)


def rooms() -> list[str]:
    """Return the distinct room names in use, sorted alphabetically."""
    return list(ScheduleEntry.objects.order_by("room").values_list("room", flat=True).distinct())


def scheduled() -> list[ConferenceSession]:
    """Return the sessions that have a schedule entry."""
    return list(
        ConferenceSession.objects.filter(schedule_entry__isnull=False).select_related("speaker", "schedule_entry")
    )


def unscheduled() -> list[ConferenceSession]:
    """Return the sessions without a schedule entry."""
    return list(ConferenceSession.objects.filter(schedule_entry__isnull=True).select_related("speaker"))


def tagged(tag: str) -> list[ConferenceSession]:
    """Return the sessions carrying *tag*.

    Tags live in a JSON list, so membership is checked in Python to stay
    portable across database backends.
    """
    return [session for session in ConferenceSession.objects.select_related("speaker") if tag in session.tags]


def preloaded() -> list[ConferenceSession]:
    """Return every session ordered by title with speaker and schedule entry loaded."""
    return list(ConferenceSession.objects.select_related("speaker", "schedule_entry").order_by("title"))
