"""Construction helpers for catalog records.

Sessions and schedule entries are created through these functions rather
than bare ``objects.create`` calls so that the slug is computed before the
row reaches the database and so that constraint violations come back as
field-level validation errors.
"""

import datetime
import logging
from collections.abc import Iterable

from django.db import IntegrityError, transaction

from django_agenda.catalog.exceptions import AlreadyScheduled, DuplicateSlug, SlotConflict
from django_agenda.catalog.models import ConferenceSession, ScheduleEntry, Speaker, normalize_tags
from django_agenda.catalog.slugs import parameterize

logger = logging.getLogger(__name__)


def build_session(
    *,
    title: str,
    description: str,
    speaker: Speaker,
    slug: str | None = None,
    tags: Iterable[str] = (),
    url: str = "",
) -> ConferenceSession:
    """Return an unsaved session with its slug resolved.

    An explicit *slug* is kept verbatim; otherwise the slug is derived from
    *title* with :func:`~django_agenda.catalog.slugs.parameterize`.
    """
    return ConferenceSession(
        title=title,
        description=description,
        speaker=speaker,
        slug=slug or parameterize(title or ""),
        tags=normalize_tags(tags),
        url=url or "",
    )


def create_session(
    *,
    title: str,
    description: str,
    speaker: Speaker,
    slug: str | None = None,
    tags: Iterable[str] = (),
    url: str = "",
) -> ConferenceSession:
    """Validate and persist a new session.

    Args:
        title: The session title; required.
        description: The session abstract; required.
        speaker: The presenting speaker.
        slug: Optional explicit slug.  When omitted the slug is derived
            from *title*.
        tags: Tag strings; duplicates are dropped.
        url: Optional external link.

    Returns:
        The saved session.

    Raises:
        ValidationError: If a required field is missing.
        DuplicateSlug: If another session already uses the slug.
    """
    session = build_session(title=title, description=description, speaker=speaker, slug=slug, tags=tags, url=url)
    session.full_clean(validate_unique=False, validate_constraints=False)
    try:
        with transaction.atomic():
            session.save(force_insert=True)
    except IntegrityError:
        if ConferenceSession.objects.filter(slug=session.slug).exists():
            raise DuplicateSlug(session.slug) from None
        raise
    logger.debug("Created session %s", session.slug)
    return session


def schedule_session(
    session: ConferenceSession,
    *,
    day: datetime.date,
    start_time: datetime.time,
    end_time: datetime.time,
    room: str,
) -> ScheduleEntry:
    """Assign *session* to a room at a day and time.

    Args:
        session: The session to schedule.  It must not have an entry yet.
        day: One of the event's dates.
        start_time: Start of the slot.
        end_time: End of the slot.
        room: Room name.

    Returns:
        The new schedule entry.

    Raises:
        ValidationError: If a required field is missing or the day is not
            an event day.
        SlotConflict: If the room is already booked at that day and start.
        AlreadyScheduled: If the session already has an entry.
    """
    entry = ScheduleEntry(session=session, day=day, start_time=start_time, end_time=end_time, room=room)
    entry.full_clean(validate_unique=False, validate_constraints=False)
    try:
        with transaction.atomic():
            entry.save(force_insert=True)
    except IntegrityError:
        if ScheduleEntry.objects.filter(day=day, start_time=start_time, room=room).exists():
            raise SlotConflict(day, start_time, room) from None
        if ScheduleEntry.objects.filter(session=session).exists():
            raise AlreadyScheduled(session) from None
        raise
    logger.debug("Scheduled %s in %s", session.slug, room)
    return entry
