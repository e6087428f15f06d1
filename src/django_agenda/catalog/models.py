"""Speaker, ConferenceSession, and ScheduleEntry models for the agenda."""

import datetime

from django.db import models

from django_agenda.catalog.exceptions import UnknownDay

# Weekday names used by the seed data, mapped to the event's calendar dates.
DAY_DATES: dict[str, datetime.date] = {
    "Wednesday": datetime.date(2026, 2, 25),
    "Thursday": datetime.date(2026, 2, 26),
    "Friday": datetime.date(2026, 2, 27),
}


def resolve_day(name: str) -> datetime.date:
    """Return the calendar date for a weekday name from :data:`DAY_DATES`.

    Raises:
        UnknownDay: If *name* is not one of the event's days.
    """
    try:
        return DAY_DATES[name]
    except KeyError:
        raise UnknownDay(name) from None


def normalize_tags(tags: object) -> list[str]:
    """Return *tags* as a sorted list of unique, non-empty strings."""
    if not tags:
        return []
    return sorted({str(tag).strip() for tag in tags if str(tag).strip()})


class Speaker(models.Model):
    """A presenter with a biography and an optional photo.

    Names are unique and stored without surrounding whitespace.  A speaker
    who still owns sessions cannot be deleted.
    """

    name = models.CharField(max_length=300, unique=True)
    bio = models.TextField()
    company = models.CharField(max_length=300, blank=True, default="")
    url = models.URLField(max_length=500, blank=True, default="")
    photo = models.FileField(upload_to="speakers/photos/", blank=True, default="")
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["name"]

    def __str__(self) -> str:
        return self.name

    def clean(self) -> None:
        super().clean()
        self.name = (self.name or "").strip()

    def save(self, *args: object, **kwargs: object) -> None:
        self.name = (self.name or "").strip()
        super().save(*args, **kwargs)

    @property
    def has_photo(self) -> bool:
        """Return whether a photo file is attached."""
        return bool(self.photo)


class ConferenceSession(models.Model):
    """A talk in the catalog, presented by a single speaker.

    The ``slug`` is fixed when the session is first created (see
    :func:`django_agenda.catalog.services.create_session`) and is never
    recomputed on later saves.  Deleting a session removes its schedule
    entry and every favorite pointing at it.
    """

    title = models.CharField(max_length=500)
    description = models.TextField()
    slug = models.SlugField(max_length=500, unique=True)
    tags = models.JSONField(blank=True, default=list)
    url = models.URLField(max_length=500, blank=True, default="")
    speaker = models.ForeignKey(
        Speaker,
        on_delete=models.PROTECT,
        related_name="sessions",
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["title"]

    def __str__(self) -> str:
        return self.title

    @property
    def is_scheduled(self) -> bool:
        """Return whether the session has a schedule entry."""
        return hasattr(self, "schedule_entry")


class ScheduleEntry(models.Model):
    """The day, time range, and room assigned to exactly one session.

    Two entries can never share the same ``(day, start_time, room)``, and a
    session has at most one entry.  Both rules are database constraints.
    """

    session = models.OneToOneField(
        ConferenceSession,
        on_delete=models.CASCADE,
        related_name="schedule_entry",
    )
    day = models.DateField(choices=[(date, name) for name, date in DAY_DATES.items()])
    start_time = models.TimeField()
    end_time = models.TimeField()
    room = models.CharField(max_length=200)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["day", "start_time", "pk"]
        verbose_name_plural = "schedule entries"
        constraints = [
            models.UniqueConstraint(
                fields=["day", "start_time", "room"],
                name="uniq_schedule_entry_day_start_room",
            ),
        ]

    def __str__(self) -> str:
        return f"{self.session} ({self.day_name()} {self.time_range()}, {self.room})"

    @property
    def speaker(self) -> Speaker:
        """Return the speaker of the scheduled session."""
        return self.session.speaker

    def day_name(self) -> str:
        """Return the weekday name of the entry's day, e.g. ``"Wednesday"``."""
        return self.day.strftime("%A")

    def time_range(self) -> str:
        """Return the 24-hour ``"HH:MM-HH:MM"`` range of the entry."""
        return f"{self.start_time.strftime('%H:%M')}-{self.end_time.strftime('%H:%M')}"
