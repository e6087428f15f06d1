"""Errors raised when a write would break a catalog uniqueness invariant.

Each error is a :class:`~django.core.exceptions.ValidationError` keyed by
the offending field so callers (forms, views, the admin) can report it the
same way as any other field-level validation failure.  They are raised
after the database rejected the write, never from an in-memory pre-check.
"""

from django.core.exceptions import NON_FIELD_ERRORS, ValidationError


class DuplicateSlug(ValidationError):
    """A session with the same slug already exists."""

    def __init__(self, slug: str) -> None:
        self.slug = slug
        super().__init__(
            {"slug": [ValidationError(f"A session with slug '{slug}' already exists.", code="unique")]},
        )


class SlotConflict(ValidationError):
    """Another session already occupies the room at that day and start time."""

    def __init__(self, day: object, start_time: object, room: str) -> None:
        self.day = day
        self.start_time = start_time
        self.room = room
        super().__init__(
            {
                NON_FIELD_ERRORS: [
                    ValidationError(
                        f"{room} is already booked on {day} at {start_time}.",
                        code="unique_together",
                    )
                ]
            },
        )


class AlreadyScheduled(ValidationError):
    """The session already has a schedule entry."""

    def __init__(self, session: object) -> None:
        self.session = session
        super().__init__(
            {"session": [ValidationError(f"'{session}' is already scheduled.", code="unique")]},
        )


class UnknownDay(KeyError):
    """A day name that is not part of the event's day table."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(name)

    def __str__(self) -> str:
        return f"Unknown conference day: {self.name!r}"
