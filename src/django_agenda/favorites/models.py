"""Favorite model linking users to the sessions they bookmarked."""

from django.conf import settings
from django.db import models


class Favorite(models.Model):
    """A user's bookmark of a conference session.

    Each ``(user, session)`` pair exists at most once; the database
    constraint is what keeps concurrent favorite requests from creating
    duplicates.  Deleting either the user or the session removes the row.
    """

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="favorites",
    )
    session = models.ForeignKey(
        "agenda_catalog.ConferenceSession",
        on_delete=models.CASCADE,
        related_name="favorites",
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-created_at"]
        constraints = [
            models.UniqueConstraint(
                fields=["user", "session"],
                name="uniq_favorite_user_session",
            ),
        ]

    def __str__(self) -> str:
        return f"{self.user}: {self.session}"
