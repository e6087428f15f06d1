"""The favorites ledger: per-user bookmarks of conference sessions.

Every function takes the acting user explicitly.  Creating and removing a
favorite are both idempotent, and uniqueness of ``(user, session)`` is left
to the database constraint on :class:`~django_agenda.favorites.models.Favorite`.
"""

import logging
from collections.abc import Iterable

from django.contrib.auth.models import AbstractBaseUser

from django_agenda.catalog.models import ConferenceSession
from django_agenda.favorites.models import Favorite

logger = logging.getLogger(__name__)


def favorite(user: AbstractBaseUser, session: ConferenceSession) -> Favorite:
    """Mark *session* as a favorite of *user*.

    Returns the existing row when the pair is already favorited.  Two
    concurrent calls cannot both insert: ``get_or_create`` falls back to a
    lookup when the unique constraint rejects the second insert.

    Returns:
        The favorite for the pair.
    """
    fav, created = Favorite.objects.get_or_create(user=user, session=session)
    if created:
        logger.debug("User %s favorited session %s", user.pk, session.pk)
    return fav


def unfavorite(user: AbstractBaseUser, session: ConferenceSession) -> int:
    """Remove *user*'s favorite for *session*, if any.

    Other users' favorites of the same session are never touched.

    Returns:
        The number of rows removed (``0`` when nothing was favorited).
    """
    deleted, _ = Favorite.objects.filter(user=user, session=session).delete()
    if deleted:
        logger.debug("User %s unfavorited session %s", user.pk, session.pk)
    return deleted


def favorites_of(user: AbstractBaseUser, sessions: Iterable[ConferenceSession] | None = None) -> set[int]:
    """Return the ids of the sessions *user* has favorited.

    Args:
        user: The acting user.  Anonymous users have no favorites.
        sessions: Optional batch of sessions to restrict the lookup to.

    Returns:
        A set of session primary keys, fetched in a single query.
    """
    if not getattr(user, "is_authenticated", False):
        return set()
    qs = Favorite.objects.filter(user=user)
    if sessions is not None:
        qs = qs.filter(session__in=[session.pk for session in sessions])
    return set(qs.values_list("session_id", flat=True))
