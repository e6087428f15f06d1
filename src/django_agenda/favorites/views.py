"""Views for the favorites app.

Favoriting is scoped to the signed-in user; both actions are idempotent and
redirect back to the home page with a flash message.
"""

from django.contrib import messages
from django.contrib.auth.mixins import LoginRequiredMixin
from django.http import HttpRequest, HttpResponse, HttpResponseRedirect
from django.shortcuts import get_object_or_404, redirect
from django.urls import reverse
from django.views import View

from django_agenda.catalog.models import ConferenceSession
from django_agenda.favorites.services import favorite, unfavorite
from django_agenda.features import FeatureRequiredMixin


class SessionMixin:
    """Mixin that resolves the session from the ``session_pk`` URL kwarg.

    Returns a 404 if no session matches.
    """

    conference_session: ConferenceSession
    kwargs: dict[str, str]

    def dispatch(self, request: HttpRequest, *args: str, **kwargs: str) -> HttpResponse:
        """Resolve the session before dispatching."""
        self.conference_session = get_object_or_404(ConferenceSession, pk=kwargs["session_pk"])
        return super().dispatch(request, *args, **kwargs)  # type: ignore[misc]


def _unfavorite_response(request: HttpRequest, session: ConferenceSession) -> HttpResponse:
    """Remove the signed-in user's favorite and redirect home with ``303 See Other``."""
    unfavorite(request.user, session)
    messages.success(request, "Session unfavorited.")
    return HttpResponseRedirect(reverse("catalog:home"), status=303)


class FavoriteView(LoginRequiredMixin, FeatureRequiredMixin, SessionMixin, View):
    """``POST`` favorites the session, ``DELETE`` unfavorites it."""

    required_feature = "favorites"

    def post(self, request: HttpRequest, **kwargs: str) -> HttpResponse:  # noqa: ARG002
        """Favorite the session for the signed-in user."""
        favorite(request.user, self.conference_session)
        messages.success(request, "Session favorited.")
        return redirect(reverse("catalog:home"))

    def delete(self, request: HttpRequest, **kwargs: str) -> HttpResponse:  # noqa: ARG002
        """Remove the signed-in user's favorite for the session."""
        return _unfavorite_response(request, self.conference_session)


class UnfavoriteView(LoginRequiredMixin, FeatureRequiredMixin, SessionMixin, View):
    """POST-only unfavorite endpoint for HTML forms, which cannot send ``DELETE``."""

    required_feature = "favorites"

    def post(self, request: HttpRequest, **kwargs: str) -> HttpResponse:  # noqa: ARG002
        """Remove the signed-in user's favorite for the session."""
        return _unfavorite_response(request, self.conference_session)
