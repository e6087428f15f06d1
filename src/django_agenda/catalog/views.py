"""Views for the session catalog app.

Provides the signed-in home page, the schedule grid (HTML and JSON), and
read-only session and speaker pages.
"""

import datetime
import itertools

from django.contrib.auth.mixins import LoginRequiredMixin
from django.db.models import QuerySet
from django.http import HttpRequest, JsonResponse
from django.shortcuts import get_object_or_404
from django.views import View
from django.views.generic import DetailView, ListView, TemplateView

from django_agenda.catalog import queries
from django_agenda.catalog.models import ConferenceSession, ScheduleEntry, Speaker
from django_agenda.favorites.services import favorites_of
from django_agenda.features import FeatureRequiredMixin


class HomeView(LoginRequiredMixin, FeatureRequiredMixin, TemplateView):
    """Signed-in landing page listing every session with favorite toggles.

    The user's favorites are fetched in a single query as a set of session
    ids so each row can render its toggle without another lookup.
    """

    required_feature = "public_ui"
    template_name = "django_agenda/catalog/home.html"

    def get_context_data(self, **kwargs: object) -> dict[str, object]:
        """Add ``conference_sessions`` and ``favorite_session_ids`` to context."""
        context = super().get_context_data(**kwargs)
        sessions = queries.preloaded()
        context["conference_sessions"] = sessions
        context["favorite_session_ids"] = favorites_of(self.request.user, sessions)
        return context


def _filter_entries(request: HttpRequest) -> list[ScheduleEntry]:
    """Return chronological entries narrowed by ``?day=`` and ``?room=``.

    An unparsable ``day`` value is ignored.
    """
    day_param = request.GET.get("day", "")
    room = request.GET.get("room", "")
    day = None
    if day_param:
        try:
            day = datetime.date.fromisoformat(day_param)
        except ValueError:
            day = None

    return queries.matching(day=day, room=room)


class ScheduleView(FeatureRequiredMixin, TemplateView):
    """Schedule grid grouped by day.

    Each day is a ``(date, list[ScheduleEntry])`` tuple ordered by start time.
    """

    required_feature = "public_ui"
    template_name = "django_agenda/catalog/schedule.html"

    def get_context_data(self, **kwargs: object) -> dict[str, object]:
        """Build schedule context grouped by day.

        Returns:
            Context dict containing ``days``, ``rooms``, ``unscheduled`` and
            the active ``current_day``/``current_room`` filters.
        """
        context = super().get_context_data(**kwargs)
        entries = _filter_entries(self.request)
        context["days"] = [
            (day, list(day_entries)) for day, day_entries in itertools.groupby(entries, key=lambda e: e.day)
        ]
        context["rooms"] = queries.rooms()
        context["unscheduled"] = queries.unscheduled()
        context["current_day"] = self.request.GET.get("day", "")
        context["current_room"] = self.request.GET.get("room", "")
        return context


class ScheduleJSONView(FeatureRequiredMixin, View):
    """JSON endpoint for the schedule grid.

    Accepts the same ``?day=`` and ``?room=`` filters as :class:`ScheduleView`.
    """

    required_feature = "public_ui"

    def get(self, request: HttpRequest, **_kwargs: str) -> JsonResponse:
        """Return schedule entries as a JSON array.

        Args:
            request: The incoming HTTP request.
            **_kwargs: URL keyword arguments (unused).

        Returns:
            A JSON response with the schedule data.
        """
        data = [
            {
                "slug": entry.session.slug,
                "title": entry.session.title,
                "speaker": entry.session.speaker.name,
                "day": entry.day.isoformat(),
                "day_name": entry.day_name(),
                "time_range": entry.time_range(),
                "start_time": entry.start_time.strftime("%H:%M"),
                "end_time": entry.end_time.strftime("%H:%M"),
                "room": entry.room,
            }
            for entry in _filter_entries(request)
        ]
        return JsonResponse(data, safe=False)


class SessionDetailView(FeatureRequiredMixin, DetailView):
    """Detail view for a single session, looked up by slug."""

    required_feature = "public_ui"
    template_name = "django_agenda/catalog/session_detail.html"
    context_object_name = "conference_session"

    def get_object(self, queryset: QuerySet[ConferenceSession] | None = None) -> ConferenceSession:  # noqa: ARG002
        """Look up the session by slug.

        Raises:
            Http404: If no session matches the slug.
        """
        return get_object_or_404(
            ConferenceSession.objects.select_related("speaker", "schedule_entry"),
            slug=self.kwargs["slug"],
        )

    def get_context_data(self, **kwargs: object) -> dict[str, object]:
        """Add whether the signed-in user has favorited the session."""
        context = super().get_context_data(**kwargs)
        is_favorite = False
        if self.request.user.is_authenticated:
            is_favorite = self.object.pk in favorites_of(self.request.user, [self.object])
        context["is_favorite"] = is_favorite
        return context


class SpeakerListView(FeatureRequiredMixin, ListView):
    """List view of all speakers, ordered by name."""

    required_feature = "public_ui"
    template_name = "django_agenda/catalog/speaker_list.html"
    context_object_name = "speakers"

    def get_queryset(self) -> QuerySet[Speaker]:
        return Speaker.objects.order_by("name")


class SpeakerDetailView(FeatureRequiredMixin, DetailView):
    """Detail view for a single speaker with their sessions."""

    required_feature = "public_ui"
    template_name = "django_agenda/catalog/speaker_detail.html"
    context_object_name = "speaker"
    queryset = Speaker.objects.prefetch_related("sessions")

    def get_context_data(self, **kwargs: object) -> dict[str, object]:
        """Add the speaker's sessions to the template context."""
        context = super().get_context_data(**kwargs)
        context["conference_sessions"] = self.object.sessions.select_related("schedule_entry").order_by("title")
        return context
