"""URL configuration for the session catalog app.

Provides schedule, session, and speaker endpoints.  Mount these in the
host project::

    urlpatterns = [
        path("", include("django_agenda.catalog.urls")),
    ]
"""

from django.urls import path

from django_agenda.catalog.views import (
    HomeView,
    ScheduleJSONView,
    ScheduleView,
    SessionDetailView,
    SpeakerDetailView,
    SpeakerListView,
)

app_name = "catalog"

urlpatterns = [
    path("", HomeView.as_view(), name="home"),
    path("schedule/", ScheduleView.as_view(), name="schedule"),
    path("schedule/data.json", ScheduleJSONView.as_view(), name="schedule-json"),
    path("sessions/<slug:slug>/", SessionDetailView.as_view(), name="session-detail"),
    path("speakers/", SpeakerListView.as_view(), name="speaker-list"),
    path("speakers/<int:pk>/", SpeakerDetailView.as_view(), name="speaker-detail"),
]
