"""URL configuration for the favorites app.

Mount these in the host project::

    urlpatterns = [
        path("", include("django_agenda.favorites.urls")),
    ]
"""

from django.urls import path

from django_agenda.favorites.views import FavoriteView, UnfavoriteView

app_name = "favorites"

urlpatterns = [
    path("sessions/<int:session_pk>/favorite/", FavoriteView.as_view(), name="favorite"),
    path("sessions/<int:session_pk>/favorite/delete/", UnfavoriteView.as_view(), name="unfavorite"),
]
