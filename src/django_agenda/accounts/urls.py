"""URL configuration for the accounts app.

Provides sign-in and sign-out endpoints backed by Django's auth views::

    urlpatterns = [
        path("accounts/", include("django_agenda.accounts.urls")),
    ]
"""

from django.contrib.auth import views as auth_views
from django.urls import path

app_name = "accounts"

urlpatterns = [
    path("login/", auth_views.LoginView.as_view(template_name="django_agenda/accounts/login.html"), name="login"),
    path("logout/", auth_views.LogoutView.as_view(), name="logout"),
]
