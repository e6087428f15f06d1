"""Tests for the favorite and unfavorite endpoints."""

import pytest
from django.contrib.messages import get_messages
from django.urls import reverse

from django_agenda.favorites.models import Favorite


def _favorite_url(session):
    return reverse("favorites:favorite", args=[session.pk])


def _unfavorite_url(session):
    return reverse("favorites:unfavorite", args=[session.pk])


@pytest.mark.django_db
class TestFavoriteView:
    def test_post_creates_favorite(self, client, user, conference_session):
        client.force_login(user)

        response = client.post(_favorite_url(conference_session))

        assert response.status_code == 302
        assert response.url == reverse("catalog:home")
        assert Favorite.objects.filter(user=user, session=conference_session).exists()
        assert [str(m) for m in get_messages(response.wsgi_request)] == ["Session favorited."]

    def test_post_twice_is_idempotent(self, client, user, conference_session):
        client.force_login(user)

        client.post(_favorite_url(conference_session))
        response = client.post(_favorite_url(conference_session))

        assert response.status_code == 302
        assert Favorite.objects.count() == 1

    def test_delete_removes_favorite_with_see_other(self, client, user, other_user, conference_session):
        Favorite.objects.create(user=user, session=conference_session)
        Favorite.objects.create(user=other_user, session=conference_session)
        client.force_login(user)

        response = client.delete(_favorite_url(conference_session))

        assert response.status_code == 303
        assert response.url == reverse("catalog:home")
        assert list(Favorite.objects.values_list("user_id", flat=True)) == [other_user.pk]

    def test_delete_without_favorite(self, client, user, conference_session):
        client.force_login(user)

        response = client.delete(_favorite_url(conference_session))

        assert response.status_code == 303

    def test_get_not_allowed(self, client, user, conference_session):
        client.force_login(user)

        assert client.get(_favorite_url(conference_session)).status_code == 405

    def test_anonymous_redirected_to_login(self, client, conference_session):
        response = client.post(_favorite_url(conference_session))

        assert response.status_code == 302
        assert response.url.startswith(reverse("accounts:login"))
        assert not Favorite.objects.exists()

    def test_unknown_session_returns_404(self, client, user, db):
        client.force_login(user)

        assert client.post(reverse("favorites:favorite", args=[999])).status_code == 404

    def test_feature_disabled_returns_404(self, client, user, conference_session, settings):
        settings.DJANGO_AGENDA = {"features": {"favorites_enabled": False}}
        client.force_login(user)

        assert client.post(_favorite_url(conference_session)).status_code == 404
        assert not Favorite.objects.exists()


@pytest.mark.django_db
class TestUnfavoriteView:
    def test_post_removes_favorite(self, client, user, conference_session):
        Favorite.objects.create(user=user, session=conference_session)
        client.force_login(user)

        response = client.post(_unfavorite_url(conference_session))

        assert response.status_code == 303
        assert not Favorite.objects.exists()
        assert [str(m) for m in get_messages(response.wsgi_request)] == ["Session unfavorited."]

    def test_only_own_favorite_removed(self, client, user, other_user, conference_session):
        Favorite.objects.create(user=other_user, session=conference_session)
        client.force_login(user)

        client.post(_unfavorite_url(conference_session))

        assert Favorite.objects.filter(user=other_user).exists()

    def test_anonymous_redirected_to_login(self, client, other_user, conference_session):
        Favorite.objects.create(user=other_user, session=conference_session)

        response = client.post(_unfavorite_url(conference_session))

        assert response.status_code == 302
        assert Favorite.objects.count() == 1

    def test_home_reflects_toggle(self, client, user, conference_session):
        client.force_login(user)

        client.post(_favorite_url(conference_session))
        home = client.get(reverse("catalog:home"))
        assert _unfavorite_url(conference_session) in home.content.decode()

        client.post(_unfavorite_url(conference_session))
        home = client.get(reverse("catalog:home"))
        assert _favorite_url(conference_session) in home.content.decode()

    def test_post_and_delete_respond_alike(self, client, user, conference_session, second_session):
        Favorite.objects.create(user=user, session=conference_session)
        Favorite.objects.create(user=user, session=second_session)
        client.force_login(user)

        via_delete = client.delete(_favorite_url(conference_session))
        via_post = client.post(_unfavorite_url(second_session))

        assert via_delete.status_code == via_post.status_code == 303
        assert via_delete.url == via_post.url == reverse("catalog:home")
        assert not Favorite.objects.exists()
