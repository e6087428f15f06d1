"""Email-based user model for django-agenda."""

from typing import ClassVar

from django.contrib.auth.models import AbstractBaseUser, BaseUserManager, PermissionsMixin
from django.db import models
from django.db.models import QuerySet
from django.utils import timezone


def normalize_email_address(value: str) -> str:
    """Return *value* stripped of surrounding whitespace and lower-cased."""
    return value.strip().lower()


class UserManager(BaseUserManager):
    """Manager that creates users keyed by a normalized email address."""

    use_in_migrations = True

    def _create_user(self, email: str, password: str | None, **extra_fields: object) -> "User":
        if not email:
            msg = "Users must have an email address"
            raise ValueError(msg)
        user = self.model(email=normalize_email_address(email), **extra_fields)
        user.set_password(password)
        user.save(using=self._db)
        return user

    def create_user(self, email: str, password: str | None = None, **extra_fields: object) -> "User":
        """Create a regular user with a hashed password."""
        extra_fields.setdefault("is_staff", False)
        extra_fields.setdefault("is_superuser", False)
        return self._create_user(email, password, **extra_fields)

    def create_superuser(self, email: str, password: str | None = None, **extra_fields: object) -> "User":
        """Create a staff superuser for the admin site."""
        extra_fields.setdefault("is_staff", True)
        extra_fields.setdefault("is_superuser", True)
        if extra_fields["is_staff"] is not True:
            msg = "Superuser must have is_staff=True."
            raise ValueError(msg)
        if extra_fields["is_superuser"] is not True:
            msg = "Superuser must have is_superuser=True."
            raise ValueError(msg)
        return self._create_user(email, password, **extra_fields)

    def get_by_natural_key(self, username: str) -> "User":
        """Look up a user by email regardless of the case used at login."""
        return self.get(**{self.model.USERNAME_FIELD: normalize_email_address(username)})


class User(AbstractBaseUser, PermissionsMixin):
    """An attendee account identified by email address.

    The email is normalized (stripped and lower-cased) on every save so the
    unique constraint holds regardless of how the address was typed.  The
    password is only ever stored as a hash via ``set_password``.
    """

    EMAIL_FIELD = "email"
    USERNAME_FIELD = "email"
    REQUIRED_FIELDS: ClassVar[list[str]] = []

    email = models.EmailField(unique=True)
    is_active = models.BooleanField(default=True)
    is_staff = models.BooleanField(default=False)
    date_joined = models.DateTimeField(default=timezone.now)

    objects = UserManager()

    class Meta:
        ordering = ["email"]

    def __str__(self) -> str:
        return self.email

    @property
    def favorited_sessions(self) -> QuerySet:
        """Return the sessions this user has favorited."""
        from django_agenda.catalog.models import ConferenceSession  # noqa: PLC0415

        return ConferenceSession.objects.filter(favorites__user=self)

    def clean(self) -> None:
        super().clean()
        self.email = normalize_email_address(self.email)

    def save(self, *args: object, **kwargs: object) -> None:
        self.email = normalize_email_address(self.email)
        super().save(*args, **kwargs)
