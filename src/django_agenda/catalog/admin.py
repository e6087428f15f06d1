"""Django admin configuration for the session catalog app."""

from django.contrib import admin
from django.http import HttpRequest

from django_agenda.catalog.models import ConferenceSession, ScheduleEntry, Speaker


@admin.register(Speaker)
class SpeakerAdmin(admin.ModelAdmin):
    """Admin interface for managing speakers.

    Speakers are mostly created by the seed importer.  Deleting a speaker
    who still presents a session is refused by the database.
    """

    list_display = ("name", "company", "has_photo", "updated_at")
    search_fields = ("name", "company")
    readonly_fields = ("created_at", "updated_at")

    @admin.display(boolean=True, description="Photo")
    def has_photo(self, obj: Speaker) -> bool:
        """Return whether the speaker has a photo attached."""
        return obj.has_photo


class ScheduleEntryInline(admin.StackedInline):
    """Inline editor for a session's single schedule entry."""

    model = ScheduleEntry
    extra = 0
    max_num = 1


@admin.register(ConferenceSession)
class ConferenceSessionAdmin(admin.ModelAdmin):
    """Admin interface for managing sessions.

    The slug is pre-filled from the title when adding a session and becomes
    read-only once the session exists.
    """

    list_display = ("title", "speaker", "slug", "is_scheduled")
    list_select_related = ("speaker", "schedule_entry")
    search_fields = ("title", "slug", "description", "speaker__name")
    raw_id_fields = ("speaker",)
    prepopulated_fields = {"slug": ("title",)}
    inlines = (ScheduleEntryInline,)

    def get_readonly_fields(self, request: HttpRequest, obj: ConferenceSession | None = None) -> tuple[str, ...]:
        """Lock the slug after creation."""
        readonly = ("created_at", "updated_at")
        if obj is not None:
            return ("slug", *readonly)
        return readonly

    def get_prepopulated_fields(self, request: HttpRequest, obj: ConferenceSession | None = None) -> dict:
        """Only pre-fill the slug on the add form."""
        if obj is not None:
            return {}
        return super().get_prepopulated_fields(request, obj)

    @admin.display(boolean=True, description="Scheduled")
    def is_scheduled(self, obj: ConferenceSession) -> bool:
        """Return whether the session has a schedule entry."""
        return obj.is_scheduled


@admin.register(ScheduleEntry)
class ScheduleEntryAdmin(admin.ModelAdmin):
    """Admin interface for the schedule grid."""

    list_display = ("session", "day", "start_time", "end_time", "room")
    list_filter = ("day", "room")
    search_fields = ("session__title", "room")
    raw_id_fields = ("session",)
    readonly_fields = ("created_at", "updated_at")
