"""One-shot import of the event's JSON seed documents into the catalog.

Provides :class:`SeedImporter`, which reconciles ``speakers.json``,
``sessions.json`` and ``schedule.json`` into :class:`Speaker`,
:class:`ConferenceSession` and :class:`ScheduleEntry` rows.  Every phase
looks records up by their natural key before writing, so re-running the
importer after a partial failure updates rows instead of duplicating them.

Data-quality gaps in the documents (an unknown speaker, a zero-length
slot) are logged and skipped or repaired.  An unknown day name is a
configuration error and aborts the run, as does a record with a blank
required field, which fails model validation before it is saved.
"""

import json
import logging
from datetime import datetime, timedelta
from pathlib import Path
from typing import Any

from django.core.files import File
from django.db.models import Model

from django_agenda.catalog.models import ConferenceSession, ScheduleEntry, Speaker, normalize_tags, resolve_day
from django_agenda.catalog.slugs import parameterize
from django_agenda.settings import get_config

logger = logging.getLogger(__name__)

SPEAKERS_FILE = "speakers.json"
SESSIONS_FILE = "sessions.json"
SCHEDULE_FILE = "schedule.json"

_TIME_FORMAT = "%H:%M"


def _validated_upsert(model: type[Model], lookup: dict[str, Any], defaults: dict[str, Any]) -> tuple[Model, bool]:
    """Find the row matching *lookup* (or build one) and apply *defaults*.

    Field values are checked with ``full_clean`` before saving, so a blank
    required field raises :class:`~django.core.exceptions.ValidationError`
    instead of being stored.  Uniqueness stays with the database.

    Returns:
        A ``(instance, created)`` tuple.
    """
    instance = model.objects.filter(**lookup).first()
    created = instance is None
    if created:
        instance = model(**lookup)
    for name, value in defaults.items():
        setattr(instance, name, value)
    instance.full_clean(validate_unique=False, validate_constraints=False)
    instance.save()
    return instance, created


class SeedImporter:
    """Imports speakers, sessions, and schedule entries from a data directory.

    The phases run in a fixed order (see :meth:`run`); each depends on the
    rows written by the one before.  There is no enclosing transaction.

    Args:
        data_dir: Directory holding the three JSON documents and any
            speaker photos referenced by ``photo_local``.
    """

    def __init__(self, data_dir: str | Path) -> None:
        self.data_dir = Path(data_dir)
        config = get_config()
        self.orphan_description = config.orphan_session_description
        self.fallback_duration = timedelta(minutes=config.fallback_duration_minutes)
        self.photo_content_type = config.photo_content_type

        self._sessions_data: list[dict[str, Any]] | None = None
        self._schedule_data: list[dict[str, Any]] | None = None
        self.slug_by_session_id: dict[Any, str] = {}

    def _load(self, filename: str) -> list[dict[str, Any]]:
        """Read a JSON array from the data directory.

        Raises:
            FileNotFoundError: If the document does not exist.
            ValueError: If the document is not valid JSON or not an array.
        """
        path = self.data_dir / filename
        if not path.exists():
            msg = f"Seed document not found: {path}"
            raise FileNotFoundError(msg)
        with path.open(encoding="utf-8") as fh:
            try:
                data = json.load(fh)
            except json.JSONDecodeError as exc:
                msg = f"Invalid JSON in {path}: {exc}"
                raise ValueError(msg) from exc
        if not isinstance(data, list):
            msg = f"{path} must contain a JSON array, got {type(data).__name__}"
            raise ValueError(msg)
        return data

    @property
    def sessions_data(self) -> list[dict[str, Any]]:
        if self._sessions_data is None:
            self._sessions_data = self._load(SESSIONS_FILE)
        return self._sessions_data

    @property
    def schedule_data(self) -> list[dict[str, Any]]:
        if self._schedule_data is None:
            self._schedule_data = self._load(SCHEDULE_FILE)
        return self._schedule_data

    def run(self) -> dict[str, int]:
        """Run every import phase in order.

        Returns:
            A dict with the resulting ``speakers``, ``sessions`` and
            ``schedule_entries`` table counts.

        Raises:
            UnknownDay: If a schedule record names a day outside the
                event's day table.
            ValidationError: If a record leaves a required field blank.
        """
        self.import_speakers()
        self.build_slug_lookup()
        self.import_sessions()
        self.import_orphan_sessions()
        self.import_schedule()
        return {
            "speakers": Speaker.objects.count(),
            "sessions": ConferenceSession.objects.count(),
            "schedule_entries": ScheduleEntry.objects.count(),
        }

    def import_speakers(self) -> int:
        """Find-or-create each speaker by name and refresh their profile.

        A photo is attached from ``photo_local`` when the file exists and the
        speaker has none yet; an existing photo is never replaced.

        Returns:
            The number of speaker records processed.
        """
        count = 0
        for attrs in self._load(SPEAKERS_FILE):
            speaker, _created = _validated_upsert(
                Speaker,
                {"name": str(attrs["name"]).strip()},
                {
                    "bio": attrs.get("bio") or "",
                    "company": attrs.get("company") or "",
                    "url": attrs.get("url") or "",
                },
            )
            self._attach_photo(speaker, attrs.get("photo_local"))
            count += 1

        logger.info("Imported %d speakers", count)
        return count

    def _attach_photo(self, speaker: Speaker, photo_local: str | None) -> None:
        if not photo_local or speaker.has_photo:
            return
        photo_path = self.data_dir / photo_local
        if not photo_path.is_file():
            logger.debug("Photo %s for %s not found", photo_path, speaker.name)
            return
        with photo_path.open("rb") as fh:
            photo = File(fh, name=photo_path.name)
            photo.content_type = self.photo_content_type
            speaker.photo.save(photo_path.name, photo, save=True)

    def build_slug_lookup(self) -> dict[Any, str]:
        """Map external session ids to the canonical slugs in the schedule document.

        Returns:
            The ``{session_id: slug}`` mapping, also kept on the importer.
        """
        self.slug_by_session_id = {
            entry["session_id"]: entry["slug"] for entry in self.schedule_data if entry.get("slug")
        }
        return self.slug_by_session_id

    def import_sessions(self) -> int:
        """Update-or-create sessions by slug, skipping unknown speakers.

        Returns:
            The number of sessions written.
        """
        count = 0
        skipped = 0
        for attrs in self.sessions_data:
            speaker = Speaker.objects.filter(name=attrs.get("speaker")).first()
            if speaker is None:
                logger.warning(
                    "Speaker '%s' not found, skipping session '%s'",
                    attrs.get("speaker"),
                    attrs.get("title"),
                )
                skipped += 1
                continue

            slug = self.slug_by_session_id.get(attrs.get("id")) or parameterize(attrs["title"])
            _validated_upsert(
                ConferenceSession,
                {"slug": slug},
                {
                    "title": attrs["title"],
                    "description": attrs["description"],
                    "tags": normalize_tags(attrs.get("tags")),
                    "url": attrs.get("url") or "",
                    "speaker": speaker,
                },
            )
            count += 1

        logger.info("Imported %d sessions (%d skipped)", count, skipped)
        return count

    def import_orphan_sessions(self) -> int:
        """Create placeholder sessions for schedule records missing from ``sessions.json``.

        These are workshops that only appear in the schedule.  Existing
        sessions with the same slug are left untouched.

        Returns:
            The number of sessions newly created.
        """
        known_ids = {attrs.get("id") for attrs in self.sessions_data}
        created_count = 0
        for entry in self.schedule_data:
            if entry.get("session_id") in known_ids:
                continue
            speaker = Speaker.objects.filter(name=entry.get("speaker")).first()
            if speaker is None:
                logger.warning(
                    "Speaker '%s' not found, skipping orphan schedule entry '%s'",
                    entry.get("speaker"),
                    entry.get("title"),
                )
                continue

            if ConferenceSession.objects.filter(slug=entry["slug"]).exists():
                continue
            _validated_upsert(
                ConferenceSession,
                {"slug": entry["slug"]},
                {
                    "title": entry["title"],
                    "description": self.orphan_description,
                    "tags": [],
                    "speaker": speaker,
                },
            )
            created_count += 1

        logger.info("Created %d sessions from orphan schedule entries", created_count)
        return created_count

    def import_schedule(self) -> int:
        """Update-or-create one schedule entry per scheduled session.

        Returns:
            The number of schedule entries written.

        Raises:
            UnknownDay: If a record names a day outside the event's day table.
        """
        sessions_by_slug = {session.slug: session for session in ConferenceSession.objects.all()}
        count = 0
        for entry in self.schedule_data:
            session = sessions_by_slug.get(entry.get("slug"))
            if session is None:
                continue

            day = resolve_day(entry["day"])
            start_time = datetime.strptime(entry["start_time"], _TIME_FORMAT).time()
            end_time = datetime.strptime(entry["end_time"], _TIME_FORMAT).time()
            if end_time == start_time:
                end_time = (datetime.combine(day, start_time) + self.fallback_duration).time()
                logger.warning(
                    "Fixed missing end_time for '%s', defaulting to %s",
                    entry.get("title"),
                    end_time.strftime(_TIME_FORMAT),
                )

            _validated_upsert(
                ScheduleEntry,
                {"session": session},
                {
                    "day": day,
                    "start_time": start_time,
                    "end_time": end_time,
                    "room": entry["room"],
                },
            )
            count += 1

        logger.info("Imported %d schedule entries", count)
        return count
