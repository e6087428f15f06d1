"""Management command to import speakers, sessions, and schedule from JSON seed data.

Usage::

    # Import from the configured DJANGO_AGENDA["seed_data_dir"]
    manage.py import_seeds

    # Import from an explicit directory
    manage.py import_seeds --data-dir ./confoo-2026-data
"""

import argparse
from pathlib import Path

from django.conf import settings
from django.core.exceptions import ValidationError
from django.core.management.base import BaseCommand, CommandError

from django_agenda.catalog.exceptions import UnknownDay
from django_agenda.catalog.seeds import SeedImporter
from django_agenda.settings import get_config


def resolve_data_dir(data_dir: str | None) -> Path:
    """Return the seed directory from the option or the configured default.

    Relative configured paths are resolved against ``settings.BASE_DIR``
    when the project defines one.
    """
    if data_dir:
        return Path(data_dir)
    path = Path(get_config().seed_data_dir)
    base_dir = getattr(settings, "BASE_DIR", None)
    if not path.is_absolute() and base_dir is not None:
        path = Path(base_dir) / path
    return path


class Command(BaseCommand):
    """Import speakers, sessions, and schedule entries from JSON seed documents."""

    help = "Import speakers, sessions, and schedule entries from JSON seed documents"

    def add_arguments(self, parser: argparse.ArgumentParser) -> None:
        """Register command-line arguments.

        Args:
            parser: The argument parser to add arguments to.
        """
        parser.add_argument(
            "--data-dir",
            default=None,
            help="Directory containing speakers.json, sessions.json and schedule.json.",
        )

    def handle(self, **options: object) -> None:
        """Execute the import.

        Runs every phase of :class:`~django_agenda.catalog.seeds.SeedImporter`
        and reports the resulting table counts.  Any import failure is reported as
        a :class:`CommandError`.
        """
        data_dir = resolve_data_dir(options["data_dir"])  # type: ignore[arg-type]
        if not data_dir.is_dir():
            msg = f"Seed data directory '{data_dir}' not found"
            raise CommandError(msg)

        importer = SeedImporter(data_dir)
        try:
            results = importer.run()
        except UnknownDay as exc:
            raise CommandError(str(exc)) from exc
        except KeyError as exc:
            msg = f"Seed record is missing required field {exc}"
            raise CommandError(msg) from exc
        except ValidationError as exc:
            msg = f"Invalid seed record: {exc.message_dict}"
            raise CommandError(msg) from exc
        except (FileNotFoundError, ValueError) as exc:
            raise CommandError(str(exc)) from exc

        self.stdout.write(self.style.SUCCESS(f"Imported {results['speakers']} speakers"))
        self.stdout.write(self.style.SUCCESS(f"Imported {results['sessions']} conference sessions"))
        self.stdout.write(self.style.SUCCESS(f"Imported {results['schedule_entries']} schedule entries"))
