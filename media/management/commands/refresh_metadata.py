"""
Management command to refresh media metadata.

Re-reads size and dimensions of stored media from their reference files.
Media whose reference can no longer be decoded are marked ERROR.
"""
from django.core.management.base import BaseCommand, CommandError

from media.models import Media
from media.operations import refresh_metadata
from media.service.exceptions import MediaServiceError
from media.service.pool import get_provider


class Command(BaseCommand):
    help = 'Refresh size and dimensions of stored media'

    def add_arguments(self, parser):
        parser.add_argument(
            '--context',
            help='Only refresh media of this context'
        )
        parser.add_argument(
            '--dry-run',
            action='store_true',
            help='Show what would be refreshed without saving'
        )

    def handle(self, *args, **options):
        """Refresh metadata of every matching media"""
        context = options['context']
        dry_run = options['dry_run']

        queryset = Media.objects.order_by('pk')
        if context:
            queryset = queryset.filter(context=context)

        total = queryset.count()
        if not total:
            self.stdout.write(self.style.SUCCESS("No media found"))
            return

        if dry_run:
            self.stdout.write(self.style.WARNING(
                f"DRY RUN: Would refresh {total} media"
            ))
            for media in queryset:
                self.stdout.write(f"  {media.pk:6} | {media.context:15} | {media.name}")
            return

        try:
            provider = get_provider()
        except MediaServiceError as e:
            raise CommandError(f"Unable to configure image provider: {e}")

        errors = 0
        for media in queryset:
            result = refresh_metadata(media, provider=provider)
            if result.ok:
                self.stdout.write(self.style.SUCCESS(
                    f"✓ {media.pk}: {media.width}x{media.height}, {media.size} bytes"
                ))
            else:
                errors += 1
                self.stdout.write(self.style.ERROR(f"✗ {media.pk}: {result.error}"))

        self.stdout.write(f"\nRefreshed {total - errors} of {total} media")
