"""
Management command to regenerate thumbnails.

Removes and rewrites the thumbnails of stored media, e.g. after format
settings changed.
"""
from django.core.management.base import BaseCommand, CommandError

from media.models import Media
from media.operations import sync_thumbnails
from media.service.exceptions import MediaServiceError
from media.service.pool import get_provider


class Command(BaseCommand):
    help = 'Regenerate thumbnails for every format of each media context'

    def add_arguments(self, parser):
        parser.add_argument(
            '--context',
            help='Only regenerate thumbnails of media in this context'
        )

    def handle(self, *args, **options):
        context = options['context']

        queryset = Media.objects.filter(provider_status=Media.STATUS_OK).order_by('pk')
        if context:
            queryset = queryset.filter(context=context)

        provider = get_provider()
        if context and not provider.get_formats_for_context(context):
            raise CommandError(f"No formats registered for context: {context}")

        count = 0
        for media in queryset:
            try:
                written = sync_thumbnails(media, provider=provider)
            except (MediaServiceError, OSError) as e:
                self.stdout.write(self.style.ERROR(f"✗ {media.pk}: {e}"))
                continue

            count += 1
            self.stdout.write(self.style.SUCCESS(f"✓ {media.pk}: {len(written)} thumbnails"))

        self.stdout.write(f"\nSynced thumbnails for {count} media")
