from django.db.models.signals import pre_delete
from django.dispatch import receiver

from media.models import Media
from media.service.pool import get_provider


@receiver(pre_delete, sender=Media)
def cleanup_media_files(sender, instance, **kwargs):
    """
    Delete the reference file and thumbnails when a Media is deleted.
    This handles both single and bulk deletions.
    """
    if instance.pk is None or not instance.provider_reference:
        return

    provider = get_provider()
    try:
        provider.remove_thumbnails(instance)
        provider.delete_reference(instance)
    except OSError as e:
        # Log error but continue with deletion
        print(f"Error deleting files for media {instance.pk}: {e}")
