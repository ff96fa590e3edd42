from huey.contrib.djhuey import db_task

from media.models import Media
from media.service.pool import get_provider


@db_task()
def generate_thumbnails_task(media_id):
    """
    Generate one thumbnail per format of the media's context.

    Runs in the huey worker after an upload, or inline through call_local().
    """
    try:
        media = Media.objects.get(pk=media_id)
    except Media.DoesNotExist:
        return []

    if media.has_error:
        return []

    return get_provider().generate_thumbnails(media)


@db_task()
def update_metadata_task(media_id):
    """Re-read size and dimensions of a stored media."""
    from media.operations import refresh_metadata

    try:
        media = Media.objects.get(pk=media_id)
    except Media.DoesNotExist:
        return None

    return refresh_metadata(media)
