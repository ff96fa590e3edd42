"""
High-level operations that can be used by admin actions, tasks, and management commands.

This module provides testable functions that encapsulate business logic,
making it easy to test operations without going through the admin or
management commands.
"""

from media.models import Media
from media.service.pool import get_provider


def create_media(uploaded_file, context, name=None, description=None, wait=True,
                 provider=None, logger=None):
    """
    Create a Media from an upload.

    Validates the upload, stores the reference file, records metadata and
    generates thumbnails for every format of the context.

    Args:
        uploaded_file: Django UploadedFile (or a path on disk)
        context: Context the media belongs to, e.g. 'gallery'
        name: Optional display name (defaults to the upload's file name)
        description: Optional description, used as alt text
        wait: If True, generate thumbnails synchronously. If False, enqueue background task.
        provider: Optional ImageProvider (built from settings when None)
        logger: Optional callable(message) for logging

    Returns:
        Media: The saved Media instance

    Raises:
        UploadRejected: extension or mime type not allowed

    Example:
        >>> media = create_media(request.FILES['file'], 'gallery')
        >>> print(media.provider_status)
        OK
    """
    def log(message):
        if logger:
            logger(message)

    provider = provider or get_provider()

    media = Media(context=context, name=name or '', description=description)
    media.binary_content = uploaded_file

    provider.transform(media)
    media.save()
    log(f'Created media {media.pk} ({media.provider_status})')

    if media.has_error:
        log('Upload could not be decoded, skipping storage')
        return media

    path = provider.store_reference(media)
    log(f'Stored reference: {path}')

    provider.update_metadata(media, logger=log)
    media.binary_content = None
    media.save()
    log(f'Metadata: {media.width}x{media.height}, {media.size} bytes')

    if media.has_error:
        return media

    if wait:
        # Run synchronously (blocking) with the caller's provider
        log('Generating thumbnails synchronously...')
        provider.generate_thumbnails(media, logger=log)
    else:
        from media.tasks import generate_thumbnails_task

        log('Enqueued thumbnail task')
        generate_thumbnails_task(media.pk)

    return media


def refresh_metadata(media, provider=None, logger=None):
    """
    Re-read size and dimensions from the stored reference file.

    Args:
        media: Media instance
        provider: Optional ImageProvider
        logger: Optional callable(message) for logging

    Returns:
        MetadataResult
    """
    def log(message):
        if logger:
            logger(message)

    provider = provider or get_provider()

    result = provider.update_metadata(media, logger=log)
    media.save()

    if result.ok:
        log(f'Media {media.pk}: {media.width}x{media.height}, {media.size} bytes')
    else:
        log(f'Media {media.pk}: {result.error}')

    return result


def sync_thumbnails(media, provider=None, logger=None):
    """
    Remove and regenerate all thumbnails of a media.

    Returns:
        list: Storage paths written
    """
    provider = provider or get_provider()
    provider.remove_thumbnails(media)
    return provider.generate_thumbnails(media, logger=logger)


def render_properties(media, format_name, provider=None, **options):
    """
    Build render parameters for a media.

    Short format labels are expanded with the media's context, so 'small'
    and 'gallery_small' are equivalent for a gallery media.

    Example:
        >>> render_properties(media, 'small', picture={'(min-width: 600px)': 'large'})
        {'picture': {'source': [...], 'img': {...}}}
    """
    from media.service.formats import get_format_name

    provider = provider or get_provider()
    return provider.get_helper_properties(media, get_format_name(media, format_name), options)
