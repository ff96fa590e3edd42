"""
Configuration adapter for media settings.

Centralizes access to Django settings so the service layer, commands and
tasks read configuration the same way.
"""

from django.conf import settings


def get_contexts():
    """
    Get configured contexts and their formats.

    Returns:
        dict: {'gallery': {'formats': {'small': {'width': 100, ...}}}}
    """
    return getattr(settings, 'PICTUREBOX_CONTEXTS', {}) or {}


def get_admin_format():
    """Get resize settings of the admin preview format"""
    return getattr(settings, 'PICTUREBOX_ADMIN_FORMAT', {'width': 200, 'height': None, 'quality': 80})


def get_cdn_path():
    """Get the base path (or absolute URL) files are served from"""
    return getattr(settings, 'PICTUREBOX_CDN_PATH', settings.MEDIA_URL)


def get_resizer_mode():
    """Get the resizer mode: 'inset' or 'outbound'"""
    return getattr(settings, 'PICTUREBOX_RESIZER_MODE', 'inset')


def get_thumbnail_quality():
    """Get the default JPEG/WebP quality for thumbnails"""
    return getattr(settings, 'PICTUREBOX_THUMBNAIL_QUALITY', 80)


def get_allowed_extensions():
    """
    Get image extensions accepted on upload.

    Returns:
        list: Lowercase extensions without the leading dot
    """
    return list(getattr(settings, 'PICTUREBOX_ALLOWED_EXTENSIONS', ['jpg', 'jpeg', 'png', 'gif', 'webp']))


def get_allowed_mime_types():
    """Get image mime types accepted on upload"""
    return list(getattr(
        settings,
        'PICTUREBOX_ALLOWED_MIME_TYPES',
        ['image/jpeg', 'image/png', 'image/gif', 'image/webp'],
    ))


def get_path_levels():
    """
    Get the directory fan-out for storage paths.

    Returns:
        tuple[int, int]: (first_level, second_level)
    """
    return (
        getattr(settings, 'PICTUREBOX_PATH_FIRST_LEVEL', 100000),
        getattr(settings, 'PICTUREBOX_PATH_SECOND_LEVEL', 1000),
    )
