"""
Build the image provider from settings.
"""
from django.core.files.storage import default_storage

from media.service import config
from media.service.cdn import ServerCDN
from media.service.formats import FormatRegistry
from media.service.kinds import ImageKind
from media.service.paths import DefaultPathGenerator
from media.service.provider import ImageProvider
from media.service.resize import SimpleResizer
from media.service.thumbnail import FormatThumbnail

PROVIDER_IMAGE = 'picturebox.media.provider.image'


def build_registry():
    return FormatRegistry.from_contexts(config.get_contexts(), config.get_admin_format())


def get_provider(storage=None):
    """
    Create an ImageProvider configured from Django settings.

    Args:
        storage: Optional Django storage (default_storage when None)

    Returns:
        ImageProvider
    """
    first_level, second_level = config.get_path_levels()

    return ImageProvider(
        name=PROVIDER_IMAGE,
        registry=build_registry(),
        storage=storage if storage is not None else default_storage,
        cdn=ServerCDN(config.get_cdn_path()),
        thumbnail=FormatThumbnail(),
        kind=ImageKind(config.get_allowed_extensions(), config.get_allowed_mime_types()),
        resizer=SimpleResizer(config.get_resizer_mode(), quality=config.get_thumbnail_quality()),
        path_generator=DefaultPathGenerator(first_level, second_level),
    )
