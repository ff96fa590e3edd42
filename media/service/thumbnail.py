"""
Thumbnail naming, generation and removal.

Each format of a media's context gets one derived file stored beside the
reference file: "<path>/thumb_<id>_<format>.<ext>".
"""
from media.service.exceptions import ResizerMissing
from media.service.formats import FORMAT_ADMIN, FORMAT_REFERENCE


class FormatThumbnail:
    """Thumbnail generator keyed by format name"""

    def __init__(self, default_extension='jpg'):
        self.default_extension = default_extension

    def get_extension(self, media, settings=None):
        """Extension of a thumbnail: the format's 'format' setting, else the reference's."""
        if settings and settings.get('format'):
            return settings['format']

        reference = media.provider_reference or ''
        if '.' in reference:
            return reference.rsplit('.', 1)[1].lower()
        return self.default_extension

    def generate_private_url(self, provider, media, format_name):
        if format_name == FORMAT_REFERENCE:
            return provider.get_reference_image(media)

        fmt = provider.registry.get(format_name)
        extension = self.get_extension(media, fmt.settings if fmt else None)
        return f'{provider.generate_path(media)}/thumb_{media.pk}_{format_name}.{extension}'

    def generate_public_url(self, provider, media, format_name):
        return self.generate_private_url(provider, media, format_name)

    def get_formats(self, provider, media):
        """Formats a thumbnail is generated for: the media's context plus admin."""
        formats = provider.registry.formats_for_context(media.context)
        admin = provider.registry.get(FORMAT_ADMIN)
        if admin is not None and admin not in formats:
            formats.append(admin)
        return formats

    def generate(self, provider, media, logger=None):
        """
        Write one resized file per format.

        Returns:
            list of storage paths written
        """
        def log(message):
            if logger:
                logger(message)

        if provider.resizer is None:
            raise ResizerMissing('Resizer not set on the image provider.')

        written = []
        for fmt in self.get_formats(provider, media):
            path = self.generate_private_url(provider, media, fmt.name)
            extension = self.get_extension(media, fmt.settings)

            with provider.get_reference_file(media) as in_file:
                box = provider.write_file(
                    path,
                    lambda out_file: provider.resizer.resize(
                        media, in_file, out_file, extension, fmt.settings
                    ),
                )

            log(f'Thumbnail {fmt.name}: {path} ({box.width}x{box.height})')
            written.append(path)

        return written

    def delete(self, provider, media, formats=None):
        """
        Remove thumbnails from storage.

        Args:
            formats: Optional list of format names; all thumbnail formats when None

        Returns:
            list of storage paths removed
        """
        if formats is None:
            formats = [fmt.name for fmt in self.get_formats(provider, media)]

        removed = []
        for format_name in formats:
            path = self.generate_private_url(provider, media, format_name)
            if provider.storage.exists(path):
                provider.storage.delete(path)
                removed.append(path)

        return removed
