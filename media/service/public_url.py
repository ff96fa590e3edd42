"""
Public URL resolution for a (media, format) pair.
"""
from urllib.parse import urlparse

from media.service.formats import FORMAT_REFERENCE


def is_absolute_url(path):
    """True when path already carries a scheme, e.g. 'https://cdn.example.com/a.jpg'"""
    return bool(urlparse(path).scheme)


class PublicURLResolver:
    """
    Map (media, format) to a public URL.

    Absolute URLs coming from the reference resolver or the thumbnail
    generator are returned untouched. Storage paths go through the CDN.
    """

    def __init__(self, provider):
        self.provider = provider

    def resolve(self, media, format_name):
        if format_name == FORMAT_REFERENCE:
            path = self.provider.get_reference_image(media)
        else:
            path = self.provider.thumbnail.generate_public_url(self.provider, media, format_name)

        if is_absolute_url(path):
            return path

        return self.provider.cdn.get_path(path, media.cdn_is_flushable)
