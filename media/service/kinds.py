"""
Media kind strategies.

A strategy knows how to decode one kind of media and which uploads it
accepts. The provider is parameterized by a strategy instead of being
subclassed per media kind.
"""
from PIL import Image, UnidentifiedImageError

from media.service.exceptions import DecodeError, UploadRejected
from media.service.formats import Box


class MediaKindStrategy:
    """Interface for media kind strategies"""

    name = None

    def __init__(self, allowed_extensions, allowed_mime_types):
        self.allowed_extensions = list(allowed_extensions)
        self.allowed_mime_types = list(allowed_mime_types)

    def open(self, path):
        """Decode a path or binary file object and return its intrinsic Box."""
        raise NotImplementedError

    def validate(self, extension, mime_type):
        """
        Check an upload against the allowed extensions and mime types.

        Raises:
            UploadRejected: if either list is empty or the upload is not allowed
        """
        if not self.allowed_extensions:
            raise UploadRejected(f'There are no allowed extensions for this {self.name}.')

        if not self.allowed_mime_types:
            raise UploadRejected(f'There are no allowed mime types for this {self.name}.')

        if extension not in self.allowed_extensions:
            allowed = '", "'.join(self.allowed_extensions)
            raise UploadRejected(
                f'The {self.name} extension "{extension or ""}" is not one of the allowed ("{allowed}").'
            )

        if mime_type not in self.allowed_mime_types:
            allowed = '", "'.join(self.allowed_mime_types)
            raise UploadRejected(
                f'The {self.name} mime type "{mime_type or ""}" is not one of the allowed ("{allowed}").'
            )


class ImageKind(MediaKindStrategy):
    """Raster images decoded with Pillow"""

    name = 'image'

    def open(self, path):
        try:
            with Image.open(path) as img:
                width, height = img.size
        except (UnidentifiedImageError, Image.DecompressionBombError, OSError, ValueError) as e:
            raise DecodeError(f'Unable to decode image {path}: {e}') from e

        return Box(width, height)
