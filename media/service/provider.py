"""
Image provider.

Composes the format registry, resizer, CDN, thumbnail generator, storage and
media kind strategy, and exposes the operations the rest of the app uses:
upload transform, metadata updates, thumbnail generation, URLs and render
parameters.
"""
from io import BytesIO
from pathlib import PurePath
import mimetypes
import os

from django.core.files.base import ContentFile
from nanoid import generate

from media.service.exceptions import DecodeError, UploadRejected
from media.service.metadata import extract_metadata, get_local_path
from media.service.paths import DefaultPathGenerator
from media.service.planner import RenderingPlanner
from media.service.public_url import PublicURLResolver
from media.service.reference import ReferenceResolver

REFERENCE_ALPHABET = '0123456789abcdefghijklmnopqrstuvwxyz'


def generate_reference_name(extension):
    """Unique storage file name for a new reference file"""
    name = generate(REFERENCE_ALPHABET, size=24)
    return f'{name}.{extension}' if extension else name


def get_upload_extension(binary_content):
    """Lowercase extension of an upload's original name, without the dot"""
    name = getattr(binary_content, 'name', None) or get_local_path(binary_content) or ''
    return PurePath(name).suffix.lstrip('.').lower()


def get_upload_mime_type(binary_content):
    """Mime type reported with the upload, else guessed from its name"""
    content_type = getattr(binary_content, 'content_type', None)
    if content_type:
        return content_type

    name = getattr(binary_content, 'name', None) or get_local_path(binary_content) or ''
    return mimetypes.guess_type(name)[0]


class ImageProvider:
    """Provider for raster images"""

    def __init__(self, name, registry, storage, cdn, thumbnail, kind, resizer=None,
                 path_generator=None):
        self.name = name
        self.registry = registry
        self.storage = storage
        self.cdn = cdn
        self.thumbnail = thumbnail
        self.kind = kind
        self.resizer = resizer
        self.path_generator = path_generator or DefaultPathGenerator()
        self.reference = ReferenceResolver(storage, self.path_generator)
        self.urls = PublicURLResolver(self)
        self.planner = RenderingPlanner(registry, resizer, self.urls, self.reference)

    # Formats

    def get_formats(self):
        return self.registry.all()

    def get_formats_for_context(self, context):
        return self.registry.formats_for_context(context)

    # Paths and URLs

    def generate_path(self, media):
        return self.path_generator.generate_path(media)

    def get_reference_image(self, media):
        return self.reference.get_reference_image(media)

    def get_reference_file(self, media):
        return self.reference.get_reference_file(media)

    def generate_public_url(self, media, format_name):
        return self.urls.resolve(media, format_name)

    def generate_private_url(self, media, format_name):
        return self.thumbnail.generate_private_url(self, media, format_name)

    # Rendering

    def get_helper_properties(self, media, format_name, options=None):
        return self.planner.plan(media, format_name, options)

    # Upload and metadata

    def transform(self, media):
        """
        Validate the upload and fill in the media's fields from it.

        Raises:
            UploadRejected: extension or mime type not allowed (status set to ERROR)
        """
        binary_content = media.binary_content
        if binary_content is None:
            return

        extension = get_upload_extension(binary_content)
        mime_type = get_upload_mime_type(binary_content)

        local_path = get_local_path(binary_content)
        original_name = getattr(binary_content, 'name', None) or local_path or ''

        media.provider_name = self.name
        media.content_type = mime_type or ''
        if not media.name:
            media.name = PurePath(original_name).name
        media.provider_reference = generate_reference_name(extension)
        media.size = getattr(binary_content, 'size', None) or 0
        if not media.size and local_path is not None:
            media.size = os.path.getsize(local_path)

        try:
            self.kind.validate(extension, mime_type)
        except UploadRejected:
            media.provider_status = media.STATUS_ERROR
            raise

        try:
            box = self._decode_upload(binary_content)
        except DecodeError:
            media.provider_status = media.STATUS_ERROR
            return

        media.width = box.width
        media.height = box.height
        media.provider_status = media.STATUS_OK

    def _decode_upload(self, binary_content):
        path = get_local_path(binary_content)
        if path is not None:
            return self.kind.open(path)

        binary_content.seek(0)
        try:
            return self.kind.open(BytesIO(binary_content.read()))
        finally:
            binary_content.seek(0)

    def extract_metadata(self, media, logger=None):
        return extract_metadata(media, self.get_reference_file, self.kind, logger=logger)

    def update_metadata(self, media, logger=None):
        """
        Record size and dimensions on the media.

        Decode failures mark the media ERROR with zero size and dimensions.
        The status is left alone on success.

        Returns:
            MetadataResult
        """
        result = self.extract_metadata(media, logger=logger)
        if not result.ok:
            media.provider_status = media.STATUS_ERROR

        media.size = result.size
        media.width = result.width
        media.height = result.height
        return result

    # Storage

    def write_file(self, path, writer):
        """
        Replace the file at path with whatever writer(file) writes.

        Returns:
            whatever writer returns
        """
        buffer = BytesIO()
        result = writer(buffer)

        if self.storage.exists(path):
            self.storage.delete(path)
        self.storage.save(path, ContentFile(buffer.getvalue()))
        return result

    def store_reference(self, media):
        """Write the uploaded content as the media's reference file."""
        binary_content = media.binary_content
        if binary_content is None:
            return None

        path = self.get_reference_image(media)
        local_path = get_local_path(binary_content)
        if local_path is not None and not hasattr(binary_content, 'read'):
            with open(local_path, 'rb') as source:
                self.write_file(path, lambda out: out.write(source.read()))
        else:
            binary_content.seek(0)
            self.write_file(path, lambda out: out.write(binary_content.read()))
        return path

    def delete_reference(self, media):
        path = self.get_reference_image(media)
        if self.storage.exists(path):
            self.storage.delete(path)
            return path
        return None

    def generate_thumbnails(self, media, logger=None):
        return self.thumbnail.generate(self, media, logger=logger)

    def remove_thumbnails(self, media, formats=None):
        removed = self.thumbnail.delete(self, media, formats=formats)
        for path in removed:
            if media.cdn_is_flushable:
                self.cdn.flush(path)
        return removed
