"""
Reference (original upload) location and access.
"""
from media.service.formats import Box


class ReferenceResolver:
    """Locate the reference file of a media in storage"""

    def __init__(self, storage, path_generator):
        self.storage = storage
        self.path_generator = path_generator

    def get_reference_image(self, media):
        return f'{self.path_generator.generate_path(media)}/{media.provider_reference}'

    def get_reference_file(self, media):
        """Open the reference file for binary reading."""
        return self.storage.open(self.get_reference_image(media), 'rb')

    def get_reference_box(self, media):
        """Intrinsic box of the reference file, as recorded on the media."""
        return media.get_box()
