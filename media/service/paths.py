"""
Storage path generation.

Spreads media files over two levels of numbered directories so no single
directory grows without bound.
"""


class DefaultPathGenerator:
    """
    Build "<context>/<first>/<second>" from the media id.

    Examples (first_level=100000, second_level=1000):
        id 1, context 'gallery'      -> 'gallery/0001/01'
        id 123456, context 'gallery' -> 'gallery/0002/24'
    """

    def __init__(self, first_level=100000, second_level=1000):
        self.first_level = first_level
        self.second_level = second_level

    def generate_path(self, media):
        if media.pk is None:
            raise ValueError('Cannot generate a storage path for unsaved media')

        first = media.pk // self.first_level
        second = (media.pk - first * self.first_level) // self.second_level

        return f'{media.context}/{first + 1:04d}/{second + 1:02d}'
