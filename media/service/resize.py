"""
Image resizing.

Computes the box a derived representation will have and writes the resized
image with Pillow.
"""
from io import BytesIO

from PIL import Image, ImageOps

from media.service.exceptions import ResizerError
from media.service.formats import Box

MODE_INSET = 'inset'
MODE_OUTBOUND = 'outbound'

# Pillow save() format names for common extensions
PIL_FORMATS = {
    'jpg': 'JPEG',
    'jpeg': 'JPEG',
    'png': 'PNG',
    'gif': 'GIF',
    'webp': 'WEBP',
}


class SimpleResizer:
    """
    Scale the media box to fit the format box.

    'inset' keeps the whole image inside the format box, 'outbound' fills the
    format box and crops whatever overflows.
    """

    def __init__(self, mode=MODE_INSET, quality=80):
        if mode not in (MODE_INSET, MODE_OUTBOUND):
            raise ResizerError(f'Invalid resizer mode: {mode}')
        self.mode = mode
        self.quality = quality

    def get_box(self, media, settings):
        size = media.get_box()
        width = settings.get('width')
        height = settings.get('height')

        if width is None and height is None:
            raise ResizerError(
                f'Width/Height parameter is missing in format settings for media {media.pk}. '
                'Please add at least one of them.'
            )

        if not size.width or not size.height:
            raise ResizerError(f'Media {media.pk} has no intrinsic dimensions')

        if height is None:
            height = int(round(width * size.height / size.width))
        if width is None:
            width = int(round(height * size.width / size.height))

        return self._compute_box(size, width, height)

    def _compute_box(self, size, width, height):
        ratios = [width / size.width, height / size.height]
        if self.mode == MODE_INSET:
            ratio = min(ratios)
        else:
            ratio = max(ratios)

        scaled = size.scale(ratio)
        return Box(min(scaled.width, width), min(scaled.height, height))

    def resize(self, media, in_file, out_file, extension, settings):
        """
        Write a resized copy of in_file to out_file.

        Args:
            media: Media instance (for the intrinsic box)
            in_file: Readable binary file with the reference image
            out_file: Writable binary file for the result
            extension: Output extension, e.g. 'jpg'
            settings: Format settings

        Returns:
            Box of the written image
        """
        box = self.get_box(media, settings)
        pil_format = PIL_FORMATS.get(extension.lower(), extension.upper())
        quality = settings.get('quality', self.quality)

        with Image.open(in_file) as img:
            if self.mode == MODE_OUTBOUND:
                resized = ImageOps.fit(img, (box.width, box.height))
            else:
                resized = img.resize((box.width, box.height))

            if pil_format == 'JPEG' and resized.mode in ('RGBA', 'P', 'LA'):
                resized = resized.convert('RGB')

            buffer = BytesIO()
            resized.save(buffer, pil_format, quality=quality)

        out_file.write(buffer.getvalue())
        return box
