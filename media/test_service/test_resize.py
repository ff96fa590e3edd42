"""
Tests for service/resize.py
"""
from io import BytesIO

from django.test import TestCase
from PIL import Image

from media.models import Media
from media.service.exceptions import ResizerError
from media.service.formats import Box
from media.service.resize import MODE_INSET, MODE_OUTBOUND, SimpleResizer


def make_image_bytes(width, height, fmt='JPEG'):
    buffer = BytesIO()
    Image.new('RGB', (width, height), color=(200, 30, 30)).save(buffer, fmt)
    return buffer.getvalue()


class SimpleResizerBoxTest(TestCase):
    """Tests for box computation"""

    def setUp(self):
        self.media = Media(id=1, context='gallery', width=800, height=600)

    def test_inset_width_only(self):
        """Test that a missing height keeps the aspect ratio"""
        box = SimpleResizer(MODE_INSET).get_box(self.media, {'width': 100})
        self.assertEqual(box, Box(100, 75))

    def test_inset_height_only(self):
        box = SimpleResizer(MODE_INSET).get_box(self.media, {'width': None, 'height': 300})
        self.assertEqual(box, Box(400, 300))

    def test_inset_fits_inside_box(self):
        box = SimpleResizer(MODE_INSET).get_box(self.media, {'width': 100, 'height': 100})
        self.assertEqual(box, Box(100, 75))

    def test_outbound_fills_box(self):
        box = SimpleResizer(MODE_OUTBOUND).get_box(self.media, {'width': 100, 'height': 100})
        self.assertEqual(box, Box(100, 100))

    def test_same_size_format(self):
        box = SimpleResizer().get_box(self.media, {'width': 800})
        self.assertEqual(box, Box(800, 600))

    def test_missing_width_and_height_raises(self):
        with self.assertRaises(ResizerError):
            SimpleResizer().get_box(self.media, {'quality': 80})

    def test_media_without_dimensions_raises(self):
        media = Media(id=2, context='gallery', width=0, height=0)
        with self.assertRaises(ResizerError):
            SimpleResizer().get_box(media, {'width': 100})

    def test_invalid_mode_raises(self):
        with self.assertRaises(ResizerError):
            SimpleResizer('stretch')


class SimpleResizerResizeTest(TestCase):
    """Tests for writing resized images"""

    def setUp(self):
        self.media = Media(id=1, context='gallery', width=800, height=600)

    def test_resize_writes_image_with_box_dimensions(self):
        out = BytesIO()
        box = SimpleResizer().resize(
            self.media, BytesIO(make_image_bytes(800, 600)), out, 'jpg', {'width': 100}
        )

        self.assertEqual(box, Box(100, 75))
        with Image.open(BytesIO(out.getvalue())) as img:
            self.assertEqual(img.size, (100, 75))
            self.assertEqual(img.format, 'JPEG')

    def test_resize_outbound_crops(self):
        out = BytesIO()
        SimpleResizer(MODE_OUTBOUND).resize(
            self.media, BytesIO(make_image_bytes(800, 600)), out, 'png', {'width': 50, 'height': 50}
        )

        with Image.open(BytesIO(out.getvalue())) as img:
            self.assertEqual(img.size, (50, 50))
            self.assertEqual(img.format, 'PNG')

    def test_resize_converts_transparent_png_to_jpeg(self):
        buffer = BytesIO()
        Image.new('RGBA', (800, 600), color=(0, 0, 0, 0)).save(buffer, 'PNG')

        out = BytesIO()
        SimpleResizer().resize(self.media, BytesIO(buffer.getvalue()), out, 'jpg', {'width': 80})

        with Image.open(BytesIO(out.getvalue())) as img:
            self.assertEqual(img.mode, 'RGB')
