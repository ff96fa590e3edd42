"""
Tests for service/formats.py
"""
from django.test import TestCase

from media.models import Media
from media.service.exceptions import FormatAlreadyRegistered, UnknownFormat
from media.service.formats import (
    FORMAT_ADMIN,
    FORMAT_REFERENCE,
    Box,
    Format,
    FormatRegistry,
    belongs_to_context,
    get_format_name,
)


class BoxTest(TestCase):
    """Tests for the Box value"""

    def test_box_equality(self):
        self.assertEqual(Box(100, 75), Box(100, 75))
        self.assertNotEqual(Box(100, 75), Box(75, 100))

    def test_box_scale_rounds(self):
        """Test scaling rounds to the nearest pixel"""
        self.assertEqual(Box(800, 600).scale(0.125), Box(100, 75))
        self.assertEqual(Box(333, 333).scale(0.5), Box(166, 166))

    def test_box_rejects_negative_dimensions(self):
        with self.assertRaises(ValueError):
            Box(-1, 10)


class FormatRegistryTest(TestCase):
    """Tests for format registration and lookup"""

    def setUp(self):
        self.registry = FormatRegistry([
            Format('gallery_small', {'width': 100}, 'gallery'),
            Format('gallery_large', {'width': 800}, 'gallery'),
            Format('news_small', {'width': 50}, 'news'),
        ])

    def test_lookup_registered_format(self):
        fmt = self.registry.lookup('gallery_small')
        self.assertEqual(fmt.name, 'gallery_small')
        self.assertEqual(fmt.settings, {'width': 100})

    def test_lookup_unknown_format_raises(self):
        with self.assertRaises(UnknownFormat) as ctx:
            self.registry.lookup('gallery_huge')
        self.assertEqual(ctx.exception.format_name, 'gallery_huge')
        self.assertIn('gallery_huge', str(ctx.exception))

    def test_get_unknown_format_returns_none(self):
        self.assertIsNone(self.registry.get('gallery_huge'))

    def test_register_duplicate_name_raises(self):
        """Test that format names are unique"""
        with self.assertRaises(FormatAlreadyRegistered):
            self.registry.register(Format('gallery_small', {'width': 200}, 'gallery'))
        self.assertEqual(self.registry.lookup('gallery_small').settings, {'width': 100})

    def test_formats_for_context_keeps_registration_order(self):
        names = [fmt.name for fmt in self.registry.formats_for_context('gallery')]
        self.assertEqual(names, ['gallery_small', 'gallery_large'])

    def test_formats_for_context_is_case_sensitive(self):
        self.assertEqual(self.registry.formats_for_context('Gallery'), [])

    def test_formats_for_context_is_a_prefix_match(self):
        """Test that 'gallery' also matches formats of 'gallery2'"""
        self.registry.register(Format('gallery2_small', {'width': 10}, 'gallery2'))
        names = [fmt.name for fmt in self.registry.formats_for_context('gallery')]
        self.assertIn('gallery2_small', names)

    def test_contains_and_len(self):
        self.assertIn('news_small', self.registry)
        self.assertNotIn('news_large', self.registry)
        self.assertEqual(len(self.registry), 3)

    def test_from_contexts(self):
        """Test building a registry from the contexts setting"""
        registry = FormatRegistry.from_contexts(
            {
                'gallery': {'formats': {'small': {'width': 100}, 'large': {'width': 800}}},
                'news': {'formats': {'wide': {'width': 1200, 'height': 400}}},
            },
            admin_format={'width': 200},
        )

        self.assertEqual(
            [fmt.name for fmt in registry.all()],
            ['gallery_small', 'gallery_large', 'news_wide', FORMAT_ADMIN],
        )
        self.assertEqual(registry.lookup('news_wide').context, 'news')
        self.assertEqual(registry.lookup(FORMAT_ADMIN).settings, {'width': 200})

    def test_from_contexts_without_admin_format(self):
        registry = FormatRegistry.from_contexts({'gallery': {'formats': {}}})
        self.assertEqual(len(registry), 0)


class ContextPredicateTest(TestCase):
    """Tests for belongs_to_context and get_format_name"""

    def test_belongs_to_context(self):
        self.assertTrue(belongs_to_context('gallery_small', 'gallery'))
        self.assertFalse(belongs_to_context('news_small', 'gallery'))
        self.assertFalse(belongs_to_context('gallery_small', None))

    def test_get_format_name_prefixes_context(self):
        media = Media(context='gallery')
        self.assertEqual(get_format_name(media, 'small'), 'gallery_small')

    def test_get_format_name_keeps_full_name(self):
        media = Media(context='gallery')
        self.assertEqual(get_format_name(media, 'gallery_small'), 'gallery_small')

    def test_get_format_name_special_formats(self):
        media = Media(context='gallery')
        self.assertEqual(get_format_name(media, FORMAT_REFERENCE), FORMAT_REFERENCE)
        self.assertEqual(get_format_name(media, FORMAT_ADMIN), FORMAT_ADMIN)
