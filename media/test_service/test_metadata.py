"""
Tests for service/metadata.py
"""
from io import BytesIO
from pathlib import Path
from unittest.mock import patch
import os
import tempfile

from django.core.files.uploadedfile import SimpleUploadedFile
from django.test import TestCase
from PIL import Image

from media.models import Media
from media.service.kinds import ImageKind
from media.service.metadata import MetadataResult, extract_metadata, get_local_path

REAL_NAMED_TEMPORARY_FILE = tempfile.NamedTemporaryFile


def make_image_bytes(width, height, fmt='PNG'):
    buffer = BytesIO()
    Image.new('RGB', (width, height), color=(10, 120, 200)).save(buffer, fmt)
    return buffer.getvalue()


def reference_opener(content):
    return lambda media: BytesIO(content)


class GetLocalPathTest(TestCase):
    """Tests for locating binary content on disk"""

    def test_none(self):
        self.assertIsNone(get_local_path(None))

    def test_string_and_path(self):
        self.assertEqual(get_local_path('/tmp/a.png'), '/tmp/a.png')
        self.assertEqual(get_local_path(Path('/tmp/a.png')), '/tmp/a.png')

    def test_in_memory_upload_has_no_path(self):
        upload = SimpleUploadedFile('a.png', b'data', content_type='image/png')
        self.assertIsNone(get_local_path(upload))


class ExtractMetadataTest(TestCase):
    """Tests for metadata extraction"""

    def setUp(self):
        self.kind = ImageKind(['png'], ['image/png'])
        self.media = Media(id=7, context='gallery')

    def test_metadata_from_local_file(self):
        """Test that content on disk is decoded directly"""
        content = make_image_bytes(120, 80)
        with tempfile.TemporaryDirectory() as temp_dir:
            path = Path(temp_dir) / 'upload.png'
            path.write_bytes(content)
            self.media.binary_content = path

            result = extract_metadata(self.media, reference_opener(b''), self.kind)

        self.assertTrue(result.ok)
        self.assertEqual(result.size, len(content))
        self.assertEqual((result.width, result.height), (120, 80))

    def test_metadata_from_reference_copy(self):
        """Test that the reference file is copied to a temporary file when no content is on disk"""
        content = make_image_bytes(64, 48)

        result = extract_metadata(self.media, reference_opener(content), self.kind)

        self.assertEqual(result, MetadataResult(size=len(content), width=64, height=48))

    def test_metadata_from_in_memory_upload(self):
        """Test that an attached in-memory upload is read instead of the stored reference"""
        content = make_image_bytes(90, 60)
        self.media.binary_content = SimpleUploadedFile('a.png', content, content_type='image/png')

        def open_reference(media):
            raise AssertionError('reference should not be opened')

        result = extract_metadata(self.media, open_reference, self.kind)

        self.assertEqual(result, MetadataResult(size=len(content), width=90, height=60))
        self.assertEqual(self.media.binary_content.tell(), 0)

    def test_metadata_does_not_touch_media(self):
        self.media.width = 5
        self.media.provider_status = Media.STATUS_OK

        extract_metadata(self.media, reference_opener(b'not an image'), self.kind)

        self.assertEqual(self.media.width, 5)
        self.assertEqual(self.media.provider_status, Media.STATUS_OK)

    def test_undecodable_content_returns_error(self):
        result = extract_metadata(self.media, reference_opener(b'not an image'), self.kind)

        self.assertFalse(result.ok)
        self.assertEqual((result.size, result.width, result.height), (0, 0, 0))
        self.assertIsNotNone(result.error)

    def test_undecodable_content_is_idempotent(self):
        """Test that repeated extraction of bad content gives the same result"""
        first = extract_metadata(self.media, reference_opener(b'garbage'), self.kind)
        second = extract_metadata(self.media, reference_opener(b'garbage'), self.kind)

        self.assertEqual((first.size, first.width, first.height), (0, 0, 0))
        self.assertEqual((second.size, second.width, second.height), (0, 0, 0))
        self.assertFalse(second.ok)

    def test_undecodable_local_file_returns_error(self):
        with tempfile.TemporaryDirectory() as temp_dir:
            path = Path(temp_dir) / 'broken.png'
            path.write_bytes(b'broken')
            self.media.binary_content = str(path)

            result = extract_metadata(self.media, reference_opener(b''), self.kind)

        self.assertFalse(result.ok)
        self.assertEqual(result.size, 0)

    @patch('media.service.metadata.tempfile.NamedTemporaryFile')
    def test_temp_file_creation_failure_returns_error(self, mock_tmp):
        mock_tmp.side_effect = OSError('No space left on device')

        result = extract_metadata(self.media, reference_opener(make_image_bytes(10, 10)), self.kind)

        self.assertFalse(result.ok)
        self.assertEqual((result.size, result.width, result.height), (0, 0, 0))
        self.assertIn('No space left', result.error)

    def test_missing_reference_returns_error(self):
        def open_reference(media):
            raise FileNotFoundError('gallery/0001/01/missing.png')

        result = extract_metadata(self.media, open_reference, self.kind)

        self.assertFalse(result.ok)
        self.assertIn('Unable to update metadata for media 7', result.error)

    def test_temporary_file_is_removed(self):
        """Test that the temporary copy is deleted on success and on failure"""
        created = []

        def tracking_tmp(*args, **kwargs):
            tmp = REAL_NAMED_TEMPORARY_FILE(*args, **kwargs)
            created.append(tmp.name)
            return tmp

        with patch('media.service.metadata.tempfile.NamedTemporaryFile', side_effect=tracking_tmp):
            extract_metadata(self.media, reference_opener(make_image_bytes(10, 10)), self.kind)
            extract_metadata(self.media, reference_opener(b'garbage'), self.kind)

        self.assertEqual(len(created), 2)
        for name in created:
            self.assertFalse(os.path.exists(name))

    def test_logger_receives_failures(self):
        logs = []
        extract_metadata(self.media, reference_opener(b'garbage'), self.kind, logger=logs.append)

        self.assertTrue(any('Metadata extraction failed' in log for log in logs))
