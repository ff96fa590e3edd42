"""
Metadata extraction.

Determines the byte size and pixel dimensions of a media's content. Extraction
never raises for bad content and never touches the media: it returns a
MetadataResult and the caller decides what to record.
"""
from dataclasses import dataclass
import os
import shutil
import tempfile

from media.service.exceptions import DecodeError, TempResourceError


@dataclass
class MetadataResult:
    """Outcome of a metadata extraction"""
    size: int = 0
    width: int = 0
    height: int = 0
    error: str = None

    @property
    def ok(self):
        return self.error is None

    @classmethod
    def failed(cls, error):
        return cls(size=0, width=0, height=0, error=str(error))


def get_local_path(binary_content):
    """
    Return a filesystem path for binary content when it has one.

    Handles plain paths, Django TemporaryUploadedFile (temporary_file_path())
    and objects exposing a 'path' attribute. In-memory uploads return None.
    """
    if binary_content is None:
        return None

    if isinstance(binary_content, (str, os.PathLike)):
        return os.fspath(binary_content)

    temporary_file_path = getattr(binary_content, 'temporary_file_path', None)
    if callable(temporary_file_path):
        return temporary_file_path()

    path = getattr(binary_content, 'path', None)
    if isinstance(path, (str, os.PathLike)):
        return os.fspath(path)

    return None


def read_metadata(path, kind):
    """
    Decode the file at path.

    Raises:
        DecodeError: when the content is not a decodable image
    """
    box = kind.open(path)
    return MetadataResult(size=os.path.getsize(path), width=box.width, height=box.height)


def extract_metadata(media, open_reference, kind, logger=None):
    """
    Extract size and dimensions for a media.

    Args:
        media: Media instance (read only)
        open_reference: Callable(media) returning the reference file opened for reading
        kind: MediaKindStrategy used to decode
        logger: Optional callable(str) for logging

    Returns:
        MetadataResult
    """
    def log(message):
        if logger:
            logger(message)

    path = get_local_path(media.binary_content)
    if path is not None:
        try:
            return read_metadata(path, kind)
        except DecodeError as e:
            log(f'Metadata extraction failed for media {media.pk}: {e}')
            return MetadataResult.failed(e)

    upload = media.binary_content if hasattr(media.binary_content, 'read') else None

    try:
        with tempfile.NamedTemporaryFile(prefix='picturebox_update_metadata') as tmp:
            try:
                if upload is not None:
                    upload.seek(0)
                    shutil.copyfileobj(upload, tmp)
                    upload.seek(0)
                else:
                    with open_reference(media) as reference:
                        shutil.copyfileobj(reference, tmp)
                tmp.flush()
            except OSError as e:
                raise TempResourceError(f'Unable to update metadata for media {media.pk}: {e}') from e

            return read_metadata(tmp.name, kind)
    except (DecodeError, TempResourceError) as e:
        log(f'Metadata extraction failed for media {media.pk}: {e}')
        return MetadataResult.failed(e)
    except OSError as e:
        log(f'Metadata extraction failed for media {media.pk}: {e}')
        return MetadataResult.failed(TempResourceError(str(e)))
