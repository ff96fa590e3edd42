"""
Exceptions raised by the media service layer.

Configuration and contract errors (unknown formats, a missing resizer,
conflicting render options) propagate to the caller. Content errors
(undecodable images, temporary file failures) are caught during metadata
extraction and recorded on the media instead.
"""


class MediaServiceError(Exception):
    """Base exception for all media service errors."""


class UnknownFormat(MediaServiceError, KeyError):
    """Raised when a format name is not registered."""

    def __init__(self, format_name):
        self.format_name = format_name
        super().__init__(
            f'The image format "{format_name}" is not defined. '
            'Is the format registered in PICTUREBOX_CONTEXTS?'
        )

    def __str__(self):
        return self.args[0]


class FormatAlreadyRegistered(MediaServiceError):
    """Raised when registering a format name twice."""


class ResizerMissing(MediaServiceError):
    """Raised when a box must be computed but no resizer is configured."""


class ResizerError(MediaServiceError):
    """Raised by a resizer when format settings cannot produce a box."""


class InvalidOptions(MediaServiceError, ValueError):
    """Raised when render options are mutually exclusive or malformed."""


class DecodeError(MediaServiceError):
    """Raised when binary content cannot be decoded as an image."""


class TempResourceError(MediaServiceError):
    """Raised when a temporary copy of the reference file cannot be created."""


class UploadRejected(MediaServiceError):
    """Raised when an upload fails extension or mime type validation."""
