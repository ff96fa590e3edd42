"""
Format definitions and the format registry.

A format is a named resize configuration scoped to a context. Format names
follow the "<context>_<label>" convention, and a format belongs to a context
when its name starts with the context string.
"""
from dataclasses import dataclass, field

from media.service.exceptions import FormatAlreadyRegistered, UnknownFormat

# The original, unmodified upload
FORMAT_REFERENCE = 'reference'

# Small preview used by the admin
FORMAT_ADMIN = 'admin'


@dataclass(frozen=True)
class Box:
    """Width and height of a rendered representation"""
    width: int
    height: int

    def __post_init__(self):
        if self.width < 0 or self.height < 0:
            raise ValueError(f'Box dimensions must be non-negative, got {self.width}x{self.height}')

    def scale(self, ratio):
        return Box(int(round(self.width * ratio)), int(round(self.height * ratio)))


@dataclass(frozen=True)
class Format:
    """A registered format. Settings are passed through to the resizer untouched."""
    name: str
    settings: dict = field(default_factory=dict, hash=False, compare=False)
    context: str = ''


def belongs_to_context(format_name, context):
    """
    Check whether a format name belongs to a context.

    This is a plain, case-sensitive prefix match, so "gallery" also matches
    "gallery2_small".
    """
    if context is None:
        return False
    return format_name.startswith(context)


def get_format_name(media, format_name):
    """
    Normalize a format label to its registered name.

    Examples:
        'small' -> 'gallery_small'  (media.context == 'gallery')
        'gallery_small' -> 'gallery_small'
        'reference' -> 'reference'
    """
    if format_name in (FORMAT_ADMIN, FORMAT_REFERENCE):
        return format_name

    base_name = f'{media.context}_'
    if format_name.startswith(base_name):
        return format_name

    return base_name + format_name


class FormatRegistry:
    """Known formats, keyed by unique name, in registration order"""

    def __init__(self, formats=None):
        self._formats = {}
        for fmt in formats or []:
            self.register(fmt)

    @classmethod
    def from_contexts(cls, contexts, admin_format=None):
        """
        Build a registry from a contexts mapping.

        Args:
            contexts: {'gallery': {'formats': {'small': {'width': 100}}}}
            admin_format: Optional settings for the admin format

        Returns:
            FormatRegistry
        """
        registry = cls()
        for context, options in (contexts or {}).items():
            for label, settings in (options.get('formats') or {}).items():
                registry.register(Format(f'{context}_{label}', dict(settings), context))

        if admin_format is not None:
            registry.register(Format(FORMAT_ADMIN, dict(admin_format)))

        return registry

    def register(self, fmt):
        if fmt.name in self._formats:
            raise FormatAlreadyRegistered(f'Format "{fmt.name}" is already registered')
        self._formats[fmt.name] = fmt

    def get(self, name):
        return self._formats.get(name)

    def lookup(self, name):
        fmt = self._formats.get(name)
        if fmt is None:
            raise UnknownFormat(name)
        return fmt

    def all(self):
        return list(self._formats.values())

    def formats_for_context(self, context):
        return [fmt for fmt in self._formats.values() if belongs_to_context(fmt.name, context)]

    def __contains__(self, name):
        return name in self._formats

    def __len__(self):
        return len(self._formats)
