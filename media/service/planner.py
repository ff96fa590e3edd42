"""
Responsive image rendering plans.

Given a media, a requested format and render options, decide which derived
representations are needed and build the parameters a template needs to
render them: a plain <img>, an <img> with srcset/sizes, or a <picture>
element with one <source> per media query.
"""
from dataclasses import dataclass, field

from media.service.exceptions import InvalidOptions, ResizerMissing
from media.service.formats import (
    FORMAT_ADMIN,
    FORMAT_REFERENCE,
    belongs_to_context,
    get_format_name,
)


@dataclass(frozen=True)
class RenderOptions:
    """
    Validated render options.

    srcset: None, a list of format identifiers, or any other value which is
        passed through to the output as the srcset attribute
    picture: None, a mapping of media query (or index) to format, or a list
        of formats
    extra: every other option, merged into the output as attributes
    """
    srcset: object = None
    picture: object = None
    extra: dict = field(default_factory=dict)

    @classmethod
    def from_options(cls, options=None):
        if isinstance(options, cls):
            return options

        options = dict(options or {})
        srcset = options.pop('srcset', None)
        picture = options.pop('picture', None)

        if srcset is not None and picture is not None:
            raise InvalidOptions("The 'srcset' and 'picture' options must not be used simultaneously.")

        if picture is not None and not isinstance(picture, (dict, list, tuple)):
            raise InvalidOptions("The 'picture' option must be a mapping or a list of formats.")

        return cls(srcset=srcset, picture=picture, extra=options)

    @property
    def srcset_formats(self):
        """The explicit srcset format list, or None when srcset is not a list"""
        if isinstance(self.srcset, (list, tuple)):
            return list(self.srcset)
        return None

    def picture_entries(self):
        if isinstance(self.picture, dict):
            return list(self.picture.items())
        return list(enumerate(self.picture or []))


def is_media_query_label(key):
    """Picture keys that are not numeric are used verbatim as media queries."""
    return isinstance(key, str) and not key.lstrip('-').isdigit()


def format_sizes(width):
    return f'(max-width: {width}px) 100vw, {width}px'


class RenderingPlanner:
    """Build render parameters for a media in a given format"""

    def __init__(self, registry, resizer, url_resolver, reference):
        self.registry = registry
        self.resizer = resizer
        self.urls = url_resolver
        self.reference = reference

    def get_box(self, media, format_name):
        """
        Box of a media rendered in a format.

        Raises:
            UnknownFormat: format is not registered
            ResizerMissing: no resizer is configured
        """
        if format_name == FORMAT_REFERENCE:
            return self.reference.get_reference_box(media)

        return self._format_box(media, self.registry.lookup(format_name))

    def _format_box(self, media, fmt):
        if self.resizer is None:
            raise ResizerMissing('Resizer not set on the image provider.')
        return self.resizer.get_box(media, fmt.settings)

    def plan(self, media, format_name, options=None):
        """
        Build the render parameters.

        Args:
            media: Media instance (read only)
            format_name: Registered format name, 'reference' or 'admin'
            options: dict or RenderOptions

        Returns:
            dict: flat <img> attributes, or {'picture': {'source': [...], 'img': {...}}}

        Raises:
            InvalidOptions, UnknownFormat, ResizerMissing
        """
        options = RenderOptions.from_options(options)

        box = self.get_box(media, format_name)
        params = {
            'alt': media.description if media.description not in (None, '') else media.name,
            'title': media.name,
            'src': self.urls.resolve(media, format_name),
            'width': box.width,
            'height': box.height,
        }

        if options.picture is not None:
            return {'picture': self._plan_picture(media, params, options)}

        extra = dict(options.extra)
        if options.srcset is not None and options.srcset_formats is None:
            extra['srcset'] = options.srcset

        if format_name != FORMAT_ADMIN:
            srcset = self._plan_srcset(media, format_name, options)
            if srcset is not None:
                params['srcset'] = srcset
            params['sizes'] = format_sizes(box.width)

        params.update(extra)
        return params

    def _plan_picture(self, media, params, options):
        sources = []
        for key, target in options.picture_entries():
            name = get_format_name(media, target)
            format_box = self._format_box(media, self.registry.lookup(name))

            if is_media_query_label(key):
                query = key
            else:
                query = f'(max-width: {format_box.width}px)'

            sources.append({'media': query, 'srcset': self.urls.resolve(media, name)})

        img = dict(params)
        for key, value in options.extra.items():
            img.setdefault(key, value)

        return {'source': sources, 'img': img}

    def _srcset_candidates(self, media, format_name, options):
        requested = options.srcset_formats
        if requested is None:
            return self.registry.formats_for_context(media.context)

        candidates = {}
        for item in requested:
            name = get_format_name(media, item)
            candidates[name] = self.registry.lookup(name)

        if format_name not in candidates:
            candidates[format_name] = self.registry.lookup(format_name)

        return list(candidates.values())

    def _plan_srcset(self, media, format_name, options):
        if options.srcset is not None and options.srcset_formats is None:
            return None

        entries = []
        for fmt in self._srcset_candidates(media, format_name, options):
            if not belongs_to_context(fmt.name, media.context):
                continue
            width = self._format_box(media, fmt).width
            entries.append(f'{self.urls.resolve(media, fmt.name)} {width}w')

        reference_box = self.reference.get_reference_box(media)
        entries.append(f'{self.urls.resolve(media, FORMAT_REFERENCE)} {reference_box.width}w')
        return ', '.join(entries)
