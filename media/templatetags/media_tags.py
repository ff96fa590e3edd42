from django import template
from django.forms.utils import flatatt
from django.utils.html import format_html, format_html_join

from media.operations import render_properties
from media.service.formats import get_format_name
from media.service.pool import get_provider

register = template.Library()


def render_image_properties(properties):
    """
    Render planner output as HTML.

    Flat properties become an <img>; {'picture': ...} becomes a <picture>
    with one <source> per media query followed by the <img>.
    """
    if 'picture' in properties:
        picture = properties['picture']
        sources = format_html_join(
            '',
            '<source media="{}" srcset="{}">',
            ((source['media'], source['srcset']) for source in picture['source']),
        )
        return format_html('<picture>{}<img{}></picture>', sources, flatatt(picture['img']))

    return format_html('<img{}>', flatatt(properties))


@register.simple_tag
def media_image(media, format_name='reference', **options):
    """
    Render a media as <img> or <picture>.

    Examples:
        {% media_image media 'small' %}
        {% media_image media 'small' class='rounded' loading='lazy' %}
        {% media_image media 'small' picture=picture_formats %}
    """
    if media is None:
        return ''
    return render_image_properties(render_properties(media, format_name, **options))


@register.simple_tag
def media_url(media, format_name='reference'):
    """Public URL of a media in a format"""
    if media is None:
        return ''
    return get_provider().generate_public_url(media, get_format_name(media, format_name))


@register.filter
def filesize(bytes_value):
    """Media size in bytes as shown in the admin list, e.g. 2411724 -> "2.3 MB"."""
    if not bytes_value:
        return '0 B'

    bytes_value = float(bytes_value)

    if bytes_value < 1024:
        return f'{int(bytes_value)} B'

    for unit in ('KB', 'MB', 'GB'):
        bytes_value /= 1024.0
        if bytes_value < 1024:
            return f'{bytes_value:.1f} {unit}'

    return f'{bytes_value / 1024.0:.1f} TB'
