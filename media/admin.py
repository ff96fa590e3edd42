from django.contrib import admin

from media.models import Media
from media.service.exceptions import MediaServiceError
from media.service.formats import FORMAT_ADMIN
from media.service.pool import get_provider
from media.tasks import generate_thumbnails_task, update_metadata_task
from media.templatetags.media_tags import filesize, render_image_properties


@admin.register(Media)
class MediaAdmin(admin.ModelAdmin):
    list_display = [
        'name',
        'preview_thumbnail',
        'context',
        'provider_status',
        'dimensions_display',
        'size_display',
        'updated_at',
    ]

    list_filter = [
        'provider_status',
        'context',
        'created_at',
    ]

    search_fields = [
        'name',
        'description',
        'guid',
        'provider_reference',
    ]

    readonly_fields = [
        'guid',
        'provider_name',
        'provider_reference',
        'content_type',
        'size',
        'width',
        'height',
        'created_at',
        'updated_at',
        'preview_display',
    ]

    fieldsets = [
        ('Identification', {'fields': ['guid', 'name', 'description', 'context']}),
        ('Provider', {'fields': ['provider_name', 'provider_reference', 'provider_status']}),
        ('Metadata', {'fields': ['content_type', 'size', 'width', 'height', 'cdn_is_flushable']}),
        ('Preview', {'fields': ['preview_display']}),
        ('Timestamps', {'fields': ['created_at', 'updated_at']}),
    ]

    actions = ['refresh_metadata', 'regenerate_thumbnails']

    def size_display(self, obj):
        return filesize(obj.size) if obj.size else '-'

    size_display.short_description = 'Size'

    def dimensions_display(self, obj):
        if obj.width and obj.height:
            return f'{obj.width}x{obj.height}'
        return '-'

    dimensions_display.short_description = 'Dimensions'

    def _render(self, obj, format_name):
        if not obj.is_ok:
            return '-'

        try:
            properties = get_provider().get_helper_properties(obj, format_name)
        except MediaServiceError as e:
            return f'Preview unavailable: {e}'

        return render_image_properties(properties)

    def preview_thumbnail(self, obj):
        return self._render(obj, FORMAT_ADMIN)

    preview_thumbnail.short_description = 'Preview'

    def preview_display(self, obj):
        if obj.pk is None:
            return '-'
        return self._render(obj, FORMAT_ADMIN)

    preview_display.short_description = 'Preview'

    def refresh_metadata(self, request, queryset):
        count = 0
        for media in queryset:
            update_metadata_task(media.pk)
            count += 1
        self.message_user(request, f'Refreshing metadata for {count} media.')

    refresh_metadata.short_description = 'Refresh metadata of selected media'

    def regenerate_thumbnails(self, request, queryset):
        count = 0
        for media in queryset:
            generate_thumbnails_task(media.pk)
            count += 1
        self.message_user(request, f'Enqueued thumbnail generation for {count} media.')

    regenerate_thumbnails.short_description = 'Regenerate thumbnails'
