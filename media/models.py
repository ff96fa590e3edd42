from django.db import models
from nanoid import generate

from media.service.formats import Box


def generate_nanoid():
    """Generate NanoID with A-Z a-z 0-9 alphabet"""
    alphabet = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789"
    return generate(alphabet, size=21)


class Media(models.Model):
    """Uploaded image and the metadata derived from it"""

    # Status choices
    STATUS_OK = "OK"
    STATUS_ERROR = "ERROR"
    STATUS_PENDING = "PENDING"

    STATUS_CHOICES = [
        (STATUS_OK, "OK"),
        (STATUS_ERROR, "Error"),
        (STATUS_PENDING, "Pending"),
    ]

    guid = models.CharField(max_length=21, unique=True, default=generate_nanoid, editable=False)

    # Basic fields
    name = models.CharField(max_length=255, blank=True)
    description = models.TextField(blank=True, null=True)
    context = models.CharField(max_length=64, db_index=True)
    content_type = models.CharField(max_length=100, blank=True)

    # Provider
    provider_name = models.CharField(max_length=255, blank=True)
    provider_reference = models.CharField(max_length=255, blank=True)
    provider_status = models.CharField(
        max_length=10, choices=STATUS_CHOICES, default=STATUS_PENDING, db_index=True
    )

    # Metadata
    size = models.BigIntegerField(default=0)
    width = models.PositiveIntegerField(default=0)
    height = models.PositiveIntegerField(default=0)

    cdn_is_flushable = models.BooleanField(default=False)

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]
        verbose_name_plural = "media"

    # Upload being processed; never persisted
    binary_content = None

    def __str__(self):
        return f"{self.name or self.provider_reference} ({self.context})"

    @property
    def is_ok(self):
        return self.provider_status == self.STATUS_OK

    @property
    def has_error(self):
        return self.provider_status == self.STATUS_ERROR

    def get_box(self):
        """Intrinsic box of the reference image"""
        return Box(self.width or 0, self.height or 0)
