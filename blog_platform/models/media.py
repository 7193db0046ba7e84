"""
Featured image storage for blog-platform.

Uploads are stored once and referenced by SHA256 content hash.
"""
import hashlib
import os

from django.conf import settings
from django.db import models
from django.utils import timezone
from loguru import logger

from ..conf import blog_settings


def get_upload_path(instance, filename):
    """Generate upload path for media files."""
    return timezone.now().strftime(blog_settings.MEDIA_UPLOAD_PATH) + filename


class MediaItem(models.Model):
    """
    Uploaded image with content-based deduplication.

    The same file uploaded twice returns the same MediaItem, so several
    posts can share one featured image.
    """

    file = models.ImageField(upload_to=get_upload_path)
    content_hash = models.CharField(
        max_length=64,
        unique=True,
        db_index=True,
        help_text="SHA256 hash of file content for deduplication",
    )
    original_filename = models.CharField(max_length=255)
    file_size = models.PositiveIntegerField(default=0, help_text="File size in bytes")
    mime_type = models.CharField(max_length=100, blank=True)
    width = models.PositiveIntegerField(null=True, blank=True)
    height = models.PositiveIntegerField(null=True, blank=True)
    alt_text = models.CharField(max_length=500, blank=True)

    uploaded_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="uploaded_blog_platform_media",
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-created_at"]
        verbose_name = "Media Item"
        verbose_name_plural = "Media"

    def __str__(self):
        return self.original_filename

    @property
    def file_url(self):
        """Return URL to the file."""
        if self.file:
            return self.file.url
        return None

    @property
    def file_extension(self):
        if self.original_filename:
            return os.path.splitext(self.original_filename)[1].lower()
        return ""

    @property
    def human_file_size(self):
        """Return human-readable file size."""
        size = self.file_size
        for unit in ["B", "KB", "MB", "GB"]:
            if size < 1024:
                return f"{size:.1f} {unit}"
            size /= 1024
        return f"{size:.1f} TB"

    @classmethod
    def get_or_create_from_file(cls, file_obj, uploaded_by=None):
        """
        Get existing media item or create new one based on content hash.

        Args:
            file_obj: Django UploadedFile or File
            uploaded_by: User who uploaded the file

        Returns:
            (MediaItem instance, created boolean)
        """
        hasher = hashlib.sha256()
        for chunk in file_obj.chunks():
            hasher.update(chunk)
        content_hash = hasher.hexdigest()

        existing = cls.objects.filter(content_hash=content_hash).first()
        if existing:
            logger.debug("Reusing media item {} for {}", existing.pk, file_obj.name)
            return existing, False

        file_obj.seek(0)

        item = cls.objects.create(
            file=file_obj,
            content_hash=content_hash,
            original_filename=os.path.basename(file_obj.name),
            file_size=file_obj.size,
            mime_type=getattr(file_obj, "content_type", "") or "",
            uploaded_by=uploaded_by,
        )
        item._read_dimensions()
        logger.info("Stored media item {} ({})", item.pk, item.original_filename)

        return item, True

    def _read_dimensions(self):
        """Read width and height from the stored image."""
        from PIL import Image, UnidentifiedImageError

        try:
            with self.file.open("rb") as fh, Image.open(fh) as img:
                self.width, self.height = img.size
        except (OSError, UnidentifiedImageError) as exc:
            logger.warning("Could not read dimensions of {}: {}", self.file.name, exc)
            return

        self.save(update_fields=["width", "height"])
