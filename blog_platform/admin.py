"""
Django admin configuration for blog_platform.
"""
from django.contrib import admin
from django.utils.html import format_html

from .forms import CategoryAdminForm, PostAdminForm
from .models import Category, MediaItem, Post, PostCategory
from . import services


class PostCategoryInline(admin.TabularInline):
    """Inline for managing the categories of a post."""

    model = PostCategory
    extra = 1
    raw_id_fields = ["category"]


class SlugLockedAdminMixin:
    """
    Derive the slug from ``slug_source`` on creation and never edit it.

    New rows go through the same collision-resolving insert as the rest of
    the app; the slug is shown read-only on both add and change pages.
    """

    slug_source = None
    readonly_fields = ["slug", "created_at", "updated_at"]

    def save_model(self, request, obj, form, change):
        if change:
            super().save_model(request, obj, form, change)
            return
        services.save_with_unique_slug(obj, getattr(obj, self.slug_source))


@admin.register(Category)
class CategoryAdmin(SlugLockedAdminMixin, admin.ModelAdmin):
    form = CategoryAdminForm
    slug_source = "name"
    list_display = ["name", "slug", "post_count", "created_at"]
    search_fields = ["name", "slug", "description"]


@admin.register(Post)
class PostAdmin(SlugLockedAdminMixin, admin.ModelAdmin):
    form = PostAdminForm
    slug_source = "title"
    list_display = [
        "title_preview",
        "slug",
        "published",
        "author",
        "created_at",
    ]
    list_filter = ["published", "categories", "created_at"]
    search_fields = ["title", "content", "slug"]
    raw_id_fields = ["author", "featured_image"]
    date_hierarchy = "created_at"
    inlines = [PostCategoryInline]

    fieldsets = (
        (None, {
            "fields": ("title", "slug", "content", "featured_image", "author")
        }),
        ("Status", {
            "fields": ("published",)
        }),
        ("Metadata", {
            "fields": ("created_at", "updated_at"),
            "classes": ("collapse",),
        }),
    )

    actions = ["publish_posts", "unpublish_posts"]

    def title_preview(self, obj):
        """Truncated title for list display."""
        return obj.title[:60] + "..." if len(obj.title) > 60 else obj.title

    title_preview.short_description = "Title"

    @admin.action(description="Publish selected posts")
    def publish_posts(self, request, queryset):
        count = queryset.update(published=True)
        self.message_user(request, f"{count} posts published.")

    @admin.action(description="Unpublish selected posts")
    def unpublish_posts(self, request, queryset):
        count = queryset.update(published=False)
        self.message_user(request, f"{count} posts unpublished.")


@admin.register(MediaItem)
class MediaItemAdmin(admin.ModelAdmin):
    list_display = [
        "thumbnail_preview",
        "original_filename",
        "human_file_size",
        "dimensions",
        "uploaded_by",
        "created_at",
    ]
    search_fields = ["original_filename", "alt_text"]
    readonly_fields = [
        "content_hash",
        "file_size",
        "width",
        "height",
        "mime_type",
        "created_at",
    ]

    def thumbnail_preview(self, obj):
        if obj.file:
            return format_html(
                '<img src="{}" style="max-width: 50px; max-height: 50px;" />',
                obj.file.url,
            )
        return "-"

    thumbnail_preview.short_description = "Preview"

    def dimensions(self, obj):
        if obj.width and obj.height:
            return f"{obj.width}x{obj.height}"
        return "-"

    dimensions.short_description = "Size"
