"""
Post and Category models for blog-platform.
"""
from django.conf import settings
from django.db import models
from django.urls import reverse

from ..stats import extract_text_from_html, get_post_stats


class Category(models.Model):
    """
    Category for organizing posts.

    The slug is assigned once on creation and kept when the name changes.
    """

    name = models.CharField(max_length=100)
    slug = models.SlugField(max_length=100, unique=True)
    description = models.TextField(blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["name"]
        verbose_name_plural = "Categories"

    def __str__(self):
        return self.name

    def get_absolute_url(self):
        return reverse("blog_platform:category_detail", kwargs={"slug": self.slug})

    @property
    def post_count(self):
        """Return count of published posts in this category."""
        return self.posts.filter(published=True).count()


class Post(models.Model):
    """
    Blog post.

    ``slug`` is unique across all posts; the database constraint is the
    authoritative guard, see ``services.create_with_unique_slug``.
    """

    title = models.CharField(max_length=255)
    slug = models.SlugField(max_length=255, unique=True)
    content = models.TextField()
    published = models.BooleanField(default=False, db_index=True)

    featured_image = models.ForeignKey(
        "blog_platform.MediaItem",
        null=True,
        blank=True,
        on_delete=models.SET_NULL,
        related_name="featured_in",
    )

    # Optional, set from the request user when there is one
    author = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        null=True,
        blank=True,
        on_delete=models.SET_NULL,
        related_name="blog_platform_posts",
    )

    categories = models.ManyToManyField(
        Category,
        through="PostCategory",
        related_name="posts",
        blank=True,
    )

    created_at = models.DateTimeField(auto_now_add=True, db_index=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at", "-pk"]
        indexes = [
            models.Index(fields=["published", "-created_at"], name="blog_platform_post_pub_idx"),
        ]

    def __str__(self):
        return self.title

    def get_absolute_url(self):
        return reverse("blog_platform:post_detail", kwargs={"slug": self.slug})

    @property
    def stats(self):
        """Word count and reading time of the content."""
        return get_post_stats(self.content)

    @property
    def excerpt(self):
        """Return plain-text preview of the content for list display."""
        text = " ".join(extract_text_from_html(self.content).split())
        if len(text) > 280:
            return text[:280] + "..."
        return text

    @property
    def featured_image_url(self):
        if self.featured_image:
            return self.featured_image.file_url
        return None


class PostCategory(models.Model):
    """Junction table linking posts to categories."""

    post = models.ForeignKey(
        Post,
        on_delete=models.CASCADE,
        related_name="post_categories",
    )
    category = models.ForeignKey(
        Category,
        on_delete=models.CASCADE,
        related_name="post_categories",
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["created_at", "pk"]
        verbose_name = "Post Category"
        verbose_name_plural = "Post Categories"
        unique_together = ["post", "category"]

    def __str__(self):
        return f"{self.post} in {self.category}"
