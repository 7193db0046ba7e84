"""
Tests for blog-platform models.
"""
import pytest
from django.db import IntegrityError, transaction

from blog_platform.models import Category, MediaItem, Post, PostCategory


class TestCategory:
    """Tests for Category model."""

    def test_str(self, category):
        assert str(category) == "Technology"

    def test_slug_is_unique(self, category):
        with pytest.raises(IntegrityError), transaction.atomic():
            Category.objects.create(name="Other", slug=category.slug)

    def test_post_count_only_counts_published(self, category, post):
        draft = Post.objects.create(title="Draft", slug="draft", content="wip")
        PostCategory.objects.create(post=draft, category=category)

        assert category.post_count == 1

    def test_absolute_url(self, category):
        assert category.get_absolute_url() == "/category/technology/"


class TestPost:
    """Tests for Post model."""

    def test_slug_is_unique(self, post):
        with pytest.raises(IntegrityError), transaction.atomic():
            Post.objects.create(title="Copy", slug=post.slug, content="x")

    def test_categories_through_join(self, post, category):
        assert list(post.categories.all()) == [category]
        assert PostCategory.objects.filter(post=post).count() == 1

    def test_title_change_keeps_slug(self, post):
        post.title = "Something Else Entirely"
        post.save()
        post.refresh_from_db()

        assert post.slug == "getting-started-with-nextjs-15"

    def test_newest_first(self, db):
        first = Post.objects.create(title="First", slug="first", content="a")
        second = Post.objects.create(title="Second", slug="second", content="b")

        assert list(Post.objects.all()) == [second, first]

    def test_stats(self, post):
        assert post.stats.word_count == 6
        assert post.stats.formatted_reading_time == "1 min read"

    def test_excerpt_strips_html_and_truncates(self, db):
        post = Post.objects.create(
            title="Long",
            slug="long",
            content="<p>" + "x" * 500 + "</p>",
        )
        assert len(post.excerpt) == 283  # 280 + "..."
        assert "<p>" not in post.excerpt

    def test_absolute_url(self, post):
        assert post.get_absolute_url() == "/post/getting-started-with-nextjs-15/"

    def test_no_featured_image(self, post):
        assert post.featured_image_url is None

    def test_deleting_category_detaches_post(self, post, category):
        category.delete()

        assert post.categories.count() == 0
        assert Post.objects.filter(pk=post.pk).exists()


class TestMediaItem:
    """Tests for MediaItem model."""

    def test_create_from_file(self, db, media_root, make_image, user):
        item, created = MediaItem.get_or_create_from_file(make_image(), uploaded_by=user)

        assert created
        assert item.original_filename == "photo.png"
        assert item.mime_type == "image/png"
        assert (item.width, item.height) == (40, 20)
        assert len(item.content_hash) == 64
        assert item.file.name.startswith("blog/media/")
        assert item.uploaded_by == user

    def test_same_content_is_deduplicated(self, db, media_root, make_image):
        first, created_first = MediaItem.get_or_create_from_file(make_image("a.png"))
        second, created_second = MediaItem.get_or_create_from_file(make_image("b.png"))

        assert created_first
        assert not created_second
        assert first.pk == second.pk
        assert MediaItem.objects.count() == 1

    def test_different_content_is_stored_separately(self, db, media_root, make_image):
        MediaItem.get_or_create_from_file(make_image(color="red"))
        MediaItem.get_or_create_from_file(make_image(color="blue"))

        assert MediaItem.objects.count() == 2

    def test_human_file_size(self, db):
        item = MediaItem(original_filename="big.jpg", file_size=1536000)
        assert "MB" in item.human_file_size
        assert item.file_extension == ".jpg"
