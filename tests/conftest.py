"""Shared fixtures for blog-platform tests."""
import io

import pytest
from django.contrib.auth import get_user_model
from django.core.files.uploadedfile import SimpleUploadedFile
from PIL import Image

from blog_platform import services


@pytest.fixture
def user(db):
    """Create a test user."""
    return get_user_model().objects.create_user(
        username="testuser",
        email="test@example.com",
        password="testpass123",
    )


@pytest.fixture
def category(db):
    """Create a test category."""
    return services.create_category(
        name="Technology",
        description="Posts about technology, programming, and software development",
    )


@pytest.fixture
def post(db, category):
    """Create a published test post."""
    return services.create_post(
        title="Getting Started with Next.js 15",
        content="<p>Next.js 15 brings exciting new features.</p>",
        published=True,
        categories=[category],
    )


@pytest.fixture
def media_root(settings, tmp_path):
    """Store uploads in a per-test directory."""
    settings.MEDIA_ROOT = str(tmp_path)
    return tmp_path


@pytest.fixture
def make_image():
    """Build an in-memory PNG upload."""

    def _make_image(name="photo.png", size=(40, 20), color="red"):
        buffer = io.BytesIO()
        Image.new("RGB", size, color).save(buffer, format="PNG")
        return SimpleUploadedFile(name, buffer.getvalue(), content_type="image/png")

    return _make_image
