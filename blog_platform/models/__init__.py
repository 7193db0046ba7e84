"""
Models for blog-platform.

All models are importable from blog_platform.models:

    from blog_platform.models import Post, Category, MediaItem
"""
from .posts import Category, Post, PostCategory
from .media import MediaItem

__all__ = [
    # Posts
    "Category",
    "Post",
    "PostCategory",
    # Media
    "MediaItem",
]
