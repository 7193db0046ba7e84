"""
Configuration settings for blog-platform.

Override these in your Django settings.py:

    BLOG_PLATFORM = {
        'POSTS_PER_PAGE': 20,
        'SLUG_CREATE_RETRIES': 5,
        ...
    }
"""
from django.conf import settings

DEFAULTS = {
    # Slugs
    "SLUG_MAX_LENGTH": 100,
    "SLUG_CREATE_RETRIES": 3,

    # Listing
    "POSTS_PER_PAGE": 10,
    "API_MAX_PAGE_SIZE": 100,

    # Media
    "MEDIA_UPLOAD_PATH": "blog/media/%Y/%m/",
    "MEDIA_MAX_SIZE_MB": 10,
    "ALLOWED_IMAGE_TYPES": ["image/jpeg", "image/png", "image/gif", "image/webp"],

    # Statistics
    "WORDS_PER_MINUTE": 225,
}


class BlogPlatformSettings:
    """
    Lazy settings object that reads from Django settings.

    Access via: from blog_platform.conf import blog_settings
    """

    def __getattr__(self, name):
        if name not in DEFAULTS:
            raise AttributeError(f"Invalid blog_platform setting: {name}")

        user_settings = getattr(settings, "BLOG_PLATFORM", {})
        return user_settings.get(name, DEFAULTS[name])


blog_settings = BlogPlatformSettings()
