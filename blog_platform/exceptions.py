"""Exceptions raised by blog_platform workflows."""


class BlogPlatformError(Exception):
    """Base class for blog_platform errors."""


class SlugConflictError(BlogPlatformError):
    """A slug is already taken, or no unique slug could be stored."""

    def __init__(self, slug, message=None):
        self.slug = slug
        super().__init__(message or f"Slug already exists: {slug}")


class InvalidSlugSourceError(BlogPlatformError):
    """The source text has no letters or digits to build a slug from."""

    def __init__(self, text):
        self.text = text
        super().__init__("Title must contain at least one letter or digit")
