"""
URL slug derivation and collision resolution.

Both functions are pure: they hold no state and touch no storage. The
storage round-trip (fetch existing slugs, insert, retry on conflict) lives
in ``blog_platform.services``.
"""
from django.utils.text import slugify


def normalize(text, max_length=None):
    """
    Derive a URL-safe slug from free-form text.

    The result only contains ``[a-z0-9-]`` and never starts, ends or
    repeats a hyphen. Text without any letter or digit yields ``""``.

    Examples:
        >>> normalize("Getting Started with Next.js 15")
        'getting-started-with-nextjs-15'
        >>> normalize("  Hello,   World!!  ")
        'hello-world'
        >>> normalize("???")
        ''
    """
    # slugify keeps underscores, which are not valid in our slugs
    slug = slugify(str(text).replace("_", " ")).strip("-")
    if max_length is not None:
        slug = slug[:max_length].rstrip("-")
    return slug


def resolve_unique(base_slug, existing_slugs):
    """
    Return ``base_slug``, or the first ``base_slug-N`` (N >= 2) not taken.

    ``existing_slugs`` is only read, never modified.

    Examples:
        >>> resolve_unique("hello-world", set())
        'hello-world'
        >>> resolve_unique("hello-world", {"hello-world", "hello-world-2"})
        'hello-world-3'
    """
    if base_slug not in existing_slugs:
        return base_slug

    counter = 2
    while True:
        candidate = f"{base_slug}-{counter}"
        if candidate not in existing_slugs:
            return candidate
        counter += 1
