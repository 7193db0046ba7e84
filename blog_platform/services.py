"""
Post and category workflows for blog-platform.

Slugs are chosen in two storage steps: read the slugs already sharing the
base slug as prefix, then insert the row with the first free candidate. A
concurrent request can take the same slug between those steps, so the
unique constraint on ``slug`` is the real guarantee and a violation at
insert time restarts the whole sequence with a fresh read.
"""
from dataclasses import dataclass

from django.core.paginator import Paginator
from django.db import IntegrityError, transaction
from loguru import logger

from .conf import blog_settings
from .exceptions import BlogPlatformError, InvalidSlugSourceError, SlugConflictError
from .models import Category, MediaItem, Post, PostCategory
from .slugs import normalize, resolve_unique

# Room left in the slug column for "-N" suffixes
SUFFIX_RESERVE = 10


@dataclass
class PostPage:
    """One page of posts plus the totals needed to render pagination."""

    posts: list
    total_count: int
    page: int
    num_pages: int


def fetch_slugs_with_prefix(model, prefix):
    """Return every slug of ``model`` starting with ``prefix``."""
    return set(
        model.objects.filter(slug__startswith=prefix).values_list("slug", flat=True)
    )


def insert_with_slug(instance, slug, after_insert=None):
    """
    Insert ``instance`` with ``slug`` in its own transaction.

    ``after_insert`` is called with the saved instance inside the same
    transaction, so related rows are rolled back with it.

    Raises:
        SlugConflictError: another row already holds ``slug``.
    """
    model = type(instance)
    instance.slug = slug
    try:
        with transaction.atomic():
            instance.save(force_insert=True)
            if after_insert is not None:
                after_insert(instance)
    except IntegrityError:
        instance.pk = None
        if model.objects.filter(slug=slug).exists():
            raise SlugConflictError(slug) from None
        raise
    return instance


def slug_max_length(model):
    """Longest base slug for ``model`` that still leaves room for a suffix."""
    column = model._meta.get_field("slug").max_length
    return min(blog_settings.SLUG_MAX_LENGTH, column - SUFFIX_RESERVE)


def create_with_unique_slug(model, source_text, after_insert=None, **fields):
    """Create a ``model`` row whose slug is derived from ``source_text``."""
    return save_with_unique_slug(model(**fields), source_text, after_insert)


def save_with_unique_slug(instance, source_text, after_insert=None):
    """
    Insert the unsaved ``instance`` with a slug derived from ``source_text``.

    Retries the read-resolve-insert sequence up to ``SLUG_CREATE_RETRIES``
    times when the insert hits the unique constraint.

    Raises:
        InvalidSlugSourceError: ``source_text`` has no letters or digits.
        SlugConflictError: every attempt collided.
    """
    model = type(instance)
    base_slug = normalize(source_text, max_length=slug_max_length(model))
    if not base_slug:
        raise InvalidSlugSourceError(source_text)

    attempts = max(1, blog_settings.SLUG_CREATE_RETRIES)
    slug = base_slug
    for attempt in range(1, attempts + 1):
        existing = fetch_slugs_with_prefix(model, base_slug)
        slug = resolve_unique(base_slug, existing)
        if slug != base_slug:
            logger.debug("Slug {} taken, using {}", base_slug, slug)

        try:
            return insert_with_slug(instance, slug, after_insert)
        except SlugConflictError:
            logger.warning(
                "Slug conflict on {} for {} (attempt {}/{})",
                slug,
                model.__name__,
                attempt,
                attempts,
            )

    raise SlugConflictError(
        slug, "Could not create a unique identifier, try a different title"
    )


def create_post(
    title,
    content,
    published=False,
    featured_image=None,
    categories=(),
    author=None,
):
    """Create a post with a unique slug and attach its categories."""
    categories = list(dict.fromkeys(categories))

    def attach_categories(post):
        PostCategory.objects.bulk_create(
            [PostCategory(post=post, category=category) for category in categories]
        )

    post = create_with_unique_slug(
        Post,
        title,
        after_insert=attach_categories,
        title=title,
        content=content,
        published=published,
        featured_image=featured_image,
        author=author,
    )
    logger.info("Created post {} ({})", post.pk, post.slug)
    return post


def create_post_with_upload(image_file=None, uploaded_by=None, **post_fields):
    """
    Store ``image_file`` as the featured image, then create the post.

    A media item stored by this call is removed again when the post
    cannot be created.
    """
    featured_image, created = None, False
    if image_file:
        featured_image, created = MediaItem.get_or_create_from_file(
            image_file, uploaded_by=uploaded_by
        )

    try:
        return create_post(featured_image=featured_image, author=uploaded_by, **post_fields)
    except BlogPlatformError:
        if created:
            logger.info("Discarding media item {} of failed post", featured_image.pk)
            featured_image.file.delete(save=False)
            featured_image.delete()
        raise


def get_posts(category=None, published=None, page=1, limit=None):
    """
    Return one page of posts, newest first.

    ``category`` may be a Category, an integer primary key or a slug.
    Strings are always slugs, even when they are all digits. Filtering
    and pagination are done by the database.
    """
    qs = Post.objects.select_related("featured_image").prefetch_related("categories")

    if published is not None:
        qs = qs.filter(published=published)

    if category is not None:
        if isinstance(category, Category):
            qs = qs.filter(categories=category)
        elif isinstance(category, int):
            qs = qs.filter(categories__pk=category)
        else:
            qs = qs.filter(categories__slug=category)

    limit = limit or blog_settings.POSTS_PER_PAGE
    limit = max(1, min(limit, blog_settings.API_MAX_PAGE_SIZE))

    paginator = Paginator(qs, limit)
    page_obj = paginator.get_page(page)

    return PostPage(
        posts=list(page_obj.object_list),
        total_count=paginator.count,
        page=page_obj.number,
        num_pages=paginator.num_pages,
    )


def get_post_by_slug(slug):
    """Return the post with ``slug``; raises Post.DoesNotExist."""
    return (
        Post.objects.select_related("featured_image")
        .prefetch_related("categories")
        .get(slug=slug)
    )


def create_category(name, description=""):
    """Create a category with a unique slug derived from its name."""
    category = create_with_unique_slug(
        Category,
        name,
        name=name,
        description=description,
    )
    logger.info("Created category {} ({})", category.pk, category.slug)
    return category


def update_category(category, name=None, description=None):
    """Rename or re-describe a category. The slug is left unchanged."""
    update_fields = ["updated_at"]
    if name is not None:
        category.name = name
        update_fields.append("name")
    if description is not None:
        category.description = description
        update_fields.append("description")

    category.save(update_fields=update_fields)
    return category


def delete_category(category):
    """Delete a category and detach it from its posts."""
    logger.info("Deleting category {} ({})", category.pk, category.slug)
    category.delete()
