"""
JSON API views for blog-platform.
"""
import json

from django.http import JsonResponse
from django.views import View
from loguru import logger

from .exceptions import InvalidSlugSourceError, SlugConflictError
from .forms import CategoryForm, CategoryUpdateForm, PostFilterForm, PostForm
from .models import Category, Post
from . import services


def serialize_category(category):
    return {
        "id": category.pk,
        "name": category.name,
        "slug": category.slug,
        "description": category.description,
    }


def serialize_post(post):
    stats = post.stats
    return {
        "id": post.pk,
        "title": post.title,
        "slug": post.slug,
        "content": post.content,
        "published": post.published,
        "featuredImage": post.featured_image_url,
        "createdAt": post.created_at.isoformat(),
        "updatedAt": post.updated_at.isoformat(),
        "categories": [serialize_category(c) for c in post.categories.all()],
        "stats": {
            "wordCount": stats.word_count,
            "readingTime": stats.reading_time,
            "formattedReadingTime": stats.formatted_reading_time,
        },
    }


def error_response(message, status, fields=None):
    payload = {"error": message}
    if fields:
        payload["fields"] = fields
    return JsonResponse(payload, status=status)


def form_error_response(form):
    fields = {name: [str(e) for e in errors] for name, errors in form.errors.items()}
    return error_response("Invalid input", 400, fields)


def request_user(request):
    user = getattr(request, "user", None)
    if user is not None and user.is_authenticated:
        return user
    return None


class PostCollectionApiView(View):
    """List posts, or create one from a multipart form."""

    def get(self, request):
        form = PostFilterForm(request.GET)
        if not form.is_valid():
            return form_error_response(form)

        data = form.cleaned_data
        try:
            page = services.get_posts(
                category=data["category_id"] or data["category"] or None,
                published=data["published"],
                page=data["page"] or 1,
                limit=data["limit"],
            )
        except Exception:
            logger.exception("Failed to fetch posts")
            return error_response("Failed to fetch posts", 500)

        return JsonResponse({
            "posts": [serialize_post(post) for post in page.posts],
            "totalCount": page.total_count,
            "page": page.page,
            "numPages": page.num_pages,
        })

    def post(self, request):
        form = PostForm(request.POST, request.FILES)
        if not form.is_valid():
            return form_error_response(form)

        data = form.cleaned_data
        user = request_user(request)
        try:
            post = services.create_post_with_upload(
                image_file=data["featured_image"],
                uploaded_by=user,
                title=data["title"],
                content=data["content"],
                published=data["published"],
                categories=data["categories"],
            )
        except InvalidSlugSourceError as exc:
            return error_response(str(exc), 400, {"title": [str(exc)]})
        except SlugConflictError as exc:
            return error_response(str(exc), 409)
        except Exception:
            logger.exception("Failed to create post")
            return error_response("Failed to create post", 500)

        return JsonResponse(serialize_post(post), status=201)


class PostDetailApiView(View):
    """Fetch a single post by slug."""

    def get(self, request, slug):
        try:
            post = services.get_post_by_slug(slug)
        except Post.DoesNotExist:
            return error_response("Post not found", 404)
        except Exception:
            logger.exception("Failed to fetch post {}", slug)
            return error_response("Failed to fetch post", 500)

        return JsonResponse(serialize_post(post))


class CategoryCollectionApiView(View):
    def get(self, request):
        categories = Category.objects.all()
        return JsonResponse(
            {"categories": [serialize_category(c) for c in categories]}
        )

    def post(self, request):
        form = CategoryForm(request.POST)
        if not form.is_valid():
            return form_error_response(form)

        try:
            category = services.create_category(
                name=form.cleaned_data["name"],
                description=form.cleaned_data["description"],
            )
        except InvalidSlugSourceError as exc:
            return error_response(str(exc), 400, {"name": [str(exc)]})
        except SlugConflictError as exc:
            return error_response(str(exc), 409)
        except Exception:
            logger.exception("Failed to create category")
            return error_response("Failed to create category", 500)

        return JsonResponse(serialize_category(category), status=201)


class CategoryDetailApiView(View):
    """Update (JSON body) or delete a category."""

    def get(self, request, pk):
        category = Category.objects.filter(pk=pk).first()
        if category is None:
            return error_response("Category not found", 404)
        return JsonResponse(serialize_category(category))

    def patch(self, request, pk):
        category = Category.objects.filter(pk=pk).first()
        if category is None:
            return error_response("Category not found", 404)

        try:
            body = json.loads(request.body or b"{}")
        except ValueError:
            return error_response("Request body must be JSON", 400)
        if not isinstance(body, dict):
            return error_response("Request body must be a JSON object", 400)

        form = CategoryUpdateForm(body)
        if not form.is_valid():
            return form_error_response(form)

        category = services.update_category(category, **form.cleaned_data)
        return JsonResponse(serialize_category(category))

    def delete(self, request, pk):
        category = Category.objects.filter(pk=pk).first()
        if category is None:
            return error_response("Category not found", 404)

        services.delete_category(category)
        return JsonResponse({"message": "Category deleted successfully", "success": True})
