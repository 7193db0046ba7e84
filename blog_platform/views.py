"""
HTML views for blog-platform.
"""
from django.shortcuts import get_object_or_404, redirect
from django.views.generic import DetailView, FormView, ListView
from loguru import logger

from .conf import blog_settings
from .exceptions import InvalidSlugSourceError, SlugConflictError
from .forms import PostForm
from .models import Category, Post
from . import services


class PostListView(ListView):
    """List published posts with pagination."""

    model = Post
    template_name = "blog_platform/post_list.html"
    context_object_name = "posts"

    def get_paginate_by(self, queryset):
        return blog_settings.POSTS_PER_PAGE

    def get_queryset(self):
        qs = Post.objects.filter(published=True).select_related(
            "featured_image"
        ).prefetch_related("categories")

        category_slug = self.request.GET.get("category")
        if category_slug:
            qs = qs.filter(categories__slug=category_slug)

        return qs

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context["categories"] = Category.objects.all()
        context["selected_category"] = self.request.GET.get("category", "")
        return context


class PostDetailView(DetailView):
    """Display a single published post by slug."""

    model = Post
    template_name = "blog_platform/post_detail.html"
    context_object_name = "post"

    def get_queryset(self):
        return Post.objects.filter(published=True).select_related(
            "featured_image"
        ).prefetch_related("categories")


class CategoryPostListView(PostListView):
    """List posts in a specific category."""

    template_name = "blog_platform/category_detail.html"

    def get_queryset(self):
        self.category = get_object_or_404(Category, slug=self.kwargs["slug"])
        return super().get_queryset().filter(categories=self.category)

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context["category"] = self.category
        return context


class PostCreateView(FormView):
    """Create a new post with an optional featured image."""

    form_class = PostForm
    template_name = "blog_platform/post_form.html"

    def form_valid(self, form):
        data = form.cleaned_data
        user = self.request.user if self.request.user.is_authenticated else None

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
            form.add_error("title", str(exc))
            return self.form_invalid(form)
        except SlugConflictError as exc:
            logger.warning("Post creation gave up on slug {}", exc.slug)
            form.add_error("title", str(exc))
            return self.form_invalid(form)

        if post.published:
            return redirect(post.get_absolute_url())
        return redirect("blog_platform:post_list")
