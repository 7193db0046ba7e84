"""
URL configuration for blog-platform.

Include in your project urls.py:

    path('blog/', include('blog_platform.urls')),
"""
from django.urls import path

from . import api, views

app_name = "blog_platform"

urlpatterns = [
    # Post list and detail
    path("", views.PostListView.as_view(), name="post_list"),
    path("post/new/", views.PostCreateView.as_view(), name="post_create"),
    path("post/<slug:slug>/", views.PostDetailView.as_view(), name="post_detail"),

    # Categories
    path("category/<slug:slug>/", views.CategoryPostListView.as_view(), name="category_detail"),

    # JSON API
    path("api/posts/", api.PostCollectionApiView.as_view(), name="api_posts"),
    path("api/posts/<slug:slug>/", api.PostDetailApiView.as_view(), name="api_post_detail"),
    path("api/categories/", api.CategoryCollectionApiView.as_view(), name="api_categories"),
    path("api/categories/<int:pk>/", api.CategoryDetailApiView.as_view(), name="api_category_detail"),
]
