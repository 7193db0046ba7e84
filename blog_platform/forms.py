"""
Forms for blog-platform.

Shared by the HTML views and the JSON API.
"""
from django import forms

from .conf import blog_settings
from .exceptions import InvalidSlugSourceError
from .models import Category, Post
from .slugs import normalize


class PostForm(forms.Form):
    """Create a post, optionally with a featured image and categories."""

    title = forms.CharField(
        max_length=255,
        error_messages={
            "required": "Title is required",
            "max_length": "Title must be less than 255 characters",
        },
    )
    content = forms.CharField(
        widget=forms.Textarea,
        error_messages={"required": "Content is required"},
    )
    published = forms.BooleanField(required=False)
    featured_image = forms.ImageField(required=False)
    categories = forms.ModelMultipleChoiceField(
        queryset=Category.objects.all(),
        required=False,
    )

    def clean_title(self):
        title = self.cleaned_data["title"]
        if not normalize(title):
            raise forms.ValidationError(str(InvalidSlugSourceError(title)))
        return title

    def clean_content(self):
        content = self.cleaned_data["content"]
        if not content.strip():
            raise forms.ValidationError("Content is required")
        return content

    def clean_featured_image(self):
        image = self.cleaned_data.get("featured_image")
        if not image:
            return None

        content_type = getattr(image, "content_type", "")
        if content_type not in blog_settings.ALLOWED_IMAGE_TYPES:
            raise forms.ValidationError(f"Unsupported image type: {content_type}")

        max_bytes = blog_settings.MEDIA_MAX_SIZE_MB * 1024 * 1024
        if image.size > max_bytes:
            raise forms.ValidationError(
                f"Image must be smaller than {blog_settings.MEDIA_MAX_SIZE_MB} MB"
            )
        return image


class CategoryForm(forms.Form):
    name = forms.CharField(
        max_length=100,
        error_messages={
            "required": "Name is required",
            "max_length": "Name must be less than 100 characters",
        },
    )
    description = forms.CharField(widget=forms.Textarea, required=False)


class CategoryUpdateForm(CategoryForm):
    """Partial update: every field is optional."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        for field in self.fields.values():
            field.required = False

    def clean(self):
        cleaned = super().clean()
        if "name" in self.data and not self.has_error("name") and not cleaned.get("name"):
            self.add_error("name", "Name is required")
        # Absent keys mean "leave unchanged"
        return {key: value for key, value in cleaned.items() if key in self.data}


class PostFilterForm(forms.Form):
    """Query parameters of the post listing API."""

    category = forms.CharField(required=False)
    category_id = forms.IntegerField(min_value=1, required=False)
    published = forms.NullBooleanField(required=False)
    page = forms.IntegerField(min_value=1, required=False)
    limit = forms.IntegerField(min_value=1, required=False)

    def clean_limit(self):
        limit = self.cleaned_data.get("limit")
        if limit is not None and limit > blog_settings.API_MAX_PAGE_SIZE:
            raise forms.ValidationError(
                f"Limit must be at most {blog_settings.API_MAX_PAGE_SIZE}"
            )
        return limit


class SlugSourceAdminForm(forms.ModelForm):
    """
    Admin form for models whose slug is derived on creation.

    ``slug_source`` names the field the slug is built from.
    """

    slug_source = None

    def clean(self):
        cleaned = super().clean()
        text = cleaned.get(self.slug_source)
        if self.instance._state.adding and text is not None and not normalize(text):
            self.add_error(self.slug_source, str(InvalidSlugSourceError(text)))
        return cleaned


class PostAdminForm(SlugSourceAdminForm):
    slug_source = "title"

    class Meta:
        model = Post
        fields = "__all__"


class CategoryAdminForm(SlugSourceAdminForm):
    slug_source = "name"

    class Meta:
        model = Category
        fields = "__all__"
