"""
Create the default categories.

    python manage.py seed_blog
"""
from django.core.management.base import BaseCommand

from blog_platform import services
from blog_platform.models import Category
from blog_platform.slugs import normalize

DEFAULT_CATEGORIES = [
    ("Technology", "Posts about technology, programming, and software development"),
    ("Lifestyle", "Posts about lifestyle, health, and personal development"),
    ("Tutorials", "Step-by-step guides and how-to articles"),
]


class Command(BaseCommand):
    help = "Create the default blog categories if they do not exist yet."

    def handle(self, *args, **options):
        created = 0
        for name, description in DEFAULT_CATEGORIES:
            # Rerunning must not create "technology-2"
            if Category.objects.filter(slug=normalize(name)).exists():
                continue
            services.create_category(name=name, description=description)
            created += 1

        self.stdout.write(self.style.SUCCESS(f"Created {created} categories."))
