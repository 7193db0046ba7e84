"""
blog-platform - A multi-user Django blogging platform.

Features:
- Unique, URL-safe slugs for posts and categories with collision retry
- Posts tagged with many categories
- Featured image uploads with content-hash deduplication
- Reading-time statistics
- HTML pages and a small JSON API
"""

__version__ = "0.1.0"
