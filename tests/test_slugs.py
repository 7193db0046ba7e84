"""
Tests for slug normalization and collision resolution.
"""
import re

import pytest

from blog_platform.slugs import normalize, resolve_unique

SLUG_RE = re.compile(r"^([a-z0-9]+(-[a-z0-9]+)*)?$")

SAMPLES = [
    "Getting Started with Next.js 15",
    "  Hello,   World!!  ",
    "???",
    "",
    "   ",
    "snake_case_title",
    "--already-hyphenated--",
    "Tabs\tand\nnewlines",
    "Café résumé",
    "日本語タイトル",
    "AI & ML: The Future!",
    "Test (2024) - Part 1",
    "a - - b",
    "__init__",
    "It's \"quoted\"",
]


class TestNormalize:
    """Tests for normalize."""

    def test_basic(self):
        assert normalize("Hello World") == "hello-world"

    def test_drops_punctuation(self):
        assert normalize("Getting Started with Next.js 15") == "getting-started-with-nextjs-15"

    def test_collapses_whitespace(self):
        assert normalize("  Hello,   World!!  ") == "hello-world"

    def test_only_punctuation_is_empty(self):
        assert normalize("???") == ""
        assert normalize("") == ""

    def test_collapses_hyphens(self):
        assert normalize("a - - b") == "a-b"
        assert normalize("Test (2024) - Part 1") == "test-2024-part-1"

    def test_strips_edge_hyphens(self):
        assert normalize("--already-hyphenated--") == "already-hyphenated"
        assert normalize("trailing -") == "trailing"

    def test_underscores_become_separators(self):
        assert normalize("snake_case_title") == "snake-case-title"
        assert normalize("__init__") == "init"

    def test_accents_are_folded(self):
        assert normalize("Café résumé") == "cafe-resume"

    def test_max_length(self):
        slug = normalize("This is a very long title that needs to be truncated", max_length=20)
        assert slug == "this-is-a-very-long"
        assert len(slug) <= 20

    def test_max_length_does_not_leave_trailing_hyphen(self):
        # the cut lands right after "hello-"
        assert normalize("hello world", max_length=6) == "hello"

    @pytest.mark.parametrize("text", SAMPLES)
    def test_idempotent(self, text):
        assert normalize(normalize(text)) == normalize(text)

    @pytest.mark.parametrize("text", SAMPLES)
    def test_output_shape(self, text):
        slug = normalize(text)
        assert SLUG_RE.match(slug), slug
        assert "--" not in slug


class TestResolveUnique:
    """Tests for resolve_unique."""

    def test_free_slug_unchanged(self):
        assert resolve_unique("hello-world", set()) == "hello-world"

    def test_taken_slug_gets_suffix(self):
        assert resolve_unique("hello-world", {"hello-world"}) == "hello-world-2"

    def test_probes_past_taken_suffixes(self):
        existing = {"base", "base-2", "base-3"}
        assert resolve_unique("base", existing) == "base-4"

    def test_gaps_are_reused(self):
        assert resolve_unique("base", {"base", "base-3"}) == "base-2"

    def test_unrelated_slugs_ignored(self):
        assert resolve_unique("base", {"base-2", "other"}) == "base"

    def test_does_not_mutate_input(self):
        existing = frozenset({"base"})
        mutable = set(existing)
        resolve_unique("base", mutable)
        assert mutable == existing
