"""Tests for tag processing."""
from app.frontend.services.tags import (
    MAX_TAGS,
    add_tag,
    has_rejected_tags,
    process_tags,
    rejected_tags,
    remove_tag,
)


def test_dedup_after_sanitizing():
    """Test that duplicates are found on the sanitized value, first spelling kept."""
    assert process_tags(["React", "react", "  React  ", "<b>JS</b>", "JS"]) == ["React", "JS"]


def test_order_preserved_and_empties_dropped():
    """Test ordering and removal of empty results."""
    assert process_tags(["Go", "", "<>", "Rust", "  "]) == ["Go", "Rust"]


def test_capped_at_ten():
    """Test that only the first ten distinct tags survive."""
    raw = [f"tag{i}" for i in range(12)]
    result = process_tags(raw)
    assert len(result) == MAX_TAGS == 10
    assert result == raw[:10]


def test_empty_input():
    """Test empty and None input."""
    assert process_tags([]) == []
    assert process_tags(None) == []


def test_rejected_tags_distinct_from_dedup():
    """Test that dedup alone is not reported as rejection."""
    assert rejected_tags(["React", "react"]) == []
    assert not has_rejected_tags(["React", "react"])

    raw = ["React", "<>", "javascript:"]
    assert rejected_tags(raw) == ["<>", "javascript:"]
    assert has_rejected_tags(raw)


def test_add_tag():
    """Test the form helper for adding a tag."""
    tags = add_tag([], "  Python ")
    assert tags == ["Python"]
    assert add_tag(tags, "python") == ["Python"]
    assert add_tag(tags, "   ") == ["Python"]
    assert add_tag(tags, "Django") == ["Python", "Django"]
    full = [f"t{i}" for i in range(MAX_TAGS)]
    assert add_tag(full, "extra") == full


def test_add_tag_does_not_mutate():
    """Test that the input list is left alone."""
    tags = ["Go"]
    add_tag(tags, "Rust")
    assert tags == ["Go"]


def test_remove_tag():
    """Test removing a tag."""
    assert remove_tag(["Go", "Rust"], "Go") == ["Rust"]
    assert remove_tag(["Go"], "Elixir") == ["Go"]
