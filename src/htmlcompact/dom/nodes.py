"""Read-only accessors for element classes and text."""

from bs4 import Comment, NavigableString, Tag


def class_list(tag: Tag) -> list[str]:
    """Return the class tokens of a tag, or an empty list."""
    value = tag.get("class")
    if not value:
        return []
    if isinstance(value, str):
        return value.split()
    return [token for token in value if token]


def collapse_whitespace(text: str) -> str:
    """Trim and collapse internal whitespace runs to single spaces."""
    return " ".join(text.split())


def own_text(tag: Tag) -> str:
    """Return the tag's direct text, excluding descendants and comments."""
    parts = [
        str(child)
        for child in tag.children
        if isinstance(child, NavigableString) and not isinstance(child, Comment)
    ]
    return collapse_whitespace("".join(parts))


def full_text(tag: Tag) -> str:
    """Return all text under the tag with whitespace collapsed."""
    return collapse_whitespace(tag.get_text(" "))
