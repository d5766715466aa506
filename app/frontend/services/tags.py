"""Tag list processing for the create-event form."""
from typing import Iterable, List
from app.frontend.services.sanitization import sanitize

MAX_TAGS = 10


def _key(tag: str) -> str:
    return tag.casefold()


def process_tags(raw_tags: Iterable[str]) -> List[str]:
    """
    Clean a tag list for storage.

    Each tag is sanitized and empty results are dropped. Tags that compare
    equal ignoring case are duplicates; the first spelling wins and order is
    kept. At most ``MAX_TAGS`` tags are returned.
    """
    seen = set()
    result: List[str] = []
    for raw in raw_tags or []:
        tag = sanitize(raw)
        if not tag or _key(tag) in seen:
            continue
        seen.add(_key(tag))
        result.append(tag)
    return result[:MAX_TAGS]


def rejected_tags(raw_tags: Iterable[str]) -> List[str]:
    """Raw tags that sanitize to nothing, i.e. were rejected outright."""
    return [raw for raw in raw_tags or [] if not sanitize(raw)]


def has_rejected_tags(raw_tags: Iterable[str]) -> bool:
    """True when sanitization shrank the tag count, ignoring de-duplication."""
    raw_list = list(raw_tags or [])
    kept = [tag for tag in (sanitize(raw) for raw in raw_list) if tag]
    return len(kept) != len(raw_list)


def add_tag(tags: List[str], candidate: str) -> List[str]:
    """Return ``tags`` with ``candidate`` appended if it is new and there is room."""
    tag = sanitize(candidate)
    if not tag or len(tags) >= MAX_TAGS:
        return list(tags)
    if any(_key(existing) == _key(tag) for existing in tags):
        return list(tags)
    return [*tags, tag]


def remove_tag(tags: List[str], tag: str) -> List[str]:
    """Return ``tags`` without ``tag``."""
    return [existing for existing in tags if existing != tag]
