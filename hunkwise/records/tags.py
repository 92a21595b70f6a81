"""Parser for ``git tag --format=<TAG_FORMAT>`` output."""

from hunkwise.core.constants import PIPE_SEPARATOR
from hunkwise.core.utils import natural_sort_key
from hunkwise.records.types import Tag


def parse_tags(text: str) -> list[Tag]:
    """Parse pipe-delimited tag lines.

    Each line is ``name|shortHash|dereferencedHash|subject``. A non-empty
    dereferenced hash marks an annotated tag, whose commit is the
    dereferenced object. Lines with fewer than two fields are skipped.

    Returns:
        Tags sorted by name, newest-looking first ("v1.10" before "v1.9").
    """
    if not text:
        return []

    tags: list[Tag] = []
    for line in text.splitlines():
        trimmed = line.strip()
        if not trimmed:
            continue

        parts = trimmed.split(PIPE_SEPARATOR)
        if len(parts) < 2:
            continue

        name, short_hash = parts[0], parts[1]
        dereferenced = parts[2] if len(parts) > 2 and parts[2] else None
        subject = parts[3] if len(parts) > 3 else None

        if dereferenced is not None and subject is not None:
            tags.append(Tag(name=name, commit_hash=dereferenced, message=subject))
        else:
            tags.append(Tag.lightweight(name, dereferenced or short_hash))

    return sorted(tags, key=lambda tag: natural_sort_key(tag.name), reverse=True)
