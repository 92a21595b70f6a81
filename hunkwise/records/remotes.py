"""Parser for ``git remote -v`` output."""

from hunkwise.records.types import Remote


def parse_remotes(text: str) -> list[Remote]:
    """Parse ``name<TAB>url (fetch|push)`` lines into remotes.

    Fetch and push lines of the same remote are merged. Remotes without a
    fetch URL are dropped.

    Returns:
        Remotes sorted by name.
    """
    if not text:
        return []

    urls: dict[str, dict[str, str]] = {}
    for line in text.splitlines():
        trimmed = line.strip()
        if not trimmed:
            continue

        name, sep, url_and_kind = trimmed.partition("\t")
        if not sep:
            continue

        url = url_and_kind.split(" ", 1)[0]
        kind = "fetch" if "(fetch)" in url_and_kind else "push"
        urls.setdefault(name, {})[kind] = url

    return [
        Remote(name=name, fetch_url=entry["fetch"], push_url=entry.get("push", ""))
        for name, entry in sorted(urls.items())
        if "fetch" in entry
    ]
