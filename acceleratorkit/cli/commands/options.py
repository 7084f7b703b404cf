from collections.abc import Iterable


def split_pages(values: Iterable[str]) -> list[str]:
    """Flatten repeated ``--page`` values, each of which may be a comma list."""
    pages: list[str] = []
    for value in values:
        pages.extend(part.strip() for part in value.split(",") if part.strip())
    return pages
