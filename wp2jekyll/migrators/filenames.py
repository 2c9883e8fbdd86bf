"""
Output paths for migrated documents.

Posts land in ``_posts/YYYY-MM-DD-slug.<ext>``, drafts in
``_drafts/slug.md`` and pages mirror the WordPress page tree as
``parent/child/index.<ext>``.  The page tree comes from
:class:`PageHierarchyIndex`, built once from every page in the database
(whatever its status) before any path is resolved.
"""

from __future__ import annotations

from datetime import datetime
from typing import Dict, Iterable, List, NamedTuple, Optional, Set

from wp2jekyll.models import ContentRecord, PageRecord
from wp2jekyll.utils.errors import PageHierarchyCycleError
from wp2jekyll.utils.slugs import sluggify


class PageEntry(NamedTuple):
    slug: str
    parent: int


class PageHierarchyIndex:
    """Read-only map of page id to ``(slug, parent id)``."""

    def __init__(self, entries: Optional[Dict[int, PageEntry]] = None) -> None:
        self._entries: Dict[int, PageEntry] = dict(entries or {})

    @classmethod
    def from_pages(cls, pages: Iterable[PageRecord]) -> "PageHierarchyIndex":
        entries = {
            page.id: PageEntry(page.slug or sluggify(page.title), page.parent)
            for page in pages
        }
        return cls(entries)

    def lookup(self, page_id: Optional[int]) -> Optional[PageEntry]:
        if page_id is None:
            return None
        return self._entries.get(page_id)

    def __contains__(self, page_id: object) -> bool:
        return page_id in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def ancestry(self, page_id: int) -> List[str]:
        """
        Slugs from the root of the tree down to ``page_id``.

        The walk stops at the first id missing from the index (WordPress
        uses parent ``0`` for top-level pages).  Seeing an id twice means the
        data contains a cycle, which raises :class:`PageHierarchyCycleError`.
        """
        slugs: List[str] = []
        seen: Set[int] = set()
        chain: List[int] = []
        current: Optional[int] = page_id
        while True:
            entry = self.lookup(current)
            if entry is None:
                break
            if current in seen:
                raise PageHierarchyCycleError(page_id, chain + [current])
            seen.add(current)
            chain.append(current)
            slugs.append(entry.slug)
            current = entry.parent
        slugs.reverse()
        return slugs


class PathResolver:
    def __init__(self, index: PageHierarchyIndex, *, extension: str = "html") -> None:
        self.index = index
        self.extension = extension

    def page_path(self, page_id: int) -> str:
        segments = [s.strip("/") for s in self.index.ancestry(page_id)]
        base = "/".join(s for s in segments if s).strip("/")
        return base or f"page_{page_id}"

    def resolve(self, record: ContentRecord, slug: str, date: datetime) -> str:
        if record.type == "page":
            return f"{self.page_path(record.id)}/index.{self.extension}"
        if record.status == "draft":
            # Drafts always use .md, whatever extension posts get.
            return f"_drafts/{slug}.md"
        return (
            f"_posts/{date.year:02d}-{date.month:02d}-{date.day:02d}"
            f"-{slug}.{self.extension}"
        )
