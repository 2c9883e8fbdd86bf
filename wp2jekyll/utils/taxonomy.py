from __future__ import annotations

from typing import Iterable, List, Optional, Tuple

from wp2jekyll.models import TermRecord
from wp2jekyll.utils.entities import EntityEncoder, PassthroughEncoder


class TaxonomyResolver:
    """
    Split the terms attached to a post into categories and tags.

    Names are kept in the order the source returned them and are passed
    through the run's entity encoder.  Terms of a disabled kind, or of any
    other taxonomy (``post_format``, custom taxonomies...), are dropped.
    """

    def __init__(
        self,
        *,
        include_categories: bool = True,
        include_tags: bool = True,
        encoder: Optional[EntityEncoder] = None,
    ) -> None:
        self.include_categories = include_categories
        self.include_tags = include_tags
        self.encoder = encoder or PassthroughEncoder()

    @property
    def enabled(self) -> bool:
        return self.include_categories or self.include_tags

    def resolve(self, post_id: int, terms: Iterable[TermRecord]) -> Tuple[List[str], List[str]]:
        categories: List[str] = []
        tags: List[str] = []
        if not self.enabled:
            return categories, tags

        for term in terms:
            if term.post_id != post_id:
                continue
            if self.include_categories and term.kind == "category":
                categories.append(self.encoder.normalize(term.name))
            elif self.include_tags and term.kind == "tag":
                tags.append(self.encoder.normalize(term.name))
        return categories, tags
