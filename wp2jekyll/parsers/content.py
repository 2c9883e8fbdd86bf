"""
Per-post content processing: title, slug, body and excerpt.

The interesting part is WordPress's ``<!--more-->`` directive.  When a post
has no hand-written excerpt, the text before the marker can stand in for
one, and the marker itself can be turned into the two anchors WordPress
links to (``#more`` and ``#more-<id>``) so old "continue reading" links
keep landing in the right place.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

from wp2jekyll.models import ContentRecord
from wp2jekyll.utils.entities import EntityEncoder, PassthroughEncoder
from wp2jekyll.utils.slugs import sluggify

MORE_MARKER = re.compile(r"<!-- *more *-->")
MORE_ANCHOR = "more"


def more_anchors(post_id: int) -> str:
    return f'<a id="{MORE_ANCHOR}"></a><a id="{MORE_ANCHOR}-{post_id}"></a>'


@dataclass(frozen=True)
class TransformedContent:
    title: str
    slug: str
    content: str
    excerpt: str
    more_anchor: Optional[str] = None


class ContentTransformer:
    def __init__(
        self,
        *,
        more_excerpt: bool = True,
        more_anchor: bool = True,
        encoder: Optional[EntityEncoder] = None,
    ) -> None:
        self.more_excerpt = more_excerpt
        self.more_anchor = more_anchor
        self.encoder = encoder or PassthroughEncoder()

    def transform(self, record: ContentRecord) -> TransformedContent:
        title = self.encoder.normalize(record.title)
        slug = record.slug or sluggify(title)
        content = self.encoder.normalize(record.content)
        excerpt = self.encoder.normalize(record.excerpt)
        anchor: Optional[str] = None

        match = MORE_MARKER.search(content)
        if match:
            if self.more_excerpt and not record.excerpt:
                excerpt = content[: match.start()]
            if self.more_anchor:
                content = (
                    content[: match.start()]
                    + more_anchors(record.id)
                    + content[match.end():]
                )
                anchor = MORE_ANCHOR

        return TransformedContent(
            title=title,
            slug=slug,
            content=content,
            excerpt=excerpt,
            more_anchor=anchor,
        )
