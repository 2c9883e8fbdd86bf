from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional

from wp2jekyll.models import CommentRecord
from wp2jekyll.utils.dates import format_date
from wp2jekyll.utils.entities import EntityEncoder, PassthroughEncoder

SPAM = "spam"


class CommentCollector:
    """
    Turn a post's comment rows into front matter entries.

    Spam is dropped; every other moderation state (approved, pending,
    trash) is kept.  The result is always sorted by ascending comment id so
    themes can render it in posting order.
    """

    def __init__(self, encoder: Optional[EntityEncoder] = None) -> None:
        self.encoder = encoder or PassthroughEncoder()

    def collect(self, post_id: int, comments: Iterable[CommentRecord]) -> List[Dict[str, Any]]:
        entries = [
            {
                "id": comment.id,
                "author": self.encoder.normalize(comment.author),
                "author_email": comment.author_email,
                "author_url": comment.author_url,
                "date": format_date(comment.date),
                "date_gmt": format_date(comment.date_gmt),
                "content": self.encoder.normalize(comment.content),
            }
            for comment in comments
            if comment.post_id == post_id and comment.approved != SPAM
        ]
        entries.sort(key=lambda c: c["id"])
        return entries
