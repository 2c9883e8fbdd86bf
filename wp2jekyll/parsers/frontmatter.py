"""
Front matter assembly and document rendering.

:func:`build_frontmatter` produces the ordered metadata mapping written at
the top of every Jekyll document.  Keys whose value is ``None`` or an empty
string are dropped, but empty lists are kept: a post with comments enabled
and no comments still carries ``comments: []``.

:func:`render_document` serializes a finished document with PyYAML.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional

import yaml

from wp2jekyll.models import ContentRecord, TransformedDocument
from wp2jekyll.parsers.autop import wpautop
from wp2jekyll.parsers.content import TransformedContent
from wp2jekyll.utils.dates import format_date

SEPARATOR = "---"


def _published(status: str) -> Optional[bool]:
    # Drafts leave the key out entirely so Jekyll falls back to its own rules.
    if status == "draft":
        return None
    return status == "publish"


def build_frontmatter(
    record: ContentRecord,
    content: TransformedContent,
    *,
    categories: Optional[List[str]] = None,
    tags: Optional[List[str]] = None,
    comments: Optional[List[Dict[str, Any]]] = None,
    include_categories: bool = True,
    include_tags: bool = True,
    include_comments: bool = True,
    date: Optional[datetime] = None,
) -> Dict[str, Any]:
    """
    ``date`` overrides ``record.date`` so the header agrees with the date
    used for the file name when the record has none of its own.
    """
    header: Dict[str, Any] = {
        "layout": record.type,
        "status": record.status,
        "published": _published(record.status),
        "title": content.title,
        "author": {
            "display_name": record.author,
            "login": record.author_login,
            "email": record.author_email,
            "url": record.author_url,
        },
        "author_login": record.author_login,
        "author_email": record.author_email,
        "author_url": record.author_url,
        "excerpt": content.excerpt,
        "more_anchor": content.more_anchor,
        "wordpress_id": record.id,
        "wordpress_url": record.guid,
        "date": format_date(date or record.date),
        "date_gmt": format_date(record.date_gmt),
        "categories": (categories or []) if include_categories else None,
        "tags": (tags or []) if include_tags else None,
        "comments": (comments or []) if include_comments else None,
    }
    return {k: v for k, v in header.items() if v is not None and v != ""}


def dump_frontmatter(frontmatter: Dict[str, Any]) -> str:
    return yaml.safe_dump(
        frontmatter,
        sort_keys=False,
        allow_unicode=True,
        default_flow_style=False,
    )


def render_document(document: TransformedDocument, *, autop: bool = True) -> str:
    """
    Serialize ``document`` as ``---``, YAML front matter, ``---`` and body.

    The body goes through :func:`~wp2jekyll.parsers.autop.wpautop` unless
    ``autop`` is disabled.
    """
    body = wpautop(document.content) if autop else document.content
    body = body.rstrip("\n")
    return (
        f"{SEPARATOR}\n"
        f"{dump_frontmatter(document.frontmatter)}"
        f"{SEPARATOR}\n"
        f"{body}\n"
    )
