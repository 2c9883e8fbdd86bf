from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, field_validator


def _blank_to_empty(v: Any) -> Any:
    return "" if v is None else v


def _parse_wp_date(v: Any) -> Any:
    # MySQL stores unset dates as the zero date, which is not a valid datetime.
    if v is None:
        return None
    if isinstance(v, str):
        text = v.strip()
        if not text or text.startswith("0000-00-00"):
            return None
        return text
    return v


class _Record(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)


class ContentRecord(_Record):
    """A row of ``<prefix>posts`` joined with its author from ``<prefix>users``."""

    id: int
    guid: str = ""
    type: str = ""
    status: str = ""
    title: str = ""
    slug: str = ""
    date: Optional[datetime] = None
    date_gmt: Optional[datetime] = None
    content: str = ""
    excerpt: str = ""
    comment_count: int = 0
    author: str = ""
    author_login: str = ""
    author_email: str = ""
    author_url: str = ""

    @field_validator(
        "guid", "type", "status", "title", "slug", "content", "excerpt",
        "author", "author_login", "author_email", "author_url",
        mode="before",
    )
    @classmethod
    def _coerce_text(cls, v: Any) -> Any:
        v = _blank_to_empty(v)
        return v if isinstance(v, str) else str(v)

    @field_validator("date", "date_gmt", mode="before")
    @classmethod
    def _coerce_date(cls, v: Any) -> Any:
        return _parse_wp_date(v)

    @field_validator("comment_count", mode="before")
    @classmethod
    def _coerce_count(cls, v: Any) -> Any:
        return 0 if v in (None, "") else v


class PageRecord(_Record):
    """The subset of a page row needed to rebuild the page tree."""

    id: int
    title: str = ""
    slug: str = ""
    parent: int = 0

    @field_validator("title", "slug", mode="before")
    @classmethod
    def _coerce_text(cls, v: Any) -> Any:
        return _blank_to_empty(v)

    @field_validator("parent", mode="before")
    @classmethod
    def _coerce_parent(cls, v: Any) -> Any:
        return 0 if v in (None, "") else v


class TermRecord(_Record):
    post_id: int
    name: str = ""
    kind: str = ""

    @field_validator("name", mode="before")
    @classmethod
    def _coerce_name(cls, v: Any) -> Any:
        return _blank_to_empty(v)

    @field_validator("kind", mode="before")
    @classmethod
    def _normalize_kind(cls, v: Any) -> Any:
        v = _blank_to_empty(v)
        return "tag" if v == "post_tag" else v


class CommentRecord(_Record):
    id: int
    post_id: int
    author: str = ""
    author_email: str = ""
    author_url: str = ""
    date: Optional[datetime] = None
    date_gmt: Optional[datetime] = None
    content: str = ""
    approved: str = ""

    @field_validator(
        "author", "author_email", "author_url", "content", "approved",
        mode="before",
    )
    @classmethod
    def _coerce_text(cls, v: Any) -> Any:
        v = _blank_to_empty(v)
        return v if isinstance(v, str) else str(v)

    @field_validator("date", "date_gmt", mode="before")
    @classmethod
    def _coerce_date(cls, v: Any) -> Any:
        return _parse_wp_date(v)
