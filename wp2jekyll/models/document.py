from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

from .records import ContentRecord


class TransformedDocument(BaseModel):
    """
    One output document ready for Jekyll.

    ``path`` is ``None`` until :class:`~wp2jekyll.migrators.filenames.PathResolver`
    assigns it; :meth:`with_path` returns a copy because documents are frozen.
    """

    model_config = ConfigDict(frozen=True)

    slug: str
    date: datetime
    frontmatter: Dict[str, Any] = Field(default_factory=dict)
    content: str = ""
    path: Optional[str] = None
    record: ContentRecord

    def with_path(self, path: str) -> "TransformedDocument":
        return self.model_copy(update={"path": path})
