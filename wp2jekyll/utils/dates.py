from __future__ import annotations

from datetime import datetime
from typing import Optional

FRONTMATTER_DATE = "%Y-%m-%d %H:%M:%S"


def format_date(value: Optional[datetime]) -> str:
    """Render a datetime the way it appears in front matter, ``""`` when unset."""
    if value is None:
        return ""
    return value.strftime(FRONTMATTER_DATE)
