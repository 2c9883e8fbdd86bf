"""
Typed representations of WordPress rows and of the documents produced
from them.  Rows are validated once at the extractor boundary; nothing
downstream touches loosely typed dictionaries.
"""

from .document import TransformedDocument
from .records import CommentRecord, ContentRecord, PageRecord, TermRecord

__all__ = [
    "CommentRecord",
    "ContentRecord",
    "PageRecord",
    "TermRecord",
    "TransformedDocument",
]
