"""
Parsers and converters used by the migration pipeline.

This subpackage exposes the per-post :class:`ContentTransformer`, the
WordPress-style :func:`wpautop` paragraph wrapper and the front matter
helpers from :mod:`wp2jekyll.parsers.frontmatter`.
"""

from .autop import wpautop
from .content import ContentTransformer, TransformedContent
from .frontmatter import build_frontmatter, render_document

__all__ = [
    "ContentTransformer",
    "TransformedContent",
    "build_frontmatter",
    "render_document",
    "wpautop",
]
