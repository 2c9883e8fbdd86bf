"""
Jekyll-side helpers.

This subpackage decides where each document lives in the Jekyll site
(``_posts``, ``_drafts`` or the nested page tree) and writes the rendered
files to disk.
"""

from .filenames import PageEntry, PageHierarchyIndex, PathResolver
from .jekyll_writer import JekyllWriter

__all__ = ["JekyllWriter", "PageEntry", "PageHierarchyIndex", "PathResolver"]
