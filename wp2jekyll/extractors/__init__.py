"""
Extractors for WordPress databases.

This subpackage reads the WordPress tables (directly from MySQL or from a
local DuckDB copy) and turns every row into a typed record from
:mod:`wp2jekyll.models`.
"""

from .wordpress_extractor import RowSupplier, WordPressDatabase

__all__ = ["RowSupplier", "WordPressDatabase"]
