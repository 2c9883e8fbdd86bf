"""
Utility helpers used by the migration tool.

This subpackage exposes slug generation, taxonomy and comment collection,
entity cleaning, and the error types and structured event reports used
throughout the run.
"""

from .errors import ERRORS, MigrationError, report_error, report_ok
from .slugs import sluggify

__all__ = ["ERRORS", "MigrationError", "report_error", "report_ok", "sluggify"]
