from __future__ import annotations

import os

from wp2jekyll.utils.errors import MigrationError


class PreFlightCheckError(MigrationError):
    """Custom exception for pre-flight check failures."""
    pass


def run_pre_flight_checks(database, output_dir: str) -> None:
    """
    Verifies that the source database and the output directory are usable
    before any document is written.

    Args:
        database: A :class:`~wp2jekyll.extractors.wordpress_extractor.WordPressDatabase`.
        output_dir: Root of the Jekyll site that will receive the documents.

    Raises:
        PreFlightCheckError: If any check fails.
    """
    print("[INFO] Running pre-flight checks...")

    # Check 1: every WordPress table the queries touch exists
    available = database.table_names()
    missing = [t for t in database.required_tables() if t not in available]
    if missing:
        raise PreFlightCheckError(
            f"Missing WordPress tables: {', '.join(missing)}. "
            "Check table_prefix and site_prefix."
        )

    # Check 2: the output directory is a writable directory (or can become one)
    if os.path.exists(output_dir):
        if not os.path.isdir(output_dir):
            raise PreFlightCheckError(f"Output path '{output_dir}' is not a directory.")
        if not os.access(output_dir, os.W_OK):
            raise PreFlightCheckError(f"Output directory '{output_dir}' is not writable.")

    print("[INFO] Pre-flight checks passed successfully.")
