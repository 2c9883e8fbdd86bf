"""
Exceptions and structured event reports for the migration.

Every fatal condition raised by the pipeline derives from
:class:`MigrationError`.  Alongside the exceptions, the module writes a
JSON Lines trail of what happened to each post so that a run can be
reviewed afterwards:

``report_error``
    Record a failure for a post.  An optional exception can be supplied and
    will be serialized to the log.

``report_ok``
    Record a successful step for a post.  Additional key/value information
    can be attached to the entry via the ``extra`` parameter.

Entries are appended to ``errors.jsonl`` and ``success.jsonl`` under the
report directory (``reports/migration`` unless told otherwise).  The
``ERRORS`` dictionary maps event codes to human readable messages; codes not
present fall back to the code itself.
"""

from __future__ import annotations

import json
import os
from typing import Any, Dict, Optional

from wp2jekyll.models import ContentRecord

ERRORS: Dict[str, str] = {
    "EXTRACTION": "Failed to read rows from the WordPress database",
    "PAGE_CYCLE": "Page hierarchy contains a cycle",
    "WRITE": "Failed to write document",
    "WRITTEN": "Document written",
}

REPORT_DIR = os.path.join("reports", "migration")


class MigrationError(Exception):
    """Base class for errors that abort a migration run."""


class ExtractionError(MigrationError):
    """The row supplier could not connect or a query failed."""


class ConfigurationError(MigrationError):
    """The configuration file or an override holds an invalid value."""


class PageHierarchyCycleError(MigrationError):
    """A page lists one of its own descendants as an ancestor."""

    def __init__(self, page_id: int, chain: list) -> None:
        self.page_id = page_id
        self.chain = chain
        path = " -> ".join(str(i) for i in chain)
        super().__init__(f"Page {page_id} has a cyclic parent chain: {path}")


def _write_jsonl(path: str, data: Dict[str, Any]) -> None:
    """Append ``data`` as a JSON object followed by a newline to ``path``."""
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    with open(path, "a", encoding="utf-8") as f:
        json.dump(data, f, ensure_ascii=False)
        f.write("\n")


def _entry(code: str, post: Optional[ContentRecord]) -> Dict[str, Any]:
    entry: Dict[str, Any] = {"code": code, "message": ERRORS.get(code, code)}
    if post is not None:
        entry["wordpress_id"] = post.id
        entry["slug"] = post.slug
        entry["title"] = post.title
    return entry


def report_error(
    code: str,
    post: Optional[ContentRecord] = None,
    exc: Optional[BaseException] = None,
    *,
    report_dir: str = REPORT_DIR,
) -> None:
    """Log an error event, optionally tied to ``post``.

    Parameters
    ----------
    code:
        A key identifying the type of error.  If ``code`` is present in
        :data:`ERRORS` its value will be used as the message.
    post:
        The record the error relates to, if any.
    exc:
        Optional exception instance that triggered the error.  Its string
        representation is included in the log entry.
    report_dir:
        Directory holding ``errors.jsonl``.
    """
    entry = _entry(code, post)
    if exc is not None:
        entry["error"] = str(exc)
    print(f"[ERROR] {entry['message']} - {entry.get('slug', '')}")
    _write_jsonl(os.path.join(report_dir, "errors.jsonl"), entry)


def report_ok(
    code: str,
    post: Optional[ContentRecord] = None,
    extra: Optional[Dict[str, Any]] = None,
    *,
    report_dir: str = REPORT_DIR,
) -> None:
    """Log a successful event, optionally tied to ``post``.

    ``extra`` is merged into the entry written to ``success.jsonl``.
    """
    entry = _entry(code, post)
    if extra:
        entry.update(extra)
    print(f"[OK] {entry['message']} - {entry.get('slug', '')}")
    _write_jsonl(os.path.join(report_dir, "success.jsonl"), entry)
