import os
import sys
from datetime import datetime

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

import pytest

from wp2jekyll.migrators.filenames import PageHierarchyIndex, PathResolver
from wp2jekyll.models import ContentRecord, PageRecord
from wp2jekyll.utils.errors import PageHierarchyCycleError

DATE = datetime(2010, 1, 2, 3, 4, 5)

PAGES = [
    PageRecord(id=1, title="Docs", slug="docs", parent=0),
    PageRecord(id=2, title="Guide", slug="guide", parent=1),
    PageRecord(id=3, title="Getting Started!", slug="", parent=2),
    PageRecord(id=4, title="Orphan", slug="orphan", parent=99),
]


def page(id, status="publish"):
    return ContentRecord(id=id, type="page", status=status)


def resolver(pages=PAGES, extension="html"):
    return PathResolver(PageHierarchyIndex.from_pages(pages), extension=extension)


def test_nested_page_path():
    assert resolver().resolve(page(2), "guide", DATE) == "docs/guide/index.html"


def test_root_page_path():
    assert resolver().resolve(page(1), "docs", DATE) == "docs/index.html"


def test_empty_page_slug_uses_title():
    index = PageHierarchyIndex.from_pages(PAGES)
    assert index.lookup(3).slug == "getting-started"
    assert resolver().resolve(page(3), "x", DATE) == "docs/guide/getting-started/index.html"


def test_unknown_parent_is_treated_as_root():
    assert resolver().resolve(page(4), "orphan", DATE) == "orphan/index.html"


def test_page_missing_from_index_falls_back_to_id():
    assert resolver().resolve(page(7), "whatever", DATE) == "page_7/index.html"


def test_draft_page_still_uses_page_tree():
    assert resolver().resolve(page(2, status="draft"), "guide", DATE) == "docs/guide/index.html"


def test_draft_always_uses_md():
    draft = ContentRecord(id=5, type="post", status="draft")
    assert resolver(extension="markdown").resolve(draft, "my-draft", DATE) == "_drafts/my-draft.md"


def test_post_path_is_dated():
    post = ContentRecord(id=6, type="post", status="publish")
    assert resolver().resolve(post, "hello", DATE) == "_posts/2010-01-02-hello.html"
    assert resolver(extension="md").resolve(post, "hello", datetime(2021, 11, 30)) == (
        "_posts/2021-11-30-hello.md"
    )


def test_cycle_is_an_error():
    pages = [
        PageRecord(id=1, slug="a", parent=2),
        PageRecord(id=2, slug="b", parent=1),
    ]
    with pytest.raises(PageHierarchyCycleError):
        resolver(pages).resolve(page(1), "a", DATE)


def test_self_parent_is_an_error():
    with pytest.raises(PageHierarchyCycleError):
        resolver([PageRecord(id=1, slug="a", parent=1)]).resolve(page(1), "a", DATE)


def test_lookup_contract():
    index = PageHierarchyIndex.from_pages(PAGES)
    assert index.lookup(2).parent == 1
    assert index.lookup(42) is None
    assert index.lookup(None) is None
    assert len(index) == 4
