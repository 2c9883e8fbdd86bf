import os
import sys
from datetime import datetime

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from wp2jekyll.models import CommentRecord
from wp2jekyll.utils.comments import CommentCollector
from wp2jekyll.utils.entities import NamedEntityEncoder


def comment(id, post_id=10, approved="1", **kw):
    return CommentRecord(id=id, post_id=post_id, approved=approved, **kw)


def test_comments_are_sorted_by_id():
    comments = [comment(5), comment(1), comment(3)]
    assert [c["id"] for c in CommentCollector().collect(10, comments)] == [1, 3, 5]


def test_spam_is_excluded_but_pending_kept():
    comments = [comment(2, approved="spam"), comment(4, approved="0"), comment(1)]
    assert [c["id"] for c in CommentCollector().collect(10, comments)] == [1, 4]


def test_other_posts_are_ignored():
    comments = [comment(1), comment(2, post_id=11)]
    assert [c["id"] for c in CommentCollector().collect(10, comments)] == [1]


def test_entry_shape():
    record = comment(
        7,
        author="Zoë",
        author_email="zoe@example.com",
        author_url=None,
        date=datetime(2011, 3, 4, 5, 6, 7),
        date_gmt="2011-03-04 04:06:07",
        content="Nice post",
    )
    [entry] = CommentCollector(NamedEntityEncoder()).collect(10, [record])
    assert entry == {
        "id": 7,
        "author": "Zo&euml;",
        "author_email": "zoe@example.com",
        "author_url": "",
        "date": "2011-03-04 05:06:07",
        "date_gmt": "2011-03-04 04:06:07",
        "content": "Nice post",
    }
