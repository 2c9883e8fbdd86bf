import os
import sys

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

import pytest

from main import main, parse_args


def test_flags_default_to_unset():
    args = parse_args([])
    assert args.comments is None
    assert args.extension is None


def test_boolean_flags_and_status():
    args = parse_args(["--no-comments", "--more_anchor", "--status", "publish,draft"])
    assert args.comments is False
    assert args.more_anchor is True
    assert args.status == "publish,draft"


def test_end_to_end_from_duckdb_file(tmp_path, monkeypatch):
    duckdb = pytest.importorskip("duckdb")
    monkeypatch.chdir(tmp_path)
    con = duckdb.connect("wordpress.duckdb")
    for statement in (
        "CREATE TABLE wp_users (ID INTEGER, user_login VARCHAR, display_name VARCHAR, "
        "user_email VARCHAR, user_url VARCHAR)",
        "CREATE TABLE wp_posts (ID INTEGER, post_author INTEGER, post_date TIMESTAMP, "
        "post_date_gmt TIMESTAMP, post_content VARCHAR, post_title VARCHAR, post_excerpt VARCHAR, "
        "post_status VARCHAR, post_name VARCHAR, post_parent INTEGER, guid VARCHAR, "
        "post_type VARCHAR, comment_count INTEGER)",
        "CREATE TABLE wp_terms (term_id INTEGER, name VARCHAR)",
        "CREATE TABLE wp_term_taxonomy (term_taxonomy_id INTEGER, term_id INTEGER, taxonomy VARCHAR)",
        "CREATE TABLE wp_term_relationships (object_id INTEGER, term_taxonomy_id INTEGER, "
        "term_order INTEGER)",
        "CREATE TABLE wp_comments (comment_ID INTEGER, comment_post_ID INTEGER, "
        "comment_author VARCHAR, comment_author_email VARCHAR, comment_author_url VARCHAR, "
        "comment_date TIMESTAMP, comment_date_gmt TIMESTAMP, comment_content VARCHAR, "
        "comment_approved VARCHAR)",
        "INSERT INTO wp_posts VALUES (1, 1, '2015-06-07 08:00:00', '2015-06-07 06:00:00', "
        "'Body', 'First post', '', 'publish', '', 0, 'http://example.com/?p=1', 'post', 0)",
    ):
        con.execute(statement)
    con.close()

    code = main(["--config", "missing.json", "--duckdb", "wordpress.duckdb", "--output", "site"])
    assert code == 0
    assert (tmp_path / "site" / "_posts" / "2015-06-07-first-post.html").exists()
    assert (tmp_path / "reports" / "migration" / "migration.log").exists()


def test_missing_tables_abort_the_run(tmp_path, monkeypatch):
    duckdb = pytest.importorskip("duckdb")
    monkeypatch.chdir(tmp_path)
    duckdb.connect("empty.duckdb").close()
    assert main(["--config", "missing.json", "--duckdb", "empty.duckdb"]) == 1


def test_invalid_config_file_exits_with_error(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "bad.json").write_text('{"extensions": "md"}', encoding="utf-8")
    assert main(["--config", "bad.json"]) == 1
    assert "[ERROR] Invalid configuration" in capsys.readouterr().out
