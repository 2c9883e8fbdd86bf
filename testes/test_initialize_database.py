import os
import sys
from datetime import datetime

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
sys.path.insert(0, os.path.join(PROJECT_ROOT, "scripts"))

import pytest
duckdb = pytest.importorskip("duckdb")
pytest.importorskip("pandas")

from initialize_database import initialize_database


def test_csv_dumps_become_tables(tmp_path):
    csv_dir = tmp_path / "tables"
    csv_dir.mkdir()
    (csv_dir / "wp_posts.csv").write_text(
        "ID,post_title,post_name,post_date\n"
        "1,Hello,hello,2010-01-02 03:04:05\n"
        "2,Draft,,0000-00-00 00:00:00\n",
        encoding="utf-8",
    )
    (csv_dir / "wp_terms.csv").write_text("term_id,name,slug\n10,2024,2024\n", encoding="utf-8")
    db_path = str(tmp_path / "data" / "wordpress.duckdb")

    assert initialize_database(str(csv_dir), db_path) == 2
    assert initialize_database(str(csv_dir), db_path) == 0

    con = duckdb.connect(db_path, read_only=True)
    try:
        rows = con.execute("SELECT post_name, post_date FROM wp_posts ORDER BY ID").fetchall()
        # Term names that look numeric stay text.
        names = con.execute("SELECT name FROM wp_terms").fetchall()
    finally:
        con.close()
    assert rows == [("hello", datetime(2010, 1, 2, 3, 4, 5)), ("", None)]
    assert names == [("2024",)]
