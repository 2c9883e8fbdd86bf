#!/usr/bin/env python3
"""
Build a local DuckDB copy of a WordPress database from per-table CSV dumps.

Each ``<table>.csv`` file in the input directory (``wp_posts.csv``,
``wp_users.csv``, ``wp_terms.csv``...) becomes a table of the same name, so
the migration can run without access to the original MySQL server:

  python scripts/initialize_database.py --input docs/tables --db data/wordpress.duckdb
  python main.py --duckdb data/wordpress.duckdb
"""

import argparse
import os
from pathlib import Path

import duckdb
import pandas as pd

DB_PATH = "data/wordpress.duckdb"
CSV_DIR = "docs/tables"

# Columns that must stay text even when every value looks numeric.
TEXT_COLUMNS = {
    "post_name", "post_title", "post_content", "post_excerpt", "post_status",
    "post_type", "guid", "comment_approved", "name", "slug", "taxonomy",
    "user_login", "display_name", "user_email", "user_url",
    "comment_author", "comment_author_email", "comment_author_url", "comment_content",
}
DATE_COLUMNS = {"post_date", "post_date_gmt", "comment_date", "comment_date_gmt"}


def load_table(csv_path: Path) -> pd.DataFrame:
    """Read one table dump; WordPress zero dates become missing values."""
    df = pd.read_csv(csv_path, keep_default_na=False, dtype={c: str for c in TEXT_COLUMNS})
    for column in DATE_COLUMNS & set(df.columns):
        df[column] = pd.to_datetime(df[column], errors="coerce")
    return df


def initialize_database(csv_dir: str = CSV_DIR, db_path: str = DB_PATH, replace: bool = False) -> int:
    """
    Create one DuckDB table per CSV file in ``csv_dir``.

    Existing tables are left alone unless ``replace`` is set.  Returns the
    number of tables created.
    """
    os.makedirs(os.path.dirname(db_path) or ".", exist_ok=True)
    con = duckdb.connect(database=db_path, read_only=False)
    created = 0
    try:
        existing = {row[0] for row in con.execute("SHOW TABLES").fetchall()}
        for csv_path in sorted(Path(csv_dir).glob("*.csv")):
            table_name = csv_path.stem
            if table_name in existing and not replace:
                print(f"[INFO] Table '{table_name}' already exists, skipping.")
                continue

            print(f"[INFO] Loading {csv_path} into '{table_name}'")
            df = load_table(csv_path)
            con.register("df_temp", df)
            con.execute(f'CREATE OR REPLACE TABLE "{table_name}" AS SELECT * FROM df_temp')
            con.unregister("df_temp")
            print(f"[INFO] Table '{table_name}' created with {len(df)} rows.")
            created += 1
    finally:
        con.close()
    return created


def main():
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[1])
    parser.add_argument("--input", default=CSV_DIR, help=f"Directory of <table>.csv dumps (default: {CSV_DIR})")
    parser.add_argument("--db", default=DB_PATH, help=f"DuckDB file to create (default: {DB_PATH})")
    parser.add_argument("--replace", action="store_true", help="Recreate tables that already exist")
    args = parser.parse_args()

    created = initialize_database(args.input, args.db, replace=args.replace)
    print(f"[INFO] {created} tables created in {args.db}.")


if __name__ == "__main__":
    main()
