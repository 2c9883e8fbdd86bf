"""
Row supplier reading a WordPress database through DuckDB.

Two sources are supported:

* a local DuckDB file holding the WordPress tables (for instance one built
  by ``scripts/initialize_database.py`` from table dumps), and
* a live MySQL server, attached read-only through DuckDB's ``mysql``
  extension.

Rows are validated into the typed records of :mod:`wp2jekyll.models` as soon
as they leave the database.  Any connection or query failure is raised as
:class:`~wp2jekyll.utils.errors.ExtractionError`; the pipeline treats it as
fatal.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional, Protocol, Sequence, Set

import duckdb

from wp2jekyll.config import MigrationConfig
from wp2jekyll.models import CommentRecord, ContentRecord, PageRecord, TermRecord
from wp2jekyll.utils.errors import ExtractionError

MYSQL_CATALOG = "wp"


class RowSupplier(Protocol):
    def fetch_posts(self, statuses: Sequence[str]) -> List[ContentRecord]:
        ...

    def fetch_pages(self) -> List[PageRecord]:
        ...

    def fetch_terms(self) -> List[TermRecord]:
        ...

    def fetch_comments(self) -> List[CommentRecord]:
        ...


def _dsn_value(value: str) -> str:
    # Values with spaces, quotes or backslashes are single-quoted with
    # backslash escapes, the libpq-style syntax the mysql extension parses.
    if not any(c in value for c in " '\\\"="):
        return value
    escaped = value.replace("\\", "\\\\").replace("'", "\\'")
    return f"'{escaped}'"


def _mysql_dsn(config: MigrationConfig) -> str:
    parts = {
        "host": config.host,
        "port": str(config.port),
        "user": config.user,
        "password": config.password,
        "database": config.dbname,
        "socket": config.socket or "",
    }
    return " ".join(f"{k}={_dsn_value(v)}" for k, v in parts.items() if v)


def _attach_statement(config: MigrationConfig) -> str:
    literal = _mysql_dsn(config).replace("'", "''")
    return f"ATTACH '{literal}' AS {MYSQL_CATALOG} (TYPE mysql, READ_ONLY)"


class WordPressDatabase:
    """
    :class:`RowSupplier` backed by a DuckDB connection.

    ``table_prefix`` and ``site_prefix`` select the table set
    (``wp_posts``, ``wp_2_posts`` on a multisite, ...).  The users table is
    shared between sites and only takes ``table_prefix``.
    """

    def __init__(
        self,
        connection: "duckdb.DuckDBPyConnection",
        *,
        table_prefix: str = "wp_",
        site_prefix: str = "",
        catalog: Optional[str] = None,
    ) -> None:
        self.connection = connection
        self.table_prefix = table_prefix
        self.site_prefix = site_prefix
        self.catalog = catalog

    @classmethod
    def connect(cls, config: MigrationConfig) -> "WordPressDatabase":
        try:
            if config.duckdb_path:
                con = duckdb.connect(database=config.duckdb_path, read_only=True)
                catalog = None
            else:
                con = duckdb.connect()
                con.execute("INSTALL mysql")
                con.execute("LOAD mysql")
                con.execute(_attach_statement(config))
                catalog = MYSQL_CATALOG
        except duckdb.Error as e:
            raise ExtractionError(f"Could not connect to the WordPress database: {e}") from e
        return cls(
            con,
            table_prefix=config.table_prefix,
            site_prefix=config.site_prefix,
            catalog=catalog,
        )

    def close(self) -> None:
        self.connection.close()

    def __enter__(self) -> "WordPressDatabase":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    # Table naming -----------------------------------------------------------

    def table_name(self, name: str, *, site: bool = True) -> str:
        prefix = self.table_prefix + (self.site_prefix if site else "")
        return f"{prefix}{name}"

    def _table(self, name: str, *, site: bool = True) -> str:
        table = f'"{self.table_name(name, site=site)}"'
        return f"{self.catalog}.{table}" if self.catalog else table

    def required_tables(self) -> List[str]:
        names = [
            self.table_name(t)
            for t in ("posts", "terms", "term_relationships", "term_taxonomy", "comments")
        ]
        names.append(self.table_name("users", site=False))
        return names

    def table_names(self) -> Set[str]:
        if self.catalog:
            rows = self._query(
                "SELECT table_name FROM information_schema.tables WHERE table_catalog = ?",
                [self.catalog],
            )
        else:
            rows = self._query(
                "SELECT table_name FROM information_schema.tables "
                "WHERE table_catalog = current_database()"
            )
        return {row["table_name"] for row in rows}

    # Queries ----------------------------------------------------------------

    def _query(self, sql: str, params: Optional[Iterable[Any]] = None) -> List[Dict[str, Any]]:
        try:
            params = list(params or [])
            cursor = self.connection.execute(sql, params or None)
            columns = [d[0] for d in cursor.description]
            return [dict(zip(columns, row)) for row in cursor.fetchall()]
        except duckdb.Error as e:
            raise ExtractionError(f"Query failed: {e}") from e

    def fetch_posts(self, statuses: Sequence[str] = ("publish",)) -> List[ContentRecord]:
        sql = f"""
            SELECT
                posts.ID            AS "id",
                posts.guid          AS "guid",
                posts.post_type     AS "type",
                posts.post_status   AS "status",
                posts.post_title    AS "title",
                posts.post_name     AS "slug",
                posts.post_date     AS "date",
                posts.post_date_gmt AS "date_gmt",
                posts.post_content  AS "content",
                posts.post_excerpt  AS "excerpt",
                posts.comment_count AS "comment_count",
                users.display_name  AS "author",
                users.user_login    AS "author_login",
                users.user_email    AS "author_email",
                users.user_url      AS "author_url"
            FROM {self._table("posts")} AS posts
                LEFT JOIN {self._table("users", site=False)} AS users
                    ON posts.post_author = users.ID"""
        params: List[Any] = []
        if statuses:
            placeholders = ", ".join("?" for _ in statuses)
            sql += f"\n            WHERE posts.post_status IN ({placeholders})"
            params.extend(statuses)
        sql += "\n            ORDER BY posts.ID"
        return [ContentRecord.model_validate(row) for row in self._query(sql, params)]

    def fetch_pages(self) -> List[PageRecord]:
        sql = f"""
            SELECT
                posts.ID          AS "id",
                posts.post_title  AS "title",
                posts.post_name   AS "slug",
                posts.post_parent AS "parent"
            FROM {self._table("posts")} AS posts
            WHERE posts.post_type = 'page'
            ORDER BY posts.ID"""
        return [PageRecord.model_validate(row) for row in self._query(sql)]

    def fetch_terms(self) -> List[TermRecord]:
        sql = f"""
            SELECT
                trels.object_id AS "post_id",
                terms.name      AS "name",
                ttax.taxonomy   AS "kind"
            FROM
                {self._table("terms")} AS terms,
                {self._table("term_relationships")} AS trels,
                {self._table("term_taxonomy")} AS ttax
            WHERE
                trels.term_taxonomy_id = ttax.term_taxonomy_id AND
                terms.term_id = ttax.term_id
            ORDER BY trels.object_id, trels.term_order, ttax.term_taxonomy_id"""
        return [TermRecord.model_validate(row) for row in self._query(sql)]

    def fetch_comments(self) -> List[CommentRecord]:
        sql = f"""
            SELECT
                comment_ID           AS "id",
                comment_post_ID      AS "post_id",
                comment_author       AS "author",
                comment_author_email AS "author_email",
                comment_author_url   AS "author_url",
                comment_date         AS "date",
                comment_date_gmt     AS "date_gmt",
                comment_content      AS "content",
                comment_approved     AS "approved"
            FROM {self._table("comments")}
            ORDER BY comment_post_ID, comment_ID"""
        return [CommentRecord.model_validate(row) for row in self._query(sql)]
