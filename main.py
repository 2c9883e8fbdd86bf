"""
Entry point for the WordPress to Jekyll migration tool.

Usage:
  python main.py --dbname blog --user root --password secret --output site/
  python main.py --duckdb data/wordpress.duckdb --status publish,draft

Settings are read from config/migration_config.json when it exists; command
line flags take precedence over it.
"""

import argparse
import sys

from wp2jekyll.config import CONFIG_FILE, load_config
from wp2jekyll.migration_tool import JekyllMigrationTool
from wp2jekyll.utils.errors import MigrationError


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Migrate a WordPress database to a Jekyll site."
    )
    parser.add_argument("--config", default=CONFIG_FILE, help=f"JSON config file (default: {CONFIG_FILE})")

    db = parser.add_argument_group("database")
    db.add_argument("--dbname", help='Database name (default: "")')
    db.add_argument("--user", help='Database user name (default: "")')
    db.add_argument("--password", help="Database user's password (default: \"\")")
    db.add_argument("--host", help='Database host name (default: "localhost")')
    db.add_argument("--port", type=int, help="Database port (default: 3306)")
    db.add_argument("--socket", help="Database socket path")
    db.add_argument("--duckdb", dest="duckdb_path", help="Read from a local DuckDB file instead of MySQL")
    db.add_argument("--table_prefix", help='Table prefix name (default: "wp_")')
    db.add_argument("--site_prefix", help='Site prefix name for multisite tables, eg. "2_" (default: "")')

    opts = parser.add_argument_group("migration")
    flag = argparse.BooleanOptionalAction
    opts.add_argument("--clean_entities", action=flag, default=None,
                      help="Convert non-ASCII characters to HTML entities (default: true)")
    opts.add_argument("--entity_encoder", help='Entity table, "named" or "html5" (default: "named")')
    opts.add_argument("--comments", action=flag, default=None, help="Import comments (default: true)")
    opts.add_argument("--categories", action=flag, default=None, help="Import categories (default: true)")
    opts.add_argument("--tags", action=flag, default=None, help="Import tags (default: true)")
    opts.add_argument("--more_excerpt", action=flag, default=None,
                      help="Use the text before <!-- more --> as excerpt (default: true)")
    opts.add_argument("--more_anchor", action=flag, default=None,
                      help="Replace <!-- more --> with anchors (default: true)")
    opts.add_argument("--extension", help='Post extension (default: "html")')
    opts.add_argument("--status", help='Comma separated allowed statuses, "" for all (default: "publish")')
    opts.add_argument("--output", dest="output_dir", help="Jekyll site directory (default: .)")
    opts.add_argument("--autop", action=flag, default=None,
                      help="Wrap post bodies in paragraphs like WordPress does (default: true)")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    """
    Main function to run the WordPress to Jekyll migration tool.
    """
    args = parse_args(argv)
    overrides = {k: v for k, v in vars(args).items() if k != "config"}
    try:
        config = load_config(args.config, overrides)
    except MigrationError as e:
        print(f"[ERROR] {e}")
        return 1

    tool = JekyllMigrationTool(config)
    tool.log_message("Starting WordPress to Jekyll migration.")
    try:
        tool.run()
    except MigrationError as e:
        tool.log_message(f"Migration aborted: {e}", level="ERROR")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
