"""
Top-level package for the WordPress → Jekyll migration utility.

This package bundles everything required to read posts, pages, terms and
comments from a WordPress database, turn each post into a Jekyll document
with YAML front matter, and write the documents at the paths Jekyll
expects.  Modules are split into subpackages:

* :mod:`wp2jekyll.extractors` – the DuckDB-backed WordPress row supplier
* :mod:`wp2jekyll.models` – typed records and output documents
* :mod:`wp2jekyll.parsers` – content, read-more, paragraph and front matter handling
* :mod:`wp2jekyll.migrators` – output paths and the Jekyll writer
* :mod:`wp2jekyll.utils` – slugs, taxonomy, comments, entities, errors and reports

Each layer has no direct knowledge of configuration or execution strategy;
orchestration is handled in :mod:`wp2jekyll.migration_tool`.
"""
