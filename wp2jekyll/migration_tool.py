"""
High-level orchestration of the WordPress → Jekyll migration.

This module defines a :class:`JekyllMigrationTool` class that ties together
the extractor, the content parsers, the path resolution and the writer into
a complete batch pipeline:

1. read posts (filtered by status), pages, terms and comments,
2. transform every post into a :class:`~wp2jekyll.models.TransformedDocument`,
3. build the page hierarchy and assign each document its output path,
4. render and write every document.

The run is a full regeneration: nothing is read back from the output
directory and existing files are overwritten.  Any extraction, hierarchy or
write failure aborts the run after being reported.
"""

from __future__ import annotations

import os
from collections import Counter, defaultdict
from datetime import datetime
from typing import Dict, Iterable, List, Optional

from wp2jekyll.config import MigrationConfig, load_config
from wp2jekyll.extractors.wordpress_extractor import RowSupplier, WordPressDatabase
from wp2jekyll.migrators.filenames import PageHierarchyIndex, PathResolver
from wp2jekyll.migrators.jekyll_writer import JekyllWriter
from wp2jekyll.models import (
    CommentRecord,
    ContentRecord,
    PageRecord,
    TermRecord,
    TransformedDocument,
)
from wp2jekyll.parsers.content import ContentTransformer
from wp2jekyll.parsers.frontmatter import build_frontmatter, render_document
from wp2jekyll.utils.comments import CommentCollector
from wp2jekyll.utils.entities import resolve_entity_encoder
from wp2jekyll.utils.errors import (
    ExtractionError,
    MigrationError,
    PageHierarchyCycleError,
    report_error,
    report_ok,
)
from wp2jekyll.utils.pre_flight_checks import run_pre_flight_checks
from wp2jekyll.utils.taxonomy import TaxonomyResolver


class JekyllMigrationTool:
    """
    Encapsulates all state and behavior required to migrate a WordPress
    database to a Jekyll site.  The configuration is fixed for the lifetime
    of the tool; each component only receives the options it uses.
    """

    def __init__(
        self,
        config: Optional[MigrationConfig] = None,
        *,
        config_file: Optional[str] = None,
        supplier: Optional[RowSupplier] = None,
        writer: Optional[JekyllWriter] = None,
    ) -> None:
        if config is None:
            config = load_config(config_file)
        self.config = config
        self.supplier = supplier
        self.writer = writer or JekyllWriter(config.output_dir)
        self.run_started_at = datetime.now().replace(microsecond=0)

        # Decided once for the whole run.
        self.encoder, self.clean_entities = resolve_entity_encoder(
            config.clean_entities,
            config.entity_encoder,
            warn=lambda m: self.log_message(m, level="WARNING"),
        )
        self.transformer = ContentTransformer(
            more_excerpt=config.more_excerpt,
            more_anchor=config.more_anchor,
            encoder=self.encoder,
        )
        self.taxonomy = TaxonomyResolver(
            include_categories=config.categories,
            include_tags=config.tags,
            encoder=self.encoder,
        )
        self.comments = CommentCollector(self.encoder)

    @property
    def report_dir(self) -> str:
        return self.config.reports_dir

    def log_message(self, message: str, level: str = "INFO") -> None:
        print(f"[{level}] {message}")
        os.makedirs(self.report_dir, exist_ok=True)
        with open(os.path.join(self.report_dir, "migration.log"), "a", encoding="utf-8") as f:
            f.write(f"{level}: {message}\n")

    # Pipeline ---------------------------------------------------------------

    def run(self) -> List[TransformedDocument]:
        """Run the whole migration and return the documents written."""
        supplier = self.supplier
        owns_supplier = supplier is None
        try:
            if supplier is None:
                supplier = WordPressDatabase.connect(self.config)
                run_pre_flight_checks(supplier, self.config.output_dir)

            self.log_message("Reading posts from WordPress.")
            posts = supplier.fetch_posts(self.config.status)
            pages = supplier.fetch_pages()
            terms = supplier.fetch_terms() if self.taxonomy.enabled else []
            comments = supplier.fetch_comments() if self.config.comments else []
        except ExtractionError as e:
            report_error("EXTRACTION", exc=e, report_dir=self.report_dir)
            self.log_message(f"Extraction failed: {e}", level="ERROR")
            raise
        finally:
            if owns_supplier and supplier is not None:
                supplier.close()

        self.log_message(
            f"Found {len(posts)} posts, {len(pages)} pages, "
            f"{len(terms)} terms and {len(comments)} comments."
        )
        documents = self.process_posts(posts, terms, comments)
        documents = self.generate_filenames(documents, pages)
        self.write_posts(documents)
        self.log_message(f"Migration finished: {len(documents)} documents written.")
        return documents

    def process_posts(
        self,
        posts: Iterable[ContentRecord],
        terms: Iterable[TermRecord] = (),
        comments: Iterable[CommentRecord] = (),
    ) -> List[TransformedDocument]:
        terms_by_post: Dict[int, List[TermRecord]] = defaultdict(list)
        for term in terms:
            terms_by_post[term.post_id].append(term)
        comments_by_post: Dict[int, List[CommentRecord]] = defaultdict(list)
        for comment in comments:
            comments_by_post[comment.post_id].append(comment)

        documents: List[TransformedDocument] = []
        for record in posts:
            if not self.config.status_allowed(record.status):
                self.log_message(
                    f"Skipping post {record.id} with status '{record.status}'",
                    level="DEBUG",
                )
                continue
            documents.append(
                self.process_post(
                    record,
                    terms_by_post.get(record.id, []),
                    comments_by_post.get(record.id, []),
                )
            )
        return documents

    def process_post(
        self,
        record: ContentRecord,
        terms: Iterable[TermRecord] = (),
        comments: Iterable[CommentRecord] = (),
    ) -> TransformedDocument:
        content = self.transformer.transform(record)
        date = record.date or record.date_gmt or self.run_started_at
        categories, tags = self.taxonomy.resolve(record.id, terms)

        post_comments = []
        if self.config.comments and record.comment_count > 0:
            post_comments = self.comments.collect(record.id, comments)

        frontmatter = build_frontmatter(
            record,
            content,
            categories=categories,
            tags=tags,
            comments=post_comments,
            include_categories=self.config.categories,
            include_tags=self.config.tags,
            include_comments=self.config.comments,
            date=date,
        )
        return TransformedDocument(
            slug=content.slug,
            date=date,
            frontmatter=frontmatter,
            content=content.content,
            record=record,
        )

    def generate_filenames(
        self,
        documents: Iterable[TransformedDocument],
        pages: Iterable[PageRecord],
    ) -> List[TransformedDocument]:
        index = PageHierarchyIndex.from_pages(pages)
        resolver = PathResolver(index, extension=self.config.extension)

        named: List[TransformedDocument] = []
        for document in documents:
            try:
                path = resolver.resolve(document.record, document.slug, document.date)
            except PageHierarchyCycleError as e:
                report_error("PAGE_CYCLE", document.record, e, report_dir=self.report_dir)
                self.log_message(str(e), level="ERROR")
                raise
            named.append(document.with_path(path))

        for path, count in Counter(d.path for d in named).items():
            if count > 1:
                self.log_message(
                    f"{count} documents share the path '{path}'; the last one wins.",
                    level="WARNING",
                )
        return named

    def write_posts(self, documents: Iterable[TransformedDocument]) -> None:
        for document in documents:
            if document.path is None:
                raise MigrationError(f"Post {document.record.id} has no output path")
            text = render_document(document, autop=self.config.autop)
            try:
                self.writer.write(document.path, text)
            except OSError as e:
                report_error("WRITE", document.record, e, report_dir=self.report_dir)
                self.log_message(f"Failed to write '{document.path}': {e}", level="ERROR")
                raise
            report_ok("WRITTEN", document.record, {"path": document.path}, report_dir=self.report_dir)
