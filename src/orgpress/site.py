"""Two-phase site build.

Phase 1 extracts a metadata record from every source. The records are
then frozen into one MacroContext, and phase 2 parses and renders every
org source against it, so a ``listing`` macro always sees the complete
set of sibling articles. Both phases run on a thread pool with a hard
barrier between them.

A failing document is recorded in ``SiteBuild.errors`` and the build goes
on with the others. The exception is a block open/close mismatch, which
aborts the build unless ``OrgConfig.abort_on_block_mismatch`` is False.

Example:
    >>> from datetime import datetime
    >>> build = build_site(
    ...     [SourceFile("index.org", "* Hi", datetime(2024, 1, 1))],
    ...     "https://example.org",
    ... )
    >>> build.pages["index.org"].html
    '<div class="article"><h1>Hi</h1></div>'

"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping, Sequence
from concurrent.futures import Future, ThreadPoolExecutor
from contextvars import copy_context
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import PurePosixPath
from typing import TypeVar

from orgpress.config import OrgConfig, config_context, get_config
from orgpress.errors import BlockMismatchError, OrgpressError, SourceReadError
from orgpress.lexer import Lexer
from orgpress.macros import MacroContext
from orgpress.metadata import (
    IMAGE_EXTENSIONS,
    SiteMetadata,
    extract_metadata,
    image_metadata,
)
from orgpress.nodes import Document
from orgpress.parser import Parser
from orgpress.renderers.html import HtmlRenderer, template_context
from orgpress.renderers.protocol import DocumentRenderer
from orgpress.utils.logger import get_logger

logger = get_logger(__name__)

ORG_SUFFIX = ".org"
HTML_SUFFIX = ".html"

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class SourceFile:
    """One input file, as supplied by the caller.

    Reading the file system is the caller's job. A file that could not be
    read is passed in with ``read_error`` set and is reported like any
    other failing document.

    Attributes:
        relative_path: Path relative to the site root, with ``/`` separators
        content: Decoded text (None for binary sources such as images)
        modified: Last modification time (naive values are taken to be UTC)
        read_error: Why the file could not be read, if it could not

    """

    relative_path: str
    content: str | None
    modified: datetime
    read_error: str | None = None

    @property
    def suffix(self) -> str:
        return PurePosixPath(self.relative_path).suffix.lower()

    @property
    def is_org(self) -> bool:
        return self.suffix == ORG_SUFFIX

    @property
    def is_image(self) -> bool:
        return self.suffix in IMAGE_EXTENSIONS

    def text(self) -> str:
        """The decoded source text.

        Raises:
            SourceReadError: If the file could not be read.
        """
        if self.read_error is not None:
            raise SourceReadError(self.relative_path, self.read_error)
        if self.content is None:
            raise SourceReadError(self.relative_path, "no text content")
        return self.content


@dataclass(frozen=True, slots=True)
class RenderedPage:
    """HTML output for one org source.

    Attributes:
        relative_path: Source path
        output_path: Path of the page to write, relative to the output root
        html: Rendered fragment
        context: Template values (document metadata plus ``content``)

    """

    relative_path: str
    output_path: str
    html: str
    context: Mapping[str, str]


@dataclass(frozen=True, slots=True)
class SiteBuild:
    """Result of a site build."""

    pages: dict[str, RenderedPage] = field(default_factory=dict)
    metadata: tuple[SiteMetadata, ...] = ()
    errors: dict[str, OrgpressError] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        """True when no document failed."""
        return not self.errors


def build_site(
    sources: Iterable[SourceFile],
    site_url: str,
    *,
    config: OrgConfig | None = None,
) -> SiteBuild:
    """Extract metadata from every source, then render every org source.

    Args:
        sources: Input files (metadata keeps their order)
        site_url: Site base URL; a trailing slash is removed
        config: Build configuration (defaults to the current context's)

    Returns:
        SiteBuild with the pages, metadata records and per-document errors.

    Raises:
        BlockMismatchError: If a document closes a block with the wrong type
            and ``config.abort_on_block_mismatch`` is set.
    """
    config = config or get_config()
    site_url = site_url.rstrip("/")
    sources = list(sources)
    errors: dict[str, OrgpressError] = {}

    with config_context(config):
        logger.info("Collecting metadata from %d sources", len(sources))
        collected = _run_phase(
            lambda source: _collect_metadata(source, site_url),
            sources,
            errors,
            config,
        )
        records = tuple(record for record in collected.values() if record is not None)

        # Barrier: phase 2 starts only once every record is in the snapshot
        context = MacroContext.from_records(site_url, records)

        renderer: DocumentRenderer = HtmlRenderer(
            highlight=config.highlight, article_class=config.article_class
        )
        to_render = [s for s in sources if s.is_org and s.relative_path not in errors]
        logger.info("Rendering %d documents", len(to_render))
        pages = _run_phase(
            lambda source: _render_page(source, context, renderer),
            to_render,
            errors,
            config,
        )

    if errors:
        logger.warning("%d of %d sources failed", len(errors), len(sources))

    return SiteBuild(pages=pages, metadata=records, errors=errors)


def _run_phase(
    task: Callable[[SourceFile], T],
    sources: Sequence[SourceFile],
    errors: dict[str, OrgpressError],
    config: OrgConfig,
) -> dict[str, T]:
    """Run one task per source on a thread pool.

    Results come back keyed by path in source order. Each task runs in a
    copy of the calling context so it sees the active configuration.
    """
    results: dict[str, T] = {}
    with ThreadPoolExecutor(max_workers=config.max_workers) as executor:
        futures: list[tuple[SourceFile, Future[T]]] = [
            (source, executor.submit(copy_context().run, task, source)) for source in sources
        ]

    for source, future in futures:
        try:
            results[source.relative_path] = future.result()
        except BlockMismatchError as e:
            if config.abort_on_block_mismatch:
                raise
            _record_failure(source, e, errors)
        except OrgpressError as e:
            _record_failure(source, e, errors)
    return results


def _record_failure(
    source: SourceFile, error: OrgpressError, errors: dict[str, OrgpressError]
) -> None:
    logger.warning("%s: %s", source.relative_path, error)
    errors[source.relative_path] = error


def _parse(source: SourceFile, context: MacroContext | None, *, expand_macros: bool) -> Document:
    tokens = Lexer(source.text(), source_file=source.relative_path).tokenize()
    return Parser(tokens, context, expand_macros=expand_macros).parse()


def _collect_metadata(source: SourceFile, site_url: str) -> SiteMetadata | None:
    """Phase 1 task: the metadata record of one source, if it has one."""
    if source.read_error is not None:
        raise SourceReadError(source.relative_path, source.read_error)

    if source.is_image:
        return image_metadata(source.relative_path, site_url)

    if not source.is_org:
        logger.debug("%s is not a document or image; skipping", source.relative_path)
        return None

    document = _parse(source, None, expand_macros=False)
    return extract_metadata(
        document,
        relative_path=source.relative_path,
        site_url=site_url,
        modified=source.modified,
    )


def _render_page(
    source: SourceFile, context: MacroContext, renderer: DocumentRenderer
) -> RenderedPage:
    """Phase 2 task: parse with the full context and render."""
    document = _parse(source, context, expand_macros=True)
    html = renderer.render(document)
    return RenderedPage(
        relative_path=source.relative_path,
        output_path=str(PurePosixPath(source.relative_path).with_suffix(HTML_SUFFIX)),
        html=html,
        context=template_context(document, html),
    )


__all__ = [
    "RenderedPage",
    "SiteBuild",
    "SourceFile",
    "build_site",
]
