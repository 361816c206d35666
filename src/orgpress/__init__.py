"""
orgpress: Outline markup to HTML for static sites

Turns outline-markup documents (headings, keyword lines, BEGIN/END blocks,
drawers, tables) into HTML fragments, and builds whole sites in two
phases so that ``listing`` blocks can link to sibling articles.

Quick Start:
    >>> from orgpress import parse, render
    >>> doc = parse("#+TITLE: Hello\\n* Hello, World!")
    >>> doc.metadata["title"]
    'Hello'
    >>> render(doc)
    '<div class="article"><h1>Hello, World!</h1></div>'

    >>> # Or use the high-level Org class
    >>> from orgpress import Org
    >>> org = Org()
    >>> html = org("* Hello")

Site builds:
    >>> from orgpress import SourceFile, build_site
    >>> build = build_site(sources, "https://example.org")
    >>> build.pages["blog/index.org"].html

Installation:
    pip install orgpress              # Core (zero deps)
    pip install orgpress[syntax]      # + Syntax highlighting via Rosettes
"""

from collections.abc import Iterable

from orgpress.config import (
    OrgConfig,
    config_context,
    get_config,
    reset_config,
    set_config,
)
from orgpress.errors import (
    BlockMismatchError,
    ExtractionError,
    MacroContextError,
    MacroError,
    NotImplementedRenderError,
    OrgpressError,
    ParseError,
    RenderError,
    SourceReadError,
    UndefinedMacroError,
    UnexpectedEndOfInputError,
)
from orgpress.lexer import Lexer, LexerMode
from orgpress.location import SourceLocation
from orgpress.macros import MacroContext, expand_macro
from orgpress.metadata import (
    ArticleMetadata,
    ImageMetadata,
    SiteMetadata,
    extract_metadata,
    image_metadata,
)
from orgpress.nodes import Document, Heading, LesserBlock, Node, Paragraph, Section, Table
from orgpress.parser import Parser
from orgpress.renderers.html import HtmlRenderer, template_context
from orgpress.renderers.protocol import DocumentRenderer
from orgpress.site import RenderedPage, SiteBuild, SourceFile, build_site
from orgpress.tokens import Token, TokenType

__version__ = "0.1.0"


def lex(source: str, *, source_file: str | None = None) -> list[Token]:
    """Split source into tokens.

    Args:
        source: Document text
        source_file: Optional source file path for error messages

    Returns:
        Tokens in source order (blank lines are not included)

    Raises:
        ParseError: On an unterminated drawer or block, or a block closed
            with a different type than it was opened with.
    """
    return list(Lexer(source, source_file=source_file).tokenize())


def parse(
    source: str,
    *,
    source_file: str | None = None,
    context: MacroContext | None = None,
    expand_macros: bool = True,
) -> Document:
    """Parse source into a Document.

    Args:
        source: Document text
        source_file: Optional source file path for error messages
        context: Sibling-article snapshot for ``listing`` blocks
        expand_macros: Set to False to skip dynamic blocks entirely

    Returns:
        Document with metadata and sections

    Example:
        >>> doc = parse("* One\\n* Two")
        >>> len(doc.sections)
        3
    """
    tokens = Lexer(source, source_file=source_file).tokenize()
    return Parser(tokens, context, expand_macros=expand_macros).parse()


def render(doc: Document, *, highlight: bool | None = None) -> str:
    """Render a Document to HTML.

    Args:
        doc: Document to render
        highlight: Enable syntax highlighting for src blocks
            (defaults to the current configuration)

    Returns:
        HTML string
    """
    config = get_config()
    if highlight is None:
        highlight = config.highlight
    renderer = HtmlRenderer(highlight=highlight, article_class=config.article_class)
    return renderer.render(doc)


class Org:
    """High-level processor combining parser and renderer.

    Usage:
        >>> org = Org()
        >>> org("* Hello")
        '<div class="article"><h1>Hello</h1></div>'

        >>> # Access the document
        >>> doc = org.parse("#+TITLE: x\\n* Heading")
        >>> doc.sections[1].heading.level
        1

    Thread Safety:
        Uses ContextVar for thread-local configuration. Safe to use multiple
        Org instances concurrently from different threads.

    """

    __slots__ = ("_config", "_context")

    def __init__(
        self,
        *,
        config: OrgConfig | None = None,
        context: MacroContext | None = None,
    ) -> None:
        """Initialize processor.

        Args:
            config: Configuration applied to every call (defaults to OrgConfig())
            context: Sibling-article snapshot for ``listing`` blocks
        """
        self._config = config or OrgConfig()
        self._context = context

    @property
    def config(self) -> OrgConfig:
        return self._config

    def __call__(self, source: str, *, source_file: str | None = None) -> str:
        """Parse and render in one call."""
        return self.render(self.parse(source, source_file=source_file))

    def parse(self, source: str, *, source_file: str | None = None) -> Document:
        """Parse source into a Document."""
        with config_context(self._config):
            return parse(source, source_file=source_file, context=self._context)

    def render(self, doc: Document) -> str:
        """Render a Document with this processor's configuration."""
        with config_context(self._config):
            return render(doc)

    def build_site(self, sources: Iterable[SourceFile], site_url: str) -> SiteBuild:
        """Build a whole site with this processor's configuration."""
        return build_site(sources, site_url, config=self._config)


__all__ = [
    # Version
    "__version__",
    # Core API
    "lex",
    "parse",
    "render",
    "Org",
    "build_site",
    "extract_metadata",
    "image_metadata",
    "expand_macro",
    "template_context",
    # Configuration
    "OrgConfig",
    "config_context",
    "get_config",
    "reset_config",
    "set_config",
    # Pipeline classes
    "Lexer",
    "LexerMode",
    "Parser",
    "HtmlRenderer",
    "DocumentRenderer",
    # Tokens and nodes
    "Token",
    "TokenType",
    "SourceLocation",
    "Document",
    "Section",
    "Node",
    "Heading",
    "Paragraph",
    "LesserBlock",
    "Table",
    # Site build
    "SourceFile",
    "RenderedPage",
    "SiteBuild",
    "MacroContext",
    "ArticleMetadata",
    "ImageMetadata",
    "SiteMetadata",
    # Errors
    "OrgpressError",
    "ParseError",
    "UnexpectedEndOfInputError",
    "BlockMismatchError",
    "MacroError",
    "UndefinedMacroError",
    "MacroContextError",
    "RenderError",
    "NotImplementedRenderError",
    "ExtractionError",
    "SourceReadError",
]
