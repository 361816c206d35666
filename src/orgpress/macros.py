"""Macro expansion.

Dynamic blocks (``#+BEGIN: name args`` ... ``#+END``) name a macro. The
only macro is ``listing``, which expands into an "Articles" section with
one card per sibling article under a URL prefix:

    #+BEGIN: listing /blog
    #+END

Cross-document data comes in through an explicit MacroContext snapshot.
A macro that needs it and does not get it fails instead of reading a
half-populated collection.

Thread Safety:
MacroContext is frozen and safe to share across render threads.

"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from orgpress.errors import MacroContextError, UndefinedMacroError
from orgpress.metadata import ArticleMetadata, SiteMetadata, as_utc
from orgpress.nodes import Heading, LesserBlock, Section
from orgpress.stringbuilder import StringBuilder
from orgpress.tokens import MacroToken
from orgpress.utils.logger import get_logger
from orgpress.utils.text import escape_html

logger = get_logger(__name__)

LISTING_MACRO = "listing"
LISTING_TITLE = "Articles"


@dataclass(frozen=True, slots=True)
class MacroContext:
    """Read-only snapshot of cross-document metadata.

    Attributes:
        site_url: Site base URL, without trailing slash
        articles: Every article record collected in the extraction phase

    """

    site_url: str
    articles: tuple[ArticleMetadata, ...] = ()

    @classmethod
    def from_records(cls, site_url: str, records: Iterable[SiteMetadata]) -> MacroContext:
        """Snapshot a collection of records, keeping only articles."""
        return cls(
            site_url=site_url,
            articles=tuple(r for r in records if isinstance(r, ArticleMetadata)),
        )

    def articles_under(self, prefix: str) -> tuple[ArticleMetadata, ...]:
        """Articles whose URL starts with site_url + prefix, in collection order."""
        base = self.site_url + prefix
        return tuple(a for a in self.articles if a.url.startswith(base))


def expand_macro(token: MacroToken, context: MacroContext | None) -> Section:
    """Expand a macro token into the section that replaces it.

    Args:
        token: The dynamic block token
        context: Cross-document snapshot (required by ``listing``)

    Returns:
        New Section holding the macro's output.

    Raises:
        UndefinedMacroError: If the macro name is not defined.
        MacroContextError: If ``listing`` is expanded without a context.
    """
    if token.name != LISTING_MACRO:
        raise UndefinedMacroError(
            token.name, lineno=token.lineno, source_file=token.location.source_file
        )

    if context is None:
        raise MacroContextError(
            f"{token.location}: listing needs the article metadata of the site; "
            "collect it before rendering"
        )

    prefix = token.args[0] if token.args else ""
    articles = context.articles_under(prefix)
    logger.info("Listing %d articles under %r", len(articles), context.site_url + prefix)

    return Section(
        nodes=(
            Heading(level=1, title=LISTING_TITLE),
            LesserBlock(block_type="export", args=("html",), contents=render_listing(articles)),
        ),
        commented=False,
    )


def render_listing(articles: Iterable[ArticleMetadata]) -> str:
    """Render article cards inside a ``<div class="articles">`` container."""
    sb = StringBuilder()
    sb.append('<div class="articles">')
    for article in articles:
        _render_card(article, sb)
    sb.append("</div>")
    return sb.build()


def _render_card(article: ArticleMetadata, sb: StringBuilder) -> None:
    """Render one article card.

    The card data is also exposed as data-* attributes so pages can sort
    and filter cards client-side.
    """
    stamp = as_utc(article.modified).isoformat()

    attributes = [("data-title", article.title), ("data-last-modified", stamp)]
    if article.description:
        attributes.append(("data-description", article.description))
    if article.author:
        attributes.append(("data-author", article.author))
    if article.tags:
        attributes.append(("data-tags", ", ".join(article.tags)))

    sb.append(f'<a href="{escape_html(article.url)}" class="article-card">')
    sb.append("<div")
    for name, value in attributes:
        sb.append(f' {name}="{escape_html(value)}"')
    sb.append(">")

    sb.append(f'<p class="card-title">{escape_html(article.title)}</p>')
    if article.description:
        sb.append(f"<p>{escape_html(article.description)}</p>")

    sb.append(f'<div><span class="card-time">{escape_html(stamp)}</span>')
    if article.author:
        sb.append(f'<span class="card-author">{escape_html(article.author)}</span>')
    sb.append("</div>")

    sb.append("</div></a>")
