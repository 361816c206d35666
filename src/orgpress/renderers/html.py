"""HTML renderer using StringBuilder pattern.

Renders a Document to an HTML fragment. Commented sections are skipped
together with their heading; block types without an HTML form are an
error rather than silently dropped.

Thread Safety:
The renderer holds configuration only. Multiple threads can safely share a
single HtmlRenderer instance and call render() concurrently.
"""

import logging

from orgpress.errors import NotImplementedRenderError
from orgpress.highlighting import highlight, plain_code_block
from orgpress.nodes import Document, Heading, LesserBlock, Node, Paragraph, Section, Table
from orgpress.stringbuilder import StringBuilder
from orgpress.utils.text import escape_html

logger = logging.getLogger(__name__)

# Key under which the template layer receives the rendered fragment
CONTENT_KEY = "content"


class HtmlRenderer:
    """Render a Document to HTML.

    Output is wrapped in ``<div class="article">`` and contains no
    whitespace between elements.

    Usage:
        >>> from orgpress import parse
        >>> HtmlRenderer().render(parse("* Hello, World!"))
        '<div class="article"><h1>Hello, World!</h1></div>'

    """

    __slots__ = ("_highlight", "_article_class")

    def __init__(self, *, highlight: bool = False, article_class: str = "article") -> None:
        """Initialize renderer.

        Args:
            highlight: Enable syntax highlighting for src blocks
            article_class: CSS class of the wrapper element
        """
        self._highlight = highlight
        self._article_class = article_class

    def render(self, node: Document) -> str:
        """Render document to an HTML string.

        Raises:
            NotImplementedRenderError: If a block type has no HTML form.
        """
        sb = StringBuilder()
        sb.append(f'<div class="{escape_html(self._article_class)}">')
        for section in node.sections:
            self._render_section(section, sb)
        sb.append("</div>")
        return sb.build()

    # =========================================================================
    # Block rendering
    # =========================================================================

    def _render_section(self, section: Section, sb: StringBuilder) -> None:
        if section.commented:
            return
        for child in section.nodes:
            self._render_node(child, sb)

    def _render_node(self, node: Node, sb: StringBuilder) -> None:
        match node:
            case Heading():
                sb.append(f"<h{node.level}>{escape_html(node.title)}</h{node.level}>")
            case Paragraph():
                sb.append("<p>")
                sb.append(escape_html(node.text).replace("\n", "<br />"))
                sb.append("</p>")
            case LesserBlock():
                self._render_block(node, sb)
            case Table():
                self._render_table(node, sb)

    def _render_block(self, block: LesserBlock, sb: StringBuilder) -> None:
        """Render a BEGIN/END block.

        src blocks become code; export blocks for the html backend are
        inserted raw and export blocks for other backends produce nothing.
        """
        match block.block_type:
            case "src":
                self._render_src(block, sb)
            case "export":
                if block.args and block.args[-1] == "html":
                    sb.append(block.contents)
            case _:
                raise NotImplementedRenderError(block.block_type)

    def _render_src(self, block: LesserBlock, sb: StringBuilder) -> None:
        lang = block.args[0] if block.args else None

        if self._highlight and lang:
            try:
                sb.append(highlight(block.contents, lang))
                return
            except Exception:
                # Log unexpected errors but continue with fallback
                logger.debug("Syntax highlighting failed for language %r", lang, exc_info=True)

        sb.append(plain_code_block(block.contents, lang))

    def _render_table(self, table: Table, sb: StringBuilder) -> None:
        """Render a table with one cell per split piece of each source row."""
        sb.append("<table><thead></thead><tbody>")
        for row in table.rows:
            sb.append("<tr>")
            for cell in row:
                sb.append(f"<td>{escape_html(cell)}</td>")
            sb.append("</tr>")
        sb.append("</tbody></table>")


def template_context(document: Document, html: str) -> dict[str, str]:
    """Values for the page template: document metadata plus the fragment.

    The rendered fragment always occupies the ``content`` key, even when
    the document defines a ``#+CONTENT:`` keyword.
    """
    context: dict[str, str] = dict(document.metadata)
    if CONTENT_KEY in context:
        logger.warning("Keyword %r is reserved for the rendered page; ignoring it", CONTENT_KEY)
    context[CONTENT_KEY] = html
    return context
