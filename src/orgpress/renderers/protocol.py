"""DocumentRenderer protocol for anything that turns a Document into text.

The site build only needs ``render(document) -> str``; HtmlRenderer is the
one shipped implementation.

Example:
    from orgpress.renderers.protocol import DocumentRenderer

    def render_page(renderer: DocumentRenderer, doc: Document) -> str:
        return renderer.render(doc)

"""

from typing import Protocol

from orgpress.nodes import Document


class DocumentRenderer(Protocol):
    """Protocol for document renderers."""

    def render(self, node: Document) -> str:
        """Render a parsed Document to a string."""
        ...
