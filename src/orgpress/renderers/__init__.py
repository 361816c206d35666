"""orgpress renderers.

Renderers convert a parsed Document into an output format.

Available Renderers:
- HtmlRenderer: Renders a Document to an HTML fragment using StringBuilder

Thread Safety:
All renderers use StringBuilder local to each render() call.
Safe for concurrent use from multiple threads.

"""

from orgpress.renderers.html import CONTENT_KEY, HtmlRenderer, template_context
from orgpress.renderers.protocol import DocumentRenderer

__all__ = ["CONTENT_KEY", "DocumentRenderer", "HtmlRenderer", "template_context"]
