"""Text processing utilities for orgpress.

Example:
    >>> from orgpress.utils.text import escape_html
    >>> escape_html('<a href="x">')
    '&lt;a href=&quot;x&quot;&gt;'
"""

from __future__ import annotations

import html as html_module


def escape_html(text: str) -> str:
    """Escape HTML special characters.

    Escapes <, >, & and " but leaves single quotes alone, so that code
    such as ``print('hi')`` survives unchanged. The result is safe both
    as element text and inside double-quoted attribute values.

    Examples:
        >>> escape_html("a < b & c")
        'a &lt; b &amp; c'
        >>> escape_html("print('hi')")
        "print('hi')"
    """
    if not text:
        return ""
    return html_module.escape(text, quote=False).replace('"', "&quot;")


def split_tags(value: str) -> tuple[str, ...]:
    """Split a ``#+TAGS:`` value into tags.

    Commas separate tags when the value contains any; otherwise
    whitespace does. Surrounding whitespace and empty pieces are dropped.

    Examples:
        >>> split_tags("rust, static sites")
        ('rust', 'static sites')
        >>> split_tags("rust web")
        ('rust', 'web')
    """
    pieces = value.split(",") if "," in value else value.split()
    return tuple(piece.strip() for piece in pieces if piece.strip())
