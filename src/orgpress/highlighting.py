"""Optional syntax highlighting for ``src`` blocks.

A ``#+BEGIN_SRC python`` block names its language in the first block
argument. When highlighting is enabled, the renderer hands the block to
the active highlighter; a language the highlighter does not know, or no
highlighter at all, gives the plain ``<pre><code class="language-...">``
markup instead.

The active highlighter is, in order: whatever was passed to
``set_highlighter``, or Rosettes when ``orgpress[syntax]`` is installed.

Usage:
    from orgpress.highlighting import set_highlighter

    def shout(code: str, language: str) -> str:
        return f"<pre>{code.upper()}</pre>"

    set_highlighter(shout)
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol

from orgpress.utils.logger import get_logger
from orgpress.utils.text import escape_html

logger = get_logger(__name__)


class Highlighter(Protocol):
    """Something that turns source code into highlighted HTML.

    Thread Safety:
        Site builds render documents on a thread pool, so ``highlight``
        and ``supports_language`` may be called concurrently.
    """

    def highlight(self, code: str, language: str) -> str:
        """HTML for code; entities in code must be escaped."""
        ...

    def supports_language(self, language: str) -> bool:
        """Whether ``highlight`` knows language."""
        ...


# A bare function taking (code, language); treated as knowing every language
HighlightFunction = Callable[[str, str], str]


class _FunctionHighlighter:
    __slots__ = ("_func",)

    def __init__(self, func: HighlightFunction) -> None:
        self._func = func

    def highlight(self, code: str, language: str) -> str:
        return self._func(code, language)

    def supports_language(self, language: str) -> bool:
        return True


class _RosettesHighlighter:
    __slots__ = ("_rosettes",)

    def __init__(self, module) -> None:
        self._rosettes = module

    def highlight(self, code: str, language: str) -> str:
        result: str = self._rosettes.highlight(code, language=language)
        return result

    def supports_language(self, language: str) -> bool:
        try:
            return bool(self._rosettes.supports_language(language))
        except LookupError:
            return False


_highlighter: Highlighter | None = None
_looked_for_rosettes: bool = False


def set_highlighter(highlighter: Highlighter | HighlightFunction | None) -> None:
    """Install the highlighter used for every ``src`` block.

    Args:
        highlighter: A ``Highlighter``, a ``(code, language) -> html``
            function, or None to go back to automatic detection.
    """
    global _highlighter, _looked_for_rosettes
    if highlighter is None:
        _highlighter = None
        _looked_for_rosettes = False
    elif hasattr(highlighter, "supports_language"):
        _highlighter = highlighter  # type: ignore[assignment]
    else:
        _highlighter = _FunctionHighlighter(highlighter)  # type: ignore[arg-type]


def _active_highlighter() -> Highlighter | None:
    """The installed highlighter, falling back to Rosettes once."""
    global _highlighter, _looked_for_rosettes

    if _highlighter is not None or _looked_for_rosettes:
        return _highlighter
    _looked_for_rosettes = True

    try:
        import rosettes  # type: ignore[import-not-found]
    except ImportError:
        logger.debug("rosettes is not installed; src blocks stay plain")
        return None

    _highlighter = _RosettesHighlighter(rosettes)
    return _highlighter


def plain_code_block(code: str, language: str | None) -> str:
    """Unhighlighted code block, with a language class when one is given."""
    lang_class = f' class="language-{escape_html(language)}"' if language else ""
    return f"<pre><code{lang_class}>{escape_html(code)}</code></pre>"


def highlight(code: str, language: str) -> str:
    """HTML for a ``src`` block.

    Uses the active highlighter when it supports language, and
    ``plain_code_block`` otherwise.
    """
    highlighter = _active_highlighter()
    if highlighter is None:
        return plain_code_block(code, language)

    if not highlighter.supports_language(language):
        logger.debug("No highlighting for language %r", language)
        return plain_code_block(code, language)

    return highlighter.highlight(code, language)


def has_highlighter() -> bool:
    """Whether a highlighter is installed or Rosettes can be loaded."""
    return _active_highlighter() is not None
