"""Exception classes for orgpress.

Every failure raised by the lexer, parser, macro expansion, renderer and
site build derives from OrgpressError. Nothing is repaired or retried:
malformed input surfaces as one of these errors.
"""

from __future__ import annotations


class OrgpressError(Exception):
    """Base exception for all orgpress errors.

    Subclass this for specific error categories.
    """

    pass


def _located(message: str, lineno: int | None, source_file: str | None) -> str:
    """Prefix message with ``file:line`` (either part may be missing)."""
    location = ""
    if source_file:
        location = f"{source_file}:"
    if lineno is not None:
        location += f"{lineno}:"
    if location:
        location = location.rstrip(":") + " "
    return f"{location}{message}"


class ParseError(OrgpressError):
    """Error while lexing or assembling a document.

    Raised when the input cannot be turned into a token sequence.
    """

    def __init__(
        self,
        message: str,
        lineno: int | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize parse error with optional location.

        Args:
            message: Error description
            lineno: Line number where the error occurred (1-indexed)
            source_file: Source identifier (optional)
        """
        self.message = message
        self.lineno = lineno
        self.source_file = source_file

        super().__init__(_located(message, lineno, source_file))


class UnexpectedEndOfInputError(ParseError):
    """Input ended while a drawer or block was still open."""

    def __init__(
        self,
        construct: str,
        lineno: int | None = None,
        source_file: str | None = None,
    ) -> None:
        self.construct = construct
        super().__init__(
            f"unexpected end of input: unterminated {construct}",
            lineno=lineno,
            source_file=source_file,
        )


class BlockMismatchError(ParseError):
    """A block was closed with a different type tag than it was opened with.

    Malformed input of this kind aborts processing; see
    ``OrgConfig.abort_on_block_mismatch`` for how the site build treats it.
    """

    def __init__(
        self,
        opened: str | None,
        closed: str | None,
        lineno: int | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize block mismatch error.

        Args:
            opened: Type tag of the open block (None for a bare #+BEGIN)
            closed: Type tag found on the closing line (None for a bare #+END)
            lineno: Line number of the closing line
            source_file: Source identifier (optional)
        """
        self.opened = opened
        self.closed = closed
        super().__init__(
            f"closing a block of a different type: "
            f"opened {opened or '<none>'!s}, closed {closed or '<none>'!s}",
            lineno=lineno,
            source_file=source_file,
        )


class MacroError(OrgpressError):
    """Error while expanding a macro."""

    pass


class UndefinedMacroError(MacroError):
    """The document uses a macro name that is not defined."""

    def __init__(
        self, name: str, lineno: int | None = None, source_file: str | None = None
    ) -> None:
        self.name = name
        self.lineno = lineno
        self.source_file = source_file
        super().__init__(_located(f"undefined macro {name!r}", lineno, source_file))


class MacroContextError(MacroError):
    """A macro needs cross-document metadata but none was supplied.

    Raised when a ``listing`` macro is expanded before the article metadata
    of sibling documents has been collected into a MacroContext.
    """

    pass


class RenderError(OrgpressError):
    """Error during HTML rendering."""

    pass


class NotImplementedRenderError(RenderError):
    """The renderer has no output for this block type."""

    def __init__(self, block_type: str) -> None:
        self.block_type = block_type
        super().__init__(f"rendering of {block_type!r} blocks is not implemented")


class ExtractionError(OrgpressError):
    """A source file cannot be turned into a metadata record."""

    pass


class SourceReadError(OrgpressError):
    """A source file could not be read by the collaborator that supplies it."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"cannot read {path}: {reason}")
