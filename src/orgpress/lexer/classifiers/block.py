"""BEGIN/END block classifier mixin."""

import re
from dataclasses import dataclass

from orgpress.lexer.modes import COMMENT_BLOCK_TYPE, LESSER_BLOCK_TYPES
from orgpress.location import SourceLocation
from orgpress.tokens import (
    CommentToken,
    GreaterBlockToken,
    LesserBlockToken,
    MacroToken,
    Token,
)

# #+BEGIN_SRC python, #+begin_quote, #+BEGIN: listing /blog
BLOCK_START_PATTERN = re.compile(
    r"^#\+BEGIN(?:_(?P<type>[A-Za-z]+))?(?::|\s|$)\s*(?P<args>.*)$",
    re.IGNORECASE,
)
# #+END_SRC, #+end, #+END:
BLOCK_END_PATTERN = re.compile(
    r"^#\+END(?:_(?P<type>[A-Za-z]+))?(?::|\s|$)",
    re.IGNORECASE,
)


@dataclass(frozen=True, slots=True)
class BlockDelimiter:
    """A BEGIN or END line.

    Attributes:
        block_type: Lower-cased type tag, None for a bare #+BEGIN / #+END
        args: Text after the marker (always empty for END lines)

    """

    block_type: str | None
    args: str = ""


def shared_indent(lines: list[str]) -> int:
    """Number of leading whitespace characters shared by all lines.

    An empty line has no leading whitespace, so it pins the result to 0.

    Example:
        >>> shared_indent(["  a", "    b"])
        2
    """
    if not lines:
        return 0
    return min(len(line) - len(line.lstrip()) for line in lines)


def strip_shared_indent(lines: list[str]) -> tuple[str, ...]:
    """Remove the shared leading whitespace, keeping relative indentation."""
    indent = shared_indent(lines)
    return tuple(line[indent:] for line in lines)


class BlockClassifierMixin:
    """Mixin providing block open/close classification and token construction."""

    def _try_classify_block_start(self, line: str) -> BlockDelimiter | None:
        """Check if line opens a block.

        Args:
            line: Raw line

        Returns:
            BlockDelimiter if the line opens a block, None otherwise.
        """
        if not line.startswith("#+"):
            return None

        match = BLOCK_START_PATTERN.match(line)
        if match is None:
            return None

        block_type = match.group("type")
        return BlockDelimiter(
            block_type=block_type.lower() if block_type else None,
            args=match.group("args").strip(),
        )

    def _try_classify_block_end(self, line: str) -> BlockDelimiter | None:
        """Check if line closes a block.

        Returns:
            BlockDelimiter carrying the closing type tag if the line closes
            a block, None otherwise.
        """
        if not line.startswith("#+"):
            return None

        match = BLOCK_END_PATTERN.match(line)
        if match is None:
            return None

        block_type = match.group("type")
        return BlockDelimiter(block_type=block_type.lower() if block_type else None)

    def _construct_block(
        self,
        block_type: str | None,
        args: str,
        lines: list[str],
        start: SourceLocation,
    ) -> Token:
        """Build the token for a closed block.

        - comment: CommentToken with lines joined by newline
        - src/verse/example/export: LesserBlockToken, shared indent removed
        - other named types: GreaterBlockToken, lines verbatim
        - no type: MacroToken named by the first word of args

        Args:
            block_type: Lower-cased type tag, None for a dynamic block
            args: Text after the BEGIN marker
            lines: Accumulated body lines
            start: Location of the BEGIN line

        Returns:
            Token located at the BEGIN line.
        """
        if block_type is None:
            words = args.split()
            return MacroToken(
                location=start,
                name=words[0] if words else "",
                args=tuple(words[1:]),
                contents=tuple(lines),
            )

        if block_type == COMMENT_BLOCK_TYPE:
            return CommentToken(location=start, content="\n".join(lines))

        if block_type in LESSER_BLOCK_TYPES:
            return LesserBlockToken(
                location=start,
                block_type=block_type,
                args=args,
                contents=strip_shared_indent(lines),
            )

        return GreaterBlockToken(
            location=start,
            block_type=block_type,
            args=args,
            contents=tuple(lines),
        )
