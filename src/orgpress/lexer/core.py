"""Line-oriented state-machine lexer.

Splits the source into lines, classifies each line according to the
current mode, and emits location-tagged tokens in a single forward pass.

Thread Safety:
Lexer instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Iterator

from orgpress.errors import UnexpectedEndOfInputError
from orgpress.lexer.classifiers import (
    BlockClassifierMixin,
    BlockDelimiter,
    DrawerClassifierMixin,
    HeadingClassifierMixin,
    KeywordClassifierMixin,
    PlanningClassifierMixin,
    TableClassifierMixin,
)
from orgpress.lexer.modes import LexerMode
from orgpress.lexer.scanners import (
    BlockScannerMixin,
    DefaultScannerMixin,
    DrawerScannerMixin,
)
from orgpress.location import SourceLocation
from orgpress.tokens import ParagraphToken, TableToken, Token, TokenType
from orgpress.utils.logger import get_logger

logger = get_logger(__name__)


class Lexer(
    # Classifiers (pure logic, no state changes)
    HeadingClassifierMixin,
    PlanningClassifierMixin,
    DrawerClassifierMixin,
    BlockClassifierMixin,
    KeywordClassifierMixin,
    TableClassifierMixin,
    # Scanners (mode-specific scanning logic)
    DefaultScannerMixin,
    DrawerScannerMixin,
    BlockScannerMixin,
):
    """State-machine lexer for outline markup.

    Modes:
        DEFAULT -> DRAWER on an indented :NAME: line
        DEFAULT -> BLOCK on a #+BEGIN line
        DRAWER -> DEFAULT on :END: (emits DrawerToken)
        BLOCK -> DEFAULT on the matching #+END (emits the block's token)

    Paragraph and table lines are collected in a pending slot and emitted
    once a line of another kind arrives, so emitted tokens are never
    edited afterwards.

    Usage:
        >>> lexer = Lexer("* Hello\\n\\nWorld", source_file="hello.org")
        >>> for token in lexer.tokenize():
        ...     print(token.type.name, token.lineno)
        HEADING 1
        PARAGRAPH 3

    Thread Safety:
        Lexer instances are single-use. Create one per source string.

    """

    __slots__ = (
        "_source",
        "_source_file",
        "_lineno",
        "_mode",
        # Pending paragraph/table buffers and the token produced for the previous line
        "_pending_type",
        "_pending_start",
        "_pending_text",
        "_pending_rows",
        "_previous",
        # Drawer/block state
        "_drawer_name",
        "_block_type",
        "_block_args",
        "_buffer",
        "_start",
    )

    def __init__(self, source: str, source_file: str | None = None) -> None:
        """Initialize lexer with source text.

        Args:
            source: Outline markup source text
            source_file: Optional source identifier for token locations
        """
        self._source = source
        self._source_file = source_file
        self._lineno = 1
        self._mode = LexerMode.DEFAULT

        self._pending_type: TokenType | None = None
        self._pending_start: SourceLocation | None = None
        self._pending_text: list[str] = []
        self._pending_rows: list[tuple[str, ...]] = []
        self._previous: Token | None = None

        self._drawer_name: str = ""
        self._block_type: str | None = None
        self._block_args: str = ""
        self._buffer: list[str] = []
        self._start: SourceLocation | None = None

    def tokenize(self) -> Iterator[Token]:
        """Tokenize source into a token stream.

        EmptyLine tokens are consumed internally and never yielded.

        Yields:
            Token objects in source order

        Raises:
            UnexpectedEndOfInputError: If a drawer or block is still open
                when the input ends.
            BlockMismatchError: If a block is closed with another type tag.
        """
        for line in self._source.split("\n"):
            yield from self._dispatch_mode(line.removesuffix("\r"))
            self._lineno += 1

        if self._mode is not LexerMode.DEFAULT:
            construct = "drawer" if self._mode is LexerMode.DRAWER else "block"
            assert self._start is not None
            raise UnexpectedEndOfInputError(
                construct,
                lineno=self._start.lineno,
                source_file=self._source_file,
            )

        yield from self._flush_pending()

    def _dispatch_mode(self, line: str) -> Iterator[Token]:
        """Dispatch to appropriate scanner based on current mode."""
        if self._mode is LexerMode.DEFAULT:
            yield from self._scan_default(line)
        elif self._mode is LexerMode.DRAWER:
            yield from self._scan_drawer_content(line)
        elif self._mode is LexerMode.BLOCK:
            yield from self._scan_block_content(line)

    # =========================================================================
    # Emission
    # =========================================================================

    def _location(self) -> SourceLocation:
        return SourceLocation(lineno=self._lineno, source_file=self._source_file)

    def _commit(self, token: Token) -> Iterator[Token]:
        """Flush the pending slot, then emit token.

        The token becomes the "previous" token for the next line even when
        it is an EmptyLine, which is what separates two paragraphs.
        """
        yield from self._flush_pending()
        self._previous = token
        if token.type is not TokenType.EMPTY_LINE:
            yield token

    def _flush_pending(self) -> Iterator[Token]:
        """Build the pending paragraph or table and emit it."""
        token_type, start = self._pending_type, self._pending_start
        if token_type is None or start is None:
            return

        token: ParagraphToken | TableToken
        if token_type is TokenType.TABLE:
            token = TableToken(location=start, rows=tuple(self._pending_rows))
        else:
            token = ParagraphToken(location=start, text="".join(self._pending_text))

        self._pending_type = None
        self._pending_start = None
        self._pending_text = []
        self._pending_rows = []
        yield token

    # =========================================================================
    # Mode transitions
    # =========================================================================

    def _enter_drawer(self, name: str) -> None:
        logger.debug("Drawer %r opened at %s", name, self._location())
        self._mode = LexerMode.DRAWER
        self._drawer_name = name
        self._buffer = []
        self._start = self._location()

    def _enter_block(self, delimiter: BlockDelimiter) -> None:
        logger.debug(
            "Block %r opened at %s", delimiter.block_type or "<dynamic>", self._location()
        )
        self._mode = LexerMode.BLOCK
        self._block_type = delimiter.block_type
        self._block_args = delimiter.args
        self._buffer = []
        self._start = self._location()

    def _return_to_default(self) -> None:
        self._mode = LexerMode.DEFAULT
        self._drawer_name = ""
        self._block_type = None
        self._block_args = ""
        self._buffer = []
        self._start = None
