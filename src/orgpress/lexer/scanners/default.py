"""Default mode scanner mixin."""

from __future__ import annotations

from collections.abc import Iterator

from orgpress.lexer.classifiers.block import BlockDelimiter
from orgpress.lexer.modes import LexerMode
from orgpress.location import SourceLocation
from orgpress.tokens import (
    CommentToken,
    EmptyLine,
    HeadingToken,
    KeywordToken,
    PlanningToken,
    Token,
    TokenType,
)


class DefaultScannerMixin:
    """Mixin providing default mode scanning logic.

    Classifies one line, first match wins:
    1. blank line
    2. heading
    3. planning line (only below a heading or planning line)
    4. drawer start
    5. block start
    6. comment
    7. keyword
    8. table row
    9. paragraph text

    Paragraph and table lines accumulate in the pending buffers until a
    line of another kind arrives. The token is built once, on flush.

    """

    # These will be set by the Lexer class
    _mode: LexerMode
    _pending_type: TokenType | None
    _pending_start: SourceLocation | None
    _pending_text: list[str]
    _pending_rows: list[tuple[str, ...]]
    _previous: Token | None

    def _location(self) -> SourceLocation:
        """Location of the current line."""
        raise NotImplementedError

    def _commit(self, token: Token) -> Iterator[Token]:
        """Flush the pending slot, then emit token."""
        raise NotImplementedError

    def _flush_pending(self) -> Iterator[Token]:
        """Emit the pending paragraph or table, if any."""
        raise NotImplementedError

    def _enter_drawer(self, name: str) -> None:
        raise NotImplementedError

    def _enter_block(self, delimiter: BlockDelimiter) -> None:
        raise NotImplementedError

    # Classifier methods (provided by classifier mixins)
    def _try_classify_heading(self, line: str) -> HeadingToken | None:
        raise NotImplementedError

    def _try_classify_planning(self, line: str, previous: Token | None) -> PlanningToken | None:
        raise NotImplementedError

    def _try_classify_drawer_start(self, line: str) -> str | None:
        raise NotImplementedError

    def _try_classify_block_start(self, line: str) -> BlockDelimiter | None:
        raise NotImplementedError

    def _try_classify_comment(self, line: str) -> CommentToken | None:
        raise NotImplementedError

    def _try_classify_keyword(self, line: str) -> KeywordToken | None:
        raise NotImplementedError

    def _try_classify_table_row(self, line: str) -> tuple[str, ...] | None:
        raise NotImplementedError

    def _scan_default(self, line: str) -> Iterator[Token]:
        """Classify a line in default mode."""
        if not line.strip():
            yield from self._commit(EmptyLine(self._location()))
            return

        token: Token | None = self._try_classify_heading(line)
        if token is not None:
            yield from self._commit(token)
            return

        token = self._try_classify_planning(line, self._previous)
        if token is not None:
            yield from self._commit(token)
            return

        name = self._try_classify_drawer_start(line)
        if name is not None:
            yield from self._flush_pending()
            self._enter_drawer(name)
            return

        delimiter = self._try_classify_block_start(line)
        if delimiter is not None:
            yield from self._flush_pending()
            self._enter_block(delimiter)
            return

        token = self._try_classify_comment(line)
        if token is not None:
            yield from self._commit(token)
            return

        token = self._try_classify_keyword(line)
        if token is not None:
            yield from self._commit(token)
            return

        row = self._try_classify_table_row(line)
        if row is not None:
            yield from self._add_table_row(row)
            return

        yield from self._add_paragraph_line(line)

    def _add_table_row(self, row: tuple[str, ...]) -> Iterator[Token]:
        """Append a row to the pending table, or start a new one."""
        if self._pending_type is not TokenType.TABLE:
            yield from self._flush_pending()
            self._start_pending(TokenType.TABLE)
        self._pending_rows.append(row)

    def _add_paragraph_line(self, line: str) -> Iterator[Token]:
        """Merge a text line into the pending paragraph, or start a new one.

        Indented continuation lines join with a space; unindented lines
        join with a newline, which the renderer turns into a line break.
        """
        if self._pending_type is not TokenType.PARAGRAPH:
            yield from self._flush_pending()
            self._start_pending(TokenType.PARAGRAPH)
            self._pending_text.append(line.lstrip())
            return

        pieces = self._pending_text
        pieces[-1] = pieces[-1].rstrip()
        if line[0].isspace():
            pieces.append(" " + line.lstrip())
        else:
            pieces.append("\n" + line)

    def _start_pending(self, token_type: TokenType) -> None:
        self._pending_type = token_type
        self._pending_start = self._location()
        # Pending lines are not tokens yet, so nothing counts as previous
        self._previous = None
