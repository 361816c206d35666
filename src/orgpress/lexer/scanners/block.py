"""Block mode scanner mixin."""

from collections.abc import Iterator

from orgpress.errors import BlockMismatchError
from orgpress.lexer.classifiers.block import BlockDelimiter
from orgpress.location import SourceLocation
from orgpress.tokens import Token


class BlockScannerMixin:
    """Mixin providing block mode scanning logic.

    Accumulates lines until an #+END line. The closing type tag must be
    the opening one; a different tag raises BlockMismatchError instead of
    guessing which block the author meant to close.

    """

    # These will be set by the Lexer class
    _block_type: str | None
    _block_args: str
    _buffer: list[str]
    _start: SourceLocation | None
    _source_file: str | None
    _lineno: int

    def _commit(self, token: Token) -> Iterator[Token]:
        """Flush the pending slot, then emit token."""
        raise NotImplementedError

    def _return_to_default(self) -> None:
        raise NotImplementedError

    def _try_classify_block_end(self, line: str) -> BlockDelimiter | None:
        raise NotImplementedError

    def _construct_block(
        self,
        block_type: str | None,
        args: str,
        lines: list[str],
        start: SourceLocation,
    ) -> Token:
        raise NotImplementedError

    def _scan_block_content(self, line: str) -> Iterator[Token]:
        """Scan a line inside a block.

        Yields:
            The block's token (located at the BEGIN line) when the
            matching #+END line is found.

        Raises:
            BlockMismatchError: If the #+END type differs from the #+BEGIN type.
        """
        closing = self._try_classify_block_end(line)
        if closing is None:
            self._buffer.append(line)
            return

        if closing.block_type != self._block_type:
            raise BlockMismatchError(
                self._block_type,
                closing.block_type,
                lineno=self._lineno,
                source_file=self._source_file,
            )

        assert self._start is not None
        token = self._construct_block(
            self._block_type,
            self._block_args,
            self._buffer,
            self._start,
        )
        self._return_to_default()
        yield from self._commit(token)
