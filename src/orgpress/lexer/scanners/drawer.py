"""Drawer mode scanner mixin."""

from collections.abc import Iterator

from orgpress.location import SourceLocation
from orgpress.tokens import DrawerToken, Token


class DrawerScannerMixin:
    """Mixin providing drawer mode scanning logic.

    Every line up to the closing :END: is kept verbatim.

    """

    # These will be set by the Lexer class
    _drawer_name: str
    _buffer: list[str]
    _start: SourceLocation | None

    def _commit(self, token: Token) -> Iterator[Token]:
        """Flush the pending slot, then emit token."""
        raise NotImplementedError

    def _return_to_default(self) -> None:
        raise NotImplementedError

    def _is_drawer_end(self, line: str) -> bool:
        """Check for :END:. Implemented by DrawerClassifierMixin."""
        raise NotImplementedError

    def _scan_drawer_content(self, line: str) -> Iterator[Token]:
        """Scan a line inside a drawer.

        Yields:
            DrawerToken located at the opening line when :END: is found.
        """
        if not self._is_drawer_end(line):
            self._buffer.append(line)
            return

        assert self._start is not None
        token = DrawerToken(
            location=self._start,
            name=self._drawer_name,
            contents=tuple(self._buffer),
        )
        self._return_to_default()
        yield from self._commit(token)
