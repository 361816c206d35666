"""Pipe table row classifier mixin."""


class TableClassifierMixin:
    """Mixin providing table row classification."""

    def _try_classify_table_row(self, line: str) -> tuple[str, ...] | None:
        """Try to classify a line as a table row.

        A row starts with ``|`` and has at least one character after it.
        Cells are the trimmed line split on ``|`` with each piece trimmed,
        so the outer pipes yield an empty first and last cell:

            >>> TableClassifierMixin()._try_classify_table_row("| a | b |")
            ('', 'a', 'b', '')

        Args:
            line: Raw line

        Returns:
            Tuple of cell texts, or None if the line is not a table row.
        """
        if len(line) < 2 or line[0] != "|":
            return None
        return tuple(cell.strip() for cell in line.strip().split("|"))
