"""Source location tracking for error messages and debugging.

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Line-granular source location.

    The lexer works one line at a time, so a location is a line number
    plus the identifier of the source it came from.

    Attributes:
        lineno: Line number (1-indexed)
        source_file: Source identifier (optional)

    Examples:
            >>> loc = SourceLocation(3, "blog/index.org")
            >>> str(loc)
            'blog/index.org:3'

    """

    lineno: int
    source_file: str | None = None

    def __str__(self) -> str:
        """Format location for error messages.

        Returns:
            Formatted string like "file.org:10" or "10"
        """
        if self.source_file:
            return f"{self.source_file}:{self.lineno}"
        return str(self.lineno)
