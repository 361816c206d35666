"""Star heading classifier mixin."""

import re

from orgpress.lexer.modes import ARCHIVE_TAG, COMMENT_KEYWORD
from orgpress.location import SourceLocation
from orgpress.tokens import HeadingToken

# * TODO [#A] Title :tag:other: [1/3]
# The priority cookie is accepted as [#A] and as #[A].
HEADING_PATTERN = re.compile(
    r"^(?P<stars>\*+)\s+"
    r"(?:(?P<todo_state>(?!COMMENT)[A-Z]{2,})\s+)?"
    r"(?:(?:\[#|#\[)(?P<priority>[A-Za-z0-9])\]\s+)?"
    r"(?P<title>.+?)"
    r"(?:\s+(?P<tags>:(?:[\w@#%]+:)+))?"
    r"(?:\s+\[(?P<completion>\d+/\d+|[\d.]+%)\])?"
    r"\s*$"
)


class HeadingClassifierMixin:
    """Mixin providing star heading classification."""

    def _location(self) -> SourceLocation:
        """Location of the current line. Implemented by Lexer."""
        raise NotImplementedError

    def _try_classify_heading(self, line: str) -> HeadingToken | None:
        """Try to classify a line as a heading.

        A heading is a run of stars at column 1 followed by whitespace.
        After the stars come an optional TODO-like keyword (two or more
        capitals, never COMMENT), an optional priority cookie, the title,
        an optional tag cluster and an optional statistics cookie.

        Args:
            line: Raw line

        Returns:
            HeadingToken if the line is a heading, None otherwise.
        """
        if not line.startswith("*"):
            return None

        match = HEADING_PATTERN.match(line)
        if match is None:
            return None

        title = match.group("title").strip()
        raw_tags = match.group("tags")
        tags = tuple(tag for tag in raw_tags.split(":") if tag) if raw_tags else ()

        return HeadingToken(
            location=self._location(),
            level=len(match.group("stars")),
            title=title,
            todo_state=match.group("todo_state"),
            priority=match.group("priority"),
            tags=tags,
            archived=ARCHIVE_TAG in tags,
            commented=title.startswith(COMMENT_KEYWORD),
            completion=match.group("completion"),
        )
