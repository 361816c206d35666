"""Comment and keyword line classifier mixin."""

import re

from orgpress.location import SourceLocation
from orgpress.tokens import CommentToken, KeywordToken

# "# text" (the space is required; "#text" is a paragraph)
COMMENT_PATTERN = re.compile(r"^#\s+(?P<content>.+)")
# "#+TITLE: value"
KEYWORD_PATTERN = re.compile(r"^#\+(?P<name>[A-Za-z_]+):\s*(?P<value>.+)$")


class KeywordClassifierMixin:
    """Mixin providing comment and keyword classification."""

    def _location(self) -> SourceLocation:
        """Location of the current line. Implemented by Lexer."""
        raise NotImplementedError

    def _try_classify_comment(self, line: str) -> CommentToken | None:
        """Try to classify a line as a ``# text`` comment."""
        if not line.startswith("#"):
            return None

        match = COMMENT_PATTERN.match(line)
        if match is None:
            return None
        return CommentToken(location=self._location(), content=match.group("content").strip())

    def _try_classify_keyword(self, line: str) -> KeywordToken | None:
        """Try to classify a line as a ``#+NAME: value`` keyword.

        The name is lower-cased so ``#+TITLE:`` and ``#+title:`` write the
        same metadata key.
        """
        if not line.startswith("#+"):
            return None

        match = KEYWORD_PATTERN.match(line)
        if match is None:
            return None
        return KeywordToken(
            location=self._location(),
            name=match.group("name").lower(),
            content=match.group("value").strip(),
        )
