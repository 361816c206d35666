"""Planning line classifier mixin."""

import re

from orgpress.location import SourceLocation
from orgpress.tokens import HeadingToken, PlanningToken, Token

# Indented KEYWORD: value (DEADLINE: <2024-01-01>, CLOSED: [...])
PLANNING_PATTERN = re.compile(r"^\s+(?P<kind>\w+):\s*(?P<value>.+)")


class PlanningClassifierMixin:
    """Mixin providing planning line classification.

    Planning lines are only recognized directly below a heading or
    another planning line; anywhere else the same text is a paragraph.

    """

    def _location(self) -> SourceLocation:
        """Location of the current line. Implemented by Lexer."""
        raise NotImplementedError

    def _try_classify_planning(self, line: str, previous: Token | None) -> PlanningToken | None:
        """Try to classify a line as a planning line.

        Args:
            line: Raw line
            previous: The token produced for the preceding line(s)

        Returns:
            PlanningToken if the line is a planning line in a valid
            position, None otherwise.
        """
        if not isinstance(previous, (HeadingToken, PlanningToken)):
            return None

        match = PLANNING_PATTERN.match(line)
        if match is None:
            return None

        return PlanningToken(
            location=self._location(),
            kind=match.group("kind"),
            value=match.group("value").rstrip(),
        )
