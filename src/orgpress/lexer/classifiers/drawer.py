"""Drawer classifier mixin."""

import re

# Drawers open on an indented :NAME: line and close on :END:
DRAWER_START_PATTERN = re.compile(r"^\s+:(?P<name>[\w-]+):")
DRAWER_END_PATTERN = re.compile(r"^\s*:end:", re.IGNORECASE)


class DrawerClassifierMixin:
    """Mixin providing drawer open/close classification."""

    def _try_classify_drawer_start(self, line: str) -> str | None:
        """Check if line opens a drawer.

        Args:
            line: Raw line

        Returns:
            Drawer name if the line opens a drawer, None otherwise.
        """
        match = DRAWER_START_PATTERN.match(line)
        if match is None:
            return None
        return match.group("name")

    def _is_drawer_end(self, line: str) -> bool:
        """Check if line closes the open drawer (case-insensitive :END:)."""
        return DRAWER_END_PATTERN.match(line) is not None
