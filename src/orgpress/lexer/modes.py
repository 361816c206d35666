"""Lexer operating modes and constants.

This module defines the finite state machine modes for the lexer
and the block type sets used when a block is closed.
"""

from __future__ import annotations

from enum import Enum, auto


class LexerMode(Enum):
    """Lexer operating modes.

    The lexer switches between modes based on context:
    - DEFAULT: Between constructs, classifying each line
    - DRAWER: Inside a :NAME: drawer, waiting for :END:
    - BLOCK: Inside a #+BEGIN block, waiting for the matching #+END

    """

    DEFAULT = auto()
    DRAWER = auto()
    BLOCK = auto()


# Block types whose contents are near-literal text (dedented on close)
LESSER_BLOCK_TYPES = frozenset({"src", "verse", "example", "export"})

# Block type whose contents become a comment token
COMMENT_BLOCK_TYPE = "comment"

# Keyword that marks a heading as commented out
COMMENT_KEYWORD = "COMMENT"

# Tag that marks a heading as archived
ARCHIVE_TAG = "ARCHIVED"
