"""Token and TokenType definitions for the orgpress lexer.

The lexer classifies each input line and produces Token objects that the
parser folds into a Document. Every token carries the location of the
line that started it.

Thread Safety:
Tokens are frozen (immutable) and safe to share across threads.
TokenType is an enum (inherently immutable).

"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import ClassVar

from orgpress.location import SourceLocation


class TokenType(Enum):
    """Token types produced by the lexer.

    Organized by category:
    - Structure (EMPTY_LINE, HEADING, PLANNING)
    - Text (PARAGRAPH, TABLE)
    - Blocks (LESSER_BLOCK, GREATER_BLOCK, DRAWER, MACRO)
    - Directives (KEYWORD, COMMENT)

    """

    # Structure
    EMPTY_LINE = auto()
    HEADING = auto()  # * TODO [#A] Title :tag: [1/2]
    PLANNING = auto()  # DEADLINE: <...> after a heading

    # Text
    PARAGRAPH = auto()
    TABLE = auto()  # | cell | cell |

    # Blocks
    LESSER_BLOCK = auto()  # #+BEGIN_SRC / VERSE / EXAMPLE / EXPORT
    GREATER_BLOCK = auto()  # #+BEGIN_<anything else>
    DRAWER = auto()  # :NAME: ... :END:
    MACRO = auto()  # #+BEGIN: name args ... #+END

    # Directives
    KEYWORD = auto()  # #+NAME: value
    COMMENT = auto()  # # text, #+BEGIN_COMMENT


@dataclass(frozen=True, slots=True)
class Token:
    """Base class for all tokens.

    Attributes:
        location: Location of the line that started this token

    """

    location: SourceLocation
    type: ClassVar[TokenType]

    @property
    def lineno(self) -> int:
        """Line number (convenience accessor)."""
        return self.location.lineno


@dataclass(frozen=True, slots=True)
class EmptyLine(Token):
    """A blank line. Separates paragraphs and tables; never emitted."""

    type = TokenType.EMPTY_LINE


@dataclass(frozen=True, slots=True)
class ParagraphToken(Token):
    """Text not claimed by any other construct.

    Unindented continuation lines are joined with a newline (rendered as
    a line break); indented ones with a single space.

    """

    type = TokenType.PARAGRAPH

    text: str


@dataclass(frozen=True, slots=True)
class TableToken(Token):
    """A run of pipe-table rows.

    Each row is the line split on ``|`` with every cell trimmed, so the
    leading and trailing pipes produce empty edge cells.

    """

    type = TokenType.TABLE

    rows: tuple[tuple[str, ...], ...]


@dataclass(frozen=True, slots=True)
class HeadingToken(Token):
    """A star heading.

    Attributes:
        level: Number of leading stars
        title: Heading text without keyword, priority, tags or cookie
        todo_state: All-caps keyword before the title (e.g. TODO, DONE)
        priority: Single priority character from ``[#A]``
        tags: Tags from the trailing ``:a:b:`` cluster
        archived: True when tags contain ARCHIVED
        commented: True when the title starts with COMMENT
        completion: Statistics cookie without brackets (``1/3`` or ``50%``)

    """

    type = TokenType.HEADING

    level: int
    title: str
    todo_state: str | None = None
    priority: str | None = None
    tags: tuple[str, ...] = ()
    archived: bool = False
    commented: bool = False
    completion: str | None = None


@dataclass(frozen=True, slots=True)
class PlanningToken(Token):
    """An indented ``KEYWORD: value`` line directly below a heading."""

    type = TokenType.PLANNING

    kind: str
    value: str


@dataclass(frozen=True, slots=True)
class LesserBlockToken(Token):
    """A src, verse, example or export block.

    Contents are dedented by the indentation shared by all lines.

    """

    type = TokenType.LESSER_BLOCK

    block_type: str
    args: str
    contents: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class GreaterBlockToken(Token):
    """A block of any other named type. Contents are kept verbatim."""

    type = TokenType.GREATER_BLOCK

    block_type: str
    args: str
    contents: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class KeywordToken(Token):
    """A ``#+NAME: value`` line. The name is lower-cased."""

    type = TokenType.KEYWORD

    name: str
    content: str


@dataclass(frozen=True, slots=True)
class CommentToken(Token):
    """A ``# text`` line or a comment block."""

    type = TokenType.COMMENT

    content: str


@dataclass(frozen=True, slots=True)
class DrawerToken(Token):
    """A named ``:NAME:`` ... ``:END:`` drawer."""

    type = TokenType.DRAWER

    name: str
    contents: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class MacroToken(Token):
    """A dynamic block, ``#+BEGIN: name args`` ... ``#+END``.

    The first word after BEGIN names the macro; the remaining words are
    its arguments.

    """

    type = TokenType.MACRO

    name: str
    args: tuple[str, ...] = ()
    contents: tuple[str, ...] = ()
