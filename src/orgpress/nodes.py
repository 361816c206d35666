"""Typed document nodes for orgpress.

All nodes are frozen dataclasses with slots, so a Document is read-only
once the parser hands it out.

Node Hierarchy:
Document
└── Section (one per heading, plus the preamble)
    └── Node
        ├── Heading
        ├── Paragraph
        ├── LesserBlock (src/verse/example/export, and greater blocks)
        └── Table

Thread Safety:
All nodes are frozen (immutable) and safe to share across threads.

"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType


@dataclass(frozen=True, slots=True)
class Node:
    """Base class for section content."""


@dataclass(frozen=True, slots=True)
class Heading(Node):
    """Section heading.

    Org: * TODO Title :tag:
    HTML: <h1>Title</h1>

    """

    level: int
    title: str
    todo_state: str | None = None
    tags: tuple[str, ...] = ()
    commented: bool = False


@dataclass(frozen=True, slots=True)
class Paragraph(Node):
    """Paragraph text. Newlines are soft breaks rendered as <br />."""

    text: str


@dataclass(frozen=True, slots=True)
class LesserBlock(Node):
    """A BEGIN/END block with its contents joined into one string.

    Greater blocks share this shape; the renderer decides which block
    types it can produce output for.

    """

    block_type: str
    args: tuple[str, ...]
    contents: str


@dataclass(frozen=True, slots=True)
class Table(Node):
    """Pipe table, one tuple of cell texts per source row."""

    rows: tuple[tuple[str, ...], ...]


@dataclass(frozen=True, slots=True)
class Section:
    """Nodes under one heading.

    The heading itself is the first node. ``commented`` is fixed from the
    heading when the section is created; commented sections are skipped
    by the renderer.

    """

    nodes: tuple[Node, ...] = ()
    commented: bool = False

    @property
    def heading(self) -> Heading | None:
        """The heading that opened this section (None for the preamble)."""
        if self.nodes and isinstance(self.nodes[0], Heading):
            return self.nodes[0]
        return None


def _empty_metadata() -> Mapping[str, str]:
    return MappingProxyType({})


@dataclass(frozen=True, slots=True)
class Document:
    """Parsed document.

    Attributes:
        metadata: Keyword values (``#+TITLE:`` -> ``title``), last write wins
        sections: Preamble section followed by one section per heading

    """

    metadata: Mapping[str, str] = field(default_factory=_empty_metadata)
    sections: tuple[Section, ...] = (Section(),)

    @property
    def preamble(self) -> Section:
        """Content that appears before the first heading."""
        return self.sections[0]

    @property
    def title(self) -> str | None:
        """Value of the ``#+TITLE:`` keyword, if any."""
        return self.metadata.get("title")
