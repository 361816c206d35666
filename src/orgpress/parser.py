"""Document assembler.

Folds the token sequence produced by the Lexer into a Document: keyword
lines fill the metadata map, every heading opens a new section, and text,
tables and blocks are appended to the current section. Dynamic blocks are
expanded through orgpress.macros.

Thread Safety:
Parser instances are single-use and not thread-safe. Create one per
document. The resulting Document is immutable and thread-safe.

"""

from __future__ import annotations

from collections.abc import Iterable
from types import MappingProxyType

from orgpress.macros import MacroContext, expand_macro
from orgpress.nodes import Document, Heading, LesserBlock, Node, Paragraph, Section, Table
from orgpress.tokens import (
    CommentToken,
    DrawerToken,
    GreaterBlockToken,
    HeadingToken,
    KeywordToken,
    LesserBlockToken,
    MacroToken,
    ParagraphToken,
    PlanningToken,
    TableToken,
    Token,
)
from orgpress.utils.logger import get_logger

logger = get_logger(__name__)


class Parser:
    """Assemble a Document from tokens.

    Usage:
            >>> from orgpress.lexer import Lexer
            >>> doc = Parser(Lexer("#+TITLE: hi\\n* Intro").tokenize()).parse()
            >>> doc.metadata["title"], len(doc.sections)
            ('hi', 2)

    Args:
        tokens: Token stream from the Lexer (consumed once)
        context: Cross-document snapshot for the listing macro
        expand_macros: When False, macro tokens are skipped rather than
            expanded (used while collecting metadata, before any context
            exists)

    """

    __slots__ = (
        "_tokens",
        "_context",
        "_expand_macros",
        "_metadata",
        "_sections",
    )

    def __init__(
        self,
        tokens: Iterable[Token],
        context: MacroContext | None = None,
        *,
        expand_macros: bool = True,
    ) -> None:
        self._tokens = tokens
        self._context = context
        self._expand_macros = expand_macros
        self._metadata: dict[str, str] = {}
        # (nodes, commented) per section; the preamble is always first
        self._sections: list[tuple[list[Node], bool]] = [([], False)]

    def parse(self) -> Document:
        """Fold all tokens into a Document.

        Returns:
            Document with the preamble section first

        Raises:
            ParseError: Propagated from the lexer when tokens are lexed lazily.
            MacroError: If a macro is undefined or lacks its context.
        """
        for token in self._tokens:
            self._handle(token)

        return Document(
            metadata=MappingProxyType(dict(self._metadata)),
            sections=tuple(Section(tuple(nodes), commented) for nodes, commented in self._sections),
        )

    def _handle(self, token: Token) -> None:
        match token:
            case HeadingToken():
                heading = Heading(
                    level=token.level,
                    title=token.title,
                    todo_state=token.todo_state,
                    tags=token.tags,
                    commented=token.commented,
                )
                self._sections.append(([heading], token.commented))
            case ParagraphToken():
                self._append(Paragraph(token.text))
            case TableToken():
                self._append(Table(token.rows))
            case LesserBlockToken() | GreaterBlockToken():
                self._append(
                    LesserBlock(
                        block_type=token.block_type,
                        args=tuple(token.args.split()),
                        contents="\n".join(token.contents),
                    )
                )
            case KeywordToken():
                self._metadata[token.name] = token.content
            case MacroToken():
                self._handle_macro(token)
            case CommentToken() | PlanningToken() | DrawerToken():
                pass

    def _handle_macro(self, token: MacroToken) -> None:
        if not self._expand_macros:
            logger.debug("Skipping macro %r at %s", token.name, token.location)
            return

        section = expand_macro(token, self._context)
        self._sections.append((list(section.nodes), section.commented))

    def _append(self, node: Node) -> None:
        self._sections[-1][0].append(node)
