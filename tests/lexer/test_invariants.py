"""Property-based tests for lexer and parser invariants using Hypothesis.

These tests verify that certain properties always hold regardless
of the input, helping catch edge cases that example-based tests miss.
"""

from hypothesis import given, settings
from hypothesis import strategies as st

from orgpress import parse
from orgpress.lexer import Lexer
from orgpress.nodes import Paragraph, Table
from orgpress.tokens import TokenType

# Text without the characters that open drawers and blocks, so every
# input lexes successfully.
safe_text = st.text(alphabet="*abcTODOMENT \t|\n.-_", max_size=400)

word = st.text(alphabet="abcxyz", min_size=1, max_size=8)
row_line = st.lists(word, min_size=1, max_size=4).map(lambda cells: "|" + "|".join(cells) + "|")


class TestBasicInvariants:
    """Test basic invariants that should always hold."""

    @given(safe_text)
    @settings(max_examples=200)
    def test_never_crashes(self, source: str) -> None:
        """Text without drawers or blocks always tokenizes."""
        list(Lexer(source).tokenize())

    @given(safe_text)
    @settings(max_examples=200)
    def test_no_empty_lines_emitted(self, source: str) -> None:
        tokens = list(Lexer(source).tokenize())
        assert all(t.type is not TokenType.EMPTY_LINE for t in tokens)

    @given(safe_text)
    @settings(max_examples=100)
    def test_locations_in_range(self, source: str) -> None:
        line_count = len(source.split("\n"))
        tokens = list(Lexer(source).tokenize())

        for token in tokens:
            assert 1 <= token.lineno <= line_count

    @given(safe_text)
    @settings(max_examples=100)
    def test_locations_non_decreasing(self, source: str) -> None:
        tokens = list(Lexer(source).tokenize())
        linenos = [t.lineno for t in tokens]
        assert linenos == sorted(linenos)


class TestSectionCount:
    @given(safe_text)
    @settings(max_examples=200)
    def test_one_section_per_heading_plus_preamble(self, source: str) -> None:
        headings = sum(1 for t in Lexer(source).tokenize() if t.type is TokenType.HEADING)
        doc = parse(source)
        assert len(doc.sections) == 1 + headings


class TestTableRuns:
    @given(st.lists(row_line, min_size=1, max_size=12))
    @settings(max_examples=100)
    def test_run_collapses_into_one_table(self, rows: list[str]) -> None:
        doc = parse("\n".join(rows))
        tables = [n for n in doc.preamble.nodes if isinstance(n, Table)]

        assert len(tables) == 1
        assert len(tables[0].rows) == len(rows)

    @given(st.lists(word, min_size=1, max_size=6))
    @settings(max_examples=50)
    def test_cell_count_is_pipes_plus_one(self, cells: list[str]) -> None:
        line = "|" + "|".join(cells) + "|"
        doc = parse(line)
        [table] = doc.preamble.nodes
        assert len(table.rows[0]) == line.count("|") + 1


class TestParagraphMergeLaw:
    @given(word, word)
    def test_unindented_line_joins_with_newline(self, a: str, b: str) -> None:
        [paragraph] = parse(f"{a}\n{b}").preamble.nodes
        assert paragraph == Paragraph(f"{a}\n{b}")

    @given(word, word, st.integers(min_value=1, max_value=8))
    def test_indented_line_joins_with_space(self, a: str, b: str, indent: int) -> None:
        [paragraph] = parse(f"{a}\n{' ' * indent}{b}").preamble.nodes
        assert paragraph == Paragraph(f"{a} {b}")
