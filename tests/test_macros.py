"""Tests for the listing macro and its context snapshot."""

from datetime import datetime, timedelta, timezone

import pytest

from orgpress.errors import MacroContextError, UndefinedMacroError
from orgpress.location import SourceLocation
from orgpress.macros import MacroContext, expand_macro, render_listing
from orgpress.metadata import ArticleMetadata, ImageMetadata
from orgpress.nodes import Heading, LesserBlock
from orgpress.tokens import MacroToken

SITE = "https://example.org"
WHEN = datetime(2024, 5, 1, 12, 30)


def article(path: str, **kwargs) -> ArticleMetadata:
    kwargs.setdefault("title", path)
    return ArticleMetadata(url=f"{SITE}/{path}", modified=WHEN, **kwargs)


def listing(*args: str) -> MacroToken:
    return MacroToken(SourceLocation(7, "index.org"), name="listing", args=args)


class TestMacroContext:
    def test_from_records_keeps_articles_only(self) -> None:
        records = [article("a.html"), ImageMetadata(f"{SITE}/logo.png"), article("b.html")]
        context = MacroContext.from_records(SITE, records)

        assert [a.url for a in context.articles] == [f"{SITE}/a.html", f"{SITE}/b.html"]

    def test_articles_under_prefix(self) -> None:
        context = MacroContext(
            SITE,
            (article("blog/one.html"), article("about.html"), article("blog/two.html")),
        )

        assert [a.title for a in context.articles_under("/blog")] == [
            "blog/one.html",
            "blog/two.html",
        ]

    def test_empty_prefix_matches_everything(self) -> None:
        context = MacroContext(SITE, (article("a.html"), article("x/b.html")))
        assert len(context.articles_under("")) == 2

    def test_is_frozen(self) -> None:
        context = MacroContext(SITE)
        with pytest.raises(AttributeError):
            context.articles = ()  # type: ignore[misc]


class TestExpandMacro:
    def test_listing_section(self) -> None:
        context = MacroContext(SITE, (article("blog/one.html", title="One"),))
        section = expand_macro(listing("/blog"), context)

        assert section.commented is False
        heading, block = section.nodes
        assert heading == Heading(1, "Articles")
        assert isinstance(block, LesserBlock)
        assert block.block_type == "export"
        assert block.args == ("html",)
        assert block.contents.startswith('<div class="articles">')

    def test_listing_without_prefix(self) -> None:
        context = MacroContext(SITE, (article("a.html"), article("b/c.html")))
        section = expand_macro(listing(), context)

        assert section.nodes[1].contents.count('class="article-card"') == 2

    def test_missing_context(self) -> None:
        with pytest.raises(MacroContextError, match="index.org:7"):
            expand_macro(listing("/blog"), None)

    def test_undefined_name(self) -> None:
        token = MacroToken(SourceLocation(3), name="clocktable")
        with pytest.raises(UndefinedMacroError) as exc_info:
            expand_macro(token, MacroContext(SITE))

        assert exc_info.value.name == "clocktable"
        assert exc_info.value.lineno == 3

    def test_undefined_name_carries_file(self) -> None:
        token = MacroToken(SourceLocation(7, "index.org"), name="toc")
        with pytest.raises(UndefinedMacroError) as exc_info:
            expand_macro(token, MacroContext(SITE))

        assert str(exc_info.value) == "index.org:7 undefined macro 'toc'"
        assert exc_info.value.source_file == "index.org"


class TestRenderListing:
    def test_empty(self) -> None:
        assert render_listing([]) == '<div class="articles"></div>'

    def test_minimal_card(self) -> None:
        html = render_listing([article("p.html", title="Post")])

        assert html == (
            '<div class="articles">'
            f'<a href="{SITE}/p.html" class="article-card">'
            '<div data-title="Post" data-last-modified="2024-05-01T12:30:00+00:00">'
            '<p class="card-title">Post</p>'
            '<div><span class="card-time">2024-05-01T12:30:00+00:00</span></div>'
            "</div></a>"
            "</div>"
        )

    def test_full_card(self) -> None:
        html = render_listing(
            [
                article(
                    "p.html",
                    title="Post",
                    author="Ada",
                    description="About things",
                    tags=("a", "b"),
                )
            ]
        )

        assert (
            '<div data-title="Post" data-last-modified="2024-05-01T12:30:00+00:00" '
            'data-description="About things" data-author="Ada" data-tags="a, b">'
        ) in html
        assert "<p>About things</p>" in html
        assert '<span class="card-author">Ada</span>' in html

    def test_values_escaped(self) -> None:
        html = render_listing([article("p.html", title='<b>"Bold"</b> & co')])

        assert 'data-title="&lt;b&gt;&quot;Bold&quot;&lt;/b&gt; &amp; co"' in html
        assert "<b>" not in html

    def test_stamp_converted_to_utc(self) -> None:
        paris = timezone(timedelta(hours=2))
        modified = datetime(2024, 5, 1, 14, 30, tzinfo=paris)
        card = ArticleMetadata("Post", f"{SITE}/p.html", modified)

        html = render_listing([card])

        assert 'data-last-modified="2024-05-01T12:30:00+00:00"' in html

    def test_collection_order_preserved(self) -> None:
        html = render_listing([article("z.html", title="Z"), article("a.html", title="A")])
        assert html.index('"card-title">Z') < html.index('"card-title">A')
