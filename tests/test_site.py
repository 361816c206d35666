"""Tests for the two-phase site build."""

import logging
from datetime import datetime, timezone

import pytest

from orgpress.config import OrgConfig, config_context, get_config
from orgpress.errors import (
    BlockMismatchError,
    NotImplementedRenderError,
    SourceReadError,
    UndefinedMacroError,
    UnexpectedEndOfInputError,
)
from orgpress.metadata import ArticleMetadata, ImageMetadata
from orgpress.site import SourceFile, build_site

SITE = "https://example.org"
WHEN = datetime(2024, 6, 1, 9, 0, tzinfo=timezone.utc)

INDEX = "#+TITLE: Home\n* Latest\n#+BEGIN: listing /blog\n#+END\n"


def org(path: str, content: str, **kwargs) -> SourceFile:
    return SourceFile(path, content, WHEN, **kwargs)


class TestBuild:
    def test_listing_sees_every_sibling(self) -> None:
        # The index comes first, so its listing is rendered only after
        # every other document has been extracted.
        build = build_site(
            [
                org("index.org", INDEX),
                org("blog/one.org", "#+TITLE: One\ntext"),
                org("blog/two.org", "#+TITLE: Two\n#+AUTHOR: Ada"),
                org("about.org", "#+TITLE: About"),
            ],
            SITE,
        )

        assert build.ok
        html = build.pages["index.org"].html
        assert f'href="{SITE}/blog/one.html"' in html
        assert f'href="{SITE}/blog/two.html"' in html
        assert "about.html" not in html
        assert html.index(">One<") < html.index(">Two<")

    def test_metadata_in_source_order(self) -> None:
        build = build_site(
            [
                org("b.org", "#+TITLE: B"),
                SourceFile("logo.png", None, WHEN),
                org("a.org", "#+TITLE: A"),
            ],
            SITE,
        )

        assert build.metadata == (
            ArticleMetadata("B", f"{SITE}/b.html", WHEN),
            ImageMetadata(f"{SITE}/logo.png"),
            ArticleMetadata("A", f"{SITE}/a.html", WHEN),
        )

    def test_naive_modified_time_stamped_as_utc(self) -> None:
        naive = datetime(2024, 6, 1, 9, 0)
        build = build_site(
            [SourceFile("index.org", INDEX, naive), SourceFile("blog/p.org", "#+TITLE: P", naive)],
            SITE,
        )

        assert build.metadata[1].modified == WHEN
        assert 'data-last-modified="2024-06-01T09:00:00+00:00"' in build.pages["index.org"].html

    def test_pages(self) -> None:
        build = build_site([org("blog/post.org", "#+TITLE: Post\n* Hi")], SITE + "/")

        page = build.pages["blog/post.org"]
        assert page.output_path == "blog/post.html"
        assert page.html == '<div class="article"><h1>Hi</h1></div>'
        assert page.context == {"title": "Post", "content": page.html}
        assert build.metadata[0].url == f"{SITE}/blog/post.html"

    def test_images_and_other_files_produce_no_page(self) -> None:
        build = build_site(
            [SourceFile("logo.png", None, WHEN), SourceFile("style.css", "body {}", WHEN)],
            SITE,
        )

        assert build.pages == {}
        assert build.errors == {}
        assert build.metadata == (ImageMetadata(f"{SITE}/logo.png"),)

    def test_empty_build(self) -> None:
        build = build_site([], SITE)
        assert build.pages == {} and build.metadata == () and build.ok


class TestPerDocumentErrors:
    def test_failures_do_not_stop_the_build(self) -> None:
        build = build_site(
            [
                org("good.org", "* Fine"),
                org("drawer.org", "  :PROPERTIES:\n  :ID: 1"),
                org("macro.org", "#+BEGIN: toc\n#+END"),
                org("quote.org", "#+BEGIN_QUOTE\nq\n#+END_QUOTE"),
                org("unreadable.org", None, read_error="permission denied"),
            ],
            SITE,
        )

        assert set(build.pages) == {"good.org"}
        assert isinstance(build.errors["drawer.org"], UnexpectedEndOfInputError)
        assert isinstance(build.errors["macro.org"], UndefinedMacroError)
        assert str(build.errors["macro.org"]).startswith("macro.org:1 ")
        assert isinstance(build.errors["quote.org"], NotImplementedRenderError)
        assert isinstance(build.errors["unreadable.org"], SourceReadError)
        assert not build.ok

    def test_failed_extraction_skips_rendering(self) -> None:
        build = build_site([org("broken.org", "#+BEGIN_SRC\n")], SITE)

        assert build.pages == {}
        assert build.metadata == ()
        assert list(build.errors) == ["broken.org"]

    def test_text_source_without_content(self) -> None:
        build = build_site([SourceFile("empty.org", None, WHEN)], SITE)
        assert isinstance(build.errors["empty.org"], SourceReadError)

    def test_failures_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="orgpress"):
            build_site([org("bad.org", "  :d:")], SITE)

        assert any("bad.org" in r.getMessage() for r in caplog.records)


class TestBlockMismatch:
    SOURCES = [org("ok.org", "* Fine"), org("bad.org", "#+BEGIN_SRC\nx\n#+END_EXAMPLE")]

    def test_aborts_by_default(self) -> None:
        with pytest.raises(BlockMismatchError):
            build_site(self.SOURCES, SITE)

    def test_recorded_when_downgraded(self) -> None:
        build = build_site(
            self.SOURCES, SITE, config=OrgConfig(abort_on_block_mismatch=False)
        )

        assert isinstance(build.errors["bad.org"], BlockMismatchError)
        assert set(build.pages) == {"ok.org"}


class TestConfiguration:
    def test_config_argument(self) -> None:
        build = build_site(
            [org("a.org", "text")],
            SITE,
            config=OrgConfig(article_class="post", max_workers=1),
        )
        assert build.pages["a.org"].html == '<div class="post"><p>text</p></div>'

    def test_context_config_used_by_default(self) -> None:
        with config_context(OrgConfig(article_class="entry")):
            build = build_site([org("a.org", "text")], SITE)

        assert build.pages["a.org"].html.startswith('<div class="entry">')

    def test_config_restored_afterwards(self) -> None:
        before = get_config()
        build_site([org("a.org", "x")], SITE, config=OrgConfig(article_class="other"))
        assert get_config() is before


class TestSourceFile:
    def test_suffix_checks(self) -> None:
        assert org("A.ORG", "").is_org
        assert SourceFile("pic.GIF", None, WHEN).is_image
        assert not org("notes.txt", "").is_org

    def test_text(self) -> None:
        assert org("a.org", "body").text() == "body"

    def test_text_with_read_error(self) -> None:
        source = org("a.org", None, read_error="gone")
        with pytest.raises(SourceReadError, match="cannot read a.org: gone"):
            source.text()
