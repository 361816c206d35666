"""Tests for ContextVar-based configuration.

Validates defaults, thread isolation, context manager behavior and
construction from a site configuration mapping.
"""

from threading import Thread

import pytest

from orgpress import (
    Org,
    OrgConfig,
    config_context,
    get_config,
    parse,
    render,
    reset_config,
    set_config,
)


class TestOrgConfigDataclass:
    """Test OrgConfig frozen dataclass behavior."""

    def test_default_values(self) -> None:
        config = OrgConfig()
        assert config.highlight is False
        assert config.abort_on_block_mismatch is True
        assert config.max_workers is None
        assert config.article_class == "article"

    def test_immutability(self) -> None:
        config = OrgConfig()
        with pytest.raises(AttributeError):
            config.highlight = True  # type: ignore[misc]

    def test_from_dict_ignores_unknown_keys(self) -> None:
        config = OrgConfig.from_dict(
            {"site_url": "https://example.org", "max_workers": 2, "article_class": "post"}
        )
        assert config.max_workers == 2
        assert config.article_class == "post"
        assert config.highlight is False

    def test_from_empty_dict(self) -> None:
        assert OrgConfig.from_dict({}) == OrgConfig()


class TestContextVarFunctions:
    """Test get/set/reset functions."""

    def teardown_method(self) -> None:
        """Reset config after each test."""
        reset_config()

    def test_default_config(self) -> None:
        assert get_config() == OrgConfig()

    def test_set_and_get(self) -> None:
        set_config(OrgConfig(article_class="post"))
        assert get_config().article_class == "post"

    def test_reset_restores_default(self) -> None:
        set_config(OrgConfig(highlight=True))
        reset_config()
        assert get_config().highlight is False

    def test_render_reads_config(self) -> None:
        set_config(OrgConfig(article_class="post"))
        assert render(parse("x")) == '<div class="post"><p>x</p></div>'


class TestConfigContext:
    """Test config_context context manager."""

    def test_context_sets_config(self) -> None:
        with config_context(OrgConfig(article_class="inner")):
            assert get_config().article_class == "inner"
        assert get_config().article_class == "article"

    def test_nested_contexts(self) -> None:
        with config_context(OrgConfig(article_class="outer")):
            with config_context(OrgConfig(highlight=True)):
                assert get_config().highlight is True
                assert get_config().article_class == "article"
            assert get_config().article_class == "outer"
        assert get_config() == OrgConfig()

    def test_context_restores_on_exception(self) -> None:
        with pytest.raises(ValueError, match="test"):
            with config_context(OrgConfig(highlight=True)):
                raise ValueError("test")

        assert get_config().highlight is False


class TestThreadIsolation:
    """Test thread-local configuration isolation."""

    def test_thread_isolation(self) -> None:
        results: dict[int, str] = {}

        def worker(thread_id: int) -> None:
            set_config(OrgConfig(article_class=f"c{thread_id}"))
            results[thread_id] = render(parse("* T"))

        threads = [Thread(target=worker, args=(i,)) for i in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        for i in range(4):
            assert results[i] == f'<div class="c{i}"><h1>T</h1></div>'
        assert get_config() == OrgConfig()

    def test_concurrent_org_instances(self) -> None:
        results: dict[int, str] = {}
        orgs = [Org(config=OrgConfig(article_class=f"p{i}")) for i in range(4)]

        def worker(i: int) -> None:
            for _ in range(20):
                results[i] = orgs[i]("text")

        threads = [Thread(target=worker, args=(i,)) for i in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert results == {i: f'<div class="p{i}"><p>text</p></div>' for i in range(4)}
