"""ContextVar-based configuration for orgpress.

Provides thread-local configuration using Python's ContextVars (PEP 567).
The high-level ``Org`` processor and ``build_site`` set it for the
duration of a call; renderers and the site build read it.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed. Worker threads started by the site build run in a
    copy of the submitting context so they see the same configuration.

Usage:
    from orgpress.config import OrgConfig, config_context

    with config_context(OrgConfig(highlight=True)):
        html = render(parse(source))

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class OrgConfig:
    """Immutable processing configuration.

    Attributes:
        highlight: Syntax-highlight src blocks when a highlighter is available
        abort_on_block_mismatch: Let a block open/close type mismatch abort the
            whole site build (True) or record it against the one document (False)
        max_workers: Worker threads per site build phase (None = executor default)
        article_class: CSS class of the wrapper element around a rendered document

    """

    highlight: bool = False
    abort_on_block_mismatch: bool = True
    max_workers: int | None = None
    article_class: str = "article"

    @classmethod
    def from_dict(cls, config_dict: dict) -> "OrgConfig":
        """Create OrgConfig from dictionary.

        Only includes keys that are valid OrgConfig fields; unknown keys
        are silently ignored, so a whole site configuration mapping can be
        passed in.

        Example:
            >>> config = OrgConfig.from_dict({"highlight": True, "site_url": "x"})
            >>> config.highlight
            True

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: OrgConfig = OrgConfig()

_config: ContextVar[OrgConfig] = ContextVar("orgpress_config", default=_DEFAULT_CONFIG)


def get_config() -> OrgConfig:
    """Get current configuration (thread-local)."""
    return _config.get()


def set_config(config: OrgConfig) -> None:
    """Set configuration for current context.

    Only affects the current thread's context.
    """
    _config.set(config)


def reset_config() -> None:
    """Reset to default configuration."""
    _config.set(_DEFAULT_CONFIG)


@contextmanager
def config_context(config: OrgConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with config_context(OrgConfig(highlight=True)):
        ...     get_config().highlight
        True

    """
    previous = _config.get()
    _config.set(config)
    try:
        yield
    finally:
        _config.set(previous)


__all__ = [
    "OrgConfig",
    "config_context",
    "get_config",
    "reset_config",
    "set_config",
]
