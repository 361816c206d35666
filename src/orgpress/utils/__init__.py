"""Utility modules for orgpress.

Provides:
- text: escape_html, split_tags for text processing
- logger: get_logger for logging
"""

from orgpress.utils.logger import get_logger
from orgpress.utils.text import escape_html, split_tags

__all__ = [
    "escape_html",
    "get_logger",
    "split_tags",
]
