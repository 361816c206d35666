"""Mode-specific scanners for the orgpress lexer.

Each scanner is a mixin that provides scanning logic for one lexer
mode (DEFAULT, DRAWER, BLOCK).
"""

from __future__ import annotations

from orgpress.lexer.scanners.block import BlockScannerMixin
from orgpress.lexer.scanners.default import DefaultScannerMixin
from orgpress.lexer.scanners.drawer import DrawerScannerMixin

__all__ = [
    "BlockScannerMixin",
    "DefaultScannerMixin",
    "DrawerScannerMixin",
]
