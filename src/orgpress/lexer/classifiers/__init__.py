"""Line classifiers for the orgpress lexer.

Each classifier is a mixin that decides whether a single line matches
one construct. Classifiers never change lexer state; scanners do.
"""

from orgpress.lexer.classifiers.block import (
    BlockClassifierMixin,
    BlockDelimiter,
)
from orgpress.lexer.classifiers.drawer import (
    DrawerClassifierMixin,
)
from orgpress.lexer.classifiers.heading import (
    HeadingClassifierMixin,
)
from orgpress.lexer.classifiers.keyword import (
    KeywordClassifierMixin,
)
from orgpress.lexer.classifiers.planning import (
    PlanningClassifierMixin,
)
from orgpress.lexer.classifiers.table import (
    TableClassifierMixin,
)

__all__ = [
    "BlockClassifierMixin",
    "BlockDelimiter",
    "DrawerClassifierMixin",
    "HeadingClassifierMixin",
    "KeywordClassifierMixin",
    "PlanningClassifierMixin",
    "TableClassifierMixin",
]
