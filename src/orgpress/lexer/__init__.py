"""Line-oriented state-machine lexer for orgpress.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer, LexerMode
├── core.py              # Lexer class (mixin composition + emission)
├── modes.py             # LexerMode enum, block type constants
├── classifiers/         # Single-line classification mixins
│   ├── heading.py       # * TODO [#A] Title :tags: [1/2]
│   ├── planning.py      # DEADLINE: ... below a heading
│   ├── drawer.py        # :NAME: / :END:
│   ├── block.py         # #+BEGIN / #+END and block token construction
│   ├── keyword.py       # # comment, #+KEY: value
│   └── table.py         # | cell | cell |
└── scanners/            # Mode-specific scanners
    ├── default.py       # DEFAULT mode (main dispatch, pending slot)
    ├── drawer.py        # DRAWER mode
    └── block.py         # BLOCK mode

Usage:
    >>> from orgpress.lexer import Lexer
    >>> [t.type.name for t in Lexer("#+TITLE: hi\\n* Heading").tokenize()]
    ['KEYWORD', 'HEADING']

"""

from orgpress.lexer.core import Lexer
from orgpress.lexer.modes import LexerMode

__all__ = ["Lexer", "LexerMode"]
