"""
gridraw: recognizer for the HI ... BYE grid drawing language

Sentences wrap bar, line and fill actions over a 5x5 grid of coordinates.
Accepted sentences produce a leftmost derivation and a parse tree.
"""

__version__ = "0.1.0"


from ._error import *
from ._grammar import *
from ._token import *
from ._tree import *
from ._lexer import *
from ._parser import *
from ._recognize import *
from ._reference import *
from ._render import *
from ._config import *
