"""
'      _
'  ___| |_ _ __ ___  __ _ _ __ ___  _   _
' / __| __| '__/ _ \/ _` | '_ ` _ \| | | |
' \__ \ |_| | |  __/ (_| | | | | | | |_| |
' |___/\__|_|  \___|\__,_|_| |_| |_|\__, |
'                                   |___/
"""

# expose the main classes
from .stream import Stream, IStream
from .cursor import Cursor
from .optional import Optional, AbsentValueError

# expose the factory functions
from .factories import (
    from_supplier,
    from_array,
    from_iterable,
    single,
    of,
    empty,
    from_range,
    repeat,
    generate,
    S
)

# expose the materialize helper used by the buffering operators
from .extensions.terminal import to_ordered_list, TerminalAccessor

# define what `import *` does
__all__ = [
    "Stream",
    "IStream",
    "Cursor",
    "Optional",
    "AbsentValueError",
    "from_supplier",
    "from_array",
    "from_iterable",
    "single",
    "of",
    "empty",
    "from_range",
    "repeat",
    "generate",
    "S",
    "to_ordered_list",
    "TerminalAccessor"
]
