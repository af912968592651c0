"""nbtcodec: Named Binary Tag Codec

A Python library for reading and writing the Named Binary Tag (NBT) format: a
recursive, self-describing binary tree of typed scalars, arrays, strings,
lists and keyed maps, used to serialize game and application state.

Decoding runs under a Limiter that bounds the total bytes read and the
nesting depth, so untrusted input is rejected before oversized strings,
arrays or deeply nested containers consume memory or stack.

Key Features:
- Complete tag set: byte, short, int, long, float, double, byte/int/long
  arrays, strings, lists and maps
- Named, unnamed and plain top-level framing
- Byte and depth budgets with reference-protocol presets
- Homogeneous list validation and typed map accessors

Quick Start:
    >>> from nbtcodec import IntNode, MapNode, StringNode, decode, encode
    >>>
    >>> root = MapNode({"a": IntNode(5), "b": StringNode("x")})
    >>> data = encode(root)
    >>> name, decoded = decode(data)
    >>> decoded == root
    True
"""

from __future__ import annotations

__version__ = "0.1.0"

from .config import LimiterConfig
from .decoder import decode, load
from .encoder import dump, encode
from .exceptions import (
    ArithmeticOverflowError,
    DecodeError,
    DepthLimitError,
    DepthUnderflowError,
    EncodeError,
    InvalidLengthError,
    LengthLimitError,
    LimitError,
    ListTypeError,
    MalformedInputError,
    NbtError,
    NegativeLengthError,
    NullNodeError,
    TruncatedInputError,
    UnknownTypeError,
)
from .framing import (
    Framing,
    read_named,
    read_plain,
    read_unnamed,
    write_named,
    write_plain,
    write_unnamed,
)
from .limiter import REFERENCE_MAX_DEPTH, REFERENCE_MAX_LENGTH, Limiter
from .nodes import (
    ByteArrayNode,
    ByteNode,
    DoubleNode,
    FloatNode,
    IntArrayNode,
    IntNode,
    ListNode,
    LongArrayNode,
    LongNode,
    MapNode,
    Node,
    NumericNode,
    ShortNode,
    StringNode,
    Tag,
    reader_for,
    type_tag,
)
from .convert import from_python, to_python
from .utils import encoded_size, intern_strings

__all__ = [
    # Core API
    "encode",
    "decode",
    "dump",
    "load",
    # Nodes
    "Node",
    "NumericNode",
    "Tag",
    "ByteNode",
    "ShortNode",
    "IntNode",
    "LongNode",
    "FloatNode",
    "DoubleNode",
    "ByteArrayNode",
    "StringNode",
    "ListNode",
    "MapNode",
    "IntArrayNode",
    "LongArrayNode",
    "type_tag",
    "reader_for",
    # Limits
    "Limiter",
    "LimiterConfig",
    "REFERENCE_MAX_LENGTH",
    "REFERENCE_MAX_DEPTH",
    # Framing
    "Framing",
    "read_named",
    "read_unnamed",
    "read_plain",
    "write_named",
    "write_unnamed",
    "write_plain",
    # Exceptions
    "NbtError",
    "EncodeError",
    "DecodeError",
    "NegativeLengthError",
    "InvalidLengthError",
    "UnknownTypeError",
    "MalformedInputError",
    "TruncatedInputError",
    "LimitError",
    "LengthLimitError",
    "DepthLimitError",
    "DepthUnderflowError",
    "ArithmeticOverflowError",
    "NullNodeError",
    "ListTypeError",
    # Utilities
    "encoded_size",
    "intern_strings",
    "to_python",
    "from_python",
    # Version
    "__version__",
]
