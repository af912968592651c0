"""Top-level node framings.

This module provides readers and writers for the named, unnamed and plain
framings of a single node.
"""

from __future__ import annotations

from .entries import (
    Framing,
    read_named,
    read_plain,
    read_unnamed,
    write_named,
    write_plain,
    write_unnamed,
)

__all__ = [
    "Framing",
    "read_named",
    "read_unnamed",
    "read_plain",
    "write_named",
    "write_unnamed",
    "write_plain",
]
