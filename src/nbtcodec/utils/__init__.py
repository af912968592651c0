"""Utility functions for nbtcodec.

This module provides size calculation, tree statistics and string interning.
"""

from __future__ import annotations

from .intern import intern_strings
from .sizing import encoded_size, max_depth, payload_size, tag_counts

__all__ = [
    # Sizing functions
    "encoded_size",
    "payload_size",
    "tag_counts",
    "max_depth",
    # Interning
    "intern_strings",
]
