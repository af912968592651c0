"""Limiter configuration.

This module provides a validated, immutable description of a decode policy
that can be built from keyword arguments, dictionaries or command line
options, and turned into fresh Limiter instances on demand.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .limiter import REFERENCE_MAX_DEPTH, REFERENCE_MAX_LENGTH, Limiter


class LimiterConfig(BaseModel):
    """Decode budget and policy flags.

    Example:
        >>> config = LimiterConfig(max_length=4096, max_depth=16)
        >>> limiter = config.create_limiter()
        >>> limiter.max_depth
        16

    Attributes:
        max_length: Maximum bytes one decode may consume (default 2097152)
        max_depth: Maximum container nesting depth (default 512)
        unlimited: Ignore the budgets and use the shared unlimited limiter
        strict_empty_names: Reject non-empty names in unnamed reads
        allow_long_arrays: Accept the long array type (disable for protocol
            versions that predate it)
        quick_exceptions: Raise shared preallocated exceptions on failure
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        strict=False,
    )

    max_length: int = Field(default=REFERENCE_MAX_LENGTH, ge=0)
    max_depth: int = Field(default=REFERENCE_MAX_DEPTH, ge=0)
    unlimited: bool = False
    strict_empty_names: bool = False
    allow_long_arrays: bool = True
    quick_exceptions: bool = False

    @classmethod
    def reference_protocol(cls) -> LimiterConfig:
        """Return the configuration matching the reference protocol limits."""
        return cls()

    @classmethod
    def unlimited_config(cls) -> LimiterConfig:
        """Return a configuration that trusts its input completely."""
        return cls(unlimited=True)

    def create_limiter(self) -> Limiter:
        """Create a fresh limiter for one decode pass."""
        if self.unlimited:
            return Limiter.unlimited()
        return Limiter(
            self.max_length,
            self.max_depth,
            strict_empty_names=self.strict_empty_names,
            allow_long_arrays=self.allow_long_arrays,
            quick_exceptions=self.quick_exceptions,
        )
