"""Tests for limiter configuration."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from nbtcodec import Limiter, LimiterConfig
from nbtcodec.limiter import REFERENCE_MAX_DEPTH, REFERENCE_MAX_LENGTH


class TestLimiterConfig:
    """Test LimiterConfig validation and limiter creation."""

    def test_defaults_match_reference(self) -> None:
        """Test the default configuration is the reference protocol."""
        config = LimiterConfig()
        assert config == LimiterConfig.reference_protocol()
        assert config.max_length == REFERENCE_MAX_LENGTH
        assert config.max_depth == REFERENCE_MAX_DEPTH
        assert config.allow_long_arrays
        assert not config.strict_empty_names
        assert not config.quick_exceptions

    def test_create_limiter(self) -> None:
        """Test the limiter carries every setting."""
        config = LimiterConfig(
            max_length=4096,
            max_depth=16,
            strict_empty_names=True,
            allow_long_arrays=False,
            quick_exceptions=True,
        )
        limiter = config.create_limiter()
        assert limiter.max_length == 4096
        assert limiter.max_depth == 16
        assert limiter.strict_empty_names
        assert not limiter.allow_long_arrays
        assert limiter.quick_exceptions

    def test_fresh_limiter_each_time(self) -> None:
        """Test every call creates an independent limiter."""
        config = LimiterConfig()
        first = config.create_limiter()
        first.read_unsigned(100)
        assert config.create_limiter().length == 0

    def test_unlimited(self) -> None:
        """Test the unlimited configuration uses the shared unlimited limiter."""
        assert LimiterConfig.unlimited_config().create_limiter() is Limiter.unlimited()

    def test_from_dict(self) -> None:
        """Test building from a dictionary, as loaded from a settings file."""
        config = LimiterConfig.model_validate({"max_length": "1024", "max_depth": 8})
        assert config.max_length == 1024

    def test_negative_rejected(self) -> None:
        """Test negative budgets are rejected."""
        with pytest.raises(ValidationError):
            LimiterConfig(max_length=-1)
        with pytest.raises(ValidationError):
            LimiterConfig(max_depth=-5)

    def test_unknown_field_rejected(self) -> None:
        """Test misspelled options are rejected."""
        with pytest.raises(ValidationError):
            LimiterConfig(max_lenght=10)  # type: ignore[call-arg]

    def test_frozen(self) -> None:
        """Test configurations are immutable."""
        config = LimiterConfig()
        with pytest.raises(ValidationError):
            config.max_depth = 3  # type: ignore[misc]
