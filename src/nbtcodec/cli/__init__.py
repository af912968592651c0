"""Command line interface for nbtcodec."""
