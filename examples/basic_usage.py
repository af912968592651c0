#!/usr/bin/env python3
"""Basic usage example for nbtcodec.

This example demonstrates:
1. Building a tag tree with typed putters
2. Encoding it to the named binary format
3. Decoding it back under a limiter
4. Rejecting hostile input
"""

from __future__ import annotations

from nbtcodec import (
    DoubleNode,
    LimitError,
    Limiter,
    MapNode,
    decode,
    encode,
    encoded_size,
    to_python,
)


def build_player() -> MapNode:
    """Build a small player record."""
    player = MapNode()
    player.put_string("Name", "Steve")
    player.put_short("Health", 20)
    player.put_boolean("OnGround", True)
    player.put_list("Pos", [DoubleNode(0.5), DoubleNode(64.0), DoubleNode(-12.25)])
    player.put_int_array("Scores", [10, 20, 30])
    return player


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("nbtcodec Basic Usage Example")
    print("=" * 60)
    print()

    print("1. Building a player record...")
    player = build_player()
    for key, node in player.items():
        print(f"   {key}: {type(node).__name__}")
    print()

    print("2. Encoding...")
    data = encode(player, "player")
    print(f"   Encoded size: {len(data)} bytes (precomputed: {encoded_size(player, 'player')})")
    print(f"   Hex: {data.hex()}")
    print()

    print("3. Decoding with the reference protocol limiter...")
    limiter = Limiter.reference_protocol()
    name, decoded = decode(data, limiter)  # type: ignore[misc]
    print(f"   Root name: {name!r}")
    print(f"   Bytes charged: {limiter.length}")
    print(f"   Round trip equal: {decoded == player}")
    print(f"   As Python: {to_python(decoded)}")
    print()

    print("4. Rejecting a document over budget...")
    try:
        decode(data, Limiter(max_length=16, max_depth=4))
    except LimitError as e:
        print(f"   Rejected: {type(e).__name__}: {e}")
    print()


if __name__ == "__main__":
    main()
