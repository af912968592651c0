"""Document dump and analysis CLI commands."""

from __future__ import annotations

import json
from pathlib import Path

from ..config import LimiterConfig
from ..convert import to_json_compatible
from ..decoder import load
from ..framing import Framing
from ..nodes import ListNode, MapNode, Node, Tag
from ..utils.sizing import encoded_size, max_depth, tag_counts


def read_document(
    file_path: Path, config: LimiterConfig, framing: Framing
) -> tuple[str, Node | None]:
    """Decode a document file.

    Returns:
        (name, node); the name is empty for unnamed and plain framing
    """
    with file_path.open("rb") as fp:
        result = load(fp, config.create_limiter(), framing, strict=True)
    if framing is Framing.NAMED:
        if result is None:
            return "", None
        name, node = result  # type: ignore[misc]
        return name, node
    return "", result  # type: ignore[return-value]


def dump_file(file_path: Path, config: LimiterConfig, framing: Framing, as_json: bool) -> None:
    """Print the tree stored in a document file.

    Args:
        file_path: Path to the encoded document
        config: Decode limits
        framing: Framing of the top-level node
        as_json: Print JSON instead of an indented tree
    """
    name, node = read_document(file_path, config, framing)
    if as_json:
        print(json.dumps({"name": name, "value": to_json_compatible(node)}, indent=2))
        return
    if node is None:
        print("(end)")
        return
    for line in format_tree(node, name):
        print(line)


def format_tree(node: Node, name: str = "", indent: int = 0) -> list[str]:
    """Render a tree as indented lines."""
    pad = "  " * indent
    label = f"{Tag(node.TAG).name}('{name}')"
    if isinstance(node, MapNode):
        lines = [f"{pad}{label}: {len(node)} entries {{"]
        for key, child in node.items():
            lines.extend(format_tree(child, key, indent + 1))
        lines.append(f"{pad}}}")
        return lines
    if isinstance(node, ListNode):
        element = node.element_type
        kind = Tag(element.TAG).name if element is not None else "END"
        lines = [f"{pad}{label}: {len(node)} entries of {kind} ["]
        for child in node:
            lines.extend(format_tree(child, "", indent + 1))
        lines.append(f"{pad}]")
        return lines
    return [f"{pad}{label}: {node.value!r}"]  # type: ignore[attr-defined]


def analyze_file(file_path: Path, config: LimiterConfig, framing: Framing) -> None:
    """Print statistics about a document file.

    Args:
        file_path: Path to the encoded document
        config: Decode limits
        framing: Framing of the top-level node
    """
    name, node = read_document(file_path, config, framing)

    print("|" * 7, "nbtcodec: NBT Codec", "|" * 7)
    print(f"File: {file_path} ({file_path.stat().st_size} bytes, {framing.value} framing)")
    if node is None:
        print("Document holds no value (end tag only).")
        return

    counts = tag_counts(node)
    total = sum(counts.values())
    size = encoded_size(node, name, framing)

    print(f"Root: {Tag(node.TAG).name} '{name}'")
    print()
    print(f"{'-' * 27} Tags {'-' * 27}")
    for tag in sorted(counts):
        tag_name = Tag(tag).name
        print(f"        {tag_name}{'.' * (40 - len(tag_name))}{counts[tag]}")
    print(f"        total{'.' * 35}{total}")
    print()

    print(f"{'=' * 24} Summary {'=' * 24}")
    print(f"Encoded size: {size} bytes")
    print(f"Maximum depth: {max_depth(node)}")
    if not config.unlimited and config.max_length:
        print(f"Length budget used: {size / config.max_length:.1%}")
    print()
