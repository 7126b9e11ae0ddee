"""Render the management tree as indented text lines."""

import logging

from hierarchy.org.errors import MissingRootError
from hierarchy.org.models import Node, Tree

logger = logging.getLogger(__name__)

DEFAULT_INDENT = "\t"


def format_row(name: str, depth: int, indent: str = DEFAULT_INDENT) -> str:
    return indent * depth + name


def walk(tree: Tree) -> list[tuple[Node, int]]:
    """Pre-order (node, depth) pairs from the root, children in arrival order."""
    if tree.root is None:
        raise MissingRootError()

    visited: list[tuple[Node, int]] = []
    stack = [(tree.root, 0)]
    while stack:
        node, depth = stack.pop()
        visited.append((node, depth))
        stack.extend((child, depth + 1) for child in reversed(node.children))
    return visited


def render(tree: Tree, indent: str = DEFAULT_INDENT) -> list[str]:
    lines = [format_row(node.name, depth, indent) for node, depth in walk(tree)]
    logger.info("Rendered %d hierarchy rows", len(lines))
    return lines
