"""Flatten the resolved tree into a DataFrame with depth and span-of-control metrics."""

import logging

import pandas as pd

from hierarchy.org.models import Node, Tree
from hierarchy.org.render import walk

logger = logging.getLogger(__name__)

FLAT_COLUMNS = ["id", "name", "manager_id", "depth", "direct_reports", "total_reports"]


def _count_reports(tree: Tree) -> dict[str, int]:
    """Total (transitive) reports per employee id, computed bottom-up."""
    totals: dict[str, int] = {}
    for node, _ in reversed(walk(tree)):
        totals[node.id] = sum(1 + totals[c.id] for c in node.children)
    return totals


def _row(node: Node, depth: int, total_reports: int) -> dict[str, str | int]:
    return {
        "id": node.id,
        "name": node.name,
        "manager_id": node.manager_id,
        "depth": depth,
        "direct_reports": len(node.children),
        "total_reports": total_reports,
    }


def flatten(tree: Tree) -> pd.DataFrame:
    """One row per employee, in the same order as the rendered listing."""
    totals = _count_reports(tree)
    rows = [_row(node, depth, totals[node.id]) for node, depth in walk(tree)]

    result = pd.DataFrame(rows, columns=FLAT_COLUMNS)
    logger.info(
        "Flattened org hierarchy: %d nodes, max depth %d",
        len(result),
        result["depth"].max() if not result.empty else 0,
    )
    return result
