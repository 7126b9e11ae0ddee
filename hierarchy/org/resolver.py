"""Single-pass ingestion with deferred resolution of forward references.

Records whose manager has not arrived yet are parked in a pending map keyed
by manager id. Each successful add drains the entries waiting on the new
node, depth-first, so chains of forward references resolve in one pass no
matter how the input is ordered.
"""

import logging
from collections.abc import Iterable, Iterator

from hierarchy.org.builder import add
from hierarchy.org.errors import (
    DuplicateEmployeeError,
    MissingRootError,
    UnresolvedEmployeesError,
    UnresolvedManagerError,
)
from hierarchy.org.models import Node, PendingSet, RawRecord, Tree

logger = logging.getLogger(__name__)


def _drain(tree: Tree, pending: PendingSet, node: Node) -> int:
    """Add every record waiting on *node*, then everything waiting on those.

    Uses an explicit stack of iterators; the visiting order is the same as a
    recursive pre-order drain.
    """
    drained = 0
    stack: list[Iterator[RawRecord]] = [iter(pending.pop(node.id, ()))]
    while stack:
        record = next(stack[-1], None)
        if record is None:
            stack.pop()
            continue
        child = add(tree, record)
        drained += 1
        logger.debug("Resolved deferred employee %s under %s", child.id, record.manager_id)
        stack.append(iter(pending.pop(child.id, ())))
    return drained


def ingest_records(
    tree: Tree,
    records: Iterable[RawRecord],
    pending: PendingSet | None = None,
) -> Tree:
    """Build *tree* from *records* in input order.

    Raises ``DuplicateRootError`` or ``DuplicateEmployeeError`` as soon as they
    occur, ``UnresolvedEmployeesError`` if anything is still pending after the
    pass, and ``MissingRootError`` if no root was ever added.
    """
    pending = {} if pending is None else pending
    seen: dict[str, int] = {}
    deferred = 0

    for record in records:
        if record.id in seen:
            raise DuplicateEmployeeError(record.id)
        seen[record.id] = len(seen)

        try:
            node = add(tree, record)
        except UnresolvedManagerError:
            logger.debug("Deferring %s until manager %s is added", record.id, record.manager_id)
            pending.setdefault(record.manager_id, []).append(record)
            deferred += 1
            continue

        _drain(tree, pending, node)

    if pending:
        raise UnresolvedEmployeesError(pending, seen)
    if tree.root is None:
        raise MissingRootError()

    logger.info("Resolved %d employees (%d deferred)", len(tree), deferred)
    return tree
