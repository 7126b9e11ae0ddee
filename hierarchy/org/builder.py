"""Attach a single raw record to the management tree."""

import logging
import weakref

from hierarchy.org.errors import DuplicateEmployeeError, DuplicateRootError, UnresolvedManagerError
from hierarchy.org.models import Node, RawRecord, Tree

logger = logging.getLogger(__name__)


def add(tree: Tree, record: RawRecord) -> Node:
    """Add *record* to *tree* and return its new node.

    Raises ``UnresolvedManagerError`` when the manager is not in the tree yet,
    leaving the tree untouched so the caller can defer the record.
    """
    if record.id in tree.nodes_by_id:
        raise DuplicateEmployeeError(record.id)

    if record.is_root:
        if tree.root is not None:
            raise DuplicateRootError(record)
        node = Node(name=record.name, id=record.id)
        tree.root = node
    else:
        manager = tree.nodes_by_id.get(record.manager_id)
        if manager is None:
            raise UnresolvedManagerError(record)
        node = Node(name=record.name, id=record.id, manager_ref=weakref.ref(manager))
        manager.children.append(node)

    tree.nodes_by_id[node.id] = node
    return node
