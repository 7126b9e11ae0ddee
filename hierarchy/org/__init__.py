"""Org chart domain.

Reads flat employee exports, rebuilds the implied management tree
(tolerating managers listed after their reports), and renders it as
an indented listing or a flat span-of-control table.
"""

from hierarchy.org.builder import add
from hierarchy.org.errors import (
    DuplicateEmployeeError,
    DuplicateRootError,
    HierarchyError,
    MissingRootError,
    UnresolvedEmployeesError,
    UnresolvedManagerError,
)
from hierarchy.org.importer import build_tree, generate_hierarchy_from_csv, load_records, run
from hierarchy.org.models import Node, RawRecord, Tree
from hierarchy.org.render import render
from hierarchy.org.resolver import ingest_records
from hierarchy.org.structure import flatten
