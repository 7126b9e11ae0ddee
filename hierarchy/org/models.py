"""Record and tree models, plus the pandera schema for raw employee rows."""

from typing import TypeAlias
import weakref
from dataclasses import dataclass, field

import pandera.pandas as pa
from pandera.pandas import Check, Column

EmployeeID: TypeAlias = str
PendingSet: TypeAlias = dict[EmployeeID, list["RawRecord"]]

RAW_COLUMNS = ["name", "id", "manager_id"]


@dataclass(frozen=True)
class RawRecord:
    name: str
    id: EmployeeID
    manager_id: EmployeeID = ""

    @property
    def is_root(self) -> bool:
        return self.manager_id == ""


@dataclass(eq=False)
class Node:
    """A resolved employee.

    ``children`` owns the subtree. ``manager_ref`` is a weak back-reference
    so the manager <-> managee link never forms a strong reference cycle.
    """

    name: str
    id: EmployeeID
    manager_ref: weakref.ref | None = field(default=None, repr=False)
    children: list["Node"] = field(default_factory=list, repr=False)

    @property
    def manager(self) -> "Node | None":
        return self.manager_ref() if self.manager_ref is not None else None

    @property
    def manager_id(self) -> EmployeeID:
        manager = self.manager
        return manager.id if manager is not None else ""


@dataclass
class Tree:
    nodes_by_id: dict[EmployeeID, Node] = field(default_factory=dict)
    root: Node | None = None

    def __len__(self) -> int:
        return len(self.nodes_by_id)

    def __contains__(self, employee_id: EmployeeID) -> bool:
        return employee_id in self.nodes_by_id


raw_employee_schema = pa.DataFrameSchema(
    {
        "name": Column(str, Check.str_length(min_value=1), nullable=False),
        "id": Column(str, Check.str_length(min_value=1), nullable=False),
        "manager_id": Column(str, nullable=False),
    },
    strict=True,
    ordered=True,
    coerce=True,
)
