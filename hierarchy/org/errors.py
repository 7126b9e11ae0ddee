"""Structural errors raised while reconstructing the management tree."""

from hierarchy.org.models import PendingSet, RawRecord


class HierarchyError(Exception):
    """Base class for all structural import failures."""


class DuplicateRootError(HierarchyError):
    def __init__(self, record: RawRecord):
        self.record = record
        super().__init__(f"Multiple roots found: {record.name!r} ({record.id}) has no manager")


class MissingRootError(HierarchyError):
    def __init__(self):
        super().__init__("Root employee not found in company")


class UnresolvedManagerError(HierarchyError):
    """Manager not yet in the tree. Absorbed by the resolver, never surfaced."""

    def __init__(self, record: RawRecord):
        self.record = record
        super().__init__(f"Manager {record.manager_id!r} not found for {record.id!r}")


class UnresolvedEmployeesError(HierarchyError):
    """Records whose manager never appeared, including self-managed and cyclic chains."""

    def __init__(self, pending: PendingSet, positions: dict[str, int] | None = None):
        positions = positions or {}
        records = [r for group in pending.values() for r in group]
        self.records: list[RawRecord] = sorted(records, key=lambda r: positions.get(r.id, 0))
        self.manager_ids: list[str] = sorted(pending)
        super().__init__(
            f"{len(self.records)} employee(s) reference unknown managers: "
            f"{', '.join(self.manager_ids)}"
        )


class DuplicateEmployeeError(HierarchyError):
    def __init__(self, employee_id: str):
        self.employee_id = employee_id
        super().__init__(f"Employee id {employee_id!r} appears more than once")
