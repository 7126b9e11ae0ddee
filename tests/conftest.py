import os

import pytest

from hierarchy.org.models import RawRecord

FIXTURES = os.path.join(os.path.dirname(__file__), "fixtures")


def records(*rows: tuple[str, str, str]) -> list[RawRecord]:
    return [RawRecord(name=n, id=i, manager_id=m) for n, i, m in rows]


@pytest.fixture
def fixture_path():
    def _path(name: str) -> str:
        return os.path.join(FIXTURES, name)

    return _path


@pytest.fixture
def company_rows() -> list[RawRecord]:
    return records(
        ("jamie", "1", ""),
        ("alan", "2", "1"),
        ("martin", "3", "2"),
        ("alex", "4", "2"),
        ("steve", "5", "1"),
        ("david", "6", "5"),
    )


EXPECTED_COMPANY = ["jamie", "\talan", "\t\tmartin", "\t\talex", "\tsteve", "\t\tdavid"]
