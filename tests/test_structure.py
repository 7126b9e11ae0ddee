from hierarchy.org.importer import build_tree
from hierarchy.org.structure import FLAT_COLUMNS, flatten

from conftest import records


class TestFlatten:
    def setup_method(self):
        self.df = flatten(
            build_tree(
                records(
                    ("jamie", "1", ""),
                    ("alan", "2", "1"),
                    ("martin", "3", "2"),
                    ("alex", "4", "2"),
                    ("steve", "5", "1"),
                    ("david", "6", "5"),
                )
            )
        )
        self.by_id = self.df.set_index("id")

    def test_columns_and_order(self):
        assert list(self.df.columns) == FLAT_COLUMNS
        assert self.df["id"].tolist() == ["1", "2", "3", "4", "5", "6"]

    def test_depth(self):
        assert self.df["depth"].tolist() == [0, 1, 2, 2, 1, 2]

    def test_manager_ids(self):
        assert self.by_id.loc["1", "manager_id"] == ""
        assert self.by_id.loc["4", "manager_id"] == "2"

    def test_span_of_control(self):
        assert self.by_id.loc["1", "direct_reports"] == 2
        assert self.by_id.loc["1", "total_reports"] == 5
        assert self.by_id.loc["2", "total_reports"] == 2
        assert self.by_id.loc["6", "total_reports"] == 0
