"""Tests for flat per-type aggregation."""

from sz.sizing.aggregate import FlatReport, TypeSize, aggregate
from sz.sizing.builder import build_module_tree
from sz.sizing.models import iter_types, total_size


class TestAggregate:
    def test_point_module(self, point_metadata):
        report = aggregate(build_module_tree(point_metadata))
        assert report == FlatReport(entries=[TypeSize("Demo.Point", 4)], grand_total=4)

    def test_entries_follow_declaration_order(self, shapes_metadata):
        report = aggregate(build_module_tree(shapes_metadata))
        assert [e.qualified_name for e in report.entries] == [
            "<global>.<Module>",
            "Geometry.Shape",
            "Geometry.Point",
            "<global>.Builder",
            "<global>.Step",
            "Util.Log",
        ]

    def test_nested_types_are_not_folded_into_parent(self, shapes_metadata):
        totals = {e.qualified_name: e.total for e in aggregate(build_module_tree(shapes_metadata)).entries}
        assert totals["Geometry.Shape"] == 55
        assert totals["<global>.Builder"] == 9
        assert totals["<global>.Step"] == 6

    def test_nested_types_qualified_by_own_namespace(self, shapes_metadata):
        """Nested types declare an empty namespace, so they report under <global>."""
        names = [e.qualified_name for e in aggregate(build_module_tree(shapes_metadata)).entries]
        assert "Geometry.Builder" not in names
        assert "<global>.Builder" in names

    def test_grand_total_counts_every_leaf_once(self, shapes_metadata):
        module = build_module_tree(shapes_metadata)
        report = aggregate(module)
        assert report.grand_total == 96 == total_size(module)
        assert report.grand_total == sum(e.total for e in report.entries)
        assert len(report.entries) == len(list(iter_types(module)))

    def test_type_without_members_contributes_zero(self, shapes_metadata):
        report = aggregate(build_module_tree(shapes_metadata))
        assert report.entries[0] == TypeSize("<global>.<Module>", 0)

    def test_no_types(self, empty_metadata):
        report = aggregate(build_module_tree(empty_metadata))
        assert report.entries == []
        assert report.grand_total == 0
