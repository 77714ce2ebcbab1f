"""Tests for building the namespace -> type -> member tree."""

import pytest

from sz.exceptions import MetadataResolutionError
from sz.metadata.models import FieldDefinition, ModuleMetadata, TypeDefinition
from sz.sizing.builder import GLOBAL_NAMESPACE, TreeBuilder, build_module_tree, namespace_key
from sz.sizing.models import LeafMember, NodeKind, TypeNode, iter_types, total_size


def _names(nodes):
    return [n.name for n in nodes]


class TestNamespaceKey:
    def test_empty_namespace_is_global(self):
        assert namespace_key("") == GLOBAL_NAMESPACE == "<global>"

    def test_named_namespace_unchanged(self):
        assert namespace_key("System.Text") == "System.Text"


class TestBuildModuleTree:
    def test_point_module(self, point_metadata):
        module = build_module_tree(point_metadata)

        assert module.name == "<assembly: Demo>"
        assert _names(module.children) == ["Demo"]
        point = module.children[0].children[0]
        assert point.name == "Point"
        assert point.children == [LeafMember("X", 2), LeafMember("Y", 2)]

    def test_namespaces_in_first_seen_order(self, shapes_metadata):
        module = build_module_tree(shapes_metadata)
        assert _names(module.children) == ["<global>", "Geometry", "Util"]
        assert _names(module.children[1].children) == ["Shape", "Point"]

    def test_nested_types_hang_under_their_parent(self, shapes_metadata):
        module = build_module_tree(shapes_metadata)

        top_level = [t.name for ns in module.children for t in ns.children]
        assert "Builder" not in top_level
        assert "Step" not in top_level

        shape = module.children[1].children[0]
        builder = shape.children[-1]
        assert isinstance(builder, TypeNode)
        assert builder.name == "Builder"
        assert _names(builder.children) == ["_parts", "Step"]
        assert _names(builder.children[1].children) == ["Run"]

    def test_member_order_is_fields_methods_properties_types(self, shapes_metadata):
        shape = build_module_tree(shapes_metadata).children[1].children[0]
        assert _names(shape.children) == ["_area", "Area", "Draw", "Name", "Builder"]
        kinds = [c.kind for c in shape.children]
        assert kinds == [NodeKind.LEAF] * 4 + [NodeKind.CONTAINER]

    def test_leaf_sizes(self, shapes_metadata):
        shape = build_module_tree(shapes_metadata).children[1].children[0]
        assert [c.size for c in shape.members] == [7, 22, 17, 9]

    def test_type_keeps_declared_namespace_and_index(self, shapes_metadata):
        module = build_module_tree(shapes_metadata)
        by_name = {t.name: t for t in iter_types(module)}
        assert by_name["Shape"].namespace == "Geometry"
        assert by_name["Builder"].namespace == ""
        assert by_name["Step"].index == 5

    def test_type_without_members_is_empty_container(self, shapes_metadata):
        module_type = build_module_tree(shapes_metadata).children[0].children[0]
        assert module_type.name == "<Module>"
        assert module_type.children == []
        assert module_type.kind is NodeKind.CONTAINER

    def test_total_covers_every_leaf(self, shapes_metadata):
        assert total_size(build_module_tree(shapes_metadata)) == 96

    def test_no_types(self, empty_metadata):
        module = build_module_tree(empty_metadata)
        assert module.name == "<assembly: Empty>"
        assert module.children == []
        assert total_size(module) == 0

    def test_module_identity_label(self):
        metadata = ModuleMetadata(name="Plugin.netmodule", kind="module")
        assert build_module_tree(metadata).name == "<module: Plugin.netmodule>"

    def test_deterministic(self, shapes_metadata):
        assert build_module_tree(shapes_metadata) == build_module_tree(shapes_metadata)

    def test_builder_can_be_reused(self, shapes_metadata):
        builder = TreeBuilder(shapes_metadata)
        assert builder.build() == builder.build()


class TestMalformedNesting:
    def test_dangling_nested_index(self):
        metadata = ModuleMetadata(
            name="Bad",
            types=(TypeDefinition(1, "Outer", "Ns", nested_indices=(9,)),),
        )
        with pytest.raises(MetadataResolutionError, match="TypeDef"):
            build_module_tree(metadata)

    def test_nesting_cycle(self):
        metadata = ModuleMetadata(
            name="Bad",
            types=(
                TypeDefinition(1, "A", "", enclosing_index=2, nested_indices=(2,)),
                TypeDefinition(2, "B", "", enclosing_index=1, nested_indices=(1,)),
            ),
        )
        with pytest.raises(MetadataResolutionError, match="not reachable"):
            build_module_tree(metadata)

    def test_self_nesting_reached_from_top_level(self):
        metadata = ModuleMetadata(
            name="Bad",
            types=(
                TypeDefinition(1, "Outer", "Ns", nested_indices=(2,)),
                TypeDefinition(2, "Inner", "", enclosing_index=1, nested_indices=(2,)),
            ),
        )
        with pytest.raises(MetadataResolutionError, match="nested more than once"):
            build_module_tree(metadata)

    def test_nested_type_whose_parent_is_missing(self):
        metadata = ModuleMetadata(
            name="Bad",
            types=(
                TypeDefinition(1, "Outer", "Ns", fields=(FieldDefinition("f", 1),)),
                TypeDefinition(2, "Orphan", "", enclosing_index=7),
            ),
        )
        with pytest.raises(MetadataResolutionError):
            build_module_tree(metadata)
