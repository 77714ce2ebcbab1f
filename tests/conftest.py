"""Shared fixtures: metadata snapshots with hand-computed sizes."""

import pytest

from sz.metadata.models import (
    FieldDefinition,
    MethodDefinition,
    ModuleMetadata,
    PropertyDefinition,
    TypeDefinition,
)


@pytest.fixture
def point_metadata():
    """Namespace Demo, type Point, fields X and Y (name 1 + signature 1 each)."""
    return ModuleMetadata(
        name="Demo",
        types=(
            TypeDefinition(
                index=1,
                name="Point",
                namespace="Demo",
                fields=(FieldDefinition("X", 1), FieldDefinition("Y", 1)),
            ),
        ),
    )


@pytest.fixture
def shapes_metadata():
    """Three namespaces, two levels of nested types.

    Direct totals per type (declaration order):
        <global>.<Module>   0
        Geometry.Shape     55   _area 7, Area 22, Draw 17, Name 9
        Geometry.Point      4   X 2, Y 2
        <global>.Builder    9   _parts 9      (nested in Shape)
        <global>.Step       6   Run 6         (nested in Builder)
        Util.Log           22   Write 22
    Grand total 96.
    """
    return ModuleMetadata(
        name="Shapes",
        types=(
            TypeDefinition(index=1, name="<Module>", namespace=""),
            TypeDefinition(
                index=2,
                name="Shape",
                namespace="Geometry",
                fields=(FieldDefinition("_area", 2),),
                methods=(
                    MethodDefinition("Area", 3, ("scale",), body_length=10),
                    MethodDefinition("Draw", 4, ("canvas", "pen")),
                ),
                properties=(PropertyDefinition("Name", 5),),
                nested_indices=(4,),
            ),
            TypeDefinition(
                index=3,
                name="Point",
                namespace="Geometry",
                fields=(FieldDefinition("X", 1), FieldDefinition("Y", 1)),
            ),
            TypeDefinition(
                index=4,
                name="Builder",
                namespace="",
                enclosing_index=2,
                fields=(FieldDefinition("_parts", 3),),
                nested_indices=(5,),
            ),
            TypeDefinition(
                index=5,
                name="Step",
                namespace="",
                enclosing_index=4,
                methods=(MethodDefinition("Run", 2, body_length=1),),
            ),
            TypeDefinition(
                index=6,
                name="Log",
                namespace="Util",
                methods=(MethodDefinition("Write", 3, ("message",), body_length=7),),
            ),
        ),
    )


@pytest.fixture
def empty_metadata():
    return ModuleMetadata(name="Empty")


@pytest.fixture
def isolated_env(tmp_path, monkeypatch):
    """Run from an empty directory with no user config and no SZ_* variables."""
    home = tmp_path / "home"
    work = tmp_path / "work"
    home.mkdir()
    work.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(work)
    for key in ("SZ_OUTPUT_PATH", "SZ_JSON_INDENT", "SZ_VERBOSITY", "SZ_LOG_FILE"):
        monkeypatch.delenv(key, raising=False)
    return work
