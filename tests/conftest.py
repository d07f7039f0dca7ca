"""Shared pytest fixtures for site_geometry tests.

Provides reusable triangles, meshes and scripted geometry kernels.
All fixtures use explicit values with documented rationale.

COORDINATE SYSTEM:
    Tests use small coordinates around the origin in the internal unit (feet).
    Terrain grids use a 10 ft spacing so every triangle edge is far above the
    kernel's short curve tolerance unless a fixture deliberately makes it short.
"""

import pytest

from site_geometry.core.ground_face_builder import GroundFaceBuilder
from site_geometry.core.mesh_source import TriangleMesh
from site_geometry.geometry.errors import FaceNotFoundError
from site_geometry.geometry.kernel import GeometryKernel
from site_geometry.model.point import Point3D
from site_geometry.model.triangle import Triangle


# =============================================================================
# SCRIPTED KERNELS
# =============================================================================


class ScriptedFailureKernel(GeometryKernel):
    """Default kernel that refuses face selection for chosen call numbers.

    Call numbers count face_by_normal() invocations from 0, so with sequential
    building they equal triangle indices.
    """

    def __init__(self, failing_calls: set[int]) -> None:
        super().__init__()
        self.failing_calls = failing_calls
        self.calls = 0

    def face_by_normal(self, solid, normal):
        call = self.calls
        self.calls += 1
        if call in self.failing_calls:
            raise FaceNotFoundError(f"scripted failure on call {call}")
        return super().face_by_normal(solid, normal)


class BrokenKernel(GeometryKernel):
    """Kernel with a programming error (not a geometry failure)."""

    def extrude(self, loop, direction, distance):
        raise RuntimeError("kernel bug")


# =============================================================================
# TRIANGLE FIXTURES
# =============================================================================


@pytest.fixture
def unit_triangle_ccw() -> Triangle:
    """Right triangle in the XY plane, counter-clockwise from above: normal +Z."""
    return Triangle(
        v0=Point3D(0.0, 0.0, 0.0),
        v1=Point3D(1.0, 0.0, 0.0),
        v2=Point3D(0.0, 1.0, 0.0),
    )


@pytest.fixture
def unit_triangle_cw() -> Triangle:
    """Same triangle wound clockwise from above: normal -Z."""
    return Triangle(
        v0=Point3D(0.0, 0.0, 0.0),
        v1=Point3D(0.0, 1.0, 0.0),
        v2=Point3D(1.0, 0.0, 0.0),
    )


@pytest.fixture
def tilted_triangle() -> Triangle:
    """Triangle on the plane z = 0.5 * x (rises 1 ft per 2 ft east)."""
    return Triangle(
        v0=Point3D(0.0, 0.0, 0.0),
        v1=Point3D(10.0, 0.0, 5.0),
        v2=Point3D(0.0, 10.0, 0.0),
    )


@pytest.fixture
def triangle_with_duplicate_vertex() -> Triangle:
    """v1 == v0: one edge has zero length."""
    return Triangle(
        v0=Point3D(0.0, 0.0, 0.0),
        v1=Point3D(0.0, 0.0, 0.0),
        v2=Point3D(1.0, 1.0, 0.0),
    )


@pytest.fixture
def collinear_triangle() -> Triangle:
    """Three points on one line; every edge is long enough but there is no area."""
    return Triangle(
        v0=Point3D(0.0, 0.0, 0.0),
        v1=Point3D(1.0, 1.0, 1.0),
        v2=Point3D(2.0, 2.0, 2.0),
    )


@pytest.fixture
def sliver_edge_triangle() -> Triangle:
    """One edge of 0.001 ft, below the short curve tolerance (~0.00256 ft)."""
    return Triangle(
        v0=Point3D(0.0, 0.0, 0.0),
        v1=Point3D(0.001, 0.0, 0.0),
        v2=Point3D(0.0, 5.0, 0.0),
    )


# =============================================================================
# MESH FIXTURES
# =============================================================================


@pytest.fixture
def flat_terrain_mesh() -> TriangleMesh:
    """3x3 grid at elevation 100 ft, 10 ft spacing: covers x, y in [0, 20], 8 triangles."""
    return TriangleMesh.from_heightfield(
        elevations=[[100.0] * 3] * 3,
        spacing_x=10.0,
        spacing_y=10.0,
    )


@pytest.fixture
def sloped_terrain_mesh() -> TriangleMesh:
    """3x3 grid on the plane z = 0.1 * x (10% slope rising east), 10 ft spacing."""
    row = [0.0, 1.0, 2.0]
    return TriangleMesh.from_heightfield(
        elevations=[row, row, row],
        spacing_x=10.0,
        spacing_y=10.0,
    )


@pytest.fixture
def ridged_terrain_mesh() -> TriangleMesh:
    """Roof-shaped 3x2 grid: ridge along x = 10 with 45° flanks, 10 ft spacing."""
    row = [0.0, 10.0, 0.0]
    return TriangleMesh.from_heightfield(
        elevations=[row, row],
        spacing_x=10.0,
        spacing_y=10.0,
    )


@pytest.fixture
def default_builder() -> GroundFaceBuilder:
    """Builder with the default kernel and 1 cm slab thickness."""
    return GroundFaceBuilder()
