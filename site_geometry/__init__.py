"""Site Geometry - Axis snapping and terrain intersection for site modeling.

Precision-sensitive helpers for placing site elements on terrain:
- Axis snapping of nearly-flat line segments to avoid modeling tolerance failures
- Conversion of a triangulated terrain into thin oriented ground faces
- First-hit intersection of lines with those ground faces

Modules:
    constants: Named tolerances and thicknesses
    model: Value types (Point3D, LineSegment, Triangle, GroundFace)
    geometry: Planar geometry kernel (lines, loops, faces, extruded solids)
    core: Snapper, face builder, intersector, line projector

Example:
    from site_geometry.core import GroundFaceBuilder, TerrainIntersector, TriangleMesh
    from site_geometry.model import LineSegment
"""
