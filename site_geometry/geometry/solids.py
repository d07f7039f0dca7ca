"""Extruded solids and face selection by normal.

create_extrusion_geometry() sweeps one closed planar profile along a direction
into a closed prism: a bottom cap, a top cap and one side face per profile
edge, all with outward normals. get_face_by_normal() picks the face of a solid
whose outward normal matches a target direction.
"""

import logging
from math import cos
from typing import Sequence

import numpy as np

from site_geometry.constants import KernelConfig
from site_geometry.geometry.curves import CurveLoop
from site_geometry.geometry.errors import (
    DegenerateGeometryError,
    FaceNotFoundError,
    GeometryConstructionError,
)
from site_geometry.geometry.faces import PlanarFace

logger = logging.getLogger(__name__)


class Solid:
    """A closed body bounded by planar faces.

    Attributes:
        faces: Bounding faces with outward normals
    """

    def __init__(self, faces: list[PlanarFace]):
        self.faces = faces

    def __len__(self) -> int:
        return len(self.faces)

    def __repr__(self) -> str:
        return f"Solid({len(self.faces)} faces)"


def create_extrusion_geometry(
    profile_loops: Sequence[CurveLoop],
    direction: Sequence[float] | np.ndarray,
    distance: float,
    angle_tolerance: float = KernelConfig.ANGLE_TOLERANCE,
) -> Solid:
    """Extrude a closed planar profile into a prism.

    Args:
        profile_loops: Profile as a list holding exactly one closed loop
        direction: Extrusion direction (any length, must not be parallel to the profile plane)
        distance: Extrusion distance, must be positive
        angle_tolerance: Minimum angle between direction and profile plane (radians)

    Returns:
        Closed Solid: bottom cap, top cap, then one side face per profile edge.

    Raises:
        GeometryConstructionError: On invalid distance, direction or profile.
    """
    if len(profile_loops) != 1:
        raise GeometryConstructionError(f"Extrusion supports exactly one profile loop, got {len(profile_loops)}")
    if not distance > 0:
        raise GeometryConstructionError(f"Extrusion distance must be positive, got {distance}")

    direction = np.asarray(direction, dtype=float)
    direction_norm = np.linalg.norm(direction)
    if direction_norm == 0.0:
        raise GeometryConstructionError("Extrusion direction is a zero vector")
    direction = direction / direction_norm

    loop = profile_loops[0]
    plane = loop.get_plane()
    alignment = float(np.dot(plane.normal, direction))
    if abs(alignment) < np.sin(angle_tolerance):
        raise DegenerateGeometryError("Extrusion direction lies in the profile plane")

    # Orient the profile counter-clockwise around the side the prism grows towards
    bottom = loop.vertices
    if alignment < 0:
        bottom = bottom[::-1]
    offset = direction * distance
    top = bottom + offset

    faces = [PlanarFace(bottom[::-1]), PlanarFace(top)]
    count = len(bottom)
    for i in range(count):
        a, b = bottom[i], bottom[(i + 1) % count]
        faces.append(PlanarFace(np.array([a, b, b + offset, a + offset])))

    return Solid(faces)


def get_face_by_normal(
    solid: Solid,
    normal: Sequence[float] | np.ndarray,
    angle_tolerance: float = KernelConfig.ANGLE_TOLERANCE,
) -> PlanarFace:
    """Return the first face of a solid whose outward normal matches the target.

    Args:
        solid: Solid to search
        normal: Target direction (any length)
        angle_tolerance: Maximum angle between normals (radians)

    Raises:
        FaceNotFoundError: If no face is within the angular tolerance.
    """
    target = np.asarray(normal, dtype=float)
    target_norm = np.linalg.norm(target)
    if target_norm == 0.0:
        raise FaceNotFoundError("Cannot match a face against a zero normal")
    target = target / target_norm

    min_cosine = cos(angle_tolerance)
    for face in solid.faces:
        if float(np.dot(face.normal, target)) >= min_cosine:
            return face

    logger.debug(f"No face among {len(solid.faces)} matches normal {target}")
    raise FaceNotFoundError(f"No face matches normal ({target[0]:.4f}, {target[1]:.4f}, {target[2]:.4f})")
