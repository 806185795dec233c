"""
Affine transforms as 4x4 homogeneous matrices.

Shapes carry a Transform that maps object space into world space. Points are
transformed with w=1 (translation applies), vectors with w=0 (it does not).

Builder methods return new transforms, so chains read in application order:

    Transform.identity().scale(2, 2, 2).translate(0, 1, 0)

scales first, then translates.
"""

from __future__ import annotations
import math
import numpy as np

from .vec3 import Vec3, Point3, EPSILON


class Transform:
    """An immutable 4x4 affine transform backed by a numpy matrix."""

    __slots__ = ('_matrix',)

    def __init__(self, matrix: np.ndarray = None):
        """Create a transform.

        Args:
            matrix: A 4x4 matrix (identity if None)
        """
        if matrix is None:
            matrix = np.eye(4, dtype=np.float64)
        matrix = np.array(matrix, dtype=np.float64)
        if matrix.shape != (4, 4):
            raise ValueError(f"Transform matrix must be 4x4, got {matrix.shape}")
        self._matrix = matrix

    @property
    def matrix(self) -> np.ndarray:
        """The underlying matrix (copy)."""
        return self._matrix.copy()

    # --- Constructors -----------------------------------------------------

    @classmethod
    def identity(cls) -> Transform:
        return cls()

    @classmethod
    def translation(cls, x: float, y: float, z: float) -> Transform:
        m = np.eye(4)
        m[:3, 3] = [x, y, z]
        return cls(m)

    @classmethod
    def scaling(cls, x: float, y: float, z: float) -> Transform:
        return cls(np.diag([x, y, z, 1.0]))

    @classmethod
    def rotation_x(cls, radians: float) -> Transform:
        c, s = math.cos(radians), math.sin(radians)
        m = np.eye(4)
        m[1, 1], m[1, 2] = c, -s
        m[2, 1], m[2, 2] = s, c
        return cls(m)

    @classmethod
    def rotation_y(cls, radians: float) -> Transform:
        c, s = math.cos(radians), math.sin(radians)
        m = np.eye(4)
        m[0, 0], m[0, 2] = c, s
        m[2, 0], m[2, 2] = -s, c
        return cls(m)

    @classmethod
    def rotation_z(cls, radians: float) -> Transform:
        c, s = math.cos(radians), math.sin(radians)
        m = np.eye(4)
        m[0, 0], m[0, 1] = c, -s
        m[1, 0], m[1, 1] = s, c
        return cls(m)

    @classmethod
    def shearing(cls, xy: float, xz: float, yx: float, yz: float, zx: float, zy: float) -> Transform:
        """Shear each axis in proportion to the other two.

        Args:
            xy: Move x in proportion to y (and so on for the others)
        """
        m = np.eye(4)
        m[0, 1], m[0, 2] = xy, xz
        m[1, 0], m[1, 2] = yx, yz
        m[2, 0], m[2, 1] = zx, zy
        return cls(m)

    # --- Fluent chaining (applied after the current transform) ------------

    def translate(self, x: float, y: float, z: float) -> Transform:
        return Transform.translation(x, y, z) @ self

    def scale(self, x: float, y: float, z: float) -> Transform:
        return Transform.scaling(x, y, z) @ self

    def rotate_x(self, radians: float) -> Transform:
        return Transform.rotation_x(radians) @ self

    def rotate_y(self, radians: float) -> Transform:
        return Transform.rotation_y(radians) @ self

    def rotate_z(self, radians: float) -> Transform:
        return Transform.rotation_z(radians) @ self

    def shear(self, xy: float, xz: float, yx: float, yz: float, zx: float, zy: float) -> Transform:
        return Transform.shearing(xy, xz, yx, yz, zx, zy) @ self

    # --- Algebra ----------------------------------------------------------

    def __matmul__(self, other: Transform) -> Transform:
        """Compose two transforms; `a @ b` applies b first, then a."""
        if not isinstance(other, Transform):
            return NotImplemented
        return Transform(self._matrix @ other._matrix)

    def inverse(self) -> Transform:
        """Return the inverse transform.

        Raises:
            numpy.linalg.LinAlgError: If the matrix is singular
        """
        return Transform(np.linalg.inv(self._matrix))

    def transpose(self) -> Transform:
        return Transform(self._matrix.T)

    def apply_point(self, point: Point3) -> Point3:
        """Transform a point (translation applies)."""
        return Vec3.from_array(self._matrix[:3, :3] @ point.to_array() + self._matrix[:3, 3])

    def apply_vector(self, vector: Vec3) -> Vec3:
        """Transform a direction or normal (translation ignored)."""
        return Vec3.from_array(self._matrix[:3, :3] @ vector.to_array())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Transform):
            return NotImplemented
        return bool(np.all(np.abs(self._matrix - other._matrix) < EPSILON))

    __hash__ = None

    def __repr__(self) -> str:
        rows = ", ".join(str(list(np.round(row, 5))) for row in self._matrix)
        return f"Transform([{rows}])"
