"""Axis-aligned bounding boxes and bounding spheres."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

import numpy as np


def _vec3(value) -> np.ndarray:
    return np.array(value, dtype=np.float64).reshape(3)


def _decompose_scale(columns: list[np.ndarray]) -> np.ndarray:
    """Scale factors of a 3x3 basis, with shear removed by Gram-Schmidt."""
    c0, c1, c2 = (c.copy() for c in columns)

    def _unit(v: np.ndarray) -> tuple[np.ndarray, float]:
        length = float(np.linalg.norm(v))
        return (v / length if length > 0.0 else v), length

    c0, sx = _unit(c0)
    c1 = c1 - c0 * np.dot(c0, c1)
    c1, sy = _unit(c1)
    c2 = c2 - c0 * np.dot(c0, c2)
    c2 = c2 - c1 * np.dot(c1, c2)
    c2, sz = _unit(c2)

    scale = np.array([sx, sy, sz])
    if np.dot(c0, np.cross(c1, c2)) < 0.0:
        scale = -scale
    return scale


@dataclass(eq=False)
class BoundingSphere:
    """A sphere given by its center and radius."""

    center: np.ndarray = field(default_factory=lambda: np.zeros(3))
    radius: float = 1.0

    def __post_init__(self) -> None:
        self.center = _vec3(self.center)
        self.radius = float(self.radius)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BoundingSphere):
            return NotImplemented
        return bool(np.array_equal(self.center, other.center)) and self.radius == other.radius

    __hash__ = None  # type: ignore[assignment]

    @classmethod
    def from_box(cls, box: "BoundingBox") -> "BoundingSphere":
        """The sphere through the corners of ``box``."""
        center = (box.minimum + box.maximum) * 0.5
        return cls(center, float(np.linalg.norm(box.maximum - center)))

    def transformed(self, transform) -> "BoundingSphere":
        """Move the sphere by the translation of ``transform``.

        The new radius is the largest scale factor of the transform.
        """
        m = np.array(transform, dtype=np.float64).reshape(4, 4)
        if abs(m[3, 3]) < 1e-12:
            raise ValueError("matrix cannot be decomposed")
        m = m / m[3, 3]
        translation = m[:3, 3]
        scale = _decompose_scale([m[:3, 0], m[:3, 1], m[:3, 2]])
        return BoundingSphere(self.center + translation, float(np.max(scale)))

    def surrounds(self, other) -> bool:
        """True if a point, box or sphere lies wholly inside this sphere."""
        if isinstance(other, BoundingBox):
            return self.surrounds(BoundingSphere.from_box(other))
        if isinstance(other, BoundingSphere):
            distance = float(np.linalg.norm(self.center - other.center))
            return distance + other.radius <= self.radius
        return float(np.linalg.norm(self.center - _vec3(other))) <= self.radius

    def overlaps(self, other) -> bool:
        """True if a box or sphere intersects this sphere."""
        if isinstance(other, BoundingBox):
            return self.overlaps(BoundingSphere.from_box(other))
        if isinstance(other, BoundingSphere):
            distance = float(np.linalg.norm(self.center - other.center))
            return distance < self.radius + other.radius
        raise TypeError("overlaps expects a BoundingBox or a BoundingSphere")

    @staticmethod
    def union(sphere: "BoundingSphere", other) -> "BoundingSphere":
        """The smallest sphere holding ``sphere`` and a point or another sphere."""
        if isinstance(other, BoundingSphere):
            distance = float(np.linalg.norm(sphere.center - other.center))
            if distance + other.radius <= sphere.radius:
                return sphere
            if distance + sphere.radius <= other.radius:
                return other
            direction = (other.center - sphere.center) / distance
            far1 = sphere.center - direction * sphere.radius
            far2 = other.center + direction * other.radius
            return BoundingSphere((far1 + far2) * 0.5, float(np.linalg.norm(far2 - far1)) * 0.5)

        point = _vec3(other)
        if sphere.surrounds(point):
            return sphere
        offset = point - sphere.center
        direction = offset / np.linalg.norm(offset)
        farthest = sphere.center - direction * sphere.radius
        return BoundingSphere((farthest + point) * 0.5, float(np.linalg.norm(point - farthest)) * 0.5)


@dataclass(eq=False)
class BoundingBox:
    """An axis-aligned box given by its minimum and maximum corners."""

    minimum: np.ndarray = field(default_factory=lambda: np.zeros(3))
    maximum: np.ndarray = field(default_factory=lambda: np.zeros(3))

    def __post_init__(self) -> None:
        self.minimum = _vec3(self.minimum)
        self.maximum = _vec3(self.maximum)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BoundingBox):
            return NotImplemented
        return bool(
            np.array_equal(self.minimum, other.minimum) and np.array_equal(self.maximum, other.maximum)
        )

    __hash__ = None  # type: ignore[assignment]

    @classmethod
    def from_point(cls, point) -> "BoundingBox":
        """A degenerate box holding a single point."""
        p = _vec3(point)
        return cls(p, p.copy())

    @classmethod
    def from_sphere(cls, sphere: BoundingSphere) -> "BoundingBox":
        """The box that tightly encloses ``sphere``."""
        r = np.full(3, sphere.radius)
        return cls(sphere.center - r, sphere.center + r)

    def surrounds(self, other) -> bool:
        """True if a point, box or sphere lies inside this box (bounds inclusive)."""
        if isinstance(other, BoundingSphere):
            return self.surrounds(BoundingBox.from_sphere(other))
        if isinstance(other, BoundingBox):
            return self.surrounds(other.minimum) and self.surrounds(other.maximum)
        p = _vec3(other)
        return bool(np.all(p >= self.minimum) and np.all(p <= self.maximum))

    def overlaps(self, other) -> bool:
        """True if a box or sphere intersects this box."""
        if isinstance(other, BoundingSphere):
            return self.overlaps(BoundingBox.from_sphere(other))
        if isinstance(other, BoundingBox):
            return not bool(
                np.any(self.maximum < other.minimum) or np.any(other.maximum < self.minimum)
            )
        raise TypeError("overlaps expects a BoundingBox or a BoundingSphere")

    @staticmethod
    def union(box: "BoundingBox", other) -> "BoundingBox":
        """The smallest box holding ``box`` and a point or another box."""
        if not isinstance(other, BoundingBox):
            other = BoundingBox.from_point(other)
        return BoundingBox(np.minimum(box.minimum, other.minimum), np.maximum(box.maximum, other.maximum))


Bounds = Union[BoundingBox, BoundingSphere]