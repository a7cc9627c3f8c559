"""Position, Euler rotation and scale of an object, with a quaternion orientation."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

import numpy as np

# Quaternions are stored as (w, x, y, z).


def _identity_quat() -> np.ndarray:
    return np.array([1.0, 0.0, 0.0, 0.0])


def _quat_normalize(q: np.ndarray) -> np.ndarray:
    n = float(np.linalg.norm(q))
    return q / n if n > 0.0 else _identity_quat()


def _quat_multiply(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    aw, ax, ay, az = a
    bw, bx, by, bz = b
    return np.array(
        [
            aw * bw - ax * bx - ay * by - az * bz,
            aw * bx + ax * bw + ay * bz - az * by,
            aw * by - ax * bz + ay * bw + az * bx,
            aw * bz + ax * by - ay * bx + az * bw,
        ]
    )


def _angle_axis(angle: float, axis) -> np.ndarray:
    half = angle * 0.5
    return np.concatenate(([math.cos(half)], np.asarray(axis, dtype=np.float64) * math.sin(half)))


def _quat_from_matrix(matrix) -> np.ndarray:
    m = np.asarray(matrix, dtype=np.float64)[:3, :3]
    trace = m[0, 0] + m[1, 1] + m[2, 2]
    if trace > 0.0:
        s = math.sqrt(trace + 1.0) * 2.0
        return np.array([0.25 * s, (m[2, 1] - m[1, 2]) / s, (m[0, 2] - m[2, 0]) / s, (m[1, 0] - m[0, 1]) / s])
    if m[0, 0] > m[1, 1] and m[0, 0] > m[2, 2]:
        s = math.sqrt(1.0 + m[0, 0] - m[1, 1] - m[2, 2]) * 2.0
        return np.array([(m[2, 1] - m[1, 2]) / s, 0.25 * s, (m[0, 1] + m[1, 0]) / s, (m[0, 2] + m[2, 0]) / s])
    if m[1, 1] > m[2, 2]:
        s = math.sqrt(1.0 + m[1, 1] - m[0, 0] - m[2, 2]) * 2.0
        return np.array([(m[0, 2] - m[2, 0]) / s, (m[0, 1] + m[1, 0]) / s, 0.25 * s, (m[1, 2] + m[2, 1]) / s])
    s = math.sqrt(1.0 + m[2, 2] - m[0, 0] - m[1, 1]) * 2.0
    return np.array([(m[1, 0] - m[0, 1]) / s, (m[0, 2] + m[2, 0]) / s, (m[1, 2] + m[2, 1]) / s, 0.25 * s])


def _quat_to_matrix(q: np.ndarray) -> np.ndarray:
    w, x, y, z = q
    m = np.eye(4)
    m[:3, :3] = [
        [1 - 2 * (y * y + z * z), 2 * (x * y - w * z), 2 * (x * z + w * y)],
        [2 * (x * y + w * z), 1 - 2 * (x * x + z * z), 2 * (y * z - w * x)],
        [2 * (x * z - w * y), 2 * (y * z + w * x), 1 - 2 * (x * x + y * y)],
    ]
    return m


def _euler_angle_yxz(yaw: float, pitch: float, roll: float) -> np.ndarray:
    cy, sy = math.cos(yaw), math.sin(yaw)
    cx, sx = math.cos(pitch), math.sin(pitch)
    cz, sz = math.cos(roll), math.sin(roll)
    ry = np.array([[cy, 0, sy], [0, 1, 0], [-sy, 0, cy]])
    rx = np.array([[1, 0, 0], [0, cx, -sx], [0, sx, cx]])
    rz = np.array([[cz, -sz, 0], [sz, cz, 0], [0, 0, 1]])
    m = np.eye(4)
    m[:3, :3] = ry @ rx @ rz
    return m


def _extract_euler_angle_yxz(matrix) -> tuple[float, float, float]:
    m = np.asarray(matrix, dtype=np.float64)
    yaw = math.atan2(m[0, 2], m[2, 2])
    c2 = math.hypot(m[1, 0], m[1, 1])
    pitch = math.atan2(-m[1, 2], c2)
    s1, c1 = math.sin(yaw), math.cos(yaw)
    roll = math.atan2(s1 * m[2, 1] - c1 * m[0, 1], c1 * m[0, 0] - s1 * m[2, 0])
    return yaw, pitch, roll


def _vec3(value) -> np.ndarray:
    return np.array(value, dtype=np.float64).reshape(3)


@dataclass(eq=False)
class Transform:
    """Position, rotation in degrees (pitch, yaw, roll) and scale."""

    position: np.ndarray = field(default_factory=lambda: np.zeros(3))
    rotation: np.ndarray = field(default_factory=lambda: np.zeros(3))
    scale: np.ndarray = field(default_factory=lambda: np.ones(3))
    _orientation: np.ndarray = field(default_factory=_identity_quat, init=False, repr=False)

    def __post_init__(self) -> None:
        self.position = _vec3(self.position)
        self.rotation = _vec3(self.rotation)
        self.scale = _vec3(self.scale)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Transform):
            return NotImplemented
        return bool(
            np.array_equal(self.position, other.position)
            and np.array_equal(self.rotation, other.rotation)
            and np.array_equal(self.scale, other.scale)
        )

    __hash__ = None  # type: ignore[assignment]

    def orientation(self) -> np.ndarray:
        """The orientation quaternion as (w, x, y, z)."""
        return self._orientation.copy()

    def update(self) -> None:
        """Rebuild the orientation from the Euler rotation."""
        pitch, yaw, roll = np.radians(np.asarray(self.rotation, dtype=np.float64))
        self._orientation = _quat_normalize(_quat_from_matrix(_euler_angle_yxz(yaw, pitch, roll)))

    def rotate(self, d_yaw: float, d_pitch: float, d_roll: float) -> np.ndarray:
        """Yaw about world up and pitch about local right; return the new rotation matrix.

        Roll is ignored.
        """
        q_yaw = _angle_axis(d_yaw, (0.0, 1.0, 0.0))
        q_pitch = _angle_axis(d_pitch, (1.0, 0.0, 0.0))
        self._orientation = _quat_normalize(_quat_multiply(_quat_multiply(q_yaw, self._orientation), q_pitch))

        matrix = _quat_to_matrix(self._orientation)
        yaw, pitch, roll = _extract_euler_angle_yxz(matrix)
        self.rotation = np.degrees(np.array([pitch, yaw, roll]))
        return matrix

    def set_orientation(self, rotation_matrix) -> None:
        """Take the orientation and Euler rotation from a rotation matrix."""
        m = np.asarray(rotation_matrix, dtype=np.float64)
        self._orientation = _quat_from_matrix(m)
        yaw, pitch, roll = _extract_euler_angle_yxz(m)
        self.rotation = np.degrees(np.array([pitch, yaw, roll]))

    def matrix(self) -> np.ndarray:
        """The 4x4 local-to-parent matrix, translation times rotation times scale."""
        s = np.diag(np.append(np.asarray(self.scale, dtype=np.float64), 1.0))
        r = _quat_to_matrix(self._orientation)
        t = np.eye(4)
        t[:3, 3] = np.asarray(self.position, dtype=np.float64)
        return t @ r @ s