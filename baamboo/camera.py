"""Camera controllers, the editor camera and projection helpers."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Optional

import numpy as np

from .input import Input, Key, MouseButton
from .transform import Transform


def look_at_lh(eye, target, up) -> np.ndarray:
    """Left-handed view matrix looking from ``eye`` towards ``target``."""
    eye = np.asarray(eye, dtype=np.float64)
    f = np.asarray(target, dtype=np.float64) - eye
    f = f / np.linalg.norm(f)
    s = np.cross(np.asarray(up, dtype=np.float64), f)
    s = s / np.linalg.norm(s)
    u = np.cross(f, s)
    m = np.eye(4)
    m[0, :3], m[1, :3], m[2, :3] = s, u, f
    m[0, 3] = -np.dot(s, eye)
    m[1, 3] = -np.dot(u, eye)
    m[2, 3] = -np.dot(f, eye)
    return m


def perspective_fov_lh_zo(fov: float, width: float, height: float, near: float, far: float) -> np.ndarray:
    """Left-handed perspective projection with depth mapped to [0, 1]."""
    if width <= 0 or height <= 0 or fov <= 0:
        raise ValueError("fov, width and height must be positive")
    h = math.cos(0.5 * fov) / math.sin(0.5 * fov)
    w = h * height / width
    m = np.zeros((4, 4))
    m[0, 0] = w
    m[1, 1] = h
    m[2, 2] = far / (far - near)
    m[2, 3] = -(far * near) / (far - near)
    m[3, 2] = 1.0
    return m


def ortho_lh_zo(left: float, right: float, bottom: float, top: float, near: float, far: float) -> np.ndarray:
    """Left-handed orthographic projection with depth mapped to [0, 1]."""
    m = np.eye(4)
    m[0, 0] = 2.0 / (right - left)
    m[1, 1] = 2.0 / (top - bottom)
    m[2, 2] = 1.0 / (far - near)
    m[0, 3] = -(right + left) / (right - left)
    m[1, 3] = -(top + bottom) / (top - bottom)
    m[2, 3] = -near / (far - near)
    return m


class CameraController(ABC):
    """Owns a transform and yields a view matrix and a position."""

    def __init__(self) -> None:
        self.transform = Transform()

    @abstractmethod
    def view(self) -> np.ndarray:
        """The world-to-view matrix."""

    @abstractmethod
    def position(self) -> np.ndarray:
        """The camera position in world space."""


class ProjectionType(Enum):
    ORTHOGRAPHIC = "Orthographic"
    PERSPECTIVE = "Perspective"


class EditorCamera:
    """A projection on top of a controller that supplies the view."""

    def __init__(self, controller: CameraController, width: int, height: int) -> None:
        self.controller = controller
        self.width = width
        self.height = height
        self.near = 0.1
        self.far = 1000.0
        self.fov = 45.0
        self.projection_type = ProjectionType.PERSPECTIVE

    def view(self) -> np.ndarray:
        return self.controller.view()

    def proj(self) -> np.ndarray:
        """The projection matrix for the current type and viewport."""
        if self.projection_type is ProjectionType.PERSPECTIVE:
            return perspective_fov_lh_zo(
                math.radians(self.fov), float(self.width), float(self.height), self.near, self.far
            )
        return ortho_lh_zo(0.0, float(self.width), 0.0, float(self.height), self.near, self.far)

    def position(self) -> np.ndarray:
        return self.controller.position()


@dataclass
class CameraConfig:
    """Tuning of the first-person controller."""

    rotation_acceleration: float = 100.0
    rotation_damping: float = 5.0
    max_rotation_speed: float = 1.0

    move_acceleration: float = 100.0
    move_damping: float = 5.0
    max_move_speed: float = 10.0
    movement_scale: float = 1.0  # centimetres
    boosting_speed: float = 10.0


class FirstPersonCameraController(CameraController):
    """Mouse-look and WASD/QE movement with acceleration and damping."""

    def __init__(self, position=None, target=None, config: Optional[CameraConfig] = None) -> None:
        super().__init__()
        self.config = config if config is not None else CameraConfig()
        self._move_velocity = np.zeros(3)
        self._rotation_velocity = np.zeros(3)
        if (position is None) != (target is None):
            raise ValueError("position and target must be given together")
        if position is not None:
            self.set_look_at(position, target)

    def update(self, dt: float, input: Optional[Input] = None) -> None:
        """Advance the camera by ``dt`` seconds from the given input state."""
        inp = input if input is not None else Input.instance()
        cfg = self.config

        if inp.is_mouse_down(MouseButton.LEFT):
            self._rotation_velocity = np.zeros(3)
        elif inp.is_mouse_pressed(MouseButton.LEFT):
            impulse = np.array([inp.mouse_delta_x, inp.mouse_delta_y, 0.0])
            self._rotation_velocity = self._rotation_velocity + impulse * cfg.rotation_acceleration * dt
        self._rotation_velocity = self._rotation_velocity - self._rotation_velocity * float(
            np.clip(cfg.rotation_damping * dt, 0.0, 0.75)
        )
        self._rotation_velocity = np.clip(
            self._rotation_velocity, -cfg.max_rotation_speed, cfg.max_rotation_speed
        )

        rotation = self.transform.rotate(
            self._rotation_velocity[0] * dt, self._rotation_velocity[1] * dt, 0.0
        )

        def held(key: Key) -> float:
            return float(inp.is_key_pressed(key))

        impulse_local = np.array([held(Key.D) - held(Key.A), 0.0, held(Key.W) - held(Key.S)])
        impulse_world = rotation[:3, :3] @ impulse_local
        impulse_world = impulse_world + np.array([0.0, held(Key.Q) - held(Key.E), 0.0])

        boosting = inp.is_key_pressed(Key.LEFT_CONTROL)
        boost = cfg.boosting_speed if boosting else 1.0
        self._move_velocity = (
            self._move_velocity + impulse_world * cfg.move_acceleration * cfg.movement_scale * dt * boost
        )
        self._move_velocity = self._move_velocity - self._move_velocity * float(
            np.clip(cfg.move_damping * dt, 0.0, 0.75)
        )

        max_speed = cfg.max_move_speed * boost
        speed = float(np.linalg.norm(self._move_velocity))
        if speed > max_speed * cfg.movement_scale:
            self._move_velocity = self._move_velocity / speed * max_speed

        if float(np.linalg.norm(self._move_velocity)) < 1e-3:
            self._move_velocity = np.zeros(3)

        self.transform.position = self.transform.position + self._move_velocity * dt

    def view(self) -> np.ndarray:
        return np.linalg.inv(self.transform.matrix())

    def position(self) -> np.ndarray:
        return np.array(self.transform.position, dtype=np.float64)

    def set_look_at(self, position, target) -> None:
        """Place the camera at ``position`` facing ``target``."""
        self.transform.position = np.array(position, dtype=np.float64).reshape(3)
        self.transform.set_orientation(look_at_lh(position, target, (0.0, 1.0, 0.0)))