"""Behaviours and components that entities of the scene carry."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from runbasis.matrix import Mat4
from runbasis.quaternion import Quaternion
from runbasis.vector import Vec3

TRANSFORM_SPEED = 30.0


class Camerable(ABC):
    """Something that can provide the view matrix used by the shaders."""

    @abstractmethod
    def get_view_matrix(self) -> Mat4:
        """View matrix for the current position and orientation."""


class Controllable(ABC):
    """Something that can be moved and rotated by user input."""

    @abstractmethod
    def get_speed(self, deltatime: float) -> float:
        """Distance covered in ``deltatime`` seconds."""

    @abstractmethod
    def move_forward(self, deltatime: float) -> None: ...

    @abstractmethod
    def move_backward(self, deltatime: float) -> None: ...

    @abstractmethod
    def move_left(self, deltatime: float) -> None: ...

    @abstractmethod
    def move_right(self, deltatime: float) -> None: ...

    @abstractmethod
    def move_up(self, deltatime: float) -> None: ...

    @abstractmethod
    def move_down(self, deltatime: float) -> None: ...

    @abstractmethod
    def rotateq(self, deltatime: float, quaternion: Quaternion) -> None: ...

    def rotate(self, deltatime: float, yaw: float, pitch: float) -> object:
        """Yaw and pitch steering; ignored unless a subclass supports it."""
        return None


@dataclass
class Cube:
    """Marker component for the controllable cube."""


@dataclass
class DebugCamera(Camerable, Controllable):
    """Free-flying camera moved along its own front and up directions."""

    position: Vec3
    front: Vec3
    up: Vec3
    speed: float

    def get_view_matrix(self) -> Mat4:
        return Mat4.look_at(self.position, self.position + self.front, self.up)

    def get_speed(self, deltatime: float) -> float:
        return self.speed * deltatime

    def _side(self) -> Vec3:
        return self.front.cross(self.up).normalize()

    def move_forward(self, deltatime: float) -> None:
        self.position = self.position + self.front.scale(self.get_speed(deltatime))

    def move_backward(self, deltatime: float) -> None:
        self.position = self.position - self.front.scale(self.get_speed(deltatime))

    def move_left(self, deltatime: float) -> None:
        self.position = self.position - self._side().scale(self.get_speed(deltatime))

    def move_right(self, deltatime: float) -> None:
        self.position = self.position + self._side().scale(self.get_speed(deltatime))

    def move_up(self, deltatime: float) -> None:
        self.position = self.position + self.up.scale(self.get_speed(deltatime))

    def move_down(self, deltatime: float) -> None:
        self.position = self.position - self.up.scale(self.get_speed(deltatime))

    def rotateq(self, deltatime: float, quaternion: Quaternion) -> None:
        """The camera keeps a fixed orientation, so the rotation is ignored."""

    def rotate(self, deltatime: float, yaw: float, pitch: float) -> Vec3:
        """Direction for ``yaw`` and ``pitch`` in degrees; the camera itself is left unchanged."""
        yaw_r = math.radians(yaw)
        pitch_r = math.radians(pitch)
        return Vec3(
            math.cos(yaw_r) * math.sin(pitch_r),
            math.sin(pitch_r),
            math.sin(yaw_r) * math.sin(pitch_r),
        )


@dataclass
class PlayerCamera(DebugCamera):
    """Camera that follows the player; it moves the same way as the debug camera."""


@dataclass
class Transform(Controllable):
    """Position, rotation and scale of an entity."""

    position: Vec3 = field(default_factory=Vec3)
    rotation: Quaternion = field(default_factory=Quaternion)
    scale: Vec3 = field(default_factory=Vec3)

    def translate(self, new_pos: Vec3) -> None:
        """Move to ``new_pos``."""
        self.position = new_pos

    def set_scale(self, scale: Vec3) -> None:
        self.scale = scale

    def center(self, object_center: Vec3) -> Vec3:
        """An object's center scaled by this transform's scale."""
        return object_center * self.scale

    def get_speed(self, deltatime: float) -> float:
        return TRANSFORM_SPEED * deltatime

    def move_forward(self, deltatime: float) -> None:
        self.position.z -= self.get_speed(deltatime)

    def move_backward(self, deltatime: float) -> None:
        self.position.z += self.get_speed(deltatime)

    def move_left(self, deltatime: float) -> None:
        self.position.x -= self.get_speed(deltatime)

    def move_right(self, deltatime: float) -> None:
        self.position.x += self.get_speed(deltatime)

    def move_up(self, deltatime: float) -> None:
        self.position.y += self.get_speed(deltatime)

    def move_down(self, deltatime: float) -> None:
        self.position.y -= self.get_speed(deltatime)

    def rotateq(self, deltatime: float, quaternion: Quaternion) -> None:
        """Apply ``quaternion`` scaled by the distance for ``deltatime``."""
        self.rotation.rotate_mut(quaternion * self.get_speed(deltatime))

    def rotate(self, deltatime: float, yaw: float, pitch: float) -> None:
        """Transforms rotate through quaternions only; yaw and pitch are ignored."""