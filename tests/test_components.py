import pytest

from runbasis.components import (
    Camerable,
    Controllable,
    DebugCamera,
    PlayerCamera,
    Transform,
)
from runbasis.matrix import Mat4
from runbasis.quaternion import Quaternion
from runbasis.vector import Vec3


def make_camera(cls=DebugCamera):
    return cls(Vec3(0.0, 0.0, 10.0), Vec3(0.0, 0.0, -1.0), Vec3(0.0, 1.0, 0.0), 30.0)


def as_tuple(v):
    return tuple(v)


def test_abstract_behaviours_cannot_be_instantiated():
    with pytest.raises(TypeError):
        Controllable()
    with pytest.raises(TypeError):
        Camerable()


def test_camera_speed_is_proportional_to_deltatime():
    camera = make_camera()
    assert camera.get_speed(0.0) == 0.0
    assert camera.get_speed(0.2) == pytest.approx(2 * camera.get_speed(0.1))


@pytest.mark.parametrize("cls", [DebugCamera, PlayerCamera])
def test_camera_view_matrix_looks_along_front(cls):
    camera = make_camera(cls)
    expected = Mat4.look_at(Vec3(0.0, 0.0, 10.0), Vec3(0.0, 0.0, 9.0), Vec3(0.0, 1.0, 0.0))
    assert camera.get_view_matrix().to_list() == pytest.approx(expected.to_list())


@pytest.mark.parametrize(
    "forth, back",
    [
        ("move_forward", "move_backward"),
        ("move_left", "move_right"),
        ("move_up", "move_down"),
    ],
)
@pytest.mark.parametrize("cls", [DebugCamera, PlayerCamera])
def test_camera_opposite_moves_cancel(cls, forth, back):
    camera = make_camera(cls)
    start = as_tuple(camera.position)
    getattr(camera, forth)(0.25)
    assert as_tuple(camera.position) != pytest.approx(start)
    getattr(camera, back)(0.25)
    assert as_tuple(camera.position) == pytest.approx(start)


def test_camera_move_forward_follows_front():
    camera = make_camera()
    camera.move_forward(0.1)
    assert camera.position.z < 10.0
    assert (camera.position.x, camera.position.y) == (0.0, 0.0)


def test_camera_move_left_goes_against_side_vector():
    camera = make_camera()
    camera.move_left(0.1)
    assert camera.position.x < 0.0
    assert camera.position.y == 0.0
    assert camera.position.z == 10.0


def test_camera_move_up_follows_up():
    camera = make_camera()
    camera.move_up(0.1)
    assert camera.position.y > 0.0
    assert camera.position.z == 10.0


def test_camera_rotation_leaves_orientation_alone():
    camera = make_camera()
    camera.rotateq(1.0, Quaternion(0.0, 1.0, 0.0, 0.0))
    direction = camera.rotate(1.0, 0.0, 0.0)
    assert camera.front == Vec3(0.0, 0.0, -1.0)
    assert camera.up == Vec3(0.0, 1.0, 0.0)
    assert as_tuple(direction) == pytest.approx((0.0, 0.0, 0.0))


def test_transform_defaults():
    transform = Transform()
    assert transform.position == Vec3()
    assert transform.rotation == Quaternion(0.0, 0.0, 0.0, 1.0)
    assert transform.scale == Vec3()


def test_transform_translate_and_scale_replace_values():
    transform = Transform()
    transform.translate(Vec3(1.0, 2.0, 3.0))
    transform.set_scale(Vec3.splat(2.0))
    assert transform.position == Vec3(1.0, 2.0, 3.0)
    assert transform.scale == Vec3(2.0, 2.0, 2.0)


def test_transform_center_with_unit_scale_is_object_center():
    transform = Transform(scale=Vec3.splat(1.0))
    assert transform.center(Vec3(4.0, -2.0, 0.5)) == Vec3(4.0, -2.0, 0.5)


def test_transform_center_with_zero_scale_is_origin():
    assert Transform().center(Vec3(4.0, -2.0, 0.5)) == Vec3(0.0, 0.0, 0.0)


def test_transform_speed_scales_with_deltatime():
    transform = Transform()
    assert transform.get_speed(0.0) == 0.0
    assert transform.get_speed(1.0) == 30.0


@pytest.mark.parametrize(
    "method, axis, sign",
    [
        ("move_forward", "z", -1),
        ("move_backward", "z", 1),
        ("move_left", "x", -1),
        ("move_right", "x", 1),
        ("move_up", "y", 1),
        ("move_down", "y", -1),
    ],
)
def test_transform_moves_along_one_axis(method, axis, sign):
    transform = Transform()
    getattr(transform, method)(0.5)
    moved = getattr(transform.position, axis)
    assert moved * sign > 0
    assert abs(moved) == pytest.approx(transform.get_speed(0.5))
    others = [value for name, value in zip("xyz", transform.position) if name != axis]
    assert others == [0.0, 0.0]


def test_transforms_do_not_share_positions():
    first = Transform()
    second = Transform()
    first.move_up(1.0)
    assert second.position == Vec3()


def test_transform_rotateq_applies_scaled_quaternion():
    transform = Transform()
    target = Quaternion.from_euler_angles(Vec3(0.0, 1.0, 0.0), 0.5)
    transform.rotateq(1.0 / 30.0, target)
    result = transform.rotation
    assert (result.x, result.y, result.z, result.w) == pytest.approx(
        (target.x, target.y, target.z, target.w)
    )


def test_transform_rotate_with_yaw_pitch_is_ignored():
    transform = Transform()
    transform.rotate(1.0, 45.0, 45.0)
    assert transform.rotation == Quaternion()