import math

import pytest

from brickengine.mathutil import Vector2, Vector3
from brickengine.matrices import Matrix3, Matrix4, Quaternion


def assert_matrix_close(a, b, tol=1e-9):
    assert a.as_flat() == pytest.approx(b.as_flat(), abs=tol)


def assert_vec_close(a, b, tol=1e-9):
    assert tuple(a) == pytest.approx(tuple(b), abs=tol)


def sample_matrix():
    return (
        Matrix4.create_scale(2.0, 3.0, 0.5)
        * Matrix4.create_rotation_x(0.3)
        * Matrix4.create_rotation_z(1.1)
        * Matrix4.create_translation(Vector3(4.0, -2.0, 7.0))
    )


# Matrix3


def test_matrix3_default_is_identity():
    assert Matrix3() == Matrix3.identity()
    assert Matrix3.identity().as_flat() == (1.0, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 1.0)


def test_matrix3_rejects_wrong_shape():
    with pytest.raises(ValueError):
        Matrix3([[1.0, 0.0], [0.0, 1.0]])


def test_matrix3_identity_is_neutral():
    m = Matrix3.create_rotation(0.7) * Matrix3.create_translation(Vector2(3.0, 4.0))
    assert_matrix_close(m * Matrix3.identity(), m)
    assert_matrix_close(Matrix3.identity() * m, m)


def test_matrix3_scale_transform():
    v = Vector2.transform(Vector2(1.0, 2.0), Matrix3.create_scale(3.0, 5.0))
    assert_vec_close(v, (3.0, 10.0))
    u = Vector2.transform(Vector2(1.0, 2.0), Matrix3.create_uniform_scale(2.0))
    assert_vec_close(u, (2.0, 4.0))


def test_matrix3_rotation_quarter_turn():
    v = Vector2.transform(Vector2(1.0, 0.0), Matrix3.create_rotation(math.pi / 2))
    assert_vec_close(v, (0.0, 1.0))


def test_matrix3_translation_respects_w():
    m = Matrix3.create_translation(Vector2(3.0, -4.0))
    assert_vec_close(Vector2.transform(Vector2(1.0, 1.0), m), (4.0, -3.0))
    assert_vec_close(Vector2.transform(Vector2(1.0, 1.0), m, 0.0), (1.0, 1.0))


def test_matrix3_imul_matches_mul():
    a = Matrix3.create_rotation(0.4)
    b = Matrix3.create_translation(Vector2(1.0, 2.0))
    expected = a * b
    a *= b
    assert_matrix_close(a, expected)


def test_matrix3_rotations_compose():
    combined = Matrix3.create_rotation(0.3) * Matrix3.create_rotation(0.5)
    assert_matrix_close(combined, Matrix3.create_rotation(0.8))


# Matrix4


def test_matrix4_rejects_wrong_shape():
    with pytest.raises(ValueError):
        Matrix4([[1.0, 0.0, 0.0], [0.0, 1.0, 0.0], [0.0, 0.0, 1.0]])


def test_matrix4_identity_is_neutral():
    m = sample_matrix()
    assert_matrix_close(m * Matrix4.identity(), m)
    assert_matrix_close(Matrix4.identity() * m, m)
    assert Matrix4() == Matrix4.identity()


def test_matrix4_invert_round_trip():
    m = sample_matrix()
    assert_matrix_close(m * m.inverted(), Matrix4.identity())
    assert_matrix_close(m.inverted() * m, Matrix4.identity())


def test_matrix4_inverted_leaves_original():
    m = sample_matrix()
    before = m.as_flat()
    m.inverted()
    assert m.as_flat() == before


def test_matrix4_invert_in_place():
    m = sample_matrix()
    expected = m.inverted()
    m.invert()
    assert_matrix_close(m, expected)


def test_matrix4_invert_translation_negates():
    m = Matrix4.create_translation(Vector3(1.0, 2.0, 3.0))
    assert_vec_close(m.inverted().get_translation(), (-1.0, -2.0, -3.0))


def test_matrix4_invert_singular_raises():
    with pytest.raises(ValueError):
        Matrix4.create_scale(1.0, 0.0, 1.0).invert()


def test_matrix4_translation_and_scale_extraction():
    m = Matrix4.create_scale(2.0, 3.0, 4.0) * Matrix4.create_translation(
        Vector3(5.0, 6.0, 7.0)
    )
    assert_vec_close(m.get_translation(), (5.0, 6.0, 7.0))
    assert_vec_close(m.get_scale(), (2.0, 3.0, 4.0))
    assert_vec_close(
        Matrix4.create_uniform_scale(3.0).get_scale(), (3.0, 3.0, 3.0)
    )


def test_matrix4_axes_are_normalized_rows():
    m = Matrix4.create_scale(2.0, 3.0, 4.0)
    assert_vec_close(m.get_x_axis(), Vector3.UNIT_X)
    assert_vec_close(m.get_y_axis(), Vector3.UNIT_Y)
    assert_vec_close(m.get_z_axis(), Vector3.UNIT_Z)


@pytest.mark.parametrize(
    "factory, axis",
    [
        (Matrix4.create_rotation_x, Vector3.UNIT_X),
        (Matrix4.create_rotation_y, Vector3.UNIT_Y),
        (Matrix4.create_rotation_z, Vector3.UNIT_Z),
    ],
)
def test_matrix4_rotation_keeps_axis_and_length(factory, axis):
    m = factory(0.9)
    assert_vec_close(Vector3.transform(axis, m), axis)
    v = Vector3(1.0, 2.0, 3.0)
    assert Vector3.transform(v, m).length() == pytest.approx(v.length())
    assert_matrix_close(m * factory(-0.9), Matrix4.identity())


def test_matrix4_rotation_z_quarter_turn():
    v = Vector3.transform(Vector3.UNIT_X, Matrix4.create_rotation_z(math.pi / 2))
    assert_vec_close(v, Vector3.UNIT_Y)


def test_matrix4_translation_moves_points_not_directions():
    m = Matrix4.create_translation(Vector3(1.0, 2.0, 3.0))
    assert_vec_close(Vector3.transform(Vector3(1.0, 1.0, 1.0), m), (2.0, 3.0, 4.0))
    assert_vec_close(Vector3.transform(Vector3(1.0, 1.0, 1.0), m, 0.0), (1.0, 1.0, 1.0))


def test_matrix4_from_identity_quaternion():
    assert_matrix_close(
        Matrix4.create_from_quaternion(Quaternion.identity()), Matrix4.identity()
    )


def test_matrix4_from_quaternion_matches_rotation_z():
    q = Quaternion.from_axis_angle(Vector3.UNIT_Z, 0.6)
    assert_matrix_close(Matrix4.create_from_quaternion(q), Matrix4.create_rotation_z(0.6))


def test_matrix4_from_quaternion_matches_vector_rotation():
    axis = Vector3(1.0, 2.0, 2.0).normalized()
    q = Quaternion.from_axis_angle(axis, 1.3)
    v = Vector3(0.5, -1.0, 4.0)
    assert_vec_close(
        Vector3.transform(v, Matrix4.create_from_quaternion(q)),
        Vector3.transform_quaternion(v, q),
    )


def test_matrix4_look_at_maps_eye_and_target():
    eye = Vector3(1.0, 2.0, -10.0)
    target = Vector3(1.0, 2.0, 0.0)
    m = Matrix4.create_look_at(eye, target, Vector3.UNIT_Y)
    assert_vec_close(Vector3.transform(eye, m), Vector3.ZERO)
    dist = (target - eye).length()
    assert_vec_close(Vector3.transform(target, m), (0.0, 0.0, dist))


def test_matrix4_look_at_is_orthonormal():
    m = Matrix4.create_look_at(
        Vector3(3.0, 1.0, -5.0), Vector3(0.0, 0.5, 2.0), Vector3.UNIT_Y
    )
    rotation = Matrix4([row[:3] + [0.0] for row in m.mat[:3]] + [[0.0, 0.0, 0.0, 1.0]])
    transpose = Matrix4([list(col) for col in zip(*rotation.mat)])
    assert_matrix_close(rotation * transpose, Matrix4.identity())


def test_matrix4_ortho_maps_view_volume():
    m = Matrix4.create_ortho(200.0, 100.0, 1.0, 11.0)
    assert_vec_close(Vector3.transform(Vector3(100.0, 50.0, 11.0), m), (1.0, 1.0, 1.0))
    assert_vec_close(
        Vector3.transform(Vector3(-100.0, -50.0, 1.0), m), (-1.0, -1.0, 0.0)
    )


def test_matrix4_perspective_maps_near_and_far():
    m = Matrix4.create_perspective_fov(math.pi / 2, 1280.0, 720.0, 0.3, 1000.0)
    near = Vector3.transform_with_persp_div(Vector3(0.0, 0.0, 0.3), m)
    far = Vector3.transform_with_persp_div(Vector3(0.0, 0.0, 1000.0), m)
    assert near.z == pytest.approx(0.0, abs=1e-9)
    assert far.z == pytest.approx(1.0)
    assert m.mat[1][1] == pytest.approx(1.0)
    assert m.mat[0][0] == pytest.approx(720.0 / 1280.0)


def test_matrix4_simple_view_proj():
    m = Matrix4.create_simple_view_proj(1024.0, 768.0)
    assert m.mat[0][0] == pytest.approx(2.0 / 1024.0)
    assert m.mat[1][1] == pytest.approx(2.0 / 768.0)
    assert m.mat[3] == [0.0, 0.0, 1.0, 1.0]
    assert m.mat[2] == [0.0, 0.0, 1.0, 0.0]


def test_matrix4_imul_matches_mul():
    a = Matrix4.create_rotation_y(0.2)
    b = Matrix4.create_translation(Vector3(1.0, 2.0, 3.0))
    expected = a * b
    a *= b
    assert_matrix_close(a, expected)


# Quaternion


def test_quaternion_identity_components():
    q = Quaternion.identity()
    assert (q.x, q.y, q.z, q.w) == (0.0, 0.0, 0.0, 1.0)
    assert Quaternion() == q


def test_quaternion_from_axis_angle_is_unit():
    q = Quaternion.from_axis_angle(Vector3(0.0, 0.6, 0.8), 2.1)
    assert q.length() == pytest.approx(1.0)


def test_quaternion_conjugate_undoes_rotation():
    q = Quaternion.from_axis_angle(Vector3(0.0, 0.6, 0.8), 0.9)
    inverse = Quaternion(q.x, q.y, q.z, q.w)
    inverse.conjugate()
    assert (inverse.x, inverse.y, inverse.z, inverse.w) == (-q.x, -q.y, -q.z, q.w)
    v = Vector3(1.0, -2.0, 0.5)
    back = Vector3.transform_quaternion(Vector3.transform_quaternion(v, q), inverse)
    assert_vec_close(back, v)


def test_quaternion_normalize():
    q = Quaternion(1.0, 2.0, 2.0, 4.0)
    assert q.length_sq() == pytest.approx(25.0)
    n = q.normalized()
    assert n.length() == pytest.approx(1.0)
    assert q.length() == pytest.approx(5.0)
    q.normalize()
    assert q == n


def test_quaternion_dot_with_self_is_length_sq():
    q = Quaternion(0.1, 0.2, 0.3, 0.4)
    assert Quaternion.dot(q, q) == pytest.approx(q.length_sq())


def test_quaternion_lerp_endpoints():
    a = Quaternion.from_axis_angle(Vector3.UNIT_Z, 0.2)
    b = Quaternion.from_axis_angle(Vector3.UNIT_Z, 1.0)
    assert Quaternion.dot(Quaternion.lerp(a, b, 0.0), a) == pytest.approx(1.0)
    assert Quaternion.dot(Quaternion.lerp(a, b, 1.0), b) == pytest.approx(1.0)
    assert Quaternion.lerp(a, b, 0.3).length() == pytest.approx(1.0)


def test_quaternion_slerp_halfway_angle():
    a = Quaternion.from_axis_angle(Vector3.UNIT_Z, 0.2)
    b = Quaternion.from_axis_angle(Vector3.UNIT_Z, 1.0)
    mid = Quaternion.slerp(a, b, 0.5)
    expected = Quaternion.from_axis_angle(Vector3.UNIT_Z, 0.6)
    assert Quaternion.dot(mid, expected) == pytest.approx(1.0)


def test_quaternion_slerp_takes_short_arc():
    a = Quaternion.from_axis_angle(Vector3.UNIT_Z, 0.4)
    b = Quaternion.from_axis_angle(Vector3.UNIT_Z, 0.8)
    neg_b = Quaternion(-b.x, -b.y, -b.z, -b.w)
    r1 = Quaternion.slerp(a, b, 0.5)
    r2 = Quaternion.slerp(a, neg_b, 0.5)
    assert abs(Quaternion.dot(r1, r2)) == pytest.approx(1.0)


def test_quaternion_slerp_collinear_falls_back():
    a = Quaternion.from_axis_angle(Vector3.UNIT_X, 0.5)
    result = Quaternion.slerp(a, a, 0.7)
    assert Quaternion.dot(result, a) == pytest.approx(1.0)


def test_quaternion_concatenate_adds_angles():
    q = Quaternion.from_axis_angle(Vector3.UNIT_Z, 0.3)
    p = Quaternion.from_axis_angle(Vector3.UNIT_Z, 0.5)
    combined = Quaternion.concatenate(q, p)
    expected = Quaternion.from_axis_angle(Vector3.UNIT_Z, 0.8)
    assert Quaternion.dot(combined, expected) == pytest.approx(1.0)


def test_quaternion_concatenate_applies_q_then_p():
    q = Quaternion.from_axis_angle(Vector3.UNIT_X, 0.7)
    p = Quaternion.from_axis_angle(Vector3.UNIT_Y, 1.2)
    v = Vector3(0.3, -0.4, 2.0)
    step = Vector3.transform_quaternion(Vector3.transform_quaternion(v, q), p)
    assert_vec_close(
        Vector3.transform_quaternion(v, Quaternion.concatenate(q, p)), step
    )