import pytest

from gpupixel.vector import Vector2


def test_default_is_zero():
    v = Vector2()
    assert v.is_zero()
    assert not v.is_one()


def test_is_one():
    assert Vector2(1, 1).is_one()
    assert not Vector2(1, 0).is_one()


def test_from_points_matches_difference():
    a = Vector2(1.5, -2.0)
    b = Vector2(4.0, 3.25)
    assert Vector2.from_points(a, b) == b - a


def test_add_then_subtract_round_trip():
    a = Vector2(1.25, -7.5)
    b = Vector2(3.0, 2.5)
    original = a.copy()
    a.add(b)
    assert a != original
    a.subtract(b)
    assert a == original


def test_operator_add():
    assert Vector2(1, 2) + Vector2(3, 4) == Vector2(4, 6)


def test_dot_with_self_is_length_squared():
    v = Vector2(3, 4)
    assert v.dot(v) == v.length_squared()
    assert v.length_squared() == 25.0


def test_distance_squared_is_length_of_difference():
    a = Vector2(2.0, -1.0)
    b = Vector2(-3.0, 5.0)
    assert a.distance_squared(b) == (a - b).length_squared()
    assert a.distance_squared(b) == b.distance_squared(a)


def test_negate_twice_restores():
    v = Vector2(2.5, -3.5)
    v.negate()
    assert v == Vector2(-2.5, 3.5)
    assert -v == Vector2(2.5, -3.5)


def test_scale_by_number_and_vector():
    v = Vector2(2, 3)
    v.scale(2)
    assert v == Vector2(2, 3) * 2
    w = Vector2(2, 3)
    w.scale(Vector2(2, 2))
    assert w == v


def test_scale_rejects_other_types():
    with pytest.raises(TypeError):
        Vector2(1, 1).scale("x")


def test_rmul_and_imul_agree():
    v = Vector2(1.5, -2.0)
    w = v.copy()
    w *= 4
    assert 4 * v == w
    assert v * 4 == w


def test_division_inverts_multiplication():
    v = Vector2(6.0, -9.0)
    assert (v * 3) / 3 == v


def test_division_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        Vector2(1, 1) / 0


def test_set_and_set_zero():
    v = Vector2()
    v.set(7, 8)
    assert (v.x, v.y) == (7.0, 8.0)
    v.set_zero()
    assert v.is_zero()


def test_copy_is_independent():
    v = Vector2(1, 2)
    c = v.copy()
    c.add(Vector2(1, 1))
    assert v == Vector2(1, 2)
    assert c != v


def test_smooth_without_elapsed_time_does_nothing():
    v = Vector2(1, 1)
    v.smooth(Vector2(10, 10), 0, 1)
    assert v == Vector2(1, 1)


def test_smooth_with_zero_response_reaches_target():
    v = Vector2(1, 1)
    target = Vector2(10, -4)
    v.smooth(target, 0.5, 0)
    assert v == target


def test_smooth_moves_closer():
    v = Vector2(0, 0)
    target = Vector2(8, 6)
    before = v.distance_squared(target)
    v.smooth(target, 1, 1)
    assert 0 < v.distance_squared(target) < before


def test_ordering_compares_x_then_y():
    assert Vector2(1, 5) < Vector2(2, 0)
    assert Vector2(1, 1) < Vector2(1, 2)
    assert Vector2(1, 2) > Vector2(1, 1)
    assert not Vector2(1, 1) < Vector2(1, 1)
    assert not Vector2(1, 1) > Vector2(1, 1)


def test_iteration_gives_components():
    assert tuple(Vector2(3, -1)) == (3.0, -1.0)