"""Tests for ray_tracer.core.tuples — points, vectors and their algebra."""

import math
import warnings

import pytest
from ray_tracer.core.tuples import EPSILON, Tuple, cross, dot, magnitude, normalize, point, vector


class TestConstruction:
    def test_tuple_with_w1_is_point(self) -> None:
        a = Tuple(4.3, -4.2, 3.1, 1.0)
        assert (a.x, a.y, a.z, a.w) == (4.3, -4.2, 3.1, 1.0)
        assert a.is_point()
        assert not a.is_vector()

    def test_tuple_with_w0_is_vector(self) -> None:
        a = Tuple(4.3, -4.2, 3.1, 0.0)
        assert (a.x, a.y, a.z, a.w) == (4.3, -4.2, 3.1, 0.0)
        assert not a.is_point()
        assert a.is_vector()

    def test_point_sets_w1(self) -> None:
        assert point(4, -4, 3) == Tuple(4, -4, 3, 1)

    def test_vector_sets_w0(self) -> None:
        assert vector(4, -4, 3) == Tuple(4, -4, 3, 0)

    def test_ints_coerced_to_float(self) -> None:
        p = point(1, 2, 3)
        assert isinstance(p.x, float)
        assert isinstance(p.w, float)

    def test_w_check_has_no_tolerance(self) -> None:
        assert not Tuple(0, 0, 0, 1.0 + 1e-12).is_point()
        assert not Tuple(0, 0, 0, 1e-12).is_vector()

    def test_immutable(self) -> None:
        p = point(1, 2, 3)
        with pytest.raises(AttributeError):
            p.x = 5  # type: ignore[misc]


class TestArithmetic:
    def test_add_point_and_vector(self) -> None:
        result = Tuple(3, -2, 5, 1).add(Tuple(-2, 3, 1, 0))
        assert result == Tuple(1, 1, 6, 1)
        assert result.is_point()

    def test_sub_two_points_gives_vector(self) -> None:
        result = point(3, 2, 1) - point(5, 6, 7)
        assert result == vector(-2, -4, -6)
        assert result.is_vector()

    def test_sub_vector_from_point_gives_point(self) -> None:
        result = point(3, 2, 1) - vector(5, 6, 7)
        assert result == point(-2, -4, -6)
        assert result.is_point()

    def test_sub_two_vectors_gives_vector(self) -> None:
        assert (vector(3, 2, 1) - vector(5, 6, 7)) == vector(-2, -4, -6)

    def test_sub_from_zero_vector(self) -> None:
        assert vector(0, 0, 0) - vector(1, -2, 3) == vector(-1, 2, -3)

    def test_neg(self) -> None:
        assert -Tuple(1, -2, 3, -4) == Tuple(-1, 2, -3, 4)
        assert Tuple(1, -2, 3, -4).neg() == Tuple(-1, 2, -3, 4)

    def test_mul_scalar(self) -> None:
        assert Tuple(1, -2, 3, -4) * 3.5 == Tuple(3.5, -7, 10.5, -14)

    def test_mul_fraction(self) -> None:
        assert Tuple(1, -2, 3, -4).mul(0.5) == Tuple(0.5, -1, 1.5, -2)

    def test_rmul(self) -> None:
        assert 2 * vector(1, 2, 3) == vector(2, 4, 6)

    def test_div_scalar(self) -> None:
        assert Tuple(1, -2, 3, -4) / 2 == Tuple(0.5, -1, 1.5, -2)

    def test_div_by_zero_is_non_finite(self) -> None:
        result = vector(1, -1, 0).div(0)
        assert result.x == math.inf
        assert result.y == -math.inf
        assert math.isnan(result.z)

    def test_div_overflow_is_silent_inf(self) -> None:
        with warnings.catch_warnings():
            warnings.simplefilter('error')
            result = vector(1e308, -1e308, 0).div(1e-10)
        assert result.x == math.inf
        assert result.y == -math.inf
        assert result.z == 0.0

    def test_div_by_zero_is_silent(self) -> None:
        with warnings.catch_warnings():
            warnings.simplefilter('error')
            vector(1, 0, 0).div(0)
            vector(0, 0, 0).normalize()

    def test_operations_return_new_tuples(self) -> None:
        v = vector(1, 2, 3)
        v + vector(1, 1, 1)
        v * 2
        assert v == vector(1, 2, 3)


class TestMagnitude:
    @pytest.mark.parametrize(
        'v, expected',
        [
            (vector(1, 0, 0), 1.0),
            (vector(0, 1, 0), 1.0),
            (vector(0, 0, 1), 1.0),
            (vector(1, 2, 3), math.sqrt(14)),
            (vector(-1, -2, -3), math.sqrt(14)),
        ],
    )
    def test_magnitude(self, v: Tuple, expected: float) -> None:
        assert v.magnitude() == pytest.approx(expected)
        assert magnitude(v) == pytest.approx(expected)

    def test_w_does_not_contribute(self) -> None:
        assert point(1, 2, 3).magnitude() == vector(1, 2, 3).magnitude()


class TestNormalize:
    def test_axis_vector(self) -> None:
        assert vector(4, 0, 0).normalize() == vector(1, 0, 0)

    def test_general_vector(self) -> None:
        root = math.sqrt(14)
        assert normalize(vector(1, 2, 3)).approx_eq(vector(1 / root, 2 / root, 3 / root))

    @pytest.mark.parametrize('v', [vector(1, 2, 3), vector(-7, 0.5, 12), vector(1e-3, 0, 0), vector(0, 300, -400)])
    def test_normalized_has_unit_length(self, v: Tuple) -> None:
        assert abs(v.normalize().magnitude() - 1.0) < EPSILON

    def test_vector_keeps_w_zero(self) -> None:
        assert vector(3, 4, 0).normalize().w == 0.0

    def test_zero_vector_gives_nan(self) -> None:
        n = vector(0, 0, 0).normalize()
        assert all(math.isnan(c) for c in (n.x, n.y, n.z, n.w))

    def test_point_w_is_not_preserved(self) -> None:
        # normalize divides w as well; points are not meant to be normalized
        assert point(3, 4, 0).normalize().w == pytest.approx(0.2)


class TestDotCross:
    def test_dot(self) -> None:
        assert dot(vector(1, 2, 3), vector(2, 3, 4)) == 20.0

    def test_dot_includes_w(self) -> None:
        assert Tuple(1, 0, 0, 2).dot(Tuple(1, 0, 0, 3)) == 7.0

    def test_dot_commutative(self) -> None:
        a, b = vector(1.5, -2, 7), vector(-3, 0.25, 9)
        assert dot(a, b) == dot(b, a)

    def test_cross(self) -> None:
        a, b = vector(1, 2, 3), vector(2, 3, 4)
        assert cross(a, b) == vector(-1, 2, -1)
        assert cross(b, a) == vector(1, -2, 1)

    def test_cross_anticommutative(self) -> None:
        a, b = vector(0.5, -4, 2), vector(3, 1, -6)
        assert cross(a, b) == -cross(b, a)

    def test_cross_always_vector(self) -> None:
        assert point(1, 2, 3).cross(point(2, 3, 4)).w == 0.0

    def test_cross_of_axes(self) -> None:
        assert vector(1, 0, 0).cross(vector(0, 1, 0)) == vector(0, 0, 1)


class TestApproxEq:
    def test_within_epsilon(self) -> None:
        assert point(1, 2, 3).approx_eq(point(1 + 1e-6, 2, 3 - 1e-6))

    def test_outside_epsilon(self) -> None:
        assert not point(1, 2, 3).approx_eq(point(1.001, 2, 3))

    def test_w_compared(self) -> None:
        assert not point(1, 2, 3).approx_eq(vector(1, 2, 3))
